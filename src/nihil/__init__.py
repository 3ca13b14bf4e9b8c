"""nihil -- default "nothing" values and object-shape utilities.

This package provides a canonical empty value per data type, predicates
that recognize those values, and helpers that copy, merge and strip
defaults from nested mappings.
"""

from nihil.defaults import (
    DEFAULTS,
    EMPTY_OBJECT,
    by_type,
    by_value,
    do_nothing,
    empty_object,
    fallback,
    is_default,
    normalize,
    set_default,
)
from nihil.exceptions import (
    CyclicReferenceError,
    InvalidPropertyNameError,
    NihilError,
    NotAMappingError,
)
from nihil.namespace import Nothing, __version__, nothing
from nihil.settings import NihilSettings, get_settings
from nihil.shape import (
    UNLIMITED,
    cut_default,
    deep_merge,
    from_object,
    purification,
    purify,
    shallow_merge,
)
from nihil.type_tags import TypeTag, classify
from nihil.typecheck import is_null, type_check

__all__ = [
    "DEFAULTS",
    "EMPTY_OBJECT",
    "UNLIMITED",
    "CyclicReferenceError",
    "InvalidPropertyNameError",
    "NihilError",
    "NihilSettings",
    "NotAMappingError",
    "Nothing",
    "TypeTag",
    "__version__",
    "by_type",
    "by_value",
    "classify",
    "cut_default",
    "deep_merge",
    "do_nothing",
    "empty_object",
    "fallback",
    "from_object",
    "get_settings",
    "is_default",
    "is_null",
    "normalize",
    "nothing",
    "purification",
    "purify",
    "set_default",
    "shallow_merge",
    "type_check",
]
