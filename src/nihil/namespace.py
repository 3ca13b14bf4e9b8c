"""The ``nothing`` namespace: the whole public surface behind one name.

Example:
    >>> from nihil import nothing
    >>> nothing.set_default("", "fallback")
    'fallback'
    >>> dict(nothing.object)
    {}
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from nihil import defaults, shape

__version__ = "1.0.4"


@dataclass(frozen=True, slots=True)
class Nothing:
    """Frozen bundle of the nihil functions and constants.

    Attributes:
        by_type: Get default value by type tag.
        by_value: Get default value by an example value's type.
        is_default: Check if a value is default for its type.
        set_default: Return value, or fallback if value is default.
        from_object: Copy a mapping keeping only the named properties.
        purification: Copy a mapping without default values.
        normalize: Collapse None and NaN to None.
        shallow_merge: Shallow merge mappings.
        deep_merge: Deep merge mappings recursively.
        cut_default: Remove default values from a mapping in place.
        do_nothing: Function that does nothing.
        object: Read-only empty mapping.
        version: Library version.
    """

    by_type: Callable[[Any], Any]
    by_value: Callable[[Any], Any]
    is_default: Callable[[Any], bool]
    set_default: Callable[[Any, Any], Any]
    from_object: Callable[..., dict[str, Any]]
    purification: Callable[..., Any]
    normalize: Callable[[Any], Any]
    shallow_merge: Callable[..., Any]
    deep_merge: Callable[..., Any]
    cut_default: Callable[..., None]
    do_nothing: Callable[..., None]
    object: Mapping[str, Any]
    version: str


nothing = Nothing(
    by_type=defaults.by_type,
    by_value=defaults.by_value,
    is_default=defaults.is_default,
    set_default=defaults.set_default,
    from_object=shape.from_object,
    purification=shape.purification,
    normalize=defaults.normalize,
    shallow_merge=shape.shallow_merge,
    deep_merge=shape.deep_merge,
    cut_default=shape.cut_default,
    do_nothing=defaults.do_nothing,
    object=defaults.EMPTY_OBJECT,
    version=__version__,
)
