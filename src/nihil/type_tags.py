"""Type tags and the classification of runtime values.

Every value is sorted into exactly one :class:`TypeTag`. The tag selects the
canonical "nothing" value for that kind of data in :mod:`nihil.defaults`.

Example:
    >>> from nihil.type_tags import TypeTag, classify
    >>> classify([1, 2]) is TypeTag.ARRAY
    True
    >>> classify({"a": 1}) is TypeTag.OBJECT
    True
"""

from __future__ import annotations

import math
from collections.abc import Collection, Mapping, MutableMapping
from enum import StrEnum
from numbers import Number
from typing import Any


class TypeTag(StrEnum):
    """Closed set of classification labels."""

    OBJECT = "object"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    FUNCTION = "function"
    NULL = "null"
    UNDEFINED = "undefined"


def is_absent(value: Any) -> bool:
    """True for ``None`` and float NaN."""
    if value is None:
        return True
    return isinstance(value, float) and math.isnan(value)


def is_mapping(value: Any) -> bool:
    """True for keyed containers."""
    return isinstance(value, Mapping)


def is_mutable_mapping(value: Any) -> bool:
    return isinstance(value, MutableMapping)


def is_array(value: Any) -> bool:
    """True for array-like collections.

    Strings and mappings are collections too but never count as arrays.
    """
    if isinstance(value, (str, Mapping)):
        return False
    return isinstance(value, Collection)


def classify(value: Any) -> TypeTag:
    """Sort a value into its TypeTag.

    Order matters: ``bool`` is checked before numbers because it subclasses
    ``int``, and mappings before arrays because every mapping is also a
    collection. NaN stays a NUMBER; absence is a separate question answered
    by :func:`is_absent`.

    Args:
        value: Any runtime value.

    Returns:
        The tag for the value. Values matching no rule are UNDEFINED.
    """
    if value is None:
        return TypeTag.NULL
    if isinstance(value, bool):
        return TypeTag.BOOLEAN
    if isinstance(value, Number):
        return TypeTag.NUMBER
    if isinstance(value, str):
        return TypeTag.STRING
    if isinstance(value, Mapping):
        return TypeTag.OBJECT
    if isinstance(value, Collection):
        return TypeTag.ARRAY
    if callable(value):
        return TypeTag.FUNCTION
    return TypeTag.UNDEFINED
