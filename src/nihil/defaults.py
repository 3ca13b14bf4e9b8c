"""Default "nothing" values per type and the predicates built on them.

The default table maps each :class:`~nihil.type_tags.TypeTag` to a
zero-argument factory. Containers come out fresh on every lookup, so a
caller mutating the ``{}`` it got back cannot corrupt anyone else's default.

Example:
    >>> from nihil.defaults import by_type, is_default, set_default
    >>> by_type("string")
    ''
    >>> is_default([])
    True
    >>> set_default(0, 42)
    42
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from nihil.type_tags import TypeTag, classify, is_array, is_mapping
from nihil.typecheck import is_null

__all__ = [
    "DEFAULTS",
    "EMPTY_OBJECT",
    "by_type",
    "by_value",
    "do_nothing",
    "empty_object",
    "fallback",
    "is_default",
    "normalize",
    "set_default",
]


def do_nothing(*args: Any, **kwargs: Any) -> None:
    """Accept anything, return None. Useful as a placeholder callback."""
    return None


def empty_object() -> dict[str, Any]:
    """Return a fresh empty keyed container."""
    return {}


EMPTY_OBJECT: Mapping[str, Any] = MappingProxyType({})
"""Shared empty keyed container. Read-only; use ``empty_object()`` to get one to fill."""

DEFAULTS: Mapping[TypeTag, Callable[[], Any]] = MappingProxyType(
    {
        TypeTag.OBJECT: empty_object,
        TypeTag.STRING: str,
        TypeTag.NUMBER: int,
        TypeTag.BOOLEAN: bool,
        TypeTag.ARRAY: list,
        TypeTag.FUNCTION: lambda: do_nothing,
        TypeTag.NULL: lambda: None,
        TypeTag.UNDEFINED: lambda: None,
    }
)
"""Factories for the canonical default of every TypeTag. Built once, never mutated."""

# Tags whose defaults are compared by equality; all others by identity.
_EQUALITY_TAGS = frozenset({TypeTag.STRING, TypeTag.NUMBER, TypeTag.BOOLEAN})


def by_type(tag: Any) -> Any:
    """Get the default "nothing" value for a type tag.

    Args:
        tag: A TypeTag or its string value (e.g. "string", "number").

    Returns:
        The canonical default for the tag. Unrecognized tags, including
        non-string ones, yield the UNDEFINED default (None).

    Example:
        >>> by_type("number")
        0
        >>> by_type("unknown") is None
        True
    """
    if not isinstance(tag, str):
        tag = TypeTag.UNDEFINED
    factory = DEFAULTS.get(tag, DEFAULTS[TypeTag.UNDEFINED])
    return factory()


def by_value(value: Any) -> Any:
    """Get the default "nothing" value for the type of ``value``.

    Example:
        >>> by_value("hello"), by_value(42), by_value([1, 2, 3])
        ('', 0, [])
    """
    return by_type(classify(value))


def is_default(value: Any) -> bool:
    """Check whether a value is the default "nothing" value for its type.

    Absence markers (None, NaN) are always default. Array-like and keyed
    containers are default when empty. Strings, numbers and booleans are
    compared with their type's default by equality; callables only match
    ``do_nothing`` itself.

    Example:
        >>> [is_default(v) for v in ("", 0, False, [], {}, None)]
        [True, True, True, True, True, True]
        >>> [is_default(v) for v in ("x", 1, True, [1], {"a": 1})]
        [False, False, False, False, False]
    """
    if is_null(value):
        return True
    if is_array(value):
        return len(value) == 0
    if is_mapping(value):
        return len(value) == 0

    tag = classify(value)
    default = by_type(tag)
    if tag in _EQUALITY_TAGS:
        return bool(value == default)
    return value is default


def set_default(value: Any, default_value: Any) -> Any:
    """Return ``value`` unless it is default, in which case ``default_value``.

    Example:
        >>> set_default("", "fallback"), set_default("hello", "fallback")
        ('fallback', 'hello')
    """
    if not is_default(value):
        return value
    return default_value


fallback = set_default


def normalize(value: Any) -> Any:
    """Collapse absence markers (None, NaN) to the NULL default.

    Unlike :func:`is_default`, empty containers and zero values pass
    through untouched.
    """
    if is_null(value):
        return by_type(TypeTag.NULL)
    return value
