"""Companion type predicates.

Small total functions that the rest of the library builds on. Neither ever
raises, whatever it is given.
"""

from __future__ import annotations

from typing import Any

from nihil.type_tags import TypeTag, classify, is_absent

__all__ = ["is_null", "type_check"]


def is_null(value: Any) -> bool:
    """Check whether a value means "nothing was provided".

    Example:
        >>> is_null(None), is_null(float("nan")), is_null(0)
        (True, True, False)
    """
    return is_absent(value)


def type_check(value: Any, tag: Any) -> bool:
    """Check whether ``value`` classifies as ``tag``.

    Args:
        value: Any runtime value.
        tag: A TypeTag or its string value. Unknown tags never match.

    Example:
        >>> type_check({"a": 1}, "object")
        True
        >>> type_check([1], "object")
        False
    """
    if not isinstance(tag, str):
        return False
    return classify(value) == tag
