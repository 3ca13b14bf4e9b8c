"""Object-shape utilities: selective copy, merging and default stripping.

All functions here work on keyed containers (any ``Mapping``). The ones that
change their arguments in place (``shallow_merge``, ``deep_merge``,
``cut_default``) need a ``MutableMapping``.

The recursive operations accept a depth budget: a negative depth is
unlimited, zero does nothing, and every descent into a nested container
costs one unit. Arguments are validated, and container graphs checked for
cycles when :attr:`NihilSettings.detect_cycles` is on, before anything is
mutated.

Example:
    >>> from nihil.shape import deep_merge, purification
    >>> deep_merge({"a": 1, "n": {"x": 1}}, {"n": {"y": 2}})
    {'a': 1, 'n': {'x': 1, 'y': 2}}
    >>> purification({"a": "", "b": 2})
    {'b': 2}
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

from nihil.defaults import empty_object, is_default
from nihil.exceptions import CyclicReferenceError, InvalidPropertyNameError, NotAMappingError
from nihil.settings import get_settings
from nihil.type_tags import is_mapping, is_mutable_mapping

__all__ = [
    "UNLIMITED",
    "cut_default",
    "deep_merge",
    "from_object",
    "purification",
    "purify",
    "shallow_merge",
]

logger = logging.getLogger(__name__)

UNLIMITED: int = -1
"""Depth budget meaning "recurse as deep as the data goes"."""


def _next_depth(depth: int) -> int:
    return depth if depth < 0 else depth - 1


def _require_mapping(parameter: str, value: Any, *, mutable: bool = False) -> None:
    ok = is_mutable_mapping(value) if mutable else is_mapping(value)
    if not ok:
        raise NotAMappingError(parameter, value, mutable=mutable)


def _check_tree(
    operation: str,
    root: Mapping[str, Any],
    depth: int,
    *,
    skip_defaults: bool = False,
    require_mutable: bool = False,
) -> None:
    """Validate every container an operation is about to recurse into.

    Walks the same nested mappings the operation will visit, within the
    same depth budget. Raises CyclicReferenceError when a container is
    re-entered along its own path (only if cycle detection is enabled) and
    NotAMappingError when a nested container the operation must mutate is
    read-only.

    Args:
        operation: Operation name used in errors and log events.
        root: Top-level container, already type-checked.
        depth: The operation's depth budget.
        skip_defaults: Empty nested containers are dropped, not entered.
        require_mutable: Nested containers will be modified in place.
    """
    detect_cycles = get_settings().detect_cycles
    active: set[int] = set()

    def walk(node: Mapping[str, Any], budget: int, path: tuple[str, ...]) -> None:
        if budget == 0:
            return
        if detect_cycles:
            if id(node) in active:
                logger.warning(
                    "cyclic_reference_detected",
                    extra={"operation": operation, "path": ".".join(path)},
                )
                raise CyclicReferenceError(operation, path)
            active.add(id(node))
        for key, value in node.items():
            if not is_mapping(value):
                continue
            if skip_defaults and is_default(value):
                continue
            if require_mutable and _next_depth(budget) != 0 and not is_mutable_mapping(value):
                raise NotAMappingError(".".join((*path, str(key))), value, mutable=True)
            walk(value, _next_depth(budget), (*path, str(key)))
        active.discard(id(node))

    walk(root, depth, ())


def from_object(source: Mapping[str, Any], *properties: str) -> dict[str, Any]:
    """Make a copy of a mapping holding only the named properties.

    Args:
        source: Mapping to copy from.
        *properties: Keys to copy. Keys absent from ``source`` are skipped.

    Returns:
        A new dict with the requested keys in request order.

    Raises:
        NotAMappingError: If ``source`` is not a mapping.
        InvalidPropertyNameError: If any property name is not a string.

    Example:
        >>> from_object({"a": 1, "b": 2, "c": 3}, "a", "c")
        {'a': 1, 'c': 3}
    """
    _require_mapping("source", source)
    for prop in properties:
        if not isinstance(prop, str):
            raise InvalidPropertyNameError(prop)

    result = empty_object()
    for prop in properties:
        if prop in source:
            result[prop] = source[prop]
    return result


def shallow_merge(target: MutableMapping[str, Any], source: Mapping[str, Any]) -> MutableMapping[str, Any]:
    """Copy every key of ``source`` into ``target``, overwriting on conflict.

    Nested containers are shared by reference, not cloned.

    Returns:
        ``target``, modified in place.

    Raises:
        NotAMappingError: If ``target`` is not a mutable mapping or
            ``source`` is not a mapping.
    """
    _require_mapping("target", target, mutable=True)
    _require_mapping("source", source)

    for key, value in list(source.items()):
        target[key] = value
    return target


def deep_merge(
    target: MutableMapping[str, Any],
    source: Mapping[str, Any],
    depth: int = UNLIMITED,
) -> MutableMapping[str, Any]:
    """Recursively merge ``source`` into ``target``.

    Nested mappings in ``source`` are merged into the value ``target``
    already holds under the same key. A read-only mapping there is copied
    into a dict first; a missing, absent or non-mapping value is replaced by
    a fresh dict. Everything else, sequences included, is assigned
    wholesale.

    Args:
        target: Mapping to merge into (modified in place).
        source: Mapping to merge from.
        depth: Depth budget. Zero returns ``target`` untouched.

    Returns:
        ``target``.

    Raises:
        NotAMappingError: If ``target`` is not a mutable mapping or
            ``source`` is not a mapping.
        CyclicReferenceError: If ``source`` contains itself.

    Example:
        >>> deep_merge({"arr": [1, 2, 3]}, {"arr": [4, 5]})
        {'arr': [4, 5]}
    """
    if depth == 0:
        logger.debug("depth_budget_exhausted", extra={"operation": "deep_merge"})
        return target

    _require_mapping("target", target, mutable=True)
    _require_mapping("source", source)
    _check_tree("deep_merge", source, depth)

    return _deep_merge(target, source, depth)


def _deep_merge(
    target: MutableMapping[str, Any],
    source: Mapping[str, Any],
    depth: int,
) -> MutableMapping[str, Any]:
    if depth == 0:
        logger.debug("depth_budget_exhausted", extra={"operation": "deep_merge"})
        return target

    for key, value in list(source.items()):
        if is_mapping(value):
            existing = target.get(key)
            if not is_mutable_mapping(existing):
                existing = dict(existing) if is_mapping(existing) else empty_object()
            target[key] = _deep_merge(existing, value, _next_depth(depth))
        else:
            target[key] = value
    return target


def purification(source: Mapping[str, Any], depth: int = UNLIMITED) -> Any:
    """Build a copy of ``source`` without its default "nothing" values.

    Keys whose values are default are dropped and nested mappings are
    purified recursively. Every level gets its own new dict; ``source`` is
    left as it was. Sequences are copied as they are, never recursed into.

    Args:
        source: Mapping to purify.
        depth: Depth budget. Zero returns ``source`` itself, unchecked.

    Returns:
        A new dict (or ``source`` when the budget is zero).

    Raises:
        NotAMappingError: If ``source`` is not a mapping.
        CyclicReferenceError: If ``source`` contains itself.

    Example:
        >>> purification({"a": "", "b": None, "c": 42, "nested": {"d": 0, "e": 5}})
        {'c': 42, 'nested': {'e': 5}}
    """
    if depth == 0:
        logger.debug("depth_budget_exhausted", extra={"operation": "purification"})
        return source

    _require_mapping("source", source)
    _check_tree("purification", source, depth, skip_defaults=True)

    return _purify(source, depth)


def _purify(source: Mapping[str, Any], depth: int) -> Any:
    if depth == 0:
        logger.debug("depth_budget_exhausted", extra={"operation": "purification"})
        return source

    result = empty_object()
    for key, value in source.items():
        if is_default(value):
            continue
        if is_mapping(value):
            result[key] = _purify(value, _next_depth(depth))
        else:
            result[key] = value
    return result


purify = purification


def cut_default(source: MutableMapping[str, Any], depth: int = UNLIMITED) -> None:
    """Delete keys holding default "nothing" values, in place.

    Nested mappings are cleaned recursively and stay in place even when
    they end up empty. Sequences are only tested for emptiness.

    Args:
        source: Mapping to clean (modified in place).
        depth: Depth budget. Zero only type-checks ``source``.

    Raises:
        NotAMappingError: If ``source``, or a nested mapping that would be
            cleaned, is not a mutable mapping.
        CyclicReferenceError: If ``source`` contains itself.

    Example:
        >>> obj = {"a": "", "b": "hello", "c": 0, "d": 42}
        >>> cut_default(obj)
        >>> obj
        {'b': 'hello', 'd': 42}
    """
    _require_mapping("source", source, mutable=True)

    if depth == 0:
        logger.debug("depth_budget_exhausted", extra={"operation": "cut_default"})
        return

    _check_tree("cut_default", source, depth, skip_defaults=True, require_mutable=True)
    _cut_default(source, depth)


def _cut_default(source: MutableMapping[str, Any], depth: int) -> None:
    if depth == 0:
        logger.debug("depth_budget_exhausted", extra={"operation": "cut_default"})
        return

    for key, value in list(source.items()):
        if is_default(value):
            del source[key]
        elif is_mapping(value):
            _cut_default(value, _next_depth(depth))
