"""Tests for the default table and the predicates built on it."""

from __future__ import annotations

from decimal import Decimal

import pytest

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
from nihil.type_tags import TypeTag, classify


@pytest.mark.unit
class TestByType:
    """Tests for by_type()."""

    @pytest.mark.parametrize(
        ("tag", "expected"),
        [
            ("object", {}),
            ("string", ""),
            ("number", 0),
            ("boolean", False),
            ("array", []),
            ("null", None),
            ("undefined", None),
        ],
    )
    def test_defaults(self, tag: str, expected: object) -> None:
        assert by_type(tag) == expected

    def test_function_default_is_do_nothing(self) -> None:
        assert by_type(TypeTag.FUNCTION) is do_nothing

    def test_unknown_tag_yields_undefined_default(self) -> None:
        assert by_type("unknown") is None

    def test_non_string_tag_never_raises(self) -> None:
        assert by_type(None) is None
        assert by_type(42) is None
        assert by_type(["string"]) is None

    def test_containers_are_fresh(self) -> None:
        first = by_type("object")
        first["polluted"] = True
        assert by_type("object") == {}
        assert by_type("array") is not by_type("array")

    def test_every_tag_has_an_entry(self) -> None:
        assert set(DEFAULTS) == set(TypeTag)

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            DEFAULTS[TypeTag.STRING] = lambda: "x"  # type: ignore[index]

    @pytest.mark.parametrize("tag", list(TypeTag))
    def test_every_default_is_default(self, tag: TypeTag) -> None:
        assert is_default(by_type(tag))


@pytest.mark.unit
class TestByValue:
    """Tests for by_value()."""

    @pytest.mark.parametrize(
        "value",
        ["hello", 42, 2.5, True, {"a": 1}, [1, 2, 3], (1,), None, len, object()],
    )
    def test_matches_by_type_of_classification(self, value: object) -> None:
        assert by_value(value) == by_type(classify(value))

    def test_examples(self) -> None:
        assert by_value("hello") == ""
        assert by_value(42) == 0
        assert by_value(True) is False
        assert by_value({"a": 1}) == {}
        assert by_value([1, 2, 3]) == []


@pytest.mark.unit
class TestIsDefault:
    """Tests for is_default()."""

    @pytest.mark.parametrize(
        "value",
        [[], {}, "", 0, 0.0, Decimal(0), False, None, float("nan"), (), set(), EMPTY_OBJECT],
    )
    def test_defaults(self, value: object) -> None:
        assert is_default(value) is True

    @pytest.mark.parametrize("value", [[1], {"a": 1}, "x", 1, -0.5, True, (0,), {0}])
    def test_non_defaults(self, value: object) -> None:
        assert is_default(value) is False

    def test_do_nothing_is_default(self) -> None:
        assert is_default(do_nothing) is True

    def test_other_callables_are_not_default(self) -> None:
        assert is_default(lambda *args: None) is False
        assert is_default(print) is False

    def test_unclassified_objects_are_not_default(self) -> None:
        assert is_default(object()) is False

    def test_nested_empty_values_do_not_make_a_container_default(self) -> None:
        assert is_default([None]) is False
        assert is_default({"a": ""}) is False


@pytest.mark.unit
class TestSetDefault:
    """Tests for set_default() and its fallback alias."""

    @pytest.mark.parametrize(
        ("value", "fallback_value", "expected"),
        [
            ("", "fallback", "fallback"),
            ("hello", "fallback", "hello"),
            (0, 42, 42),
            (5, 42, 5),
            ([], [1, 2, 3], [1, 2, 3]),
            ([4, 5], [1, 2, 3], [4, 5]),
            ({}, {"name": "John"}, {"name": "John"}),
            ({"age": 25}, {"name": "John"}, {"age": 25}),
            (None, "not null", "not null"),
        ],
    )
    def test_examples(self, value: object, fallback_value: object, expected: object) -> None:
        assert set_default(value, fallback_value) == expected

    def test_returns_value_unchanged(self) -> None:
        value = {"age": 25}
        assert set_default(value, {}) is value

    def test_returns_fallback_itself(self) -> None:
        replacement = ["x"]
        assert set_default([], replacement) is replacement

    def test_fallback_alias(self) -> None:
        assert fallback is set_default
        assert fallback(False, True) is True


@pytest.mark.unit
class TestNormalize:
    """Tests for normalize()."""

    def test_absence_markers_become_none(self) -> None:
        assert normalize(None) is None
        assert normalize(float("nan")) is None

    def test_other_values_pass_through(self) -> None:
        payload = {"a": 1}
        assert normalize("x") == "x"
        assert normalize(payload) is payload

    def test_empty_values_are_not_normalized(self) -> None:
        assert normalize("") == ""
        assert normalize(0) == 0
        assert normalize([]) == []


@pytest.mark.unit
class TestConstants:
    """Tests for do_nothing and the empty object constants."""

    def test_do_nothing_accepts_anything(self) -> None:
        assert do_nothing() is None
        assert do_nothing(1, 2, key="value") is None

    def test_empty_object_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            EMPTY_OBJECT["key"] = "value"  # type: ignore[index]
        assert len(EMPTY_OBJECT) == 0

    def test_empty_object_factory_is_fresh(self) -> None:
        first = empty_object()
        first["key"] = 1
        assert empty_object() == {}
