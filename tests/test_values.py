"""Tests for jsonguard.values and jsonguard.pointer modules."""

import sys
from decimal import Decimal

import pytest

from jsonguard.pointer import Pointer
from jsonguard.values import (
    SchemaNode,
    is_bigint_string,
    is_json_integer,
    is_json_number,
    json_equal,
    json_type,
)


class TestValueKinds:
    """Test JSON kind detection."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (None, "null"),
            (True, "boolean"),
            (1, "integer"),
            (1.5, "number"),
            (Decimal("1.5"), "number"),
            ("s", "string"),
            ([], "array"),
            ({}, "object"),
            ((1, 2), None),
            (object(), None),
        ],
    )
    def test_json_type(self, value, expected):
        assert json_type(value) == expected

    def test_numbers_exclude_booleans(self):
        assert is_json_number(0)
        assert is_json_number(0.0)
        assert not is_json_number(False)
        assert not is_json_integer(True)

    def test_integers(self):
        assert is_json_integer(3)
        assert is_json_integer(3.0)
        assert is_json_integer(Decimal("3.000"))
        assert not is_json_integer(3.5)
        assert not is_json_integer(float("inf"))
        assert not is_json_integer(Decimal("NaN"))
        assert not is_json_integer("3")

    def test_bigint_strings(self):
        assert is_bigint_string(str(sys.maxsize + 1))
        assert not is_bigint_string(str(sys.maxsize))
        assert not is_bigint_string("-" + str(sys.maxsize + 1))
        assert not is_bigint_string("１２３")
        assert not is_bigint_string(sys.maxsize + 1)

    def test_bigint_strings_compare_as_text(self):
        assert is_bigint_string("9" * 5000)
        assert not is_bigint_string("0" * 5000)
        assert not is_bigint_string("000" + str(sys.maxsize))
        assert is_bigint_string("000" + str(sys.maxsize + 1))
        assert not is_bigint_string("")


class TestJsonEqual:
    """Test structural equality."""

    def test_numbers(self):
        assert json_equal(1, 1.0)
        assert json_equal(Decimal("2"), 2)
        assert not json_equal(1, 2)

    def test_booleans_are_not_numbers(self):
        assert not json_equal(True, 1)
        assert not json_equal(0, False)
        assert json_equal(True, True)

    def test_containers(self):
        assert json_equal({"a": [1, {"b": None}]}, {"a": [1.0, {"b": None}]})
        assert json_equal({"a": 1, "b": 2}, {"b": 2, "a": 1})
        assert not json_equal([1, 2], [2, 1])
        assert not json_equal([1], [1, 1])
        assert not json_equal({"a": 1}, {"a": 1, "b": 1})
        assert not json_equal([], {})

    def test_mixed_scalars(self):
        assert json_equal(None, None)
        assert not json_equal(None, False)
        assert not json_equal("1", 1)


class TestSchemaNode:
    """Test the read-only schema view."""

    def test_lookup(self):
        node = SchemaNode({"minimum": 0, "exclusiveMinimum": False})

        assert node.has("minimum")
        assert node.get("exclusiveMinimum") is False
        assert node.get("maximum") is None
        assert node.get("maximum", 5) == 5
        assert list(node) == ["minimum", "exclusiveMinimum"]
        assert len(node) == 2
        assert node["minimum"] == 0

    def test_stored_none_is_returned(self):
        assert SchemaNode({"default": None}).get("default", "fallback") is None


class TestPointer:
    """Test JSON pointer tracking."""

    def test_root(self):
        assert str(Pointer()) == ""
        assert len(Pointer()) == 0

    def test_join_returns_new_pointer(self):
        parent = Pointer().join("a")
        child = parent.join(0)

        assert str(parent) == "/a"
        assert str(child) == "/a/0"
        assert child.segments == ("a", 0)

    def test_escaping(self):
        assert str(Pointer(["a/b", "c~d"])) == "/a~1b/c~0d"

    def test_parse(self):
        assert Pointer.parse("/a~1b/c~0d/0").segments == ("a/b", "c~d", "0")
        assert Pointer.parse("") == Pointer()
        with pytest.raises(ValueError):
            Pointer.parse("a/b")

    def test_equality(self):
        assert Pointer(["a"]) == Pointer().join("a")
        assert hash(Pointer(["a"])) == hash(Pointer(["a"]))
