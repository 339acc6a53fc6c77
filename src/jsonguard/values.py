"""Value model helpers.

Decoded JSON data is represented with native Python values:

- ``None`` for null, ``bool`` for booleans
- ``int``, ``float`` or ``Decimal`` for numbers (``bool`` is never a number)
- ``str`` for strings, ``list`` for arrays
- ``dict`` with string keys for objects, in insertion order

Schemas are the same structures. ``SchemaNode`` wraps a schema mapping to
give handlers typed, read-only lookup of sibling keywords.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator, Mapping
from decimal import Decimal
from typing import Any

_MISSING = object()
_MAXSIZE_DIGITS = str(sys.maxsize)


def is_json_number(value: Any) -> bool:
    """Return True for numeric values, excluding booleans."""
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def is_json_integer(value: Any) -> bool:
    """Return True for numbers with a zero fractional part (``3`` and ``3.0``)."""
    if not is_json_number(value):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return value.is_integer()
    return value.is_finite() and value == value.to_integral_value()


def is_bigint_string(value: Any) -> bool:
    """Return True for a string holding an integer too large for a native int.

    Decoders that cannot represent big integers natively may hand them over
    as strings; those strings are numbers in disguise.
    """
    if not (isinstance(value, str) and value.isascii() and value.isdigit()):
        return False
    # compare as text, int() refuses very long digit strings
    digits = value.lstrip("0")
    return len(digits) > len(_MAXSIZE_DIGITS) or (
        len(digits) == len(_MAXSIZE_DIGITS) and digits > _MAXSIZE_DIGITS
    )


def json_type(value: Any) -> str | None:
    """Return the JSON type name of a value, or None for non-JSON values."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if is_json_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return None


def json_equal(left: Any, right: Any) -> bool:
    """Structural equality over JSON values.

    Numbers compare by value (``1`` equals ``1.0``) but never equal booleans.
    Objects compare regardless of key order, arrays element by element.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if is_json_number(left) and is_json_number(right):
        return left == right
    if isinstance(left, list) and isinstance(right, list):
        return len(left) == len(right) and all(
            json_equal(a, b) for a, b in zip(left, right)
        )
    if isinstance(left, dict) and isinstance(right, dict):
        return left.keys() == right.keys() and all(
            json_equal(value, right[key]) for key, value in left.items()
        )
    if json_type(left) != json_type(right):
        return False
    return left == right


class SchemaNode(Mapping[str, Any]):
    """Read-only view of a schema mapping.

    Example:
        >>> node = SchemaNode({"minimum": 5, "exclusiveMinimum": True})
        >>> node.get("exclusiveMinimum")
        True
        >>> node.has("maximum")
        False
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[str, Any]):
        self._data = data

    def __getitem__(self, keyword: str) -> Any:
        return self._data[keyword]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def has(self, keyword: str) -> bool:
        return keyword in self._data

    def get(self, keyword: str, default: Any = None) -> Any:
        value = self._data.get(keyword, _MISSING)
        return default if value is _MISSING else value

    @property
    def raw(self) -> Mapping[str, Any]:
        return self._data

    def __repr__(self) -> str:
        return f"SchemaNode({dict(self._data)!r})"
