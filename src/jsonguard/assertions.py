"""Assertion helpers for keyword handlers.

Each helper raises ``AssertionFailedError`` when the value does not satisfy
the constraint; the dispatcher converts it to a ``ValidationError``.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from .errors import AssertionFailedError, ErrorKind


def _number(value: Any) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def assert_min(value: Any, limit: Any, pointer: str, *, exclusive: bool = False) -> None:
    if exclusive and not value > limit:
        raise AssertionFailedError(
            f"Number must be greater than {limit}.",
            ErrorKind.RANGE_VIOLATION,
            value,
            pointer,
            {"minimum": limit, "exclusive": True},
        )
    if not exclusive and not value >= limit:
        raise AssertionFailedError(
            f"Number must be at least {limit}.",
            ErrorKind.RANGE_VIOLATION,
            value,
            pointer,
            {"minimum": limit, "exclusive": False},
        )


def assert_max(value: Any, limit: Any, pointer: str, *, exclusive: bool = False) -> None:
    if exclusive and not value < limit:
        raise AssertionFailedError(
            f"Number must be less than {limit}.",
            ErrorKind.RANGE_VIOLATION,
            value,
            pointer,
            {"maximum": limit, "exclusive": True},
        )
    if not exclusive and not value <= limit:
        raise AssertionFailedError(
            f"Number must be at most {limit}.",
            ErrorKind.RANGE_VIOLATION,
            value,
            pointer,
            {"maximum": limit, "exclusive": False},
        )


def assert_multiple_of(value: Any, divisor: Any, pointer: str) -> None:
    if isinstance(value, int) and isinstance(divisor, int):
        remainder_is_zero = divisor != 0 and value % divisor == 0
    else:
        # float modulo is not exact (0.3 % 0.1 != 0)
        try:
            remainder_is_zero = _number(value) % _number(divisor) == 0
        except (InvalidOperation, ArithmeticError):
            remainder_is_zero = False
    if not remainder_is_zero:
        raise AssertionFailedError(
            f"Number must be a multiple of {divisor}.",
            ErrorKind.NOT_MULTIPLE_OF,
            value,
            pointer,
            {"multiple_of": divisor},
        )


def assert_length(
    value: str, pointer: str, *, minimum: int | None = None, maximum: int | None = None
) -> None:
    length = len(value)
    if minimum is not None and length < minimum:
        raise AssertionFailedError(
            f"String must be at least {minimum} characters long.",
            ErrorKind.LENGTH_VIOLATION,
            value,
            pointer,
            {"min_length": minimum, "length": length},
        )
    if maximum is not None and length > maximum:
        raise AssertionFailedError(
            f"String must be at most {maximum} characters long.",
            ErrorKind.LENGTH_VIOLATION,
            value,
            pointer,
            {"max_length": maximum, "length": length},
        )


def assert_count(
    value: Any,
    pointer: str,
    noun: str,
    *,
    minimum: int | None = None,
    maximum: int | None = None,
) -> None:
    """Check the number of items of an array or properties of an object."""
    count = len(value)
    if minimum is not None and count < minimum:
        raise AssertionFailedError(
            f"Must have at least {minimum} {noun}.",
            ErrorKind.COUNT_VIOLATION,
            value,
            pointer,
            {"expected": minimum, "actual": count, "bound": "minimum"},
        )
    if maximum is not None and count > maximum:
        raise AssertionFailedError(
            f"Must have at most {maximum} {noun}.",
            ErrorKind.COUNT_VIOLATION,
            value,
            pointer,
            {"expected": maximum, "actual": count, "bound": "maximum"},
        )


def assert_all_present(
    required: list[str], value: dict[str, Any], pointer: str, kind: ErrorKind, message: str
) -> None:
    missing = [name for name in required if name not in value]
    if missing:
        raise AssertionFailedError(
            f"{message} {', '.join(missing)}",
            kind,
            value,
            pointer,
            {"required": list(required), "missing": missing},
        )
