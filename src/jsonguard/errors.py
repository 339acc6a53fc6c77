"""Validation error records for jsonguard.

A ``ValidationError`` is plain data describing one failed constraint. Keyword
handlers signal a local failure by raising ``AssertionFailedError``; the
dispatcher in ``jsonguard.core`` turns it into a record.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from .models import GuardBaseModel


class ErrorKind(Enum):
    """Codes for the constraint a value failed."""

    MISSING_REQUIRED = "missing_required"
    TYPE_MISMATCH = "type_mismatch"
    NOT_ALLOWED_PROPERTY = "not_allowed_property"
    ANY_OF_FAILED = "any_of_failed"
    ONE_OF_FAILED = "one_of_failed"
    NOT_FAILED = "not_failed"
    PATTERN_MISMATCH = "pattern_mismatch"
    RANGE_VIOLATION = "range_violation"
    NOT_MULTIPLE_OF = "not_multiple_of"
    LENGTH_VIOLATION = "length_violation"
    COUNT_VIOLATION = "count_violation"
    DUPLICATE_ITEMS = "duplicate_items"
    ENUM_MISMATCH = "enum_mismatch"
    FORMAT_MISMATCH = "format_mismatch"
    MISSING_DEPENDENCY = "missing_dependency"
    FALSE_SCHEMA = "false_schema"
    MAX_DEPTH_EXCEEDED = "max_depth_exceeded"


class ValidationError(GuardBaseModel):
    """A single constraint violation.

    Attributes:
        kind: Which constraint failed.
        message: Human-readable description.
        value: The offending value.
        pointer: JSON Pointer to the offending value ("" is the root).
        context: Constraint parameters, e.g. the violated schema fragment.

    Example:
        >>> error = ValidationError(
        ...     kind=ErrorKind.TYPE_MISMATCH,
        ...     message="The data must be a(n) string.",
        ...     value=1,
        ...     pointer="/x",
        ...     context={"type": "string"},
        ... )
        >>> error.to_dict()["kind"]
        'type_mismatch'
    """

    kind: ErrorKind
    message: str
    value: Any = None
    pointer: str = ""
    context: dict[str, Any] = Field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Return the flat, serialisable form of this error."""
        return {
            "pointer": self.pointer,
            "kind": self.kind.value,
            "message": self.message,
            "context": self.context,
        }

    def __str__(self) -> str:
        return f"{self.pointer or '/'}: {self.message}"


class AssertionFailedError(Exception):
    """Raised by keyword handlers when the value fails their constraint."""

    def __init__(
        self,
        message: str,
        kind: ErrorKind,
        value: Any,
        pointer: str,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.kind = kind
        self.value = value
        self.pointer = pointer
        self.context = context or {}

    def to_error(self) -> ValidationError:
        return ValidationError(
            kind=self.kind,
            message=self.message,
            value=self.value,
            pointer=self.pointer,
            context=self.context,
        )
