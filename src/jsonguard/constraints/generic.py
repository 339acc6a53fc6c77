"""Keywords that apply to any value: ``enum`` and ``format``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..errors import AssertionFailedError, ErrorKind, ValidationError
from ..values import json_equal
from .base import Constraint

if TYPE_CHECKING:
    from ..core import Validator


class EnumConstraint(Constraint):
    keyword = "enum"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        self.expect(validator, parameter, list)
        if not any(json_equal(validator.value, member) for member in parameter):
            raise AssertionFailedError(
                f"Value must be one of: {parameter}",
                ErrorKind.ENUM_MISMATCH,
                validator.value,
                str(validator.pointer),
                {"enum": parameter},
            )
        return []


class FormatConstraint(Constraint):
    """Checks strings with the validator's format checker; unknown formats pass."""

    keyword = "format"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        self.expect(validator, parameter, str)
        value = validator.value
        if not isinstance(value, str):
            return []
        if not validator.format_checker.check(value, parameter):
            raise AssertionFailedError(
                f"Invalid {parameter} format: {value}",
                ErrorKind.FORMAT_MISMATCH,
                value,
                str(validator.pointer),
                {"format": parameter},
            )
        return []
