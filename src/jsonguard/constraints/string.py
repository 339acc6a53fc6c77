"""String keywords: ``minLength``, ``maxLength`` and ``pattern``."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from ..assertions import assert_length
from ..errors import AssertionFailedError, ErrorKind, ValidationError
from ..exceptions import InvalidSchemaError
from .base import Constraint

if TYPE_CHECKING:
    from ..core import Validator


def search(pattern: str, value: str, pointer: str = "") -> bool:
    """Return whether ``pattern`` matches anywhere in ``value``.

    Raises:
        InvalidSchemaError: If the pattern is not a valid regular expression
    """
    try:
        return re.search(pattern, value) is not None
    except re.error as e:
        raise InvalidSchemaError(pattern, pointer, f"Invalid pattern '{pattern}': {e}") from e


class MinLengthConstraint(Constraint):
    keyword = "minLength"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        self.expect(validator, parameter, int)
        if isinstance(validator.value, str):
            assert_length(validator.value, str(validator.pointer), minimum=parameter)
        return []


class MaxLengthConstraint(Constraint):
    keyword = "maxLength"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        self.expect(validator, parameter, int)
        if isinstance(validator.value, str):
            assert_length(validator.value, str(validator.pointer), maximum=parameter)
        return []


class PatternConstraint(Constraint):
    keyword = "pattern"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        self.expect(validator, parameter, str)
        value = validator.value
        if not isinstance(value, str):
            return []
        if not search(parameter, value, str(validator.pointer)):
            raise AssertionFailedError(
                f"String does not match pattern: {parameter}",
                ErrorKind.PATTERN_MISMATCH,
                value,
                str(validator.pointer),
                {"pattern": parameter},
            )
        return []
