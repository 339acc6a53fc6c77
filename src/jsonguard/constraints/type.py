"""The ``type`` keyword."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..errors import AssertionFailedError, ErrorKind, ValidationError
from ..models import BigintMode
from ..values import is_bigint_string, is_json_integer, is_json_number
from .base import Constraint

if TYPE_CHECKING:
    from ..core import Validator

TYPE_NAMES = ("object", "array", "boolean", "null", "number", "integer", "string")


class TypeConstraint(Constraint):
    """Checks the JSON type of a value against one type name or a list of them.

    With ``BigintMode.STRING_INVALID`` a string of digits too large for a
    native integer is taken to be a number that was decoded as a string, so
    it matches ``number`` and ``integer`` instead of ``string``.
    """

    keyword = "type"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        self.expect(validator, parameter, str, list)
        mode = validator.options.bigint_mode
        value = validator.value

        if isinstance(parameter, list):
            if not any(self.matches(value, choice, mode) for choice in parameter):
                raise AssertionFailedError(
                    f"The data must be one of {', '.join(map(str, parameter))}.",
                    ErrorKind.TYPE_MISMATCH,
                    value,
                    str(validator.pointer),
                    {"type": parameter},
                )
            return []

        if not self.matches(value, parameter, mode):
            raise AssertionFailedError(
                f"The data must be a(n) {parameter}.",
                ErrorKind.TYPE_MISMATCH,
                value,
                str(validator.pointer),
                {"type": parameter},
            )
        return []

    @staticmethod
    def matches(value: Any, type_name: Any, mode: BigintMode) -> bool:
        """Return whether ``value`` is of JSON type ``type_name``."""
        if type_name == "object":
            return isinstance(value, dict)
        if type_name == "array":
            return isinstance(value, list)
        if type_name == "boolean":
            return isinstance(value, bool)
        if type_name == "null":
            return value is None
        if type_name == "number":
            return is_json_number(value) or TypeConstraint.bigint_is_number(value, mode)
        if type_name == "integer":
            return is_json_integer(value) or TypeConstraint.bigint_is_number(value, mode)
        if type_name == "string":
            return isinstance(value, str) and not TypeConstraint.bigint_is_number(value, mode)
        return False

    @staticmethod
    def bigint_is_number(value: Any, mode: BigintMode) -> bool:
        """Return whether ``value`` is a big integer that was decoded as a string.

        Only unsigned digit strings qualify, and only in ``STRING_INVALID``
        mode, so every string is either a ``string`` or a ``number``, never both.
        """
        return mode is BigintMode.STRING_INVALID and is_bigint_string(value)
