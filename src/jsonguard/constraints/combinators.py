"""Combinators: ``allOf``, ``anyOf``, ``oneOf`` and ``not``.

Sub-schemas validate the same value at the same pointer. ``anyOf``,
``oneOf`` and ``not`` only need the pass/fail outcome of each probe, so
their sub-errors are not surfaced. Structural failures raised by a probe
(depth exceeded, malformed sub-schema) propagate to the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..errors import AssertionFailedError, ErrorKind, ValidationError
from .base import Constraint

if TYPE_CHECKING:
    from ..core import Validator


class AllOfConstraint(Constraint):
    """Merges the errors of every failing sub-schema."""

    keyword = "allOf"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        self.expect(validator, parameter, list)
        errors: list[ValidationError] = []
        for schema in parameter:
            errors.extend(validator.descend(validator.value, schema).evaluate())
        return errors


class AnyOfConstraint(Constraint):
    keyword = "anyOf"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        self.expect(validator, parameter, list)
        for schema in parameter:
            if validator.descend(validator.value, schema).passes():
                return []

        raise AssertionFailedError(
            "Failed matching any of the provided schemas.",
            ErrorKind.ANY_OF_FAILED,
            validator.value,
            str(validator.pointer),
            {"any_of": parameter},
        )


class OneOfConstraint(Constraint):
    keyword = "oneOf"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        self.expect(validator, parameter, list)
        passed = sum(
            1 for schema in parameter if validator.descend(validator.value, schema).passes()
        )
        if passed != 1:
            raise AssertionFailedError(
                "Failed matching exactly one of the provided schemas.",
                ErrorKind.ONE_OF_FAILED,
                validator.value,
                str(validator.pointer),
                {"one_of": parameter, "passed": passed},
            )
        return []


class NotConstraint(Constraint):
    keyword = "not"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        self.expect_schema(validator, parameter)
        if validator.descend(validator.value, parameter).passes():
            raise AssertionFailedError(
                "Data should not match the schema.",
                ErrorKind.NOT_FAILED,
                validator.value,
                str(validator.pointer),
                {"not_schema": parameter},
            )
        return []
