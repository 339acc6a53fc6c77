"""Numeric keywords: ``minimum``, ``maximum`` and ``multipleOf``.

``exclusiveMinimum`` and ``exclusiveMaximum`` are draft-4 boolean modifiers
read from the same schema node; they have no handler of their own.
"""

from __future__ import annotations

from numbers import Number
from typing import TYPE_CHECKING, Any

from ..assertions import assert_max, assert_min, assert_multiple_of
from ..errors import ValidationError
from ..values import is_json_number
from .base import Constraint

if TYPE_CHECKING:
    from ..core import Validator


class MinimumConstraint(Constraint):
    keyword = "minimum"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        self.expect(validator, parameter, Number)
        if not is_json_number(validator.value):
            return []
        exclusive = validator.schema.get("exclusiveMinimum") is True
        assert_min(validator.value, parameter, str(validator.pointer), exclusive=exclusive)
        return []


class MaximumConstraint(Constraint):
    keyword = "maximum"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        self.expect(validator, parameter, Number)
        if not is_json_number(validator.value):
            return []
        exclusive = validator.schema.get("exclusiveMaximum") is True
        assert_max(validator.value, parameter, str(validator.pointer), exclusive=exclusive)
        return []


class MultipleOfConstraint(Constraint):
    keyword = "multipleOf"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        self.expect(validator, parameter, Number)
        if not is_json_number(validator.value):
            return []
        assert_multiple_of(validator.value, parameter, str(validator.pointer))
        return []
