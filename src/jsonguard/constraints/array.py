"""Array keywords: ``items``, ``additionalItems``, ``minItems``, ``maxItems``
and ``uniqueItems``."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ..assertions import assert_count
from ..errors import AssertionFailedError, ErrorKind, ValidationError
from ..values import json_equal
from .base import Constraint

if TYPE_CHECKING:
    from ..core import Validator


class ItemsConstraint(Constraint):
    """List validation for a single schema, tuple validation for a list.

    In tuple mode elements past the end of the list are left to
    ``additionalItems``.
    """

    keyword = "items"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        if not isinstance(parameter, list):
            self.expect_schema(validator, parameter)
        value = validator.value
        if not isinstance(value, list):
            return []

        errors: list[ValidationError] = []
        if isinstance(parameter, list):
            for index, (item, schema) in enumerate(zip(value, parameter)):
                errors.extend(validator.descend(item, schema, index).evaluate())
        else:
            for index, item in enumerate(value):
                errors.extend(validator.descend(item, parameter, index).evaluate())
        return errors


class AdditionalItemsConstraint(Constraint):
    """Governs elements beyond a tuple-form ``items`` list.

    Ignored when ``items`` is absent or a single schema.
    """

    keyword = "additionalItems"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        value = validator.value
        items = validator.schema.get("items")
        if not isinstance(value, list) or not isinstance(items, list):
            return []

        if parameter is False:
            if len(value) > len(items):
                raise AssertionFailedError(
                    f"Must have at most {len(items)} items, additional items are not allowed.",
                    ErrorKind.COUNT_VIOLATION,
                    value,
                    str(validator.pointer),
                    {"expected": len(items), "actual": len(value), "bound": "maximum"},
                )
            return []

        if parameter is True:
            return []

        self.expect_schema(validator, parameter)

        errors: list[ValidationError] = []
        for index in range(len(items), len(value)):
            errors.extend(validator.descend(value[index], parameter, index).evaluate())
        return errors


class MinItemsConstraint(Constraint):
    keyword = "minItems"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        self.expect(validator, parameter, int)
        if isinstance(validator.value, list):
            assert_count(validator.value, str(validator.pointer), "items", minimum=parameter)
        return []


class MaxItemsConstraint(Constraint):
    keyword = "maxItems"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        self.expect(validator, parameter, int)
        if isinstance(validator.value, list):
            assert_count(validator.value, str(validator.pointer), "items", maximum=parameter)
        return []


class UniqueItemsConstraint(Constraint):
    keyword = "uniqueItems"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        value = validator.value
        if parameter is not True or not isinstance(value, list):
            return []

        duplicates: list[int] = []
        for index, item in enumerate(value):
            if any(json_equal(item, earlier) for earlier in value[:index]):
                duplicates.append(index)

        if duplicates:
            raise AssertionFailedError(
                "Array must contain unique items.",
                ErrorKind.DUPLICATE_ITEMS,
                value,
                str(validator.pointer),
                {"duplicates": duplicates},
            )
        return []
