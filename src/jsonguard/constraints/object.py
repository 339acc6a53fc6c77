"""Object keywords.

``properties``, ``patternProperties`` and ``additionalProperties`` fan out
into child validators, one per property. ``required`` and ``dependencies``
check key presence on the object itself.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from ..assertions import assert_all_present, assert_count
from ..errors import AssertionFailedError, ErrorKind, ValidationError
from .base import Constraint
from .string import search

if TYPE_CHECKING:
    from ..core import Validator


def keys_matching_pattern(pattern: str, keys: Iterable[str], pointer: str = "") -> list[str]:
    """Return the keys ``pattern`` matches, in their original order."""
    return [key for key in keys if search(pattern, key, pointer)]


def validate_properties(
    validator: Validator, schemas: Iterable[tuple[str, Any]]
) -> list[ValidationError]:
    """Validate each present property against its schema and merge the errors."""
    value = validator.value
    errors: list[ValidationError] = []
    for name, schema in schemas:
        if name in value:
            errors.extend(validator.descend(value[name], schema, name).evaluate())
    return errors


class PropertiesConstraint(Constraint):
    """Properties absent from the value are skipped; ``required`` reports them."""

    keyword = "properties"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        self.expect(validator, parameter, dict)
        if not isinstance(validator.value, dict):
            return []
        return validate_properties(validator, parameter.items())


class PatternPropertiesConstraint(Constraint):
    keyword = "patternProperties"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        self.expect(validator, parameter, dict)
        value = validator.value
        if not isinstance(value, dict):
            return []

        pointer = str(validator.pointer)
        errors: list[ValidationError] = []
        for pattern, schema in parameter.items():
            matches = keys_matching_pattern(pattern, value, pointer)
            errors.extend(validate_properties(validator, ((key, schema) for key in matches)))
        return errors


class AdditionalPropertiesConstraint(Constraint):
    """Applies to keys matched by neither ``properties`` nor ``patternProperties``."""

    keyword = "additionalProperties"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        self.expect_schema(validator, parameter)
        value = validator.value
        if not isinstance(value, dict):
            return []

        additional = self.additional_keys(validator)
        if not additional or parameter is True:
            return []

        if parameter is False:
            raise AssertionFailedError(
                f"Additional properties are not allowed: {', '.join(additional)}",
                ErrorKind.NOT_ALLOWED_PROPERTY,
                value,
                str(validator.pointer),
                {"additional": additional},
            )

        return validate_properties(validator, ((key, parameter) for key in additional))

    @staticmethod
    def additional_keys(validator: Validator) -> list[str]:
        declared = validator.schema.get("properties")
        declared = declared if isinstance(declared, dict) else {}
        remaining = [key for key in validator.value if key not in declared]

        patterns = validator.schema.get("patternProperties")
        if isinstance(patterns, dict):
            pointer = str(validator.pointer)
            for pattern in patterns:
                matched = set(keys_matching_pattern(pattern, remaining, pointer))
                remaining = [key for key in remaining if key not in matched]
        return remaining


class RequiredConstraint(Constraint):
    """Reports all missing names in a single error."""

    keyword = "required"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        self.expect(validator, parameter, list)
        if isinstance(validator.value, dict):
            assert_all_present(
                parameter,
                validator.value,
                str(validator.pointer),
                ErrorKind.MISSING_REQUIRED,
                "Required properties missing:",
            )
        return []


class MinPropertiesConstraint(Constraint):
    keyword = "minProperties"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        self.expect(validator, parameter, int)
        if isinstance(validator.value, dict):
            assert_count(validator.value, str(validator.pointer), "properties", minimum=parameter)
        return []


class MaxPropertiesConstraint(Constraint):
    keyword = "maxProperties"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        self.expect(validator, parameter, int)
        if isinstance(validator.value, dict):
            assert_count(validator.value, str(validator.pointer), "properties", maximum=parameter)
        return []


class DependenciesConstraint(Constraint):
    """Property dependencies (a list of names) and schema dependencies.

    A schema dependency validates the whole object, at the object's own
    pointer, whenever the named property is present.
    """

    keyword = "dependencies"

    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        self.expect(validator, parameter, dict)
        value = validator.value
        if not isinstance(value, dict):
            return []

        errors: list[ValidationError] = []
        for name, dependency in parameter.items():
            if name not in value:
                continue
            if isinstance(dependency, list):
                try:
                    assert_all_present(
                        dependency,
                        value,
                        str(validator.pointer),
                        ErrorKind.MISSING_DEPENDENCY,
                        f"Property '{name}' requires:",
                    )
                except AssertionFailedError as e:
                    # keep checking the remaining dependencies
                    e.context["property"] = name
                    errors.append(e.to_error())
            else:
                self.expect_schema(validator, dependency)
                errors.extend(validator.descend(value, dependency).evaluate())
        return errors
