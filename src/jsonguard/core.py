"""Core validation engine for jsonguard.

A ``Validator`` checks one value against one schema node at one location in
the document. Keyword handlers that need to look at nested data or
sub-schemas spawn child validators through ``Validator.descend`` and merge
the child errors into their own.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .constraints import KEYWORD_HANDLERS, Constraint
from .errors import AssertionFailedError, ErrorKind, ValidationError
from .exceptions import InvalidSchemaError, MaximumDepthExceededError
from .formats import FormatChecker, default_checker
from .models import BigintMode, ValidationOptions
from .pointer import Pointer
from .references import Reference
from .values import SchemaNode

logger = logging.getLogger(__name__)


class Validator:
    """Validates a JSON value against a draft-4 JSON Schema node.

    Evaluation visits every keyword of the schema and collects every error;
    it never stops at the first failure. Each call to ``evaluate`` starts
    from scratch, so a validator can be evaluated any number of times.

    Example:
        >>> validator = Validator(
        ...     {"x": 1, "y": 2},
        ...     {"properties": {"x": {"type": "string"}}, "additionalProperties": False},
        ... )
        >>> [(e.pointer, e.kind.value) for e in validator.evaluate()]
        [('/x', 'type_mismatch'), ('', 'not_allowed_property')]
    """

    def __init__(
        self,
        value: Any,
        schema: Any,
        options: ValidationOptions | dict[str, Any] | None = None,
        *,
        pointer: Pointer | None = None,
        depth: int = 0,
        format_checker: FormatChecker | None = None,
        handlers: Mapping[str, Constraint] | None = None,
    ):
        """Initialize the validator.

        Args:
            value: The decoded JSON value to validate
            schema: A schema mapping, a boolean schema or a Reference
            options: Validation options, a dict of option values, or None
            pointer: Location of ``value`` in the document (defaults to the root)
            depth: Recursion depth of this validator
            format_checker: Registry used by the ``format`` keyword
            handlers: Keyword handler table (defaults to the draft-4 keywords)

        Raises:
            InvalidSchemaError: If ``schema`` is not a mapping, a boolean or a reference
            InvalidOptionError: If ``options`` is invalid
            ReferenceResolutionError: If a reference cannot be resolved
        """
        self.options = ValidationOptions.coerce(options)
        self.pointer = pointer if pointer is not None else Pointer()
        self.depth = depth
        self.format_checker = format_checker or default_checker
        self.handlers = handlers if handlers is not None else KEYWORD_HANDLERS

        if isinstance(schema, Reference):
            schema = schema.resolve()

        self.schema: SchemaNode | bool
        if isinstance(schema, bool):
            self.schema = schema
        elif isinstance(schema, Mapping):
            self.schema = SchemaNode(schema)
        else:
            raise InvalidSchemaError(schema, str(self.pointer))

        self.value = value

    def evaluate(self) -> list[ValidationError]:
        """Run every keyword of the schema against the value.

        Returns:
            All errors, local and from child validators, in keyword order

        Raises:
            MaximumDepthExceededError: If this validator is nested too deep
            InvalidSchemaError: If a keyword parameter or sub-schema is malformed
        """
        self.check_depth()

        if self.schema is True:
            return []
        if self.schema is False:
            return [
                ValidationError(
                    kind=ErrorKind.FALSE_SCHEMA,
                    message="No value is allowed by the schema.",
                    value=self.value,
                    pointer=str(self.pointer),
                )
            ]

        errors: list[ValidationError] = []
        for keyword, parameter in self.schema.items():
            handler = self.handlers.get(keyword)
            if handler is None:
                logger.debug(f"Skipping keyword '{keyword}' at '{self.pointer}'")
                continue
            try:
                errors.extend(handler.apply(self, parameter))
            except AssertionFailedError as e:
                errors.append(e.to_error())
        return errors

    def errors(self) -> list[ValidationError]:
        """Alias of ``evaluate``."""
        return self.evaluate()

    def passes(self) -> bool:
        return not self.evaluate()

    def fails(self) -> bool:
        return not self.passes()

    def descend(self, value: Any, schema: Any, segment: str | int | None = None) -> Validator:
        """Create a child validator one level deeper.

        Args:
            value: The child value
            schema: The schema for the child value
            segment: Path segment to append; None keeps the current pointer

        Returns:
            A new Validator sharing this validator's options
        """
        pointer = self.pointer if segment is None else self.pointer.join(segment)
        return Validator(
            value,
            schema,
            self.options,
            pointer=pointer,
            depth=self.depth + 1,
            format_checker=self.format_checker,
            handlers=self.handlers,
        )

    def check_depth(self) -> None:
        """Stop a runaway recursion, e.g. through a self-referencing schema."""
        if self.depth > self.options.max_depth:
            logger.error(
                f"Maximum depth {self.options.max_depth} exceeded at '{self.pointer}'"
            )
            raise MaximumDepthExceededError(self.depth, self.options.max_depth, str(self.pointer))

    def __repr__(self) -> str:
        return f"Validator(pointer={str(self.pointer)!r}, depth={self.depth})"


def evaluate(
    value: Any,
    schema: Any,
    options: ValidationOptions | dict[str, Any] | None = None,
    *,
    max_depth: int | None = None,
    bigint_mode: BigintMode | str | None = None,
    format_checker: FormatChecker | None = None,
) -> list[ValidationError]:
    """Validate ``value`` against ``schema`` and return every error.

    Args:
        value: The decoded JSON value
        schema: A schema mapping, a boolean schema or a Reference
        options: Validation options or a dict of option values
        max_depth: Overrides ``options.max_depth``
        bigint_mode: Overrides ``options.bigint_mode``
        format_checker: Registry used by the ``format`` keyword

    Returns:
        List of ValidationError, empty if the value is valid

    Raises:
        JsonGuardError: On structural failures (invalid schema or options,
            depth exceeded, unresolvable reference)
    """
    options = ValidationOptions.coerce(options, max_depth=max_depth, bigint_mode=bigint_mode)
    return Validator(value, schema, options, format_checker=format_checker).evaluate()


def passes(value: Any, schema: Any, *args: Any, **kwargs: Any) -> bool:
    """Return True if ``value`` is valid. Takes the same arguments as ``evaluate``."""
    return not evaluate(value, schema, *args, **kwargs)


def fails(value: Any, schema: Any, *args: Any, **kwargs: Any) -> bool:
    """Return True if ``value`` is invalid. Takes the same arguments as ``evaluate``."""
    return not passes(value, schema, *args, **kwargs)
