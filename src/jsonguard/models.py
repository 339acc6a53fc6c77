"""Base Pydantic models and validation options for jsonguard.

This module provides the base model class that all jsonguard Pydantic models
inherit from, plus the options that control a validation pass:

- Strict field validation (no extra fields allowed)
- Immutable instances, so options can be shared between child validators

Example:
    >>> from jsonguard.models import ValidationOptions, BigintMode
    >>> options = ValidationOptions(max_depth=20)
    >>> options.bigint_mode
    <BigintMode.STRING_INVALID: 'string_invalid'>
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import InvalidOptionError

DEFAULT_MAX_DEPTH = 10


class GuardBaseModel(BaseModel):
    """Base model for all jsonguard Pydantic models.

    - extra="forbid": Rejects any fields not defined in the model
    - frozen=True: Makes instances immutable
    """

    model_config = ConfigDict(extra="forbid", frozen=True)


class BigintMode(Enum):
    """How the ``string`` type treats numbers that were decoded as strings.

    Some decoders turn integer literals that overflow the native integer
    range into strings (``"98249283749234923498293171823948729348710298"``).

    - STRING_VALID: such strings are ordinary strings
    - STRING_INVALID: such strings are numbers, hence not valid strings
    """

    STRING_VALID = "string_valid"
    STRING_INVALID = "string_invalid"


class ValidationOptions(GuardBaseModel):
    """Options shared by every validator in one validation pass.

    Attributes:
        max_depth: Maximum recursion depth before evaluation aborts with
            ``MaximumDepthExceededError``. Only raise this if your schema
            uses circular references over deeply nested data.
        bigint_mode: Treatment of bigint-as-string artifacts by ``type``.
    """

    max_depth: int = Field(default=DEFAULT_MAX_DEPTH, ge=0)
    bigint_mode: BigintMode = BigintMode.STRING_INVALID

    @classmethod
    def coerce(
        cls, options: ValidationOptions | dict[str, Any] | None = None, **overrides: Any
    ) -> ValidationOptions:
        """Build options from an instance, a dict or nothing, applying overrides.

        Args:
            options: Existing options, a plain dict of option values, or None
            **overrides: Individual option values; ``None`` values are ignored

        Returns:
            A ValidationOptions instance

        Raises:
            InvalidOptionError: If any option value is invalid
        """
        overrides = {k: v for k, v in overrides.items() if v is not None}
        if isinstance(options, ValidationOptions) and not overrides:
            return options

        if options is None:
            values: dict[str, Any] = {}
        elif isinstance(options, ValidationOptions):
            values = options.model_dump()
        elif isinstance(options, dict):
            values = dict(options)
        else:
            raise InvalidOptionError(
                f"Options must be ValidationOptions or a dict, got {type(options).__name__}"
            )
        values.update(overrides)

        try:
            return cls.model_validate(values)
        except PydanticValidationError as e:
            raise InvalidOptionError(f"Invalid validation options: {e}") from e
