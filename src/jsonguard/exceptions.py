"""Structural failures raised by jsonguard.

These exceptions signal a misuse of the API or a pathological schema, never
a data-quality problem. They abort evaluation and propagate to the caller,
unlike ``ValidationError`` records which are collected.
"""

from __future__ import annotations

from typing import Any


class JsonGuardError(Exception):
    """Base class for all structural failures."""


class InvalidSchemaError(JsonGuardError, TypeError):
    """Raised when a schema or keyword parameter is malformed.

    The default message covers a schema argument that is not a mapping, a
    boolean or a reference; handlers pass ``reason`` for malformed keyword
    parameters.
    """

    def __init__(self, schema: Any, pointer: str = "", reason: str | None = None):
        self.schema = schema
        self.pointer = pointer
        location = f" at '{pointer}'" if pointer else ""
        if reason is None:
            reason = (
                "The schema should be an object, a boolean or a reference, "
                f"got {type(schema).__name__}"
            )
        super().__init__(f"{reason}{location}")


class InvalidOptionError(JsonGuardError, ValueError):
    """Raised when validation options are invalid."""


class MaximumDepthExceededError(JsonGuardError):
    """Raised when validation recurses deeper than ``max_depth``.

    This usually means the schema references itself in a way the data never
    bottoms out of, or the data is nested deeper than the configured limit.

    Attributes:
        depth: The depth that was reached.
        max_depth: The configured limit.
        pointer: Location of the value being validated when the guard fired.
    """

    def __init__(self, depth: int, max_depth: int, pointer: str = ""):
        self.depth = depth
        self.max_depth = max_depth
        self.pointer = pointer
        super().__init__(
            f"Maximum validation depth of {max_depth} exceeded at '{pointer}'"
        )


class ReferenceResolutionError(JsonGuardError):
    """Raised when a ``$ref`` cannot be resolved to a concrete schema."""

    def __init__(self, ref: str, reason: str):
        self.ref = ref
        self.reason = reason
        super().__init__(f"Unable to resolve reference '{ref}': {reason}")
