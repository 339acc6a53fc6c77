"""Base class for keyword handlers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from ..exceptions import InvalidSchemaError
from ..references import Reference

if TYPE_CHECKING:
    from ..core import Validator
    from ..errors import ValidationError


def is_schema(parameter: Any) -> bool:
    """Return True for anything a validator accepts as a schema node."""
    return isinstance(parameter, (Mapping, bool, Reference))


class Constraint(ABC):
    """A handler for one schema keyword.

    Handlers are stateless; everything they need comes from the validator
    they are applied to. A handler signals a local failure by raising
    ``AssertionFailedError`` and returns the errors of any child validators
    it spawned.
    """

    keyword: ClassVar[str]

    @abstractmethod
    def apply(self, validator: Validator, parameter: Any) -> list[ValidationError]:
        """Check ``validator.value`` against this keyword.

        Args:
            validator: The validator being evaluated
            parameter: The keyword's value in the schema

        Returns:
            Errors collected from child validators

        Raises:
            AssertionFailedError: If the value fails this keyword
        """

    def expect(self, validator: Validator, parameter: Any, *types: type) -> None:
        """Raise InvalidSchemaError unless ``parameter`` is one of ``types``.

        Booleans only count when ``bool`` itself is listed, not as ints.
        """
        is_bool = isinstance(parameter, bool)
        if not isinstance(parameter, types) or (is_bool and bool not in types):
            expected = " or ".join(t.__name__ for t in types)
            raise InvalidSchemaError(
                parameter,
                str(validator.pointer),
                f"Keyword '{self.keyword}' expects {expected}, got {type(parameter).__name__}",
            )

    def expect_schema(self, validator: Validator, parameter: Any) -> None:
        """Raise InvalidSchemaError unless ``parameter`` is a schema node."""
        if not is_schema(parameter):
            raise InvalidSchemaError(
                parameter,
                str(validator.pointer),
                f"Keyword '{self.keyword}' expects a schema, got {type(parameter).__name__}",
            )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.keyword!r})"
