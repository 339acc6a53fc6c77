"""Keyword handlers and the keyword registration table.

``KEYWORD_HANDLERS`` maps each supported draft-4 keyword to its handler.
Keywords without an entry (``exclusiveMinimum``, ``definitions``, ``title``,
vendor extensions...) are skipped by the validator.
"""

from collections.abc import Mapping
from types import MappingProxyType

from .array import (
    AdditionalItemsConstraint,
    ItemsConstraint,
    MaxItemsConstraint,
    MinItemsConstraint,
    UniqueItemsConstraint,
)
from .base import Constraint, is_schema
from .combinators import AllOfConstraint, AnyOfConstraint, NotConstraint, OneOfConstraint
from .generic import EnumConstraint, FormatConstraint
from .numeric import MaximumConstraint, MinimumConstraint, MultipleOfConstraint
from .object import (
    AdditionalPropertiesConstraint,
    DependenciesConstraint,
    MaxPropertiesConstraint,
    MinPropertiesConstraint,
    PatternPropertiesConstraint,
    PropertiesConstraint,
    RequiredConstraint,
)
from .string import MaxLengthConstraint, MinLengthConstraint, PatternConstraint
from .type import TypeConstraint


def build_registry(*handlers: Constraint) -> Mapping[str, Constraint]:
    """Build a read-only keyword to handler table."""
    return MappingProxyType({handler.keyword: handler for handler in handlers})


KEYWORD_HANDLERS: Mapping[str, Constraint] = build_registry(
    TypeConstraint(),
    EnumConstraint(),
    FormatConstraint(),
    MinimumConstraint(),
    MaximumConstraint(),
    MultipleOfConstraint(),
    MinLengthConstraint(),
    MaxLengthConstraint(),
    PatternConstraint(),
    ItemsConstraint(),
    AdditionalItemsConstraint(),
    MinItemsConstraint(),
    MaxItemsConstraint(),
    UniqueItemsConstraint(),
    PropertiesConstraint(),
    PatternPropertiesConstraint(),
    AdditionalPropertiesConstraint(),
    RequiredConstraint(),
    MinPropertiesConstraint(),
    MaxPropertiesConstraint(),
    DependenciesConstraint(),
    AllOfConstraint(),
    AnyOfConstraint(),
    OneOfConstraint(),
    NotConstraint(),
)

__all__ = [
    "Constraint",
    "KEYWORD_HANDLERS",
    "build_registry",
    "is_schema",
]
