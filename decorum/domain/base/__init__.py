"""Base domain layer - shared kernel for subjects, decorators and chains."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    SubjectValidationError,
    TransformTypeError,
    UnknownAttribute,
    UnknownAttributeError,
    UnknownVariantError,
    ValidationError,
)
from .ports import AttributeProvider
from .value_objects import AttributeKind, AttributeSet, AttributeValue, ValueObject

__all__ = [
    # Value Objects
    "ValueObject",
    "AttributeKind",
    "AttributeSet",
    "AttributeValue",
    # Ports
    "AttributeProvider",
    # Exceptions
    "DomainException",
    "ValidationError",
    "UnknownAttributeError",
    "UnknownAttribute",
    "SubjectValidationError",
    "TransformTypeError",
    "UnknownVariantError",
    "ConfigurationError",
]
