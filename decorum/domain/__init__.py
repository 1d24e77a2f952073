"""
Domain Layer - the value-decoration engine

This domain layer is organized by bounded contexts:
- base/: Shared kernel with value objects, ports and exceptions
- subject/: Subject schemas and fixed-value base subjects
- decorator/: Decorator wrappers and the pure transforms they apply
- chain/: Composition helpers folding decorators around a base subject
"""

from .base import (
    AttributeKind,
    AttributeProvider,
    AttributeSet,
    AttributeValue,
    ConfigurationError,
    DomainException,
    SubjectValidationError,
    TransformTypeError,
    UnknownAttribute,
    UnknownAttributeError,
    UnknownVariantError,
    ValidationError,
    ValueObject,
)
from .chain import compose, compose_chain, conflicting_attributes, is_order_independent
from .decorator import (
    Add,
    Append,
    DecoratorFactory,
    DecoratorWrapper,
    Prepend,
    Scale,
    decorator_factory,
)
from .subject import BaseSubject, SubjectSchema, create_subject

__all__ = [
    # Base primitives
    "ValueObject",
    "AttributeKind",
    "AttributeSet",
    "AttributeValue",
    "AttributeProvider",
    "DomainException",
    "ValidationError",
    "UnknownAttributeError",
    "UnknownAttribute",
    "SubjectValidationError",
    "TransformTypeError",
    "UnknownVariantError",
    "ConfigurationError",
    # Subject context
    "SubjectSchema",
    "BaseSubject",
    "create_subject",
    # Decorator context
    "DecoratorWrapper",
    "DecoratorFactory",
    "decorator_factory",
    "Add",
    "Scale",
    "Append",
    "Prepend",
    # Chain context
    "compose",
    "compose_chain",
    "conflicting_attributes",
    "is_order_independent",
]
