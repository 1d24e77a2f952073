"""Decorator bounded context - wrappers and the pure transforms they apply."""

from .decorator_wrapper import DecoratorFactory, DecoratorWrapper, decorator_factory
from .transforms import Add, Append, Prepend, Scale, Transform, describe_transform

__all__ = [
    "DecoratorWrapper",
    "DecoratorFactory",
    "decorator_factory",
    # Transforms
    "Transform",
    "Add",
    "Scale",
    "Append",
    "Prepend",
    "describe_transform",
]
