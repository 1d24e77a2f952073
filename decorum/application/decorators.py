"""
Application Layer Registration Decorators.

This module provides the class/function decorators that register decorator
variants and subject kinds by name, so chains can be described in
configuration files and on the command line.

Layer Responsibilities:
- Domain: Subjects, wrappers, transforms and composition
- Application: Name-based registration and lookup of domain building blocks
- Interface: CLI commands resolving names through these registries
"""
from __future__ import annotations

from typing import Callable, Dict, List, Type, TypeVar

from decorum.domain.base.exceptions import UnknownVariantError
from decorum.domain.decorator import DecoratorFactory, DecoratorWrapper, decorator_factory
from decorum.domain.subject import BaseSubject, SubjectSchema

TWrapper = TypeVar("TWrapper", bound=Type[DecoratorWrapper])
SubjectFactory = Callable[..., BaseSubject]
TSubjectFactory = TypeVar("TSubjectFactory", bound=SubjectFactory)

# Registries (application-level)
_decorator_registry: Dict[str, DecoratorFactory] = {}
_subject_registry: Dict[str, SubjectFactory] = {}
_schema_registry: Dict[str, SubjectSchema] = {}
_decorator_kinds: Dict[str, str] = {}


def decorator_variant(kind: str = ""):
    """
    Application-layer decorator to register a decorator variant by name.

    Usage:
        @decorator_variant("speaker")
        class BassBoost(DecoratorWrapper):
            name = "bass_boost"
            transforms = {"bass": Add(5.0)}

    Args:
        kind: Subject kind the variant is meant for (informational)

    Returns:
        Decorated wrapper class
    """

    def decorator(variant: TWrapper) -> TWrapper:
        factory = decorator_factory(variant)
        if not variant.name:
            raise ValueError(f"{variant.__name__} must declare a name to be registered")
        existing = _decorator_registry.get(variant.name)
        if existing is not None and existing.variant is not variant:
            raise ValueError(f"Decorator variant '{variant.name}' is already registered")
        _decorator_registry[variant.name] = factory
        _decorator_kinds[variant.name] = kind

        # Mark the class with metadata for discovery
        variant._is_decorator_variant = True
        variant._subject_kind = kind

        return variant

    return decorator


def subject_kind(schema: SubjectSchema):
    """
    Application-layer decorator to register a subject factory for a schema.

    Usage:
        @subject_kind(SPEAKER_SCHEMA)
        def make_speaker(power: float, bass: float) -> BaseSubject:
            ...

    Args:
        schema: Schema of the subjects the factory builds

    Returns:
        Decorated factory function
    """

    def decorator(factory: TSubjectFactory) -> TSubjectFactory:
        if schema.kind in _subject_registry and _subject_registry[schema.kind] is not factory:
            raise ValueError(f"Subject kind '{schema.kind}' is already registered")
        _subject_registry[schema.kind] = factory
        _schema_registry[schema.kind] = schema
        return factory

    return decorator


# Registry access
def get_decorator_factory(name: str) -> DecoratorFactory:
    """Get the factory for a registered decorator variant."""
    if name not in _decorator_registry:
        raise UnknownVariantError(name, "decorator")
    return _decorator_registry[name]


def get_decorator_kind(name: str) -> str:
    """Get the subject kind a decorator variant was registered for."""
    get_decorator_factory(name)
    return _decorator_kinds[name]


def get_subject_factory(kind: str) -> SubjectFactory:
    """Get the factory for a registered subject kind."""
    if kind not in _subject_registry:
        raise UnknownVariantError(kind, "subject")
    return _subject_registry[kind]


def get_subject_schema(kind: str) -> SubjectSchema:
    """Get the schema for a registered subject kind."""
    if kind not in _schema_registry:
        raise UnknownVariantError(kind, "subject")
    return _schema_registry[kind]


def get_registered_decorators() -> Dict[str, DecoratorFactory]:
    """Get all registered decorator factories."""
    return _decorator_registry.copy()


def get_registered_subject_kinds() -> List[str]:
    """Get all registered subject kinds."""
    return sorted(_subject_registry)


def get_registry_stats() -> Dict[str, int]:
    """Get statistics about registered variants."""
    return {
        "decorators": len(_decorator_registry),
        "subjects": len(_subject_registry),
        "total": len(_decorator_registry) + len(_subject_registry),
    }
