"""decorum - Root Package.

This package provides a generic value-decoration engine: any number of
attribute-modifying wrappers composed around an immutable base value object,
with consistent results whenever the wrappers touch disjoint attributes.

Key Components:
    - domain: Subjects, decorator wrappers, transforms and chain composition
    - application: Decorator/subject registries, the catalog and services
    - config: Configuration schemas, loading and management
    - infrastructure: Logging and error handling
    - cli: Command-line interface

Example:
    >>> from decorum.application.catalog.speaker import bass_boost, make_speaker, power_boost
    >>> from decorum.domain import compose
    >>> speaker = compose(make_speaker(power=110.0, bass=1.0), bass_boost, power_boost)
    >>> speaker.get_attribute("power"), speaker.get_attribute("bass")
    (120.0, 6.0)
"""

from ._package import PACKAGE_NAME, __version__
from .domain import (
    AttributeProvider,
    AttributeSet,
    BaseSubject,
    DecoratorWrapper,
    SubjectSchema,
    UnknownAttribute,
    UnknownAttributeError,
    compose,
    compose_chain,
    create_subject,
    decorator_factory,
    is_order_independent,
)

__package_name__ = PACKAGE_NAME

__all__ = [
    "__version__",
    "AttributeProvider",
    "AttributeSet",
    "BaseSubject",
    "DecoratorWrapper",
    "SubjectSchema",
    "UnknownAttribute",
    "UnknownAttributeError",
    "compose",
    "compose_chain",
    "create_subject",
    "decorator_factory",
    "is_order_independent",
]
