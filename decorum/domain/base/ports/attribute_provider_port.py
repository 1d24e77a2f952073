"""Attribute Provider Port - read-only interface for querying named attributes.

Every participant of a composition chain implements this port:
- Base subjects answer queries from their stored values
- Decorator wrappers answer by delegating to the provider they wrap

Callers only ever see this interface, never the concrete chain shape.
"""
from abc import ABC, abstractmethod
from typing import FrozenSet, Tuple

from decorum.domain.base.value_objects import AttributeSet, AttributeValue


class AttributeProvider(ABC):
    """Port for read-only attribute queries.

    Implementations must be pure: querying the same instance twice yields
    identical results, and no query has side effects.
    """

    @abstractmethod
    def get_attribute(self, name: str) -> AttributeValue:
        """Return the value of a named attribute.

        Args:
            name: Attribute name from the subject's fixed schema

        Returns:
            The attribute value (numeric or text)

        Raises:
            UnknownAttributeError: If name is not in the schema
        """

    @property
    @abstractmethod
    def attribute_names(self) -> FrozenSet[str]:
        """Fixed set of attribute names this provider answers for."""

    @property
    @abstractmethod
    def kind(self) -> str:
        """Subject type at the root of the chain (e.g. "speaker")."""

    @property
    def layers(self) -> Tuple[str, ...]:
        """Names of applied decorators, innermost first."""
        return ()

    def attributes(self) -> AttributeSet:
        """Snapshot of every attribute as seen through this provider."""
        return AttributeSet({name: self.get_attribute(name) for name in sorted(self.attribute_names)})
