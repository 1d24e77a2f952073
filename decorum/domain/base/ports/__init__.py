"""Domain ports - interfaces implemented by the domain's concrete types."""

from .attribute_provider_port import AttributeProvider

__all__ = ["AttributeProvider"]
