"""Subject schema - the fixed attribute set of a subject type."""
import re
from typing import Any, Dict, FrozenSet, Mapping

from pydantic import field_validator

from decorum.domain.base.value_objects import AttributeKind, ValueObject

_KIND_PATTERN = re.compile(r"^[a-z][a-z0-9_]*$")


class SubjectSchema(ValueObject):
    """Fixed attribute names and value kinds for one subject type."""

    kind: str
    attributes: Dict[str, AttributeKind]

    @field_validator("kind")
    @classmethod
    def validate_kind(cls, v: str) -> str:
        if not _KIND_PATTERN.match(v):
            raise ValueError(f"Invalid subject kind format: {v}")
        return v

    @field_validator("attributes")
    @classmethod
    def validate_attributes(cls, v: Dict[str, AttributeKind]) -> Dict[str, AttributeKind]:
        if not v:
            raise ValueError("A subject schema needs at least one attribute")
        for name in v:
            if not name:
                raise ValueError("Attribute names must be non-empty")
        return v

    @property
    def names(self) -> FrozenSet[str]:
        return frozenset(self.attributes)

    def validate_values(self, values: Mapping[str, Any]) -> Dict[str, str]:
        """Check values against the schema.

        Returns:
            Mapping of attribute name to error message; empty when valid
        """
        errors: Dict[str, str] = {}
        for name, kind in self.attributes.items():
            if name not in values:
                errors[name] = "missing"
            elif not kind.accepts(values[name]):
                errors[name] = f"expected {kind.value}, got {type(values[name]).__name__}"
        for name in values:
            if name not in self.attributes:
                errors[name] = "not in schema"
        return errors
