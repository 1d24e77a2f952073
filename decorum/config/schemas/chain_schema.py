"""Chain configuration schema - describes a composition chain by names."""
from typing import Dict, List, Union

from pydantic import BaseModel, Field, field_validator

from decorum.domain.base.value_objects import AttributeKind


class SubjectConfig(BaseModel):
    """Base subject of a configured chain."""

    kind: str = Field(..., description="Registered subject kind")
    values: Dict[str, Union[float, int, str]] = Field(..., description="Starting attribute values")

    @field_validator("values", mode="before")
    @classmethod
    def validate_values(cls, v):
        if isinstance(v, dict):
            for name, value in v.items():
                try:
                    AttributeKind.of(value)
                except ValueError as e:
                    raise ValueError(f"{name}: {e}") from e
        return v


class ChainConfig(BaseModel):
    """A named chain: one subject plus decorator names, innermost first."""

    subject: SubjectConfig
    decorators: List[str] = Field(default_factory=list, description="Decorator names, innermost first")
    description: str = Field("", description="Human-readable summary")

    @field_validator("decorators")
    @classmethod
    def validate_decorators(cls, v: List[str]) -> List[str]:
        for name in v:
            if not name or not name.strip():
                raise ValueError("Decorator names must be non-empty")
        return v
