"""Base value objects - immutable building blocks of the domain."""
from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, Union

from pydantic import BaseModel, ConfigDict

AttributeValue = Union[int, float, str]


class ValueObject(BaseModel):
    """Base class for all value objects."""

    model_config = ConfigDict(
        frozen=True,  # Value objects are immutable
        arbitrary_types_allowed=True,
        extra="forbid",
    )


class AttributeKind(str, Enum):
    """Kinds of values an attribute can hold."""

    NUMERIC = "numeric"
    TEXT = "text"

    def accepts(self, value: Any) -> bool:
        if self is AttributeKind.NUMERIC:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                return False
            # nan and inf are never attribute values
            return isinstance(value, int) or math.isfinite(value)
        return isinstance(value, str)

    @classmethod
    def of(cls, value: Any) -> "AttributeKind":
        """Infer the kind of a raw value."""
        for kind in cls:
            if kind.accepts(value):
                return kind
        raise ValueError(f"Unsupported attribute value: {value!r}")


class AttributeSet(Mapping):
    """Immutable mapping from attribute name to value.

    Compares equal to any mapping with the same items and is hashable, so
    two snapshots of the same chain can be compared or used as dict keys.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Union[Mapping, None] = None, **kwargs: AttributeValue):
        merged: Dict[str, AttributeValue] = dict(values or {})
        merged.update(kwargs)
        for name, value in merged.items():
            if not isinstance(name, str) or not name:
                raise ValueError(f"Attribute names must be non-empty strings: {name!r}")
            AttributeKind.of(value)
        object.__setattr__(self, "_values", MappingProxyType(merged))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __getitem__(self, name: str) -> AttributeValue:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __hash__(self) -> int:
        return hash(frozenset(self._values.items()))

    def __repr__(self) -> str:
        return f"AttributeSet({dict(self._values)!r})"

    def to_dict(self) -> Dict[str, AttributeValue]:
        return dict(self._values)
