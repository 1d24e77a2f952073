"""Pure attribute transforms shared by every decorator variant.

Each transform is a small frozen callable, so decorator declarations stay
data-like (``{"bass": Add(5.0)}``) and two declarations with the same
parameters compare equal.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from decorum.domain.base.exceptions import TransformTypeError
from decorum.domain.base.value_objects import AttributeKind, AttributeValue

Number = Union[int, float]
Transform = Callable[[AttributeValue], AttributeValue]


def _require(kind: AttributeKind, transform: str, value: AttributeValue) -> None:
    if not kind.accepts(value):
        raise TransformTypeError(transform, kind.value, value)


@dataclass(frozen=True)
class Add:
    """Add a fixed bonus to a numeric attribute."""

    amount: Number

    def __call__(self, value: AttributeValue) -> AttributeValue:
        _require(AttributeKind.NUMERIC, "Add", value)
        return value + self.amount

    def __str__(self) -> str:
        return f"{self.amount:+g}"


@dataclass(frozen=True)
class Scale:
    """Multiply a numeric attribute by a fixed factor."""

    factor: Number

    def __call__(self, value: AttributeValue) -> AttributeValue:
        _require(AttributeKind.NUMERIC, "Scale", value)
        return value * self.factor

    def __str__(self) -> str:
        return f"x{self.factor:g}"


@dataclass(frozen=True)
class Append:
    """Concatenate a fixed suffix onto a text attribute."""

    suffix: str

    def __call__(self, value: AttributeValue) -> AttributeValue:
        _require(AttributeKind.TEXT, "Append", value)
        return value + self.suffix

    def __str__(self) -> str:
        return f"+{self.suffix!r}"


@dataclass(frozen=True)
class Prepend:
    """Put a fixed prefix in front of a text attribute."""

    prefix: str

    def __call__(self, value: AttributeValue) -> AttributeValue:
        _require(AttributeKind.TEXT, "Prepend", value)
        return self.prefix + value

    def __str__(self) -> str:
        return f"{self.prefix!r}+"


def describe_transform(transform: Transform) -> str:
    """Short human-readable form of a transform for listings."""
    if isinstance(transform, (Add, Scale, Append, Prepend)):
        return str(transform)
    return getattr(transform, "__name__", repr(transform))
