"""Decorator wrapper - an attribute provider layered over exactly one other.

A variant is declared as a subclass carrying two class-level values::

    class BassBoost(DecoratorWrapper):
        name = "bass_boost"
        transforms = {"bass": Add(5.0)}

    bass_boost = decorator_factory(BassBoost)

The factory returned by ``decorator_factory`` is the sanctioned way to wrap a
provider. The wrapped provider is kept in a private slot and is never exposed.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, ClassVar, FrozenSet, Mapping, Tuple, Type

from decorum.domain.base.ports import AttributeProvider
from decorum.domain.base.value_objects import AttributeValue
from decorum.domain.decorator.transforms import Transform


class DecoratorWrapper(AttributeProvider):
    """Attribute provider that transforms a fixed subset of its inner provider's attributes.

    Every attribute not named in ``transforms`` is passed through unchanged.
    The inner provider is always queried first, so an unknown name surfaces
    the innermost subject's ``UnknownAttributeError`` as-is.
    """

    __slots__ = ("_inner",)

    name: ClassVar[str] = ""
    transforms: ClassVar[Mapping[str, Transform]] = MappingProxyType({})

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        transforms = dict(cls.transforms)
        for attribute, transform in transforms.items():
            if not isinstance(attribute, str) or not attribute:
                raise TypeError(f"{cls.__name__}: attribute names must be non-empty strings")
            if not callable(transform):
                raise TypeError(f"{cls.__name__}: transform for '{attribute}' is not callable")
        cls.transforms = MappingProxyType(transforms)

    def __init__(self, inner: AttributeProvider):
        if not isinstance(inner, AttributeProvider):
            raise TypeError(f"{type(self).__name__} can only wrap an AttributeProvider, got {type(inner).__name__}")
        object.__setattr__(self, "_inner", inner)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def get_attribute(self, name: str) -> AttributeValue:
        value = self._inner.get_attribute(name)
        transform = self.transforms.get(name)
        if transform is None:
            return value
        return transform(value)

    @property
    def attribute_names(self) -> FrozenSet[str]:
        return self._inner.attribute_names

    @property
    def kind(self) -> str:
        return self._inner.kind

    @property
    def layers(self) -> Tuple[str, ...]:
        return self._inner.layers + (self.name or type(self).__name__,)

    @classmethod
    def modified_attributes(cls) -> FrozenSet[str]:
        return frozenset(cls.transforms)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._inner!r})"


@dataclass(frozen=True)
class DecoratorFactory:
    """Construction path for one decorator variant."""

    variant: Type[DecoratorWrapper]

    def __call__(self, inner: AttributeProvider) -> AttributeProvider:
        return self.variant(inner)

    @property
    def name(self) -> str:
        return self.variant.name or self.variant.__name__

    @property
    def modified_attributes(self) -> FrozenSet[str]:
        return self.variant.modified_attributes()

    @property
    def transforms(self) -> Mapping[str, Transform]:
        return self.variant.transforms


def decorator_factory(variant: Type[DecoratorWrapper]) -> DecoratorFactory:
    """Build the factory function for a decorator variant."""
    if not (isinstance(variant, type) and issubclass(variant, DecoratorWrapper)):
        raise TypeError(f"{variant!r} is not a DecoratorWrapper subclass")
    return DecoratorFactory(variant)
