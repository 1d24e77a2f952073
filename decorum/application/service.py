"""Composition application service - builds and describes chains by name."""
import math
from typing import Any, Dict, List, Mapping, Optional, Sequence

# Importing the catalog registers the built-in subjects and decorators
import decorum.application.catalog  # noqa: F401
from decorum.application.decorators import (
    get_decorator_factory,
    get_decorator_kind,
    get_registered_decorators,
    get_registered_subject_kinds,
    get_subject_factory,
    get_subject_schema,
)
from decorum.config.manager import ConfigurationManager
from decorum.domain.base.exceptions import SubjectValidationError, ValidationError
from decorum.domain.base.ports import AttributeProvider
from decorum.domain.base.value_objects import AttributeValue
from decorum.domain.chain import compose_chain, conflicting_attributes
from decorum.domain.decorator import describe_transform
from decorum.domain.subject import BaseSubject
from decorum.infrastructure.logging.logger import get_logger


def _same_value(a: AttributeValue, b: AttributeValue) -> bool:
    if isinstance(a, str) or isinstance(b, str):
        return a == b
    # Additions applied in a different order may differ in the last bit
    return math.isclose(a, b, rel_tol=1e-9, abs_tol=1e-12)


class CompositionService:
    """Application service for building chains from registered names."""

    def __init__(self, config_manager: Optional[ConfigurationManager] = None):
        self._config_manager = config_manager or ConfigurationManager()
        self._logger = get_logger(__name__)

    def build_subject(self, kind: str, values: Mapping[str, AttributeValue]) -> BaseSubject:
        """
        Build a base subject of a registered kind.

        Args:
            kind: Registered subject kind
            values: Complete set of starting values

        Returns:
            Validated base subject

        Raises:
            UnknownVariantError: If kind is not registered
            SubjectValidationError: If values do not match the kind's schema
        """
        schema = get_subject_schema(kind)
        errors = schema.validate_values(values)
        if errors:
            raise SubjectValidationError(kind, errors)
        return get_subject_factory(kind)(**values)

    def build_chain(
        self,
        kind: str,
        values: Mapping[str, AttributeValue],
        decorator_names: Sequence[str],
    ) -> AttributeProvider:
        """
        Build a subject and wrap it with named decorators, innermost first.

        Raises:
            UnknownVariantError: If the kind or a decorator name is not registered
            ValidationError: If a decorator was registered for another kind or
                modifies attributes the kind does not have
        """
        factories = [get_decorator_factory(name) for name in decorator_names]
        self._check_decorators_fit(kind, decorator_names)
        base = self.build_subject(kind, values)
        self._logger.info("Building chain", kind=kind, decorators=list(decorator_names))
        return compose_chain(base, factories)

    def _check_decorators_fit(self, kind: str, decorator_names: Sequence[str]) -> None:
        schema = get_subject_schema(kind)
        for name in decorator_names:
            registered_kind = get_decorator_kind(name)
            if registered_kind and registered_kind != kind:
                raise ValidationError(
                    f"Decorator '{name}' is registered for {registered_kind}, not {kind}",
                    {"decorator": name, "decorator_kind": registered_kind, "kind": kind},
                )
            unknown = get_decorator_factory(name).modified_attributes - schema.names
            if unknown:
                raise ValidationError(
                    f"Decorator '{name}' modifies attributes {kind} does not have: {', '.join(sorted(unknown))}",
                    {"decorator": name, "kind": kind, "attributes": sorted(unknown)},
                )

    def build_named_chain(self, name: str) -> AttributeProvider:
        """Build a chain declared in configuration."""
        chain_config = self._config_manager.get_chain(name)
        return self.build_chain(
            chain_config.subject.kind,
            chain_config.subject.values,
            chain_config.decorators,
        )

    def describe(self, provider: AttributeProvider) -> Dict[str, Any]:
        """Describe a provider: kind, decorator layers and final attributes."""
        layers = list(provider.layers)
        return {
            "kind": provider.kind,
            "layers": layers,
            "attributes": provider.attributes().to_dict(),
            "order_independent": not conflicting_attributes(
                [get_decorator_factory(layer) for layer in layers]
            ),
        }

    def list_decorators(self) -> List[Dict[str, Any]]:
        """List registered decorator variants with what they modify."""
        result = []
        for name, factory in sorted(get_registered_decorators().items()):
            result.append(
                {
                    "name": name,
                    "kind": get_decorator_kind(name),
                    "modifies": sorted(factory.modified_attributes),
                    "transforms": {
                        attribute: describe_transform(transform)
                        for attribute, transform in sorted(factory.transforms.items())
                    },
                }
            )
        return result

    def list_subjects(self) -> List[Dict[str, Any]]:
        """List registered subject kinds with their schemas."""
        return [
            {
                "kind": kind,
                "attributes": {
                    name: attribute_kind.value
                    for name, attribute_kind in get_subject_schema(kind).attributes.items()
                },
            }
            for kind in get_registered_subject_kinds()
        ]

    def check_order(
        self,
        kind: str,
        values: Mapping[str, AttributeValue],
        decorator_names: Sequence[str],
    ) -> Dict[str, Any]:
        """
        Compare a chain with the same chain built in reverse order.

        Returns:
            Dictionary with both attribute snapshots, whether they agree, the
            attributes that differ and the attributes shared between decorators
        """
        forward = self.build_chain(kind, values, decorator_names).attributes()
        backward = self.build_chain(kind, values, list(reversed(decorator_names))).attributes()
        differing = sorted(name for name in forward if not _same_value(forward[name], backward[name]))
        conflicts = conflicting_attributes([get_decorator_factory(name) for name in decorator_names])
        if differing:
            self._logger.info("Decorator order changes result", kind=kind, differing=differing)
        return {
            "kind": kind,
            "decorators": list(decorator_names),
            "forward": forward.to_dict(),
            "reversed": backward.to_dict(),
            "consistent": not differing,
            "differing_attributes": differing,
            "shared_attributes": sorted(conflicts),
        }
