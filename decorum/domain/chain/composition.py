"""Composition chain helpers.

A chain is not a stored entity; it is the nesting of decorators around one
base subject. These helpers fold an ordered sequence of decorator factories
over a base, innermost first::

    compose(base, bass_boost, power_boost)  # == power_boost(bass_boost(base))

Decorators touching disjoint attributes commute. Decorators touching the
same attribute compose by nesting order, so ``is_order_independent`` and
``conflicting_attributes`` let callers check a sequence before relying on
either order.
"""
from __future__ import annotations

from collections import Counter
from functools import reduce
from typing import Callable, FrozenSet, Iterable, Optional, Sequence

from decorum.domain.base.ports import AttributeProvider
from decorum.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

Wrap = Callable[[AttributeProvider], AttributeProvider]


def compose_chain(base: AttributeProvider, factories: Iterable[Wrap]) -> AttributeProvider:
    """Apply decorator factories to a base, first factory innermost.

    Args:
        base: Provider at the root of the chain
        factories: Ordered decorator factories

    Returns:
        The outermost provider; ``base`` itself when no factories are given
    """
    factories = list(factories)
    chain = reduce(lambda inner, wrap: wrap(inner), factories, base)
    logger.debug(
        "Composed decorator chain",
        kind=chain.kind,
        layers=list(chain.layers),
        depth=len(factories),
    )
    return chain


def compose(base: AttributeProvider, *factories: Wrap) -> AttributeProvider:
    """Variadic form of :func:`compose_chain`."""
    return compose_chain(base, factories)


def modified_attributes(factory: Wrap) -> Optional[FrozenSet[str]]:
    """Attributes a factory modifies, or None when it does not declare them."""
    declared = getattr(factory, "modified_attributes", None)
    if declared is None:
        return None
    if callable(declared):
        declared = declared()
    return frozenset(declared)


def conflicting_attributes(factories: Sequence[Wrap]) -> FrozenSet[str]:
    """Attribute names modified by more than one factory."""
    counts: Counter = Counter()
    for factory in factories:
        declared = modified_attributes(factory)
        if declared is None:
            raise TypeError(f"{factory!r} does not declare the attributes it modifies")
        counts.update(declared)
    return frozenset(name for name, count in counts.items() if count > 1)


def is_order_independent(factories: Sequence[Wrap]) -> bool:
    """True when every pair of factories modifies disjoint attributes.

    Only then is the composed result the same for every ordering.
    """
    return not conflicting_attributes(factories)
