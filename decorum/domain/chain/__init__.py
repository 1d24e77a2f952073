"""Chain bounded context - folding decorators around a base subject."""

from .composition import (
    compose,
    compose_chain,
    conflicting_attributes,
    is_order_independent,
    modified_attributes,
)

__all__ = [
    "compose",
    "compose_chain",
    "conflicting_attributes",
    "is_order_independent",
    "modified_attributes",
]
