"""
In-memory operator implementations.

Usage::

    from catalog_filters.operators_memory import build_default_registry

    registry = build_default_registry()
    registry.evaluate(FilterOperator.CONTAINS, "Berlin", "ber", insensitive=True)
"""

from __future__ import annotations

from ..evaluator import MemoryOperatorRegistry
from .collection import HasEveryOperator, HasOperator, HasSomeOperator
from .standard import (
    EqualsOperator,
    GreaterEqualOperator,
    GreaterThanOperator,
    InOperator,
    LessEqualOperator,
    LessThanOperator,
    NotInOperator,
    NotOperator,
)
from .string import ContainsOperator, EndsWithOperator, StartsWithOperator


def build_default_registry() -> MemoryOperatorRegistry:
    """
    Create a registry with all built-in operators.

    Returns a fresh instance on every call, so callers may register
    or unregister operators without affecting anyone else.
    """
    registry = MemoryOperatorRegistry()
    registry.register_all(
        # Comparison
        EqualsOperator(),
        NotOperator(),
        InOperator(),
        NotInOperator(),
        GreaterThanOperator(),
        LessThanOperator(),
        GreaterEqualOperator(),
        LessEqualOperator(),
        # String
        ContainsOperator(),
        StartsWithOperator(),
        EndsWithOperator(),
        # Collection
        HasOperator(),
        HasSomeOperator(),
        HasEveryOperator(),
    )
    return registry


__all__ = [
    "build_default_registry",
    "MemoryOperatorRegistry",
]
