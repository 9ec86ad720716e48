"""
In-memory operator evaluation strategy.

Provides the MemoryOperator protocol and a registry that maps
FilterOperator → evaluation strategy.

New operators are added by subclassing MemoryOperator and
registering via ``register()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .exceptions import OperatorNotFoundError
from .operators import FilterOperator


class MemoryOperator(ABC):
    """
    Strategy interface for in-memory operator evaluation.

    Each operator is an isolated class with a single ``evaluate`` method.
    """

    @property
    @abstractmethod
    def name(self) -> FilterOperator:
        """The operator this strategy handles."""
        ...

    @abstractmethod
    def evaluate(
        self,
        field_value: Any,
        condition_value: Any,
        *,
        insensitive: bool = False,
    ) -> bool:
        """
        Evaluate the operator against concrete values.

        Args:
            field_value: The actual value read from the candidate record.
            condition_value: The value provided in the clause.
            insensitive: ``mode: "insensitive"`` was set on the clause.
                Only string operators look at it.

        Returns:
            True if the condition is satisfied.
        """
        ...


class MemoryOperatorRegistry:
    """
    Registry of MemoryOperator instances keyed by FilterOperator.

    Usage::

        registry = MemoryOperatorRegistry()
        registry.register(EqualsOperator())

        result = registry.evaluate(FilterOperator.EQUALS, actual, expected)
    """

    def __init__(self) -> None:
        self._operators: dict[FilterOperator, MemoryOperator] = {}

    # -- registration --------------------------------------------------------

    def register(self, operator: MemoryOperator) -> None:
        """Register an operator strategy instance."""
        self._operators[operator.name] = operator

    def register_all(self, *operators: MemoryOperator) -> None:
        """Register multiple operator strategy instances at once."""
        for op in operators:
            self.register(op)

    def unregister(self, name: FilterOperator) -> None:
        """Remove an operator from the registry."""
        self._operators.pop(name, None)

    # -- look-up -------------------------------------------------------------

    def get(self, name: FilterOperator | str) -> MemoryOperator | None:
        """Return the registered operator or ``None``."""
        try:
            key = FilterOperator(name)
        except ValueError:
            return None
        return self._operators.get(key)

    def has(self, name: FilterOperator | str) -> bool:
        return self.get(name) is not None

    @property
    def supported_operators(self) -> set[FilterOperator]:
        return set(self._operators.keys())

    # -- evaluation shortcut -------------------------------------------------

    def evaluate(
        self,
        name: FilterOperator | str,
        field_value: Any,
        condition_value: Any,
        *,
        insensitive: bool = False,
    ) -> bool:
        """
        Look up the operator and evaluate.

        Raises:
            OperatorNotFoundError: If the operator is not registered.
        """
        op = self.get(name)
        if op is None:
            raise OperatorNotFoundError(
                str(getattr(name, "value", name)),
                [o.value for o in self._operators],
            )
        return op.evaluate(field_value, condition_value, insensitive=insensitive)
