"""
SQLAlchemy operator compilation strategy.

Provides the ``SQLAlchemyOperator`` protocol and a registry, structured
in the same strategy pattern as the in-memory evaluator.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from ..exceptions import OperatorNotFoundError
from ..operators import FilterOperator

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement


class SQLAlchemyOperator(ABC):
    """
    Strategy interface for compiling a clause operator
    into a SQLAlchemy ``ColumnElement[bool]``.
    """

    @property
    @abstractmethod
    def name(self) -> FilterOperator:
        """The operator this strategy handles."""
        ...

    @abstractmethod
    def apply(
        self,
        column: Any,
        value: Any,
        *,
        insensitive: bool = False,
    ) -> ColumnElement[bool]:
        """
        Build a SQLAlchemy filter clause.

        Args:
            column: A SQLAlchemy column or instrumented attribute.
            value: The condition value from the clause.
            insensitive: ``mode: "insensitive"`` was set on the clause.

        Returns:
            A SQLAlchemy boolean expression.
        """
        ...


class SQLAlchemyOperatorRegistry:
    """
    Registry of ``SQLAlchemyOperator`` instances keyed by
    :class:`FilterOperator`.
    """

    def __init__(self) -> None:
        self._operators: dict[FilterOperator, SQLAlchemyOperator] = {}

    def register(self, operator: SQLAlchemyOperator) -> None:
        self._operators[operator.name] = operator

    def register_all(self, *operators: SQLAlchemyOperator) -> None:
        for op in operators:
            self.register(op)

    def get(self, name: FilterOperator | str) -> SQLAlchemyOperator | None:
        try:
            key = FilterOperator(name)
        except ValueError:
            return None
        return self._operators.get(key)

    def apply(
        self,
        name: FilterOperator | str,
        column: Any,
        value: Any,
        *,
        insensitive: bool = False,
    ) -> ColumnElement[bool]:
        """
        Look up the operator and build its clause.

        Raises:
            OperatorNotFoundError: If the operator is not registered.
        """
        op = self.get(name)
        if op is None:
            raise OperatorNotFoundError(
                str(getattr(name, "value", name)),
                [o.value for o in self._operators],
            )
        return op.apply(column, value, insensitive=insensitive)
