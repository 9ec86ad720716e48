"""Built-in SQLAlchemy operator strategies."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import any_, func

from ..operators import FilterOperator
from .strategy import SQLAlchemyOperator, SQLAlchemyOperatorRegistry

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement


def _lowered(column: Any, value: Any, insensitive: bool) -> tuple[Any, Any]:
    if insensitive and isinstance(value, str):
        return func.lower(column), value.lower()
    return column, value


# -- comparison ---------------------------------------------------------------


class EqualsOperator(SQLAlchemyOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.EQUALS

    def apply(
        self, column: Any, value: Any, *, insensitive: bool = False
    ) -> ColumnElement[bool]:
        if value is None:
            return cast("ColumnElement[bool]", column.is_(None))
        col, val = _lowered(column, value, insensitive)
        return cast("ColumnElement[bool]", col == val)


class NotOperator(SQLAlchemyOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.NOT

    def apply(
        self, column: Any, value: Any, *, insensitive: bool = False
    ) -> ColumnElement[bool]:
        if value is None:
            return cast("ColumnElement[bool]", column.is_not(None))
        col, val = _lowered(column, value, insensitive)
        return cast("ColumnElement[bool]", col != val)


class InOperator(SQLAlchemyOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.IN

    def apply(
        self, column: Any, value: Any, *, insensitive: bool = False
    ) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.in_(list(value)))


class NotInOperator(SQLAlchemyOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.NOT_IN

    def apply(
        self, column: Any, value: Any, *, insensitive: bool = False
    ) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.not_in(list(value)))


class LessThanOperator(SQLAlchemyOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.LT

    def apply(
        self, column: Any, value: Any, *, insensitive: bool = False
    ) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column < value)


class LessEqualOperator(SQLAlchemyOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.LTE

    def apply(
        self, column: Any, value: Any, *, insensitive: bool = False
    ) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column <= value)


class GreaterThanOperator(SQLAlchemyOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.GT

    def apply(
        self, column: Any, value: Any, *, insensitive: bool = False
    ) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column > value)


class GreaterEqualOperator(SQLAlchemyOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.GTE

    def apply(
        self, column: Any, value: Any, *, insensitive: bool = False
    ) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column >= value)


# -- string -------------------------------------------------------------------


class ContainsOperator(SQLAlchemyOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.CONTAINS

    def apply(
        self, column: Any, value: Any, *, insensitive: bool = False
    ) -> ColumnElement[bool]:
        if insensitive:
            return cast("ColumnElement[bool]", column.icontains(value, autoescape=True))
        return cast("ColumnElement[bool]", column.contains(value, autoescape=True))


class StartsWithOperator(SQLAlchemyOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.STARTS_WITH

    def apply(
        self, column: Any, value: Any, *, insensitive: bool = False
    ) -> ColumnElement[bool]:
        if insensitive:
            return cast(
                "ColumnElement[bool]", column.istartswith(value, autoescape=True)
            )
        return cast("ColumnElement[bool]", column.startswith(value, autoescape=True))


class EndsWithOperator(SQLAlchemyOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.ENDS_WITH

    def apply(
        self, column: Any, value: Any, *, insensitive: bool = False
    ) -> ColumnElement[bool]:
        if insensitive:
            return cast("ColumnElement[bool]", column.iendswith(value, autoescape=True))
        return cast("ColumnElement[bool]", column.endswith(value, autoescape=True))


# -- scalar lists (PostgreSQL ARRAY) ------------------------------------------


class HasOperator(SQLAlchemyOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.HAS

    def apply(
        self, column: Any, value: Any, *, insensitive: bool = False
    ) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", value == any_(column))


class HasSomeOperator(SQLAlchemyOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.HAS_SOME

    def apply(
        self, column: Any, value: Any, *, insensitive: bool = False
    ) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.overlap(list(value)))


class HasEveryOperator(SQLAlchemyOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.HAS_EVERY

    def apply(
        self, column: Any, value: Any, *, insensitive: bool = False
    ) -> ColumnElement[bool]:
        return cast("ColumnElement[bool]", column.contains(list(value)))


def build_default_sqla_registry() -> SQLAlchemyOperatorRegistry:
    """Create a registry with all built-in SQLAlchemy operators."""
    registry = SQLAlchemyOperatorRegistry()
    registry.register_all(
        EqualsOperator(),
        NotOperator(),
        InOperator(),
        NotInOperator(),
        LessThanOperator(),
        LessEqualOperator(),
        GreaterThanOperator(),
        GreaterEqualOperator(),
        ContainsOperator(),
        StartsWithOperator(),
        EndsWithOperator(),
        HasOperator(),
        HasSomeOperator(),
        HasEveryOperator(),
    )
    return registry


DEFAULT_SQLA_REGISTRY = build_default_sqla_registry()
