"""
Compile a predicate into a SQLAlchemy filter expression.

Uses the strategy pattern: each operator is an isolated class in
``operators``, registered in a ``SQLAlchemyOperatorRegistry``.
``build_sqla_filter`` walks the serialized predicate and delegates
field conditions to the registry; ``AND`` / ``OR`` / ``NOT`` become
``and_`` / ``or_`` / ``not_``.

Pagination
----------
``apply_pagination`` takes a ``Select`` statement and a ``Pagination``
and applies ordering, offset and limit.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

from sqlalchemy import and_, asc, desc, false, not_, or_, true
from sqlalchemy import inspect as sa_inspect

from ..clauses import QueryPredicate
from ..exceptions import FieldNotFoundError
from ..operators import INSENSITIVE, MODE_KEY, FilterOperator, LogicalOperator
from .operators import DEFAULT_SQLA_REGISTRY

if TYPE_CHECKING:
    from collections.abc import Sequence

    from sqlalchemy import ColumnElement, Select

    from ..pagination import Pagination
    from .strategy import SQLAlchemyOperatorRegistry

logger = logging.getLogger("catalog_filters.sqla")

# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_sqla_filter(
    model: type[Any],
    predicate: QueryPredicate | Mapping[str, Any],
    *,
    registry: SQLAlchemyOperatorRegistry | None = None,
) -> ColumnElement[bool]:
    """
    Build a SQLAlchemy filter expression from a predicate.

    Args:
        model: The mapped model class the predicate's field names refer to.
        predicate: A ``QueryPredicate`` or its raw dict form.
        registry: Optional custom operator registry.  Falls back to
            ``DEFAULT_SQLA_REGISTRY``.

    Returns:
        SQLAlchemy Boolean expression (``true()`` for an empty predicate).

    Raises:
        FieldNotFoundError: If a field is not a mapped column of ``model``.
        OperatorNotFoundError: If a clause uses an unknown operator key.
    """
    reg = registry or DEFAULT_SQLA_REGISTRY
    data = predicate.to_dict() if isinstance(predicate, QueryPredicate) else predicate
    logger.debug("Compiling predicate for %s: %s", model.__name__, data)
    return _compile_node(model, data, reg)


def apply_pagination(
    stmt: Select[Any],
    model: type[Any],
    pagination: Pagination,
    order_by: Sequence[str] | None = None,
) -> Select[Any]:
    """
    Apply ordering, offset and limit to a ``Select`` statement.

    ``order_by`` entries name mapped attributes; prefix with ``-`` for
    descending, e.g. ``["-createdAt", "title"]``.
    """
    if order_by:
        clauses = []
        for field_expr in order_by:
            if field_expr.startswith("-"):
                clauses.append(desc(_resolve_column(model, field_expr[1:])))
            else:
                clauses.append(asc(_resolve_column(model, field_expr)))
        stmt = stmt.order_by(*clauses)
    return stmt.offset(pagination.skip).limit(pagination.take)


# ---------------------------------------------------------------------------
# Internal compilation
# ---------------------------------------------------------------------------


def _as_list(value: Any) -> list[Any]:
    return list(value) if isinstance(value, list | tuple) else [value]


def _combine_and(conditions: list[ColumnElement[bool]]) -> ColumnElement[bool]:
    if not conditions:
        return true()
    if len(conditions) == 1:
        return conditions[0]
    return and_(*conditions)


def _combine_or(conditions: list[ColumnElement[bool]]) -> ColumnElement[bool]:
    if not conditions:
        return false()
    if len(conditions) == 1:
        return conditions[0]
    return or_(*conditions)


def _compile_node(
    model: type[Any],
    node: Mapping[str, Any],
    registry: SQLAlchemyOperatorRegistry,
) -> ColumnElement[bool]:
    conditions: list[ColumnElement[bool]] = []
    for key, value in node.items():
        if key == LogicalOperator.AND:
            entries = [_compile_node(model, e, registry) for e in _as_list(value)]
            conditions.append(_combine_and(entries))
        elif key == LogicalOperator.OR:
            entries = [_compile_node(model, e, registry) for e in _as_list(value)]
            conditions.append(_combine_or(entries))
        elif key == LogicalOperator.NOT:
            entries = [_compile_node(model, e, registry) for e in _as_list(value)]
            conditions.append(cast("ColumnElement[bool]", not_(_combine_or(entries))))
        else:
            conditions.extend(_compile_field(model, key, value, registry))
    return _combine_and(conditions)


def _compile_field(
    model: type[Any],
    name: str,
    condition: Any,
    registry: SQLAlchemyOperatorRegistry,
) -> list[ColumnElement[bool]]:
    column = _resolve_column(model, name)
    if not isinstance(condition, Mapping):
        return [registry.apply(FilterOperator.EQUALS, column, condition)]

    insensitive = condition.get(MODE_KEY) == INSENSITIVE
    return [
        registry.apply(op, column, value, insensitive=insensitive)
        for op, value in condition.items()
        if op != MODE_KEY
    ]


def _resolve_column(model: type[Any], name: str) -> Any:
    column_names = list(sa_inspect(model).column_attrs.keys())
    if name not in column_names:
        raise FieldNotFoundError(name, model.__name__, column_names)
    return getattr(model, name)
