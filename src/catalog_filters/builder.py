"""
Filter-predicate builder.

Populates a :class:`QueryPredicate` accumulator from
:class:`ProgramFilterOptions`.  Dimensions are applied in a fixed order,
and later dimensions may replace the clause an earlier one put on a
shared field::

    price range → duration range → part-time equality
        → university membership → city substring → keyword OR

Example::

    options = ProgramFilterOptions(
        min_price=100,
        keyword="data",
        fields=ProgramFilterFields(price="price", keyword=["title", "summary"]),
    )
    apply_program_filters(QueryPredicate(), options).to_dict()
    # → {"price": {"gte": 100},
    #    "AND": [{"OR": [{"title": {"contains": "data", "mode": "insensitive"}},
    #                    {"summary": {"contains": "data", "mode": "insensitive"}}]}]}

The builder never raises: missing field maps, missing values, empty
strings and empty sequences are silent no-ops.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .clauses import (
    Clause,
    ContainsClause,
    EqualsClause,
    HasClause,
    OrGroup,
    RangeClause,
)
from .utils import to_field_list

if TYPE_CHECKING:
    from .clauses import QueryPredicate
    from .options import ProgramFilterOptions

logger = logging.getLogger("catalog_filters.builder")


def apply_program_filters(
    predicate: QueryPredicate,
    options: ProgramFilterOptions | None = None,
) -> QueryPredicate:
    """
    Apply ``options`` to ``predicate`` in place and return it.

    Args:
        predicate: Accumulator, possibly already populated by earlier callers.
        options: Filter values and field map.  ``None`` leaves
            ``predicate`` untouched.

    Returns:
        The same ``predicate`` object.
    """
    if options is None:
        return predicate

    fields = options.fields

    _apply_range(predicate, fields.price, options.min_price, options.max_price)
    _apply_range(
        predicate, fields.duration, options.min_duration, options.max_duration
    )

    if fields.part_time and options.part_time is not None:
        predicate[fields.part_time] = EqualsClause(options.part_time)
        logger.debug("partTime: %s = %s", fields.part_time, options.part_time)

    if fields.university and options.university:
        predicate[fields.university] = HasClause(options.university)
        logger.debug("university: %s has %r", fields.university, options.university)

    if fields.city and options.city:
        predicate[fields.city] = ContainsClause(options.city)
        logger.debug("city: %s contains %r", fields.city, options.city)

    if options.keyword:
        _apply_keyword(predicate, to_field_list(fields.keyword), options.keyword)

    return predicate


def _apply_range(
    predicate: QueryPredicate,
    field_names: Any,
    minimum: Any,
    maximum: Any,
) -> None:
    names = to_field_list(field_names)
    if not names or (minimum is None and maximum is None):
        return

    for name in names:
        if not name:
            continue
        target = _ensure_range(predicate, name)
        if minimum is not None:
            target.gte = minimum
        if maximum is not None:
            target.lte = maximum
        logger.debug("range: %s gte=%s lte=%s", name, minimum, maximum)


def _ensure_range(predicate: QueryPredicate, name: str) -> RangeClause:
    """Return the range clause for ``name``, creating it when needed."""
    existing = predicate.get(name)
    if _is_falsy(existing):
        target = RangeClause()
    else:
        target = RangeClause.absorb(existing)  # type: ignore[arg-type]
    predicate[name] = target
    return target


def _is_falsy(clause: Clause | None) -> bool:
    if clause is None:
        return True
    return isinstance(clause, EqualsClause) and not clause.value


def _apply_keyword(predicate: QueryPredicate, names: list[str], keyword: str) -> None:
    terms = tuple((name, ContainsClause(keyword)) for name in names if name)
    if not terms:
        return
    predicate.add_conjunction(OrGroup(terms))
    logger.debug("keyword: %r across %s", keyword, [name for name, _ in terms])
