"""
Field maps for the program catalogs and a per-request predicate factory.

Usage::

    options = ProgramFilterParser(STUDY_ABROAD_FILTER_FIELDS).parse(request.query)
    where = build_catalog_predicate(options, status="published").to_dict()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .builder import apply_program_filters
from .clauses import EqualsClause, QueryPredicate
from .options import ProgramFilterFields

if TYPE_CHECKING:
    from .options import ProgramFilterOptions

_NO_FIELDS = ProgramFilterFields()

COURSE_FILTER_FIELDS = ProgramFilterFields(
    price="price",
    duration="durationMonths",
    keyword=["title", "description", "shortDescription", "programName"],
)

STUDY_ABROAD_FILTER_FIELDS = ProgramFilterFields(
    price="avgTuition",
    duration="durationMonths",
    part_time="partTimeAvailable",
    university="universities",
    city="city",
    keyword=["city", "country", "description"],
)


def build_catalog_predicate(
    options: ProgramFilterOptions | None,
    fields: ProgramFilterFields | None = None,
    *,
    status: str | None = None,
) -> QueryPredicate:
    """
    Start a fresh predicate for one catalog list request.

    Args:
        options: Parsed filter options (``None`` = no filters).
        fields: Field map used when ``options`` carries an empty one.
        status: Publication status to pin, e.g. ``"published"``.
    """
    predicate = QueryPredicate()
    if status is not None:
        predicate["status"] = EqualsClause(status)
    if options is not None and fields is not None and options.fields == _NO_FIELDS:
        options = options.with_fields(fields)
    return apply_program_filters(predicate, options)
