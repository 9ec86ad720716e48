"""PaginationParser: page/limit from query params."""

from __future__ import annotations

import math
from typing import Any, NamedTuple


class Pagination(NamedTuple):
    """
    One page request.

    ``PaginationParser`` always yields ``page >= 1`` and ``limit >= 1``.
    Hand-built values outside that range are tolerated: ``skip`` never
    goes below zero and ``meta`` reports zero pages for ``limit < 1``.
    """

    page: int
    limit: int

    @property
    def skip(self) -> int:
        """Rows to skip (ORM offset)."""
        return max(0, (self.page - 1) * self.limit)

    @property
    def take(self) -> int:
        """Rows to return (ORM limit)."""
        return max(0, self.limit)

    def meta(self, total: int) -> dict[str, int]:
        """Pagination block of a list response."""
        total_pages = math.ceil(total / self.limit) if self.limit > 0 else 0
        return {
            "page": self.page,
            "limit": self.limit,
            "total": total,
            "totalPages": total_pages,
        }


class PaginationParser:
    """Parse page/limit from query params, clamping out-of-range values."""

    def parse(
        self,
        query_params: dict[str, Any],
        *,
        page_key: str = "page",
        limit_key: str = "limit",
        default_limit: int = 10,
        max_limit: int = 100,
    ) -> Pagination:
        page = _int_or_none(query_params.get(page_key))
        page = 1 if page is None else max(1, page)
        limit = _int_or_none(query_params.get(limit_key))
        if limit is None:
            limit = default_limit
        else:
            limit = min(max_limit, max(1, limit))
        return Pagination(page=page, limit=limit)


def _int_or_none(value: Any) -> int | None:
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None
