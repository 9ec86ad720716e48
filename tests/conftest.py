"""Shared fixtures for catalog filter tests."""

from __future__ import annotations

import pytest

from catalog_filters import QueryPredicate
from catalog_filters.operators_memory import build_default_registry


@pytest.fixture
def registry():
    """Default in-memory operator registry."""
    return build_default_registry()


@pytest.fixture
def predicate() -> QueryPredicate:
    """Fresh, empty accumulator."""
    return QueryPredicate()


@pytest.fixture
def destinations() -> list[dict]:
    """Study-abroad rows as the catalog stores them."""
    return [
        {
            "id": 1,
            "city": "Munich",
            "country": "Germany",
            "description": "Engineering hub with public universities",
            "avgTuition": 1500,
            "durationMonths": 24,
            "partTimeAvailable": True,
            "universities": ["TU Munich", "LMU Munich"],
            "status": "published",
        },
        {
            "id": 2,
            "city": "Toronto",
            "country": "Canada",
            "description": "Co-op programs and post-study work permits",
            "avgTuition": 22000,
            "durationMonths": 16,
            "partTimeAvailable": True,
            "universities": ["University of Toronto"],
            "status": "published",
        },
        {
            "id": 3,
            "city": "Dublin",
            "country": "Ireland",
            "description": "Tech and pharma employers",
            "avgTuition": 14000,
            "durationMonths": 12,
            "partTimeAvailable": False,
            "universities": ["Trinity College Dublin"],
            "status": "draft",
        },
    ]
