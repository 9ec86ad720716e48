"""SQLAlchemy backend: predicate → ``WHERE`` expression."""

from __future__ import annotations

from .compiler import apply_pagination, build_sqla_filter
from .operators import DEFAULT_SQLA_REGISTRY, build_default_sqla_registry
from .strategy import SQLAlchemyOperator, SQLAlchemyOperatorRegistry

__all__ = [
    "DEFAULT_SQLA_REGISTRY",
    "SQLAlchemyOperator",
    "SQLAlchemyOperatorRegistry",
    "apply_pagination",
    "build_default_sqla_registry",
    "build_sqla_filter",
]
