"""Program-catalog filter predicates: options, builder, parser, backends."""

from .builder import apply_program_filters
from .clauses import (
    Clause,
    ClauseKind,
    ContainsClause,
    EqualsClause,
    HasClause,
    OrGroup,
    QueryPredicate,
    RangeClause,
)
from .evaluator import MemoryOperator, MemoryOperatorRegistry
from .exceptions import (
    CatalogFilterError,
    FieldNotFoundError,
    FilterParseError,
    OperatorNotFoundError,
)
from .matching import matches
from .operators import FilterOperator, LogicalOperator
from .operators_memory import build_default_registry
from .options import ProgramFilterFields, ProgramFilterOptions
from .pagination import Pagination, PaginationParser
from .parser import ProgramFilterParser
from .presets import (
    COURSE_FILTER_FIELDS,
    STUDY_ABROAD_FILTER_FIELDS,
    build_catalog_predicate,
)
from .utils import parse_bool, to_field_list

__all__ = [
    # Builder
    "apply_program_filters",
    # Clauses
    "Clause",
    "ClauseKind",
    "ContainsClause",
    "EqualsClause",
    "HasClause",
    "OrGroup",
    "QueryPredicate",
    "RangeClause",
    # Options / parsing
    "ProgramFilterFields",
    "ProgramFilterOptions",
    "ProgramFilterParser",
    "Pagination",
    "PaginationParser",
    # Presets
    "COURSE_FILTER_FIELDS",
    "STUDY_ABROAD_FILTER_FIELDS",
    "build_catalog_predicate",
    # Evaluation
    "FilterOperator",
    "LogicalOperator",
    "MemoryOperator",
    "MemoryOperatorRegistry",
    "build_default_registry",
    "matches",
    # Exceptions
    "CatalogFilterError",
    "FieldNotFoundError",
    "FilterParseError",
    "OperatorNotFoundError",
    # Utilities
    "parse_bool",
    "to_field_list",
]
