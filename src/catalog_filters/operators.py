from enum import Enum


class FilterOperator(str, Enum):
    """Operator keys recognised inside a predicate clause."""

    # Comparison
    EQUALS = "equals"
    NOT = "not"
    IN = "in"
    NOT_IN = "notIn"
    LT = "lt"
    LTE = "lte"
    GT = "gt"
    GTE = "gte"

    # String matching
    CONTAINS = "contains"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"

    # Collection (scalar-list fields)
    HAS = "has"
    HAS_SOME = "hasSome"
    HAS_EVERY = "hasEvery"


class LogicalOperator(str, Enum):
    """Top-level combinators of a predicate."""

    AND = "AND"
    OR = "OR"
    NOT = "NOT"


# Modifier key carried next to string operators, not an operator itself.
MODE_KEY = "mode"
INSENSITIVE = "insensitive"
