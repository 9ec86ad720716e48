"""
Catalog filter exception hierarchy with fuzzy-match suggestions.

All exceptions inherit from ``CatalogFilterError`` and provide
``to_dict()`` for API-friendly error responses.

The predicate builder itself never raises; these are raised by the
parser, the in-memory evaluator and the SQLAlchemy compiler.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class CatalogFilterError(Exception):
    """Base exception for all catalog filter errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class FilterParseError(CatalogFilterError):
    """Query parameters could not be turned into filter options.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        parts = [
            f"{field}: {message}"
            for field, messages in self.errors.items()
            for message in messages
        ]
        return ", ".join(parts) or "Invalid filter parameters"

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FILTER_PARSE_ERROR",
            "message": str(self),
            "errors": self.errors,
        }


class OperatorNotFoundError(CatalogFilterError):
    """
    Unknown operator key inside a predicate clause.

    Provides fuzzy-matched suggestions for likely intended operators.
    """

    def __init__(self, operator: str, valid_operators: list[str]) -> None:
        self.operator = operator
        self.valid_operators = valid_operators
        self.suggestions = get_close_matches(operator, valid_operators, n=3, cutoff=0.6)

        message = f"Unknown operator: '{operator}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid operators: {', '.join(sorted(valid_operators))}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "OPERATOR_NOT_FOUND",
            "operator": self.operator,
            "suggestions": self.suggestions,
            "valid_operators": sorted(self.valid_operators),
        }


class FieldNotFoundError(CatalogFilterError):
    """
    Predicate references a field the target model does not have.

    Example error message::

        Invalid field 'durationMonth' on 'CourseRecord'.
        Did you mean one of these?
          • durationMonths

        Available fields: city, durationMonths, id, price, ...
    """

    def __init__(
        self,
        invalid_field: str,
        model_name: str,
        available_fields: list[str],
        cutoff: float = 0.6,
    ) -> None:
        self.invalid_field = invalid_field
        self.model_name = model_name
        self.available_fields = available_fields
        self.suggestions = get_close_matches(
            invalid_field, available_fields, n=5, cutoff=cutoff
        )
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        lines = [f"Invalid field '{self.invalid_field}' on '{self.model_name}'."]
        if self.suggestions:
            lines.append("Did you mean one of these?")
            for s in self.suggestions:
                lines.append(f"  • {s}")

        sorted_fields = sorted(self.available_fields)
        preview = ", ".join(sorted_fields[:15])
        if len(sorted_fields) > 15:
            preview += ", ..."
        lines.append(f"Available fields: {preview}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FIELD_NOT_FOUND",
            "field": self.invalid_field,
            "model": self.model_name,
            "suggestions": self.suggestions,
            "available_fields": sorted(self.available_fields),
        }
