"""String operators: contains, startsWith, endsWith."""

from __future__ import annotations

from typing import Any

from ..evaluator import MemoryOperator
from ..operators import FilterOperator


def _pair(field_value: Any, condition_value: Any, insensitive: bool) -> tuple[str, str]:
    haystack, needle = str(field_value), str(condition_value)
    if insensitive:
        return haystack.lower(), needle.lower()
    return haystack, needle


class ContainsOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.CONTAINS

    def evaluate(
        self, field_value: Any, condition_value: Any, *, insensitive: bool = False
    ) -> bool:
        if field_value is None:
            return False
        haystack, needle = _pair(field_value, condition_value, insensitive)
        return needle in haystack


class StartsWithOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.STARTS_WITH

    def evaluate(
        self, field_value: Any, condition_value: Any, *, insensitive: bool = False
    ) -> bool:
        if field_value is None:
            return False
        haystack, needle = _pair(field_value, condition_value, insensitive)
        return haystack.startswith(needle)


class EndsWithOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.ENDS_WITH

    def evaluate(
        self, field_value: Any, condition_value: Any, *, insensitive: bool = False
    ) -> bool:
        if field_value is None:
            return False
        haystack, needle = _pair(field_value, condition_value, insensitive)
        return haystack.endswith(needle)
