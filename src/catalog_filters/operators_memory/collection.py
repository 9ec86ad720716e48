"""Scalar-list operators: has, hasSome, hasEvery."""

from __future__ import annotations

from typing import Any

from ..evaluator import MemoryOperator
from ..operators import FilterOperator


class HasOperator(MemoryOperator):
    """The list field includes the given element."""

    @property
    def name(self) -> FilterOperator:
        return FilterOperator.HAS

    def evaluate(
        self, field_value: Any, condition_value: Any, *, insensitive: bool = False
    ) -> bool:
        if field_value is None:
            return False
        return condition_value in field_value


class HasSomeOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.HAS_SOME

    def evaluate(
        self, field_value: Any, condition_value: Any, *, insensitive: bool = False
    ) -> bool:
        if field_value is None:
            return False
        return any(v in field_value for v in condition_value)


class HasEveryOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.HAS_EVERY

    def evaluate(
        self, field_value: Any, condition_value: Any, *, insensitive: bool = False
    ) -> bool:
        if field_value is None:
            return False
        return all(v in field_value for v in condition_value)
