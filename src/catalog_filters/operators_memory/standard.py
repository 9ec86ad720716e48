"""Comparison operators: equals, not, in, notIn, lt, lte, gt, gte."""

from __future__ import annotations

from typing import Any

from ..evaluator import MemoryOperator
from ..operators import FilterOperator


def _fold(value: Any, insensitive: bool) -> Any:
    if insensitive and isinstance(value, str):
        return value.lower()
    return value


class EqualsOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.EQUALS

    def evaluate(
        self, field_value: Any, condition_value: Any, *, insensitive: bool = False
    ) -> bool:
        return bool(
            _fold(field_value, insensitive) == _fold(condition_value, insensitive)
        )


class NotOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.NOT

    def evaluate(
        self, field_value: Any, condition_value: Any, *, insensitive: bool = False
    ) -> bool:
        return bool(
            _fold(field_value, insensitive) != _fold(condition_value, insensitive)
        )


class InOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.IN

    def evaluate(
        self, field_value: Any, condition_value: Any, *, insensitive: bool = False
    ) -> bool:
        candidates = [_fold(v, insensitive) for v in condition_value]
        return _fold(field_value, insensitive) in candidates


class NotInOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.NOT_IN

    def evaluate(
        self, field_value: Any, condition_value: Any, *, insensitive: bool = False
    ) -> bool:
        candidates = [_fold(v, insensitive) for v in condition_value]
        return _fold(field_value, insensitive) not in candidates


class GreaterThanOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.GT

    def evaluate(
        self, field_value: Any, condition_value: Any, *, insensitive: bool = False
    ) -> bool:
        if field_value is None:
            return False
        return bool(field_value > condition_value)


class LessThanOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.LT

    def evaluate(
        self, field_value: Any, condition_value: Any, *, insensitive: bool = False
    ) -> bool:
        if field_value is None:
            return False
        return bool(field_value < condition_value)


class GreaterEqualOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.GTE

    def evaluate(
        self, field_value: Any, condition_value: Any, *, insensitive: bool = False
    ) -> bool:
        if field_value is None:
            return False
        return bool(field_value >= condition_value)


class LessEqualOperator(MemoryOperator):
    @property
    def name(self) -> FilterOperator:
        return FilterOperator.LTE

    def evaluate(
        self, field_value: Any, condition_value: Any, *, insensitive: bool = False
    ) -> bool:
        if field_value is None:
            return False
        return bool(field_value <= condition_value)
