"""
Evaluate a predicate against in-memory records.

Useful for tests, caches and fixtures that hold catalog rows as dicts
or objects::

    rows = [r for r in rows if matches(predicate, r)]

Semantics follow the relational backend: field clauses and ``AND``
entries must all hold, an ``OR`` list needs one match (an empty one
matches nothing), ``NOT`` entries must all fail.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from .clauses import QueryPredicate
from .operators import INSENSITIVE, MODE_KEY, LogicalOperator
from .operators_memory import build_default_registry
from .utils import get_field_value

if TYPE_CHECKING:
    from .evaluator import MemoryOperatorRegistry


def matches(
    predicate: QueryPredicate | Mapping[str, Any],
    candidate: Any,
    registry: MemoryOperatorRegistry | None = None,
) -> bool:
    """
    Return True if ``candidate`` satisfies ``predicate``.

    Raises:
        OperatorNotFoundError: If a clause uses an unknown operator key.
    """
    reg = registry if registry is not None else build_default_registry()
    data = predicate.to_dict() if isinstance(predicate, QueryPredicate) else predicate
    return _match_node(data, candidate, reg)


def _as_list(value: Any) -> list[Any]:
    return list(value) if isinstance(value, list | tuple) else [value]


def _match_node(
    node: Mapping[str, Any], candidate: Any, reg: MemoryOperatorRegistry
) -> bool:
    for key, value in node.items():
        if key == LogicalOperator.AND:
            ok = all(_match_node(e, candidate, reg) for e in _as_list(value))
        elif key == LogicalOperator.OR:
            ok = any(_match_node(e, candidate, reg) for e in _as_list(value))
        elif key == LogicalOperator.NOT:
            ok = not any(_match_node(e, candidate, reg) for e in _as_list(value))
        else:
            ok = _match_field(get_field_value(candidate, key), value, reg)
        if not ok:
            return False
    return True


def _match_field(field_value: Any, condition: Any, reg: MemoryOperatorRegistry) -> bool:
    if not isinstance(condition, Mapping):
        return bool(field_value == condition)

    insensitive = condition.get(MODE_KEY) == INSENSITIVE
    for op, expected in condition.items():
        if op == MODE_KEY:
            continue
        if not reg.evaluate(op, field_value, expected, insensitive=insensitive):
            return False
    return True
