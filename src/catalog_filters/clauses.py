"""
Predicate clauses and the ``QueryPredicate`` accumulator.

A predicate is an ordered mapping from field name to clause, plus an
optional top-level ``AND`` list.  Every clause kind serializes to the
ORM-style fragment the data-access layer expects.

Example::

    predicate = QueryPredicate()
    predicate["price"] = RangeClause(gte=100)
    predicate["city"] = ContainsClause("berlin")
    predicate.to_dict()
    # → {"price": {"gte": 100},
    #    "city": {"contains": "berlin", "mode": "insensitive"}}
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping, MutableMapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from .operators import INSENSITIVE, MODE_KEY, FilterOperator, LogicalOperator


class ClauseKind(str, Enum):
    """Discriminator of the clause tagged union."""

    RANGE = "range"
    EQUALS = "equals"
    HAS = "has"
    CONTAINS = "contains"


class Clause(ABC):
    """A condition on a single field."""

    kind: ClassVar[ClauseKind]

    @abstractmethod
    def to_dict(self) -> Any:
        """Return the ORM-style fragment for this clause."""
        ...


@dataclass
class RangeClause(Clause):
    """
    Object clause holding numeric bounds.

    ``extra`` keeps any other operator keys that were already present on
    the field (``{"not": None}``, ``{"in": [...]}``, ...).  Bounds are
    merged in place, so this clause is the only mutable kind.
    """

    kind: ClassVar[ClauseKind] = ClauseKind.RANGE

    gte: Any = None
    lte: Any = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        out = dict(self.extra)
        if self.gte is not None:
            out[FilterOperator.GTE.value] = self.gte
        if self.lte is not None:
            out[FilterOperator.LTE.value] = self.lte
        return out

    @classmethod
    def absorb(cls, clause: Clause) -> RangeClause:
        """Return a range clause that keeps ``clause``'s condition."""
        if isinstance(clause, RangeClause):
            return clause
        if isinstance(clause, EqualsClause):
            return cls(extra={FilterOperator.EQUALS.value: clause.value})
        return cls(extra=dict(clause.to_dict()))


@dataclass(frozen=True)
class EqualsClause(Clause):
    """Literal equality; serializes to the bare value."""

    kind: ClassVar[ClauseKind] = ClauseKind.EQUALS

    value: Any

    def to_dict(self) -> Any:
        return self.value


@dataclass(frozen=True)
class HasClause(Clause):
    """Collection-valued field includes ``value``."""

    kind: ClassVar[ClauseKind] = ClauseKind.HAS

    value: Any

    def to_dict(self) -> dict[str, Any]:
        return {FilterOperator.HAS.value: self.value}


@dataclass(frozen=True)
class ContainsClause(Clause):
    """Substring match, case-insensitive unless told otherwise."""

    kind: ClassVar[ClauseKind] = ClauseKind.CONTAINS

    value: str
    insensitive: bool = True

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {FilterOperator.CONTAINS.value: self.value}
        if self.insensitive:
            out[MODE_KEY] = INSENSITIVE
        return out


@dataclass(frozen=True)
class OrGroup:
    """Disjunction of single-field clauses, stored in the ``AND`` list."""

    terms: tuple[tuple[str, Clause], ...]

    def to_dict(self) -> dict[str, Any]:
        return {
            LogicalOperator.OR.value: [
                {name: clause.to_dict()} for name, clause in self.terms
            ]
        }


def clause_from_value(value: Any) -> Clause:
    """Classify a raw ORM-style field value into a clause."""
    if not isinstance(value, Mapping):
        return EqualsClause(value)

    keys = set(value)
    if keys == {FilterOperator.HAS.value}:
        return HasClause(value[FilterOperator.HAS.value])
    if FilterOperator.CONTAINS.value in keys and keys <= {
        FilterOperator.CONTAINS.value,
        MODE_KEY,
    }:
        return ContainsClause(
            value[FilterOperator.CONTAINS.value],
            insensitive=value.get(MODE_KEY) == INSENSITIVE,
        )

    extra = dict(value)
    gte = extra.pop(FilterOperator.GTE.value, None)
    lte = extra.pop(FilterOperator.LTE.value, None)
    return RangeClause(gte=gte, lte=lte, extra=extra)


class QueryPredicate(MutableMapping[str, Clause]):
    """
    Ordered mapping of field name → clause, plus the top-level ``AND`` list.

    ``conjunctions`` stays ``None`` until something is appended, so a
    predicate without keyword search serializes without an ``AND`` key.
    Entries are :class:`OrGroup` instances or raw dicts adopted from an
    existing predicate.
    """

    def __init__(
        self,
        clauses: Mapping[str, Clause] | None = None,
        conjunctions: list[OrGroup | dict[str, Any]] | None = None,
    ) -> None:
        self._clauses: dict[str, Clause] = {}
        self.conjunctions = conjunctions
        self.update(clauses or {})

    # -- mapping protocol ----------------------------------------------------

    def __getitem__(self, name: str) -> Clause:
        return self._clauses[name]

    def __setitem__(self, name: str, clause: Clause) -> None:
        if name == LogicalOperator.AND.value:
            raise KeyError(
                "'AND' is not a field; append entries with add_conjunction()"
            )
        if not isinstance(clause, Clause):
            raise TypeError(
                f"Expected a Clause for field '{name}', got {type(clause).__name__}"
            )
        self._clauses[name] = clause

    def __delitem__(self, name: str) -> None:
        del self._clauses[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._clauses)

    def __len__(self) -> int:
        return len(self._clauses)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QueryPredicate):
            return self.to_dict() == other.to_dict()
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"QueryPredicate({self.to_dict()!r})"

    # -- conjunctions --------------------------------------------------------

    def add_conjunction(self, entry: OrGroup | dict[str, Any]) -> None:
        """Append to the ``AND`` list, creating it on first use."""
        if self.conjunctions is None:
            self.conjunctions = []
        self.conjunctions.append(entry)

    # -- serialization -------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            name: clause.to_dict() for name, clause in self._clauses.items()
        }
        if self.conjunctions is not None:
            out[LogicalOperator.AND.value] = [
                entry.to_dict() if isinstance(entry, OrGroup) else entry
                for entry in self.conjunctions
            ]
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> QueryPredicate:
        """
        Adopt a raw ORM-style predicate built elsewhere.

        Field values are classified with :func:`clause_from_value`; an
        ``AND`` list is kept entry for entry, and a single ``AND`` object
        becomes a one-entry list.  Other top-level logical keys (``OR``,
        ``NOT``) are carried through as literal values.
        """
        predicate = cls()
        for name, value in data.items():
            if name == LogicalOperator.AND.value:
                if isinstance(value, list | tuple):
                    predicate.conjunctions = list(value)
                else:
                    predicate.conjunctions = [value]
                continue
            predicate[name] = clause_from_value(value)
        return predicate
