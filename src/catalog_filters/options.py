"""Filter options and field-map models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

FieldNames = str | list[str] | tuple[str, ...] | None


class _OptionsModel(BaseModel):
    """Immutable, accepts camelCase (wire) and snake_case (Python) names."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ProgramFilterFields(_OptionsModel):
    """
    Maps each filter dimension to the record field(s) it constrains.

    ``price``, ``duration`` and ``keyword`` accept one name or an
    ordered sequence; the others name a single field.
    """

    price: FieldNames = None
    duration: FieldNames = None
    part_time: str | None = None
    university: str | None = None
    city: str | None = None
    keyword: FieldNames = None


class ProgramFilterOptions(_OptionsModel):
    """Resolved filter values for one request, plus the field map."""

    min_price: int | float | None = None
    max_price: int | float | None = None
    min_duration: int | float | None = None
    max_duration: int | float | None = None
    part_time: bool | None = None
    university: str | None = None
    city: str | None = None
    keyword: str | None = None
    fields: ProgramFilterFields = ProgramFilterFields()

    def with_fields(self, fields: ProgramFilterFields) -> ProgramFilterOptions:
        """Return a copy bound to another field map."""
        return self.model_copy(update={"fields": fields})

    @property
    def is_empty(self) -> bool:
        """True when no filter value is set (the field map is ignored)."""
        return not self.model_dump(exclude={"fields"}, exclude_none=True)
