"""ProgramFilterParser: query params -> ProgramFilterOptions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from .exceptions import FilterParseError
from .options import ProgramFilterFields, ProgramFilterOptions
from .utils import parse_bool

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger("catalog_filters.parser")


class ProgramFilterQuery(BaseModel):
    """Validation schema for the filter part of a list-endpoint query."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        str_strip_whitespace=True,
        allow_inf_nan=False,
    )

    min_price: float | None = Field(default=None, ge=0)
    max_price: float | None = Field(default=None, ge=0)
    min_duration: float | None = Field(default=None, ge=0)
    max_duration: float | None = Field(default=None, ge=0)
    part_time: bool | None = None
    university: str | None = None
    city: str | None = None
    keyword: str | None = None

    @field_validator(
        "min_price",
        "max_price",
        "min_duration",
        "max_duration",
        "university",
        "city",
        "keyword",
        mode="before",
    )
    @classmethod
    def _blank_is_absent(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("part_time", mode="before")
    @classmethod
    def _parse_part_time(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return parse_bool(value)


class ProgramFilterParser:
    """Parse API query params into :class:`ProgramFilterOptions`."""

    def __init__(self, fields: ProgramFilterFields | None = None) -> None:
        """
        Initialize ProgramFilterParser.

        Args:
            fields: Default field map attached to parsed options.
        """
        self._fields = fields or ProgramFilterFields()

    def parse(
        self,
        query_params: Mapping[str, Any],
        *,
        fields: ProgramFilterFields | None = None,
    ) -> ProgramFilterOptions:
        """
        Return options for ``query_params``.

        Unrelated parameters (``page``, ``limit``, ``status``, ...) are
        ignored.  Repeated parameters given as lists use their last value.

        Raises:
            FilterParseError: If a value cannot be coerced or is out of range.
        """
        raw = {key: _last(value) for key, value in query_params.items()}
        try:
            query = ProgramFilterQuery.model_validate(raw)
        except PydanticValidationError as exc:
            errors: dict[str, list[str]] = {}
            for error in exc.errors():
                loc = ".".join(str(p) for p in error.get("loc", ("__root__",)))
                msg = error.get("msg", "validation error")
                errors.setdefault(loc, []).append(msg)
            logger.info("Rejected filter parameters: %s", errors)
            raise FilterParseError(errors) from exc

        return ProgramFilterOptions(
            **query.model_dump(),
            fields=fields or self._fields,
        )


def _last(value: Any) -> Any:
    if isinstance(value, list | tuple):
        return value[-1] if value else None
    return value
