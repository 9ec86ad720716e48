"""
Shared helpers for normalizing filter inputs.

Pure-Python, no infrastructure dependencies.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

_TRUE_STRINGS = frozenset({"true", "1", "yes", "on"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "off"})


def to_field_list(value: Any) -> list[str]:
    """
    Normalize a field mapping value into a list of field names.

    Supports:
    - ``None`` or an empty string → ``[]``
    - a single name → ``[name]``
    - list / tuple → a list in the same order

    Empty names inside a sequence are kept; callers skip them.
    """
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list | tuple):
        return list(value)
    return [value]


def parse_bool(value: Any) -> bool:
    """
    Parse a query-string boolean.

    Accepts real booleans and ``true/false/1/0/yes/no/on/off``
    (case-insensitive, surrounding whitespace ignored).

    Raises:
        ValueError: If the value is not a recognised boolean.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ValueError(f"Cannot interpret {value!r} as a boolean")


def get_field_value(candidate: Any, field: str) -> Any:
    """Read ``field`` from a mapping or an object; missing reads as ``None``."""
    if isinstance(candidate, Mapping):
        return candidate.get(field)
    return getattr(candidate, field, None)
