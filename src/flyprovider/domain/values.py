"""Tagged field values for desired configuration.

A planned attribute is in one of three states: not determined yet, explicitly
unset, or set to a concrete value. Callers branch on the tag instead of on
sentinel defaults such as empty strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class Unknown:
    """Value is not determined yet (computed later or left for resolution)."""

    def __repr__(self) -> str:
        return "UNKNOWN"


@dataclass(frozen=True, slots=True)
class Null:
    """Value was explicitly left empty by the caller."""

    def __repr__(self) -> str:
        return "NULL"


@dataclass(frozen=True, slots=True)
class Known[T]:
    value: T


type FieldValue[T] = Unknown | Null | Known[T]

UNKNOWN: Final = Unknown()
NULL: Final = Null()


def known[T](value: T) -> Known[T]:
    return Known(value)


def is_known[T](field: FieldValue[T]) -> bool:
    return isinstance(field, Known)


def value_or[T](field: FieldValue[T], default: T) -> T:
    if isinstance(field, Known):
        return field.value
    return default


def from_optional[T](value: T | None, *, unset: Unknown | Null = UNKNOWN) -> FieldValue[T]:
    """Wrap an optional value, mapping ``None`` to ``unset``."""

    if value is None:
        return unset
    return Known(value)


__all__ = [
    "NULL",
    "UNKNOWN",
    "FieldValue",
    "Known",
    "Null",
    "Unknown",
    "from_optional",
    "is_known",
    "known",
    "value_or",
]
