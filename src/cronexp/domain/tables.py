"""Static per-field domains and the symbolic name tables for months and weekdays."""

from __future__ import annotations

__all__ = ["DAY_NAMES", "FIELD_DOMAINS", "MONTH_NAMES", "SYMBOL_TABLES", "domain_of", "symbol_index", "symbols_of"]

from typing import Final

from cronexp.common import CronField

FIELD_DOMAINS: Final[dict[CronField, tuple[int, ...]]] = {
    CronField.Minute: tuple(range(60)),
    CronField.Hour: tuple(range(24)),
    CronField.DayOfMonth: tuple(range(1, 32)),
    CronField.Month: tuple(range(1, 13)),
    CronField.DayOfWeek: tuple(range(7)),
}

# Position in the table is the offset from the first domain value (JAN -> 1, SUN -> 0).
MONTH_NAMES: Final[tuple[str, ...]] = (
    "JAN",
    "FEB",
    "MAR",
    "APR",
    "MAY",
    "JUN",
    "JUL",
    "AUG",
    "SEP",
    "OCT",
    "NOV",
    "DEC",
)
DAY_NAMES: Final[tuple[str, ...]] = ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT")

SYMBOL_TABLES: Final[dict[CronField, tuple[str, ...]]] = {
    CronField.Month: MONTH_NAMES,
    CronField.DayOfWeek: DAY_NAMES,
}


def domain_of(field: CronField) -> tuple[int, ...]:
    """Return the ordered legal integer values of *field*."""
    return FIELD_DOMAINS[field]


def symbols_of(field: CronField) -> tuple[str, ...] | None:
    """Return the symbol table of *field*, or ``None`` for purely numeric fields."""
    return SYMBOL_TABLES.get(field)


def symbol_index(field: CronField, name: str) -> int | None:
    """Return the position of *name* (case-insensitive) in the symbol table of *field*."""
    symbols = symbols_of(field)
    if symbols is None:
        return None
    try:
        return symbols.index(name.upper())
    except ValueError:
        return None
