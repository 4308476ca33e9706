"""Constants and enums shared by every part of the expander."""

from __future__ import annotations

from typing import Final

from cronexp.py_compatibility import StrEnum

EXPECTED_FIELD_COUNT: Final[int] = 5
OPTIONAL_SENTINEL: Final[str] = "Unused"
WILDCARD: Final[str] = "*"
OPTIONAL: Final[str] = "?"


class CronField(StrEnum):
    """Enum of the five schedule positions, in the order they appear in a cron line."""

    Minute = "Minute"
    Hour = "Hour"
    DayOfMonth = "DayOfMonth"
    Month = "Month"
    DayOfWeek = "DayOfWeek"

    @property
    def label(self) -> str:
        """Return the human readable name used in messages and tables."""
        return FIELD_LABELS[self]


FIELD_LABELS: Final[dict[CronField, str]] = {
    CronField.Minute: "Minute",
    CronField.Hour: "Hour",
    CronField.DayOfMonth: "Day of month",
    CronField.Month: "Month",
    CronField.DayOfWeek: "Day of week",
}
