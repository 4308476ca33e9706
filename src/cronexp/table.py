"""Fixed-width rendering of an expanded cron expression."""

from __future__ import annotations

__all__ = ["DEFAULT_COLUMN_WIDTH", "format_table"]

from typing import TYPE_CHECKING, Final

from cronexp.common import CronField

if TYPE_CHECKING:
    from cronexp.expression import CronExpression

DEFAULT_COLUMN_WIDTH: Final[int] = 14
COMMAND_LABEL: Final[str] = "command"


def format_table(expression: CronExpression, column_width: int = DEFAULT_COLUMN_WIDTH) -> str:
    """Render one line per field followed by the command.

    Labels are left-justified to *column_width*. A field that failed to expand
    shows its raw value, and a field missing from the line shows nothing.
    """
    rows: list[tuple[str, str]] = []
    for field in CronField:
        text = expression.expansion_text(field)
        if text is None:
            text = expression.fields[field] or ""
        rows.append((field.label.lower(), text))
    rows.append((COMMAND_LABEL, expression.command))
    return "\n".join(f"{label.ljust(column_width)}{value}".rstrip() for label, value in rows)
