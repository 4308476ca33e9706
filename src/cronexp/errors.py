"""Module containing cronexp-related errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cronexp.common import CronField


class CronexpError(Exception):
    """Base class for all cronexp-related errors."""


class InvalidCronExpressionError(CronexpError, ValueError):
    """Raised when a caller asks for an expression with field errors to be rejected."""

    def __init__(self, expression: str, errors: dict[CronField, str]) -> None:
        """Keep the offending *expression* and the message of every failed field."""
        self.expression = expression
        self.errors = dict(errors)
        details = " ".join(errors.values())
        super().__init__(f"{expression!r} is not valid cron expression. {details}".rstrip())


class CronexpConfigError(CronexpError, ValueError):
    """Raised when a setting supplied through the environment cannot be used."""

