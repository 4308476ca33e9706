"""Public interface for the cronexp package."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .common import CronField
from .errors import CronexpConfigError, CronexpError, InvalidCronExpressionError
from .expanders import Expansion, FieldError, FieldErrorKind
from .expression import CronExpression, tokenize
from .grammar import FieldGrammar, classify, expand_field
from .table import format_table

if TYPE_CHECKING:
    from collections.abc import Sequence

__all__ = [
    "CronExpression",
    "CronField",
    "CronexpConfigError",
    "CronexpError",
    "Expansion",
    "FieldError",
    "FieldErrorKind",
    "FieldGrammar",
    "InvalidCronExpressionError",
    "classify",
    "expand_field",
    "format_table",
    "parse",
    "tokenize",
]


def parse(line: str | Sequence[str]) -> CronExpression:
    """Expand a cron line; shorthand for :meth:`CronExpression.parse`."""
    return CronExpression.parse(line)
