"""Expansion of the ``AAA-BBB,CCC`` form: a symbolic range followed by one literal."""

from __future__ import annotations

__all__ = ["expand_combined"]

from typing import TYPE_CHECKING

from cronexp.expanders.literal import expand_literal
from cronexp.expanders.ranges import expand_range
from cronexp.expanders.result import FieldError

if TYPE_CHECKING:
    from cronexp.common import CronField
    from cronexp.expanders.result import ExpansionResult


def expand_combined(field: CronField, raw: str) -> ExpansionResult:
    """Return the range tokens followed by the literal, or the first sub-expansion error."""
    range_part, _, literal_part = raw.partition(",")
    head = expand_range(field, range_part)
    if isinstance(head, FieldError):
        return head
    tail = expand_literal(field, literal_part)
    if isinstance(tail, FieldError):
        return tail
    return head + tail
