"""Expansion of comma separated lists such as ``1,15`` or ``JAN,MAR,MAY``."""

from __future__ import annotations

__all__ = ["expand_list"]

from typing import TYPE_CHECKING

from cronexp.domain import within_range
from cronexp.expanders.result import Expansion, FieldError, FieldErrorKind

if TYPE_CHECKING:
    from cronexp.common import CronField
    from cronexp.expanders.result import ExpansionResult


def expand_list(field: CronField, raw: str) -> ExpansionResult:
    """Return the upper-cased list members in the order given.

    A single member outside the domain rejects the whole list.
    """
    members = raw.split(",")
    if not all(within_range(field, member) for member in members):
        return FieldError(FieldErrorKind.InvalidListMember, field, raw)
    return Expansion(tuple(member.upper() for member in members))
