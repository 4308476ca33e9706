"""Expansion of a single literal value such as ``8`` or ``MAY``."""

from __future__ import annotations

__all__ = ["expand_literal"]

from typing import TYPE_CHECKING

from cronexp.domain import within_range
from cronexp.expanders.result import Expansion, FieldError, FieldErrorKind

if TYPE_CHECKING:
    from cronexp.common import CronField
    from cronexp.expanders.result import ExpansionResult


def expand_literal(field: CronField, token: str) -> ExpansionResult:
    """Return *token* unchanged when it is a legal value of *field*.

    No canonicalisation happens: ``may`` stays ``may`` and ``08`` stays ``08``.
    """
    if not within_range(field, token):
        return FieldError(FieldErrorKind.OutOfRange, field, token)
    return Expansion((token,))
