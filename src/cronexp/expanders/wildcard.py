"""Expansions of the two fixed field values, ``*`` and ``?``."""

from __future__ import annotations

__all__ = ["expand_optional", "expand_wildcard"]

from typing import TYPE_CHECKING

from cronexp.common import OPTIONAL_SENTINEL
from cronexp.domain import domain_of
from cronexp.expanders.result import Expansion

if TYPE_CHECKING:
    from cronexp.common import CronField


def expand_wildcard(field: CronField) -> Expansion:
    """Return every value of the field's numeric domain in ascending order."""
    return Expansion(tuple(str(value) for value in domain_of(field)))


def expand_optional(field: CronField) -> Expansion:  # noqa: ARG001
    """Return the sentinel marking a field as unused, whatever the field."""
    return Expansion((OPTIONAL_SENTINEL,))
