"""Expansion of ``base/step`` intervals such as ``*/15``, ``5/3`` or ``TUE/2``."""

from __future__ import annotations

__all__ = ["expand_interval"]

from typing import TYPE_CHECKING

from cronexp.common import WILDCARD
from cronexp.domain import domain_of, symbol_index, symbols_of, to_number, within_range
from cronexp.expanders.result import Expansion, FieldError, FieldErrorKind

if TYPE_CHECKING:
    from cronexp.common import CronField
    from cronexp.expanders.result import ExpansionResult


def expand_interval(field: CronField, raw: str) -> ExpansionResult:
    """Select every *step*-th element of the domain, starting at *base*.

    Selection is positional: ``*/15`` on minutes takes positions 0, 15, 30
    and 45 of the minute domain, and ``*/2`` on days of month gives
    ``1 3 5 ...`` because that domain starts at 1. A non-wildcard base
    restricts the sequence to the elements from the base onwards; a symbolic
    base walks the symbol table instead of the numbers.

    Besides being a positive integer, a step used with a non-wildcard base
    must itself be a legal value of the field.

    :param field: Field the interval belongs to.
    :param raw: Raw field value.
    :returns: The expansion, or an ``InvalidInterval`` error.
    """
    parts = raw.split("/")
    if len(parts) != 2:  # noqa: PLR2004
        return _invalid_interval(field, raw)

    base, step_text = parts
    if base == WILDCARD:
        step = _to_step(step_text)
        if step is None:
            return _invalid_interval(field, raw)
        return Expansion(tuple(str(value) for value in domain_of(field)[::step]))

    if not (within_range(field, base) and within_range(field, step_text)):
        return _invalid_interval(field, raw)
    step = _to_step(step_text)
    if step is None:
        return _invalid_interval(field, raw)

    start_value = to_number(base)
    if start_value is not None:
        values = domain_of(field)
        start = values.index(start_value)
        return Expansion(tuple(str(value) for value in values[start::step]))

    symbols = symbols_of(field)
    start_index = symbol_index(field, base)
    if symbols is None or start_index is None:
        return _invalid_interval(field, raw)
    return Expansion(symbols[start_index::step])


def _to_step(text: str) -> int | None:
    """Return *text* as a positive step, or ``None`` for zero, non-numeric or overlong steps."""
    return to_number(text) or None


def _invalid_interval(field: CronField, raw: str) -> FieldError:
    return FieldError(FieldErrorKind.InvalidInterval, field, raw)
