"""Expansion of ``lower-upper`` ranges, numeric or symbolic."""

from __future__ import annotations

__all__ = ["expand_range"]

from typing import TYPE_CHECKING

from cronexp.domain import domain_of, is_numeric, symbol_index, symbols_of, to_number, within_range
from cronexp.expanders.result import Expansion, FieldError, FieldErrorKind

if TYPE_CHECKING:
    from cronexp.common import CronField
    from cronexp.expanders.result import ExpansionResult


def expand_range(field: CronField, raw: str) -> ExpansionResult:
    """Expand a range into every value between its bounds, both inclusive.

    Numeric ranges select the domain values between the bounds, so a lower
    bound above the upper one selects nothing. Symbolic ranges are resolved
    through the field's symbol table and wrap past its end when the upper
    name comes first, e.g. ``FRI-MON`` gives ``FRI SAT SUN MON``.

    :param field: Field the range belongs to.
    :param raw: Raw field value, e.g. ``"15-20"`` or ``"TUE-FRI"``.
    :returns: The expansion, or an ``InvalidRange`` error.
    """
    bounds = raw.split("-")
    if len(bounds) != 2 or not all(within_range(field, bound) for bound in bounds):  # noqa: PLR2004
        return _invalid_range(field, raw)

    lower, upper = bounds
    if is_numeric(lower):
        low, high = to_number(lower), to_number(upper)
        if low is None or high is None:
            return _invalid_range(field, raw)
        return Expansion(tuple(str(value) for value in domain_of(field) if low <= value <= high))

    symbols = symbols_of(field)
    low_index, high_index = symbol_index(field, lower), symbol_index(field, upper)
    if symbols is None or low_index is None or high_index is None:
        return _invalid_range(field, raw)
    if low_index <= high_index:
        return Expansion(symbols[low_index : high_index + 1])
    return Expansion(symbols[low_index:] + symbols[: high_index + 1])


def _invalid_range(field: CronField, raw: str) -> FieldError:
    return FieldError(FieldErrorKind.InvalidRange, field, raw)
