"""Membership checks of single tokens against a field's domain."""

from __future__ import annotations

__all__ = ["MAX_NUMBER_DIGITS", "is_numeric", "to_number", "within_range"]

from typing import TYPE_CHECKING, Final

from cronexp.domain.tables import FIELD_DOMAINS, domain_of, symbols_of

if TYPE_CHECKING:
    from cronexp.common import CronField

# Significant digits of the largest value any field accepts.
MAX_NUMBER_DIGITS: Final[int] = len(str(max(max(values) for values in FIELD_DOMAINS.values())))


def is_numeric(token: str) -> bool:
    """Return ``True`` when *token* is written with ASCII digits only."""
    return token.isascii() and token.isdigit()


def to_number(token: str) -> int | None:
    """Return the value of a numeric *token*, or ``None``.

    Tokens that are not numeric, or that carry more significant digits than
    any field value, give ``None`` without being converted.
    """
    if not is_numeric(token):
        return None
    digits = token.lstrip("0") or "0"
    if len(digits) > MAX_NUMBER_DIGITS:
        return None
    return int(digits)


def within_range(field: CronField, token: str) -> bool:
    """Return ``True`` when *token* is a legal value of *field*.

    Numeric tokens are looked up in the integer domain. Any other token is
    upper-cased and looked up in the field's symbol table, so symbolic tokens
    are never legal for minute, hour or day of month.

    :param field: Field whose domain is checked.
    :param token: Raw token, e.g. ``"80"`` or ``"feb"``.
    """
    if is_numeric(token):
        return to_number(token) in domain_of(field)
    symbols = symbols_of(field)
    if symbols is None:
        return False
    return token.upper() in symbols
