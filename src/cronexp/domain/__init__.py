"""Legal values of every cron field and membership checks against them."""

from .tables import FIELD_DOMAINS, SYMBOL_TABLES, domain_of, symbol_index, symbols_of
from .validator import MAX_NUMBER_DIGITS, is_numeric, to_number, within_range

__all__ = [
    "FIELD_DOMAINS",
    "MAX_NUMBER_DIGITS",
    "SYMBOL_TABLES",
    "domain_of",
    "is_numeric",
    "symbol_index",
    "symbols_of",
    "to_number",
    "within_range",
]
