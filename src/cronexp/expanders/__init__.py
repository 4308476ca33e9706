"""Expanders turning one raw field value into its ordered tokens."""

from .combined import expand_combined
from .interval import expand_interval
from .listing import expand_list
from .literal import expand_literal
from .ranges import expand_range
from .result import Expansion, ExpansionResult, FieldError, FieldErrorKind
from .wildcard import expand_optional, expand_wildcard

__all__ = [
    "Expansion",
    "ExpansionResult",
    "FieldError",
    "FieldErrorKind",
    "expand_combined",
    "expand_interval",
    "expand_list",
    "expand_literal",
    "expand_optional",
    "expand_range",
    "expand_wildcard",
]
