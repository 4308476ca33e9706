"""Classification of raw field values and dispatch to the matching expander."""

from __future__ import annotations

__all__ = ["DEFAULT_DISPATCHER", "FieldGrammar", "GrammarDispatcher", "classify", "expand_field"]

import re
from typing import TYPE_CHECKING, Final

from cronexp.common import OPTIONAL, WILDCARD
from cronexp.expanders import (
    FieldError,
    FieldErrorKind,
    expand_combined,
    expand_interval,
    expand_list,
    expand_literal,
    expand_optional,
    expand_range,
    expand_wildcard,
)
from cronexp.logging import WithLogger
from cronexp.py_compatibility import StrEnum, assert_never

if TYPE_CHECKING:
    from cronexp.common import CronField
    from cronexp.expanders import ExpansionResult

_COMBINED_RANGE_LITERAL: Final[re.Pattern[str]] = re.compile(r"[A-Za-z]{3}-[A-Za-z]{3},[A-Za-z]{3}")


class FieldGrammar(StrEnum):
    """Enum of the micro-grammars a raw field value can be written in."""

    Wildcard = "Wildcard"
    """``*``: every value of the field."""
    Optional = "Optional"
    """``?``: the field is not used."""
    CombinedRangeLiteral = "CombinedRangeLiteral"
    """``FRI-MON,WED``: a symbolic range plus one trailing literal."""
    Range = "Range"
    """``15-20`` or ``TUE-FRI``."""
    Interval = "Interval"
    """``*/15``, ``5/3`` or ``TUE/2``."""
    List = "List"
    """``1,15`` or ``JAN,MAR,MAY``."""
    Literal = "Literal"
    """A single value such as ``8`` or ``MAY``."""


def classify(raw: str) -> FieldGrammar:
    """Return the grammar *raw* is written in.

    Rules are tried in a fixed order and the first match wins: ``1-5,7`` is a
    range (and fails as one), while ``JAN-MAR,MAY`` is the combined form.
    """
    if raw == WILDCARD:
        return FieldGrammar.Wildcard
    if raw == OPTIONAL:
        return FieldGrammar.Optional
    if _COMBINED_RANGE_LITERAL.fullmatch(raw):
        return FieldGrammar.CombinedRangeLiteral
    if "-" in raw:
        return FieldGrammar.Range
    if "/" in raw:
        return FieldGrammar.Interval
    if "," in raw:
        return FieldGrammar.List
    return FieldGrammar.Literal


class GrammarDispatcher(WithLogger):
    """Route raw field values to the expander of their grammar."""

    def expand(self, field: CronField, raw: str | None) -> ExpansionResult:
        """Expand *raw* for *field*, returning failures instead of raising them.

        :param field: Field the value was given for.
        :param raw: Raw value, or ``None`` when the line has no value for *field*.
        :returns: The expansion, or the :class:`FieldError` describing the failure.
        """
        if raw is None:
            self._logger.debug("No value given for %s", field)
            return FieldError(FieldErrorKind.MissingField, field, None)

        grammar = classify(raw)
        self._logger.debug("Expanding %s value %r as %s", field, raw, grammar)
        result = self._route(grammar, field, raw)

        if isinstance(result, FieldError):
            self._logger.info("%s", result.message)
        elif not result.tokens:
            self._logger.warning("%s range %s selects no values", field.label, raw)
        return result

    def _route(self, grammar: FieldGrammar, field: CronField, raw: str) -> ExpansionResult:
        match grammar:
            case FieldGrammar.Wildcard:
                return expand_wildcard(field)
            case FieldGrammar.Optional:
                return expand_optional(field)
            case FieldGrammar.CombinedRangeLiteral:
                return expand_combined(field, raw)
            case FieldGrammar.Range:
                return expand_range(field, raw)
            case FieldGrammar.Interval:
                return expand_interval(field, raw)
            case FieldGrammar.List:
                return expand_list(field, raw)
            case FieldGrammar.Literal:
                return expand_literal(field, raw)
            case _:
                assert_never(grammar)


DEFAULT_DISPATCHER: Final[GrammarDispatcher] = GrammarDispatcher()


def expand_field(field: CronField, raw: str | None) -> ExpansionResult:
    """Expand *raw* for *field* with the default dispatcher."""
    return DEFAULT_DISPATCHER.expand(field, raw)
