"""The cron expression aggregate: five expanded fields plus a command."""

from __future__ import annotations

__all__ = ["CronExpression", "tokenize"]

from collections.abc import Mapping, Sequence
import dataclasses
from types import MappingProxyType

from cronexp.common import EXPECTED_FIELD_COUNT, CronField
from cronexp.errors import InvalidCronExpressionError
from cronexp.expanders import Expansion, FieldError
from cronexp.grammar import DEFAULT_DISPATCHER, GrammarDispatcher
from cronexp.logging import WithLogger


def tokenize(line: str | Sequence[str]) -> tuple[dict[CronField, str | None], str]:
    """Split a cron line into its raw field values and the command.

    A sequence of tokens is joined with single spaces first. The first five
    whitespace separated tokens are the fields, in order; fields the line does
    not reach are ``None``. Everything after them, re-joined with single
    spaces, is the command.

    :param line: Raw cron line, e.g. ``"*/15 0 1,15 * 1-5 /usr/bin/find"``.
    :returns: The raw value of every field and the command string.
    """
    if not isinstance(line, str):
        line = " ".join(line)
    tokens = line.split()
    values = tokens[:EXPECTED_FIELD_COUNT]
    fields: dict[CronField, str | None] = {
        field: values[index] if index < len(values) else None for index, field in enumerate(CronField)
    }
    return fields, " ".join(tokens[EXPECTED_FIELD_COUNT:])


@dataclasses.dataclass(frozen=True)
class CronExpression(WithLogger):
    """Expanded cron line.

    Build instances with :meth:`parse`. Every field is always attempted; a
    field that fails has no expansion and an entry in :attr:`errors` instead.

    :param source: The line the expression was parsed from.
    :param fields: Raw value of every field, ``None`` when the line was too short.
    :param expansions: Expansion of every field, ``None`` for failed fields.
    :param errors: Error message of every failed field.
    :param command: Everything after the five fields.
    """

    source: str
    fields: Mapping[CronField, str | None]
    expansions: Mapping[CronField, Expansion | None]
    errors: Mapping[CronField, str]
    command: str

    @classmethod
    def parse(
        cls, line: str | Sequence[str], dispatcher: GrammarDispatcher = DEFAULT_DISPATCHER
    ) -> CronExpression:
        """Tokenize *line* and expand each of its five fields.

        :param line: Raw line or an equivalent sequence of tokens.
        :param dispatcher: Dispatcher used to expand the fields.
        """
        source = line if isinstance(line, str) else " ".join(line)
        fields, command = tokenize(source)

        expansions: dict[CronField, Expansion | None] = {}
        errors: dict[CronField, str] = {}
        for field, raw in fields.items():
            result = dispatcher.expand(field, raw)
            if isinstance(result, FieldError):
                expansions[field] = None
                errors[field] = result.message
            else:
                expansions[field] = result

        cls._get_logger().debug("Parsed %r with %d invalid field(s)", source, len(errors))
        return cls(
            source=source,
            fields=MappingProxyType(fields),
            expansions=MappingProxyType(expansions),
            errors=MappingProxyType(errors),
            command=command,
        )

    @property
    def valid(self) -> bool:
        """Return ``True`` when no field failed to expand."""
        return not self.errors

    def expansion_text(self, field: CronField) -> str | None:
        """Return the space separated expansion of *field*, or ``None`` when it failed."""
        expansion = self.expansions[field]
        if expansion is None:
            return None
        return str(expansion)

    @property
    def minute(self) -> str | None:
        """Return the expanded minute field, or ``None`` when it failed."""
        return self.expansion_text(CronField.Minute)

    @property
    def hour(self) -> str | None:
        """Return the expanded hour field, or ``None`` when it failed."""
        return self.expansion_text(CronField.Hour)

    @property
    def day_of_month(self) -> str | None:
        """Return the expanded day of month field, or ``None`` when it failed."""
        return self.expansion_text(CronField.DayOfMonth)

    @property
    def month(self) -> str | None:
        """Return the expanded month field, or ``None`` when it failed."""
        return self.expansion_text(CronField.Month)

    @property
    def day_of_week(self) -> str | None:
        """Return the expanded day of week field, or ``None`` when it failed."""
        return self.expansion_text(CronField.DayOfWeek)

    def raise_for_errors(self) -> CronExpression:
        """Return the expression itself when valid.

        :raises InvalidCronExpressionError: If any field failed, carrying every message.
        """
        if self.errors:
            raise InvalidCronExpressionError(self.source, dict(self.errors))
        return self
