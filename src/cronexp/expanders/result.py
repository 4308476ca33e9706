"""Explicit result types returned by every field expander."""

from __future__ import annotations

__all__ = ["Expansion", "ExpansionResult", "FieldError", "FieldErrorKind"]

from collections.abc import Iterator
import dataclasses
from typing import TYPE_CHECKING, Final, TypeAlias

from cronexp.py_compatibility import StrEnum

if TYPE_CHECKING:
    from cronexp.common import CronField


class FieldErrorKind(StrEnum):
    """Enum of the ways a single field can fail to expand."""

    OutOfRange = "OutOfRange"
    """A literal value lies outside the field's domain."""
    InvalidListMember = "InvalidListMember"
    """At least one member of a comma list lies outside the domain."""
    InvalidRange = "InvalidRange"
    """A range bound is outside the domain or cannot be resolved."""
    InvalidInterval = "InvalidInterval"
    """The base or the step of an interval is not valid."""
    MissingField = "MissingField"
    """The line ended before this field."""


_MESSAGE_TEMPLATES: Final[dict[FieldErrorKind, str]] = {
    FieldErrorKind.OutOfRange: "{label} value {value} is invalid.",
    FieldErrorKind.InvalidListMember: "{label} list {value} is not valid.",
    FieldErrorKind.InvalidRange: "{label} range {value} is invalid.",
    FieldErrorKind.InvalidInterval: "{label} interval {value} is not valid.",
    FieldErrorKind.MissingField: "{label} value is missing.",
}


@dataclasses.dataclass(slots=True, frozen=True)
class FieldError:
    """Describe why the raw value of a field could not be expanded."""

    kind: FieldErrorKind
    field: CronField
    value: str | None

    @property
    def message(self) -> str:
        """Return the human readable message reported for this failure."""
        return _MESSAGE_TEMPLATES[self.kind].format(label=self.field.label, value=self.value)


@dataclasses.dataclass(slots=True, frozen=True)
class Expansion:
    """Ordered tokens a field value expands to.

    Tokens keep the form they are produced in: decimal numbers, or upper-case
    names where the value was symbolic.
    """

    tokens: tuple[str, ...]

    def __str__(self) -> str:
        """Return the tokens joined with single spaces."""
        return " ".join(self.tokens)

    def __iter__(self) -> Iterator[str]:
        """Iterate over the tokens in order."""
        return iter(self.tokens)

    def __len__(self) -> int:
        """Return the number of tokens."""
        return len(self.tokens)

    def __add__(self, other: Expansion) -> Expansion:
        """Return the tokens of *self* followed by those of *other*."""
        return Expansion(self.tokens + other.tokens)


ExpansionResult: TypeAlias = Expansion | FieldError
