"""Tests for tokenizing cron lines and building expressions."""

from __future__ import annotations

import re

import pytest

from cronexp import CronExpression, CronField, InvalidCronExpressionError, parse, tokenize
from cronexp.expanders import Expansion

END_TO_END_LINE = "*/5 * 1,15 JAN-DEC MON /bin/bash -c ./do-something"


class TestTokenize:
    """Splitting lines into fields and command."""

    def test_fields_and_command(self) -> None:
        """The first five tokens are fields; the rest is the command."""
        fields, command = tokenize(END_TO_END_LINE)
        assert fields == {
            CronField.Minute: "*/5",
            CronField.Hour: "*",
            CronField.DayOfMonth: "1,15",
            CronField.Month: "JAN-DEC",
            CronField.DayOfWeek: "MON",
        }
        assert command == "/bin/bash -c ./do-something"

    def test_whitespace_runs_collapse(self) -> None:
        """Repeated whitespace collapses to single spaces in the command."""
        fields, command = tokenize("  0 \t 0  1 1 0   echo    hello   world ")
        assert list(fields.values()) == ["0", "0", "1", "1", "0"]
        assert command == "echo hello world"

    def test_sequence_input(self) -> None:
        """Pre-tokenized input is joined before splitting."""
        fields, command = tokenize(["*/15", "0", "1,15 *", "1-5", "/usr/bin/find", "-name", "x"])
        assert fields[CronField.Month] == "*"
        assert fields[CronField.DayOfWeek] == "1-5"
        assert command == "/usr/bin/find -name x"

    def test_short_line(self) -> None:
        """Fields beyond the end of the line are ``None`` and the command is empty."""
        fields, command = tokenize("0 0 1")
        assert fields[CronField.DayOfMonth] == "1"
        assert fields[CronField.Month] is None
        assert fields[CronField.DayOfWeek] is None
        assert command == ""


@pytest.mark.parametrize(
    (
        "line",
        "expected_minute",
        "expected_hour",
        "expected_day_of_month",
        "expected_month",
        "expected_day_of_week",
    ),
    [
        pytest.param(
            "0 0 1 1 0 /usr/bin/find",
            "0",
            "0",
            "1",
            "1",
            "0",
            id="literals",
        ),
        pytest.param(
            "* * ? * * /usr/bin/find",
            " ".join(str(v) for v in range(60)),
            " ".join(str(v) for v in range(24)),
            "Unused",
            "1 2 3 4 5 6 7 8 9 10 11 12",
            "0 1 2 3 4 5 6",
            id="wildcards-and-optional",
        ),
        pytest.param(
            "*/15 15-20 1,15 JAN,MAR,MAY TUE-FRI /usr/bin/find",
            "0 15 30 45",
            "15 16 17 18 19 20",
            "1 15",
            "JAN MAR MAY",
            "TUE WED THU FRI",
            id="steps-ranges-and-lists",
        ),
        pytest.param(
            "38 5/3 * MAY TUE/2 /usr/bin/find",
            "38",
            "5 8 11 14 17 20 23",
            " ".join(str(v) for v in range(1, 32)),
            "MAY",
            "TUE THU SAT",
            id="anchored-steps",
        ),
        pytest.param(
            "0 9 ? NOV-FEB FRI-MON,WED /usr/bin/find",
            "0",
            "9",
            "Unused",
            "NOV DEC JAN FEB",
            "FRI SAT SUN MON WED",
            id="wrapping-ranges",
        ),
    ],
)
def test_cron_expression_valid(  # noqa: PLR0913
    line: str,
    expected_minute: str,
    expected_hour: str,
    expected_day_of_month: str,
    expected_month: str,
    expected_day_of_week: str,
) -> None:
    """Validate expansion of every field across multiple line shapes."""
    expression = CronExpression.parse(line)

    assert expression.valid
    assert expression.errors == {}
    assert expression.minute == expected_minute
    assert expression.hour == expected_hour
    assert expression.day_of_month == expected_day_of_month
    assert expression.month == expected_month
    assert expression.day_of_week == expected_day_of_week
    assert expression.command == "/usr/bin/find"


def test_end_to_end_line_keeps_raw_fields() -> None:
    """Raw field values and the command survive expansion untouched."""
    expression = parse(END_TO_END_LINE)

    assert expression.fields[CronField.Minute] == "*/5"
    assert expression.fields[CronField.Hour] == "*"
    assert expression.fields[CronField.DayOfMonth] == "1,15"
    assert expression.fields[CronField.Month] == "JAN-DEC"
    assert expression.fields[CronField.DayOfWeek] == "MON"
    assert expression.command == "/bin/bash -c ./do-something"
    assert expression.minute == "0 5 10 15 20 25 30 35 40 45 50 55"
    assert expression.day_of_week == "MON"


def test_invalid_range_leaves_field_empty() -> None:
    """A bad field has no expansion, a message and makes the expression invalid."""
    expression = CronExpression.parse("* * * * TUE-BOB /usr/bin/find")

    assert expression.day_of_week is None
    assert expression.expansions[CronField.DayOfWeek] is None
    assert not expression.valid
    assert expression.errors == {CronField.DayOfWeek: "Day of week range TUE-BOB is invalid."}


def test_every_field_is_attempted() -> None:
    """One failing field does not stop the others from expanding or failing."""
    expression = CronExpression.parse("90 24 1,99 13-15 80/15 /usr/bin/find")

    assert not expression.valid
    assert expression.errors == {
        CronField.Minute: "Minute value 90 is invalid.",
        CronField.Hour: "Hour value 24 is invalid.",
        CronField.DayOfMonth: "Day of month list 1,99 is not valid.",
        CronField.Month: "Month range 13-15 is invalid.",
        CronField.DayOfWeek: "Day of week interval 80/15 is not valid.",
    }
    assert all(expansion is None for expansion in expression.expansions.values())


def test_partial_failure_keeps_other_expansions() -> None:
    """Valid fields next to an invalid one are still expanded."""
    expression = CronExpression.parse("80/15 8 * * * /usr/bin/find")

    assert expression.errors[CronField.Minute] == "Minute interval 80/15 is not valid."
    assert expression.minute is None
    assert expression.hour == "8"


def test_missing_fields_are_errors() -> None:
    """A line shorter than five fields reports the missing ones."""
    expression = CronExpression.parse("0 0 1 1")

    assert not expression.valid
    assert expression.errors == {CronField.DayOfWeek: "Day of week value is missing."}
    assert expression.fields[CronField.DayOfWeek] is None
    assert expression.command == ""


def test_descending_numeric_range_is_valid_but_empty() -> None:
    """A numeric range with its bounds reversed expands to nothing, without an error."""
    expression = CronExpression.parse("0 20-15 * * * /usr/bin/find")

    assert expression.valid
    assert expression.expansions[CronField.Hour] == Expansion(())
    assert expression.hour == ""


def test_sequence_input_matches_string_input() -> None:
    """Pre-tokenized input yields the same expression as the joined string."""
    tokens = END_TO_END_LINE.split()
    assert CronExpression.parse(tokens) == CronExpression.parse(END_TO_END_LINE)
    assert CronExpression.parse(tokens).source == END_TO_END_LINE


def test_expression_is_immutable() -> None:
    """Neither attributes nor the field maps can be changed after parsing."""
    expression = CronExpression.parse(END_TO_END_LINE)

    with pytest.raises(AttributeError):
        expression.command = "rm -rf /"  # type: ignore[misc]
    with pytest.raises(TypeError):
        expression.errors[CronField.Minute] = "boom"  # type: ignore[index]


def test_raise_for_errors_returns_valid_expression() -> None:
    """A valid expression is returned unchanged."""
    expression = CronExpression.parse(END_TO_END_LINE)
    assert expression.raise_for_errors() is expression


def test_raise_for_errors_raises_with_all_messages() -> None:
    """An invalid expression raises with every message attached."""
    line = "90 8 * * TUE-BOB /usr/bin/find"
    expression = CronExpression.parse(line)

    with pytest.raises(InvalidCronExpressionError, match=re.escape(f"{line!r} is not valid cron expression.")) as exc:
        expression.raise_for_errors()

    assert exc.value.errors == {
        CronField.Minute: "Minute value 90 is invalid.",
        CronField.DayOfWeek: "Day of week range TUE-BOB is invalid.",
    }
    assert isinstance(exc.value, ValueError)
    assert "Minute value 90 is invalid." in str(exc.value)


@pytest.mark.parametrize(
    ("line", "field", "expected_error"),
    [
        pytest.param(
            "1" * 5000 + " * * * * true",
            CronField.Minute,
            f"Minute value {'1' * 5000} is invalid.",
            id="literal",
        ),
        pytest.param(
            "* 1-" + "9" * 5000 + " * * * true",
            CronField.Hour,
            f"Hour range 1-{'9' * 5000} is invalid.",
            id="range-bound",
        ),
        pytest.param(
            "*/" + "9" * 5000 + " * * * * true",
            CronField.Minute,
            f"Minute interval */{'9' * 5000} is not valid.",
            id="wildcard-step",
        ),
        pytest.param(
            "* 5/" + "9" * 5000 + " * * * true",
            CronField.Hour,
            f"Hour interval 5/{'9' * 5000} is not valid.",
            id="step",
        ),
    ],
)
def test_huge_numbers_are_field_errors(line: str, field: CronField, expected_error: str) -> None:
    """Overlong digit strings fail their own field and leave the others expanded."""
    expression = CronExpression.parse(line)

    assert not expression.valid
    assert expression.errors == {field: expected_error}
    assert expression.expansions[field] is None
    assert expression.command == "true"


def test_module_parse_accepts_any_token_sequence() -> None:
    """The package-level shorthand takes the same input as ``CronExpression.parse``."""
    expression = parse(tuple(END_TO_END_LINE.split()))

    assert expression == CronExpression.parse(END_TO_END_LINE)
