"""Command-line interface for cronexp."""

from typing import Annotated, Optional

import typer

from cronexp.expression import CronExpression
from cronexp.logging import configure_logging
from cronexp.settings import CronexpSettings
from cronexp.table import format_table

EMPTY_INPUT_MESSAGE = "Please provide a cron expression."

app = typer.Typer(
    name="cronexp",
    help="Expand the schedule fields of a cron line into the values they match.",
    add_completion=False,
)


# The command part of a cron line may carry its own flags (``/bin/bash -c ...``),
# so option parsing stops at the first positional argument.
@app.command(context_settings={"allow_interspersed_args": False, "ignore_unknown_options": True})
def expand(
    line: Annotated[
        Optional[list[str]],  # noqa: UP045
        typer.Argument(help="Cron line, e.g. '*/15 0 1,15 * 1-5 /usr/bin/find'"),
    ] = None,
    log_level: Annotated[
        Optional[str],  # noqa: UP045
        typer.Option("--log-level", help="Logging level name, overrides CRONEXP_LOG_LEVEL"),
    ] = None,
    column_width: Annotated[
        Optional[int],  # noqa: UP045
        typer.Option("--column-width", min=1, help="Width of the label column"),
    ] = None,
) -> None:
    """Print the expanded fields of a cron line and its command."""
    try:
        settings = CronexpSettings.load(log_level=log_level, column_width=column_width)
        configure_logging(settings.log_level)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(2) from exc

    source = " ".join(line or []).strip()
    if not source:
        typer.echo(EMPTY_INPUT_MESSAGE, err=True)
        raise typer.Exit(1)

    expression = CronExpression.parse(source)
    for message in expression.errors.values():
        typer.echo(message, err=True)
    typer.echo(format_table(expression, settings.column_width))

    if not expression.valid:
        raise typer.Exit(1)


def main() -> None:
    """Entry point of the ``cronexp`` console script."""
    app()
