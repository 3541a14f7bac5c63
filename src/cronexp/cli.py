"""Command-line interface for cronexp."""

from __future__ import annotations

from typing import Annotated, Optional

import typer

from cronexp.errors import CronexpError
from cronexp.logging import configure_logging
from cronexp.parser import parse_cron
from cronexp.printer import format_table
from cronexp.settings import CronexpSettings

app = typer.Typer(
    name="cronexp",
    help="Expand a cron expression into the values of each field.",
    add_completion=False,
)


@app.command()
def main(
    expression: Annotated[
        str,
        typer.Argument(
            help=(
                "Cron expression quoted as a single argument: minute, hour, day of month, "
                "month, day of week and command, separated by exactly one space."
            ),
            show_default=False,
        ),
    ],
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", "-l", help="Logging level, overrides CRONEXP_LOG_LEVEL"),
    ] = None,
) -> None:
    """Print the table of values an EXPRESSION runs at."""
    try:
        settings = CronexpSettings.load()
        if log_level is not None:
            settings.update(log_level=log_level.upper())
        configure_logging(settings.log_level)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    if "\n" in expression or "\r" in expression:
        typer.echo("Error: the expression must be a single line", err=True)
        raise typer.Exit(1)

    if settings.echo_input:
        typer.echo(f"Cron string: {expression}")

    try:
        result = parse_cron(expression)
    except CronexpError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e

    typer.echo(format_table(result, settings.column_width))


if __name__ == "__main__":
    app()
