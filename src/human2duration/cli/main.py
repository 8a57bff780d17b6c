"""Main CLI entry point using Typer."""

from __future__ import annotations

from typing import Annotated

import typer

from human2duration import __version__
from human2duration.cli.commands import after, parse, since
from human2duration.cli.console import configure_logging, console

app = typer.Typer(
    name="human2duration",
    help="human2duration: turn human-written time expressions into signed offsets from now.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.command()(parse)
app.command()(since)
app.command()(after)


def version_callback(value: bool) -> None:
    """Print the version and exit."""
    if value:
        console.print(f"human2duration {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            help="Enable debug logging",
        ),
    ] = False,
) -> None:
    """human2duration: turn human-written time expressions into signed offsets from now.

    Accepts amounts with units ('2d 3h', '1h30m', '1.5h'), idioms ('half an
    hour'), timestamps ('2024-01-31T12:00:00Z') and 'X ago' / 'in X' phrases.
    """
    if debug:
        configure_logging(debug=True)


if __name__ == "__main__":
    app()
