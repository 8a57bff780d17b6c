"""Parse command for turning an expression into a signed offset."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer
from rich.markup import escape

from human2duration.cli.console import configure_logging, console, print_error, set_json_output_mode
from human2duration.cli.errors import get_error_info
from human2duration.cli.formatters import print_parse_result
from human2duration.cli.output import Direction, format_error_json, format_parse_result_json, print_json
from human2duration.config import get_settings
from human2duration.core.errors import DurationParseError
from human2duration.core.parser import match_after_duration, match_duration, match_since_duration

if TYPE_CHECKING:
    from human2duration.core.parser import DurationMatch

logger = logging.getLogger(__name__)

MATCHERS: dict[Direction, Callable[..., DurationMatch]] = {
    Direction.PLAIN: match_duration,
    Direction.SINCE: match_since_duration,
    Direction.AFTER: match_after_duration,
}

ConfigOption = Annotated[
    Path | None,
    typer.Option(
        "--config",
        help="Path to configuration file (YAML)",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        help="Show which parsing strategy matched",
    ),
]
JSONOption = Annotated[
    bool,
    typer.Option(
        "--json",
        help="Output results as JSON for scripting",
    ),
]


def run_expression(
    expression: str,
    direction: Direction,
    config_file: Path | None = None,
    verbose: bool = False,
    json_output: bool = False,
) -> None:
    """Parse *expression* in the given direction and print the result.

    Exits with code 0 on success and 2 when the expression is rejected.
    """
    try:
        settings = get_settings(config_file=config_file)
    except Exception as e:
        _handle_error(e, "Invalid configuration", json_output)

    if settings.debug:
        configure_logging(debug=True)

    json_output = json_output or settings.json_output
    verbose = verbose or settings.verbose
    if json_output:
        set_json_output_mode(True)

    now = datetime.now(UTC)
    try:
        match = MATCHERS[direction](expression, now=now)
    except DurationParseError as e:
        _handle_error(e, "Invalid expression", json_output)

    logger.debug(f"{direction.value} {expression!r} -> {match.duration} via {match.strategy}")

    instant = None
    if settings.display.show_instant:
        try:
            instant = now + match.duration
            if not settings.display.utc:
                instant = instant.astimezone()
        except OverflowError:
            instant = None
            logger.debug(f"Instant for {expression!r} is outside the supported calendar range")

    if json_output:
        print_json(format_parse_result_json(expression, match, direction, instant=instant))
    else:
        print_parse_result(expression, match, direction, instant=instant, verbose=verbose)

    raise typer.Exit(0)


def parse(
    expression: Annotated[
        str,
        typer.Argument(help="Duration, phrase or timestamp, e.g. '2d 3h', 'half an hour', '2024-01-31'"),
    ],
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
    json_output: JSONOption = False,
) -> None:
    """Parse a duration expression into a signed offset from now.

    Timestamps give the offset from now to that instant (negative when in
    the past). A lone 'm' means minutes right after an hour unit and months
    otherwise.

    Examples:

        human2duration parse "2d 3h"

        human2duration parse "half an hour"

        # JSON for scripts

        human2duration parse 1h30m --json
    """
    run_expression(expression, Direction.PLAIN, config_file, verbose, json_output)


def _handle_error(
    e: Exception,
    prefix: str,
    json_output: bool,
) -> None:
    """Handle an error with appropriate output format.

    Args:
        e: The exception
        prefix: Error message prefix
        json_output: Whether JSON output is enabled
    """
    error_info = get_error_info(e)

    if json_output:
        json_data = format_error_json(
            error_type=error_info.error_type,
            message=f"{prefix}: {error_info.message}",
            kind=error_info.kind,
            details=error_info.details,
            recovery_suggestion=error_info.recovery_suggestion,
        )
        print_json(json_data)
    else:
        print_error(escape(f"{prefix}: {error_info.message}"))
        if error_info.details:
            console.print(f"[dim]{escape(error_info.details)}[/dim]")
        if error_info.recovery_suggestion:
            console.print(f"\n[info]Hint: {error_info.recovery_suggestion}[/info]")

    raise typer.Exit(2) from None
