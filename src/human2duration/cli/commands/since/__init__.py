"""Since command for past-relative expressions ("2h ago")."""

from __future__ import annotations

from typing import Annotated

import typer

from human2duration.cli.commands.parse import ConfigOption, JSONOption, VerboseOption, run_expression
from human2duration.cli.output import Direction


def since(
    expression: Annotated[
        str,
        typer.Argument(help="Past-relative expression, e.g. '2h ago' or '3 days'"),
    ],
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
    json_output: JSONOption = False,
) -> None:
    """Parse a past-relative expression into a negative offset.

    The trailing 'ago' is optional: '2h' and '2h ago' both mean two hours
    in the past.

    Examples:

        human2duration since "2h ago"

        human2duration since "couple of days" --json
    """
    run_expression(expression, Direction.SINCE, config_file, verbose, json_output)
