"""After command for future-relative expressions ("in 2h")."""

from __future__ import annotations

from typing import Annotated

import typer

from human2duration.cli.commands.parse import ConfigOption, JSONOption, VerboseOption, run_expression
from human2duration.cli.output import Direction


def after(
    expression: Annotated[
        str,
        typer.Argument(help="Future-relative expression, e.g. 'in 2h' or 'after 1 day'"),
    ],
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
    json_output: JSONOption = False,
) -> None:
    """Parse a future-relative expression into a positive offset.

    A leading 'in' or 'after' is optional.

    Examples:

        human2duration after "in 2h"

        human2duration after "after 1 day" --json
    """
    run_expression(expression, Direction.AFTER, config_file, verbose, json_output)
