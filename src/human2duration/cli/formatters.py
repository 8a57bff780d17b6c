"""Rich formatters for displaying parse results in the terminal."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from human2duration.cli.console import console

if TYPE_CHECKING:
    from human2duration.cli.output import Direction
    from human2duration.core.parser import DurationMatch


def format_parse_summary(
    expression: str,
    match: DurationMatch,
    direction: Direction,
    instant: datetime | None = None,
    verbose: bool = False,
) -> Panel:
    """Create a summary panel for a parsed duration.

    Args:
        expression: The expression as typed by the user
        match: Parsed duration and matching strategy
        direction: Operation that produced the duration
        instant: Optional instant reached by applying the offset to now
        verbose: Include the matching strategy

    Returns:
        Rich Panel with summary table
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Label", style="bold")
    table.add_column("Value", justify="right")

    offset = match.duration
    style = "past" if offset.total_seconds() < 0 else "future"

    table.add_row("Input", escape(expression))
    table.add_row("Direction", direction.value)
    table.add_row("Offset", f"[{style}]{offset}[/{style}]")
    table.add_row("Seconds", f"[{style}]{offset.total_seconds()}[/{style}]")
    if instant is not None:
        table.add_row("Instant", instant.isoformat())
    if verbose:
        table.add_row("Strategy", f"[highlight]{match.strategy}[/highlight]")

    return Panel(table, title="[header]Duration[/header]", border_style="cyan")


def print_parse_result(
    expression: str,
    match: DurationMatch,
    direction: Direction,
    instant: datetime | None = None,
    verbose: bool = False,
) -> None:
    """Print a parse result to the console."""
    console.print(format_parse_summary(expression, match, direction, instant=instant, verbose=verbose))
