"""CLI commands for human2duration."""

from human2duration.cli.commands.after import after
from human2duration.cli.commands.parse import parse
from human2duration.cli.commands.since import since

__all__ = ["after", "parse", "since"]
