"""Rich console singleton for consistent terminal output."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

# Custom theme for human2duration
H2D_THEME = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red bold",
        "highlight": "magenta",
        "key": "blue bold",
        "past": "yellow",
        "future": "green",
        "header": "bold cyan",
        "muted": "dim",
    }
)

# Global console instance
console = Console(theme=H2D_THEME)
error_console = Console(stderr=True, theme=H2D_THEME)

# Global flag for JSON output mode (suppresses Rich output)
_json_output_mode = False


def set_json_output_mode(enabled: bool) -> None:
    """Enable or disable JSON output mode.

    When enabled, Rich console output is suppressed in favor of JSON.
    """
    global _json_output_mode
    _json_output_mode = enabled


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    if not _json_output_mode:
        error_console.print(f"[error]{message}[/error]")


def configure_logging(debug: bool = False) -> None:
    """Route library logging through Rich on stderr.

    Args:
        debug: Log at DEBUG level when True, WARNING otherwise
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=error_console, rich_tracebacks=True, show_path=False)],
        force=True,
    )
