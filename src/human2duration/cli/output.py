"""JSON and structured output formatting for scripting."""

from __future__ import annotations

import json
import sys
from dataclasses import asdict, dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

from human2duration import __version__

if TYPE_CHECKING:
    from human2duration.core.parser import DurationMatch


class Direction(str, Enum):
    """Which operation produced a result."""

    PLAIN = "plain"  # parse_duration
    SINCE = "since"  # parse_since_duration
    AFTER = "after"  # parse_after_duration


@dataclass
class JSONOutputMeta:
    """Metadata for JSON output."""

    tool: str = "human2duration"
    version: str = ""
    timestamp: str = field(default_factory=lambda: datetime.now(UTC).isoformat())


@dataclass
class JSONParseOutput:
    """JSON output structure for a parsed duration."""

    status: str  # "ok"
    exit_code: int
    meta: JSONOutputMeta
    input: str
    direction: str
    strategy: str
    duration: dict[str, Any]
    instant: str | None = None


@dataclass
class JSONErrorOutput:
    """JSON output structure for errors."""

    status: str = "error"
    exit_code: int = 2
    meta: JSONOutputMeta = field(default_factory=JSONOutputMeta)
    error: dict[str, Any] = field(default_factory=dict)


def get_version() -> str:
    """Get human2duration version."""
    return __version__


def format_parse_result_json(
    expression: str,
    match: DurationMatch,
    direction: Direction,
    instant: datetime | None = None,
) -> dict[str, Any]:
    """Format a parse result as a JSON-serializable dictionary.

    Args:
        expression: The expression as typed by the user
        match: Parsed duration and matching strategy
        direction: Operation that produced the duration
        instant: Optional instant reached by applying the offset to now

    Returns:
        Dictionary suitable for JSON serialization
    """
    output = JSONParseOutput(
        status="ok",
        exit_code=0,
        meta=JSONOutputMeta(version=get_version()),
        input=expression,
        direction=direction.value,
        strategy=match.strategy,
        duration={
            "seconds": match.duration.total_seconds(),
            "timedelta": str(match.duration),
        },
        instant=instant.isoformat() if instant is not None else None,
    )

    return asdict(output)


def format_error_json(
    error_type: str,
    message: str,
    kind: str | None = None,
    details: str | None = None,
    recovery_suggestion: str | None = None,
    exit_code: int = 2,
) -> dict[str, Any]:
    """Format an error as JSON.

    Args:
        error_type: Type of error (e.g., "UnknownUnitError")
        message: Error message
        kind: Optional error kind (e.g., "unknown_unit")
        details: Optional detailed error information
        recovery_suggestion: Optional suggestion for fixing the error
        exit_code: Exit code to use

    Returns:
        Dictionary suitable for JSON serialization
    """
    output = JSONErrorOutput(
        exit_code=exit_code,
        meta=JSONOutputMeta(version=get_version()),
        error={
            "type": error_type,
            "kind": kind,
            "message": message,
            "details": details,
            "recovery_suggestion": recovery_suggestion,
        },
    )

    return asdict(output)


def print_json(data: dict[str, Any], file: Any = None) -> None:
    """Print JSON output to stdout or specified file.

    Args:
        data: Dictionary to serialize as JSON
        file: Optional file handle (defaults to stdout)
    """
    output = json.dumps(data, indent=2, default=str)
    print(output, file=file or sys.stdout)
