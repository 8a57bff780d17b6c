"""Error handling utilities with recovery suggestions for CLI."""

from __future__ import annotations

from dataclasses import dataclass

from human2duration.core.units import UNIT_TABLE


@dataclass
class ErrorInfo:
    """Information about an error with recovery suggestion."""

    error_type: str
    message: str
    kind: str | None = None
    details: str | None = None
    recovery_suggestion: str | None = None


_KNOWN_UNITS = ", ".join(sorted(UNIT_TABLE))

# Mapping of error types to recovery suggestions
ERROR_RECOVERY_SUGGESTIONS: dict[str, str] = {
    "InvalidNumberError": (
        "Each amount must be a plain decimal number such as `2` or `1.5`. "
        "Check for stray dots, e.g. `1.2.3h`."
    ),
    "UnknownUnitError": (
        f"Use one of the supported units: {_KNOWN_UNITS}. "
        "A lone `m` means minutes right after an hour unit (`2h 30m`) and months otherwise (`1y 3m`)."
    ),
    "InvalidDurationFormatError": (
        "Write amounts with units (`2d 3h`, `1h30m`, `1.5h`), a phrase such as `half an hour`, "
        "or a timestamp like `2024-01-31 12:00` or `2024-01-31T12:00:00Z`."
    ),
    "DurationParseError": ("The expression could not be parsed. Use `--help` to see accepted formats."),
    "FileNotFoundError": (
        "The specified file does not exist. Verify the file path is correct "
        "and the file is accessible from the current directory."
    ),
    "PermissionError": (
        "Permission denied when accessing the file or resource. Check file permissions and ensure you have read access."
    ),
}


def get_recovery_suggestion(error_type: str) -> str | None:
    """Get a recovery suggestion for an error type.

    Args:
        error_type: The error class name (e.g., "UnknownUnitError")

    Returns:
        Recovery suggestion string or None if not found
    """
    return ERROR_RECOVERY_SUGGESTIONS.get(error_type)


def get_error_info(
    exception: Exception,
    default_message: str | None = None,
) -> ErrorInfo:
    """Extract error information from an exception with recovery suggestion.

    Args:
        exception: The exception to extract info from
        default_message: Optional default message if exception has none

    Returns:
        ErrorInfo with type, message, kind, details, and recovery suggestion
    """
    error_type = type(exception).__name__
    message = str(exception) or default_message or "An error occurred"

    kind = getattr(exception, "kind", None)
    kind_value = kind.value if kind is not None else None

    details = None
    raw = getattr(exception, "raw", None)
    if raw is not None:
        details = f"Offending input: {raw!r}"
    elif exception.__cause__:
        details = str(exception.__cause__)

    return ErrorInfo(
        error_type=error_type,
        message=message,
        kind=kind_value,
        details=details,
        recovery_suggestion=get_recovery_suggestion(error_type),
    )
