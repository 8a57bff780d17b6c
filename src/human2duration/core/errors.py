"""Exceptions raised by the duration parser.

Every failure is a :class:`DurationParseError` subclass carrying an
:class:`ErrorKind`, so callers can branch on the kind instead of the
message text.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Categories of parse failure."""

    INVALID_NUMBER = "invalid_number"
    UNKNOWN_UNIT = "unknown_unit"
    INVALID_DURATION_FORMAT = "invalid_duration_format"


class DurationParseError(ValueError):
    """Base exception for duration parsing failures.

    Attributes:
        kind: Category of the failure
        raw: The offending input fragment (numeral, unit token or full input)
        message: Human-readable message without context
        context: Optional prefix added by wrapper operations
    """

    kind: ErrorKind = ErrorKind.INVALID_DURATION_FORMAT
    label: str = "invalid duration format"

    def __init__(self, raw: str, message: str | None = None, context: str | None = None) -> None:
        """Initialize the parse error.

        Args:
            raw: The offending input fragment
            message: Optional custom message (default: "<label>: <raw>")
            context: Optional context prefix, e.g. "failed to parse duration"
        """
        self.raw = raw
        self.message = message if message is not None else f"{self.label}: {raw}"
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the full error message."""
        if self.context:
            return f"{self.context}: {self.message}"
        return self.message

    def with_context(self, context: str) -> DurationParseError:
        """Return a copy of this error, of the same class, with *context* prepended."""
        return type(self)(self.raw, message=self.message, context=context)


class InvalidNumberError(DurationParseError):
    """Raised when a numeral in a unit sequence is not a valid float."""

    kind = ErrorKind.INVALID_NUMBER
    label = "invalid number"


class UnknownUnitError(DurationParseError):
    """Raised when a unit token has no entry in the unit table."""

    kind = ErrorKind.UNKNOWN_UNIT
    label = "unknown unit"


class InvalidDurationFormatError(DurationParseError):
    """Raised when no parsing strategy recognizes the input."""

    kind = ErrorKind.INVALID_DURATION_FORMAT
    label = "invalid duration format"
