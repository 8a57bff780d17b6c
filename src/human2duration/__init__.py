__version__ = "0.1.0"
__author__ = "Matteo Renoldi"

from human2duration.core.errors import (
    DurationParseError,
    ErrorKind,
    InvalidDurationFormatError,
    InvalidNumberError,
    UnknownUnitError,
)
from human2duration.core.parser import (
    DurationMatch,
    match_after_duration,
    match_duration,
    match_since_duration,
    parse_after_duration,
    parse_duration,
    parse_since_duration,
)

__all__ = [
    "DurationMatch",
    "DurationParseError",
    "ErrorKind",
    "InvalidDurationFormatError",
    "InvalidNumberError",
    "UnknownUnitError",
    "match_after_duration",
    "match_duration",
    "match_since_duration",
    "parse_after_duration",
    "parse_duration",
    "parse_since_duration",
    "__version__",
]
