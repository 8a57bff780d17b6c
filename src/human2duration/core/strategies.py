"""Parsing strategies tried, in order, by the duration parser.

Each strategy takes the trimmed input and a clock, and returns a
``timedelta`` when it recognizes the input or ``None`` when it does not.
Only the unit-sequence strategy raises: it is the last one in the cascade,
so its failures are final.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from human2duration.core.errors import (
    InvalidDurationFormatError,
    InvalidNumberError,
    UnknownUnitError,
)
from human2duration.core.units import (
    AMBIGUOUS_UNIT,
    FUZZY_PHRASES,
    HOUR,
    HOUR_FAMILY,
    MINUTE,
    MINUTE_UNIT,
    MONTH_UNIT,
    SECOND,
    UNIT_TABLE,
)
from human2duration.core.utils import compact, normalize

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
StrategyFunc = Callable[[str, Clock], timedelta | None]

# Tried in order; naive layouts are read as UTC.
TIMESTAMP_LAYOUTS: tuple[str, ...] = (
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d",
    "%Y/%m/%d",
)

# RFC 3339 allows any number of fraction digits; strptime reads at most six.
_LONG_FRACTION_RE = re.compile(r"(\.\d{6})\d+")

_NUMBER = r"(?:\d+(?:\.\d*)?|\.\d+)"

# Optional leading sign, then h, m and s terms, each at most once and in that
# order, nothing else.
_COMPACT_RE = re.compile(
    r"(?P<sign>[-+])?"
    rf"(?:(?P<hours>{_NUMBER})h)?(?:(?P<minutes>{_NUMBER})m)?(?:(?P<seconds>{_NUMBER})s)?"
)

_UNIT_GROUPS = (("hours", HOUR), ("minutes", MINUTE), ("seconds", SECOND))

_UNIT_SEQUENCE_RE = re.compile(r"([\d.]+)\s*([a-z]+)")


def try_parse_timestamp(text: str) -> datetime | None:
    """Parse *text* as an absolute timestamp.

    The input is upper-cased first so lowercase ``t``/``z`` designators are
    accepted. Layouts without an offset are interpreted as UTC. Fractional
    seconds beyond microseconds are truncated.

    Args:
        text: Trimmed input string

    Returns:
        Timezone-aware datetime, or None if no layout matches
    """
    candidate = _LONG_FRACTION_RE.sub(r"\1", text.upper(), count=1)
    for layout in TIMESTAMP_LAYOUTS:
        try:
            parsed = datetime.strptime(candidate, layout)
        except ValueError:
            continue
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        return parsed
    return None


def timestamp_strategy(text: str, clock: Clock) -> timedelta | None:
    """Return the offset from now to an absolute timestamp."""
    instant = try_parse_timestamp(text)
    if instant is None:
        return None
    return instant - clock()


def fuzzy_strategy(text: str, clock: Clock) -> timedelta | None:
    """Look up an idiomatic phrase such as "half an hour"."""
    return FUZZY_PHRASES.get(normalize(text))


def compact_strategy(text: str, clock: Clock) -> timedelta | None:
    """Parse back-to-back ``h``/``m``/``s`` terms such as "1h30m" or "90m".

    Whitespace is removed before matching. Here ``m`` is always minutes. A
    leading ``-`` negates the whole expression ("-1h30m").
    """
    match = _COMPACT_RE.fullmatch(compact(normalize(text)))
    if match is None or not any(match.group(group) for group, _ in _UNIT_GROUPS):
        return None

    total = timedelta(0)
    for group, weight in _UNIT_GROUPS:
        value = match.group(group)
        if value is not None:
            total += weight * float(value)
    return -total if match.group("sign") == "-" else total


def resolve_unit(unit: str, previous: str | None) -> str:
    """Resolve the ambiguous ``m`` token using the preceding unit.

    A lone ``m`` means minutes when the unit immediately before it in the
    same expression is in the hour family ("2h 30m"), and months otherwise
    ("1y 3m"). Every other token is returned unchanged.

    Args:
        unit: Lowercase unit token
        previous: Lowercase unit token that preceded it, or None

    Returns:
        Unit token to look up in the unit table
    """
    if unit != AMBIGUOUS_UNIT:
        return unit
    resolved = MINUTE_UNIT if previous in HOUR_FAMILY else MONTH_UNIT
    logger.debug(f"Resolved ambiguous unit 'm' after {previous!r} as {resolved!r}")
    return resolved


def unit_sequence_strategy(text: str, clock: Clock) -> timedelta:
    """Sum every ``<number><unit>`` pair found in the input.

    Raises:
        InvalidNumberError: If a numeral cannot be parsed as a float
        UnknownUnitError: If a unit token is not in the unit table
        InvalidDurationFormatError: If no pair is found at all, or the input
            carries a sign, which this grammar cannot apply
    """
    normalized = normalize(text)
    matches = _UNIT_SEQUENCE_RE.findall(normalized)
    if not matches or "-" in normalized or "+" in normalized:
        raise InvalidDurationFormatError(text)

    total = timedelta(0)
    previous: str | None = None
    for number, unit in matches:
        try:
            value = float(number)
        except ValueError:
            raise InvalidNumberError(number) from None

        weight = UNIT_TABLE.get(resolve_unit(unit, previous))
        if weight is None:
            raise UnknownUnitError(unit)

        total += weight * value
        previous = unit
    return total


STRATEGIES: tuple[tuple[str, StrategyFunc], ...] = (
    ("timestamp", timestamp_strategy),
    ("fuzzy", fuzzy_strategy),
    ("compact", compact_strategy),
    ("unit_sequence", unit_sequence_strategy),
)
