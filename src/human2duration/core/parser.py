"""Duration parser: the strategy cascade and its directional wrappers.

The input is tried against, in order:

1. absolute timestamps (offset from now)
2. fuzzy phrases ("half an hour")
3. compact h/m/s forms ("1h30m", "90m")
4. general unit sequences ("2d 3h", "1y 3m")

The first strategy that recognizes the input wins. The last one raises
when it cannot parse the input, which ends the cascade.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from human2duration.core.errors import DurationParseError, InvalidDurationFormatError
from human2duration.core.strategies import STRATEGIES, Clock
from human2duration.core.utils import strip_prefix_ignore_case, strip_suffix_ignore_case

logger = logging.getLogger(__name__)

WRAPPER_CONTEXT = "failed to parse duration"


@dataclass(frozen=True)
class DurationMatch:
    """A parsed duration and the name of the strategy that produced it."""

    duration: timedelta
    strategy: str


def _clock_for(now: datetime | None) -> Clock:
    """Build the clock handed to strategies; naive *now* is read as UTC."""
    if now is None:
        return lambda: datetime.now(UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    return lambda: now


def match_duration(text: str, now: datetime | None = None) -> DurationMatch:
    """Parse *text* and report which strategy recognized it.

    Args:
        text: Human-written duration or timestamp
        now: Reference instant for timestamps (default: current UTC time)

    Returns:
        DurationMatch with the signed offset and the strategy name

    Raises:
        DurationParseError: If no strategy can parse the input
    """
    stripped = text.strip()
    if not stripped:
        raise InvalidDurationFormatError(text)

    clock = _clock_for(now)
    for name, strategy in STRATEGIES:
        try:
            duration = strategy(stripped, clock)
        except OverflowError:
            raise InvalidDurationFormatError(stripped, message=f"duration out of range: {stripped}") from None
        if duration is not None:
            logger.debug(f"Parsed {stripped!r} with {name} strategy: {duration}")
            return DurationMatch(duration=duration, strategy=name)

    # The unit-sequence strategy raises instead of returning None.
    raise InvalidDurationFormatError(stripped)


def parse_duration(text: str, now: datetime | None = None) -> timedelta:
    """Parse a human-written duration into a signed ``timedelta``.

    Example:
        >>> parse_duration("half an hour")
        datetime.timedelta(seconds=1800)
        >>> parse_duration("1 day 4h 30m")
        datetime.timedelta(days=1, seconds=16200)
    """
    return match_duration(text, now=now).duration


def _match_with_context(text: str, now: datetime | None) -> DurationMatch:
    try:
        return match_duration(text, now=now)
    except DurationParseError as e:
        raise e.with_context(WRAPPER_CONTEXT) from e


def match_since_duration(text: str, now: datetime | None = None) -> DurationMatch:
    """Like :func:`parse_since_duration`, also reporting the strategy used."""
    stripped = strip_suffix_ignore_case(text.strip(), " ago")
    match = _match_with_context(stripped, now)
    return DurationMatch(duration=-match.duration, strategy=match.strategy)


def match_after_duration(text: str, now: datetime | None = None) -> DurationMatch:
    """Like :func:`parse_after_duration`, also reporting the strategy used."""
    stripped = text.strip()
    stripped = strip_prefix_ignore_case(stripped, "in ")
    stripped = strip_prefix_ignore_case(stripped, "after ")
    return _match_with_context(stripped, now)


def parse_since_duration(text: str, now: datetime | None = None) -> timedelta:
    """Parse a past-relative expression such as "2h ago".

    The trailing " ago" is optional. The result is negated, so "1h ago"
    gives ``-timedelta(hours=1)``.

    Raises:
        DurationParseError: Same class as the underlying failure, with the
            "failed to parse duration" context
    """
    return match_since_duration(text, now=now).duration


def parse_after_duration(text: str, now: datetime | None = None) -> timedelta:
    """Parse a future-relative expression such as "in 2h" or "after 1 day".

    A leading "in " and then a leading "after " are each removed at most
    once, in that order. The result is returned unchanged.

    Raises:
        DurationParseError: Same class as the underlying failure, with the
            "failed to parse duration" context
    """
    return match_after_duration(text, now=now).duration
