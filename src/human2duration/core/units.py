"""Static lookup tables for duration parsing.

Months and years are fixed-length approximations (30 and 365 days).
All keys are lowercase; callers lowercase their query before lookup.
"""

from __future__ import annotations

from datetime import timedelta
from types import MappingProxyType

SECOND = timedelta(seconds=1)
MINUTE = timedelta(minutes=1)
HOUR = timedelta(hours=1)
DAY = timedelta(days=1)
WEEK = timedelta(weeks=1)
MONTH = timedelta(days=30)
YEAR = timedelta(days=365)

UNIT_TABLE: MappingProxyType[str, timedelta] = MappingProxyType(
    {
        # Seconds
        "s": SECOND,
        "sec": SECOND,
        "secs": SECOND,
        "second": SECOND,
        "seconds": SECOND,
        # Minutes ("m" alone is ambiguous, see HOUR_FAMILY)
        "m": MINUTE,
        "min": MINUTE,
        "mins": MINUTE,
        "minute": MINUTE,
        "minutes": MINUTE,
        # Hours
        "h": HOUR,
        "hr": HOUR,
        "hrs": HOUR,
        "hour": HOUR,
        "hours": HOUR,
        # Days
        "d": DAY,
        "day": DAY,
        "days": DAY,
        # Weeks
        "w": WEEK,
        "wk": WEEK,
        "wks": WEEK,
        "week": WEEK,
        "weeks": WEEK,
        # Months
        "mo": MONTH,
        "mon": MONTH,
        "month": MONTH,
        "months": MONTH,
        # Years
        "y": YEAR,
        "yr": YEAR,
        "yrs": YEAR,
        "year": YEAR,
        "years": YEAR,
    }
)

# A lone "m" is read as minutes only right after one of these tokens.
HOUR_FAMILY: frozenset[str] = frozenset({"h", "hr", "hrs", "hour", "hours"})

AMBIGUOUS_UNIT = "m"
MINUTE_UNIT = "min"
MONTH_UNIT = "mo"

# Idioms the unit-sequence grammar cannot express. No key contains a digit.
FUZZY_PHRASES: MappingProxyType[str, timedelta] = MappingProxyType(
    {
        "half an hour": 30 * MINUTE,
        "an hour and a half": 90 * MINUTE,
        "half a day": 12 * HOUR,
        "half a minute": 30 * SECOND,
        "quarter of an hour": 15 * MINUTE,
        "a quarter of an hour": 15 * MINUTE,
        "couple of minutes": 2 * MINUTE,
        "couple of hours": 2 * HOUR,
        "couple of days": 2 * DAY,
        "couple of weeks": 2 * WEEK,
        "a couple of minutes": 2 * MINUTE,
        "a couple of hours": 2 * HOUR,
        "a couple of days": 2 * DAY,
        "a couple of weeks": 2 * WEEK,
        "a second": SECOND,
        "a minute": MINUTE,
        "an hour": HOUR,
        "a day": DAY,
        "a week": WEEK,
        "a month": MONTH,
        "a year": YEAR,
    }
)
