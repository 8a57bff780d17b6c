"""Tests for human2duration.core.units."""

import re
from datetime import timedelta

import pytest

from human2duration.core.units import FUZZY_PHRASES, HOUR_FAMILY, UNIT_TABLE


class TestUnitTable:
    """Tests for the unit table."""

    def test_keys_are_lowercase(self):
        """Every unit key is lowercase."""
        assert all(key == key.lower() for key in UNIT_TABLE)

    @pytest.mark.parametrize(
        ("unit", "weight"),
        [
            ("s", timedelta(seconds=1)),
            ("min", timedelta(minutes=1)),
            ("hours", timedelta(hours=1)),
            ("day", timedelta(days=1)),
            ("wks", timedelta(weeks=1)),
            ("mo", timedelta(days=30)),
            ("years", timedelta(days=365)),
        ],
    )
    def test_weights(self, unit, weight):
        """Units map to fixed-length weights."""
        assert UNIT_TABLE[unit] == weight

    def test_read_only(self):
        """The table cannot be modified."""
        with pytest.raises(TypeError):
            UNIT_TABLE["fortnight"] = timedelta(weeks=2)  # type: ignore[index]

    def test_hour_family_are_hours(self):
        """Every hour-family token is an hour unit."""
        assert all(UNIT_TABLE[unit] == timedelta(hours=1) for unit in HOUR_FAMILY)


class TestFuzzyPhrases:
    """Tests for the fuzzy phrase table."""

    def test_keys_are_normalized(self):
        """Phrases are lowercase and trimmed."""
        assert all(key == key.strip().lower() for key in FUZZY_PHRASES)

    def test_no_digits(self):
        """Phrases never overlap the number/unit grammar."""
        assert not any(re.search(r"\d", key) for key in FUZZY_PHRASES)

    def test_read_only(self):
        """The table cannot be modified."""
        with pytest.raises(TypeError):
            FUZZY_PHRASES["a fortnight"] = timedelta(weeks=2)  # type: ignore[index]
