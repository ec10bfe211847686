"""
Tests for clock/minute conversions.
"""

from slotreflow.domain.time_arithmetic import minutes_to_time, normalize_time, time_to_minutes


class TestTimeToMinutes:
    """Tests for time_to_minutes."""

    def test_hour_minute(self):
        """Test parsing HH:MM."""
        assert time_to_minutes("00:00") == 0
        assert time_to_minutes("09:30") == 570
        assert time_to_minutes("23:59") == 1439

    def test_seconds_are_ignored(self):
        """Test that seconds precision does not change the result."""
        assert time_to_minutes("09:30:00") == 570
        assert time_to_minutes("09:30:59") == 570


class TestMinutesToTime:
    """Tests for minutes_to_time."""

    def test_zero_padding(self):
        assert minutes_to_time(0) == "00:00"
        assert minutes_to_time(65) == "01:05"
        assert minutes_to_time(1439) == "23:59"

    def test_no_wraparound_past_midnight(self):
        """Values past the end of the day are rendered as-is."""
        assert minutes_to_time(1500) == "25:00"


class TestNormalizeTime:
    """Tests for normalize_time."""

    def test_drops_seconds(self):
        assert normalize_time("09:00:00") == "09:00"

    def test_keeps_hour_minute(self):
        assert normalize_time("17:45") == "17:45"
