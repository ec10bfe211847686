"""
Conversions between clock text and minutes since midnight.

All values are expected on a single-day scale (0-1439 minutes). Nothing here
validates that range; malformed input yields malformed output.
"""


def time_to_minutes(time: str) -> int:
    """Parse "HH:MM" or "HH:MM:SS" into minutes since midnight."""
    hours, minutes = time.split(":")[:2]
    return int(hours) * 60 + int(minutes)


def minutes_to_time(minutes: int) -> str:
    """
    Render minutes since midnight as zero-padded "HH:MM".

    Values past the end of the day are not wrapped (1500 -> "25:00").
    """
    hours, mins = divmod(minutes, 60)
    return f"{hours:02d}:{mins:02d}"


def normalize_time(time: str) -> str:
    """Drop seconds precision: "09:00:00" -> "09:00"."""
    return time[:5]
