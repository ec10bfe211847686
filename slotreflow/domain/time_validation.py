"""
Helpers for deciding whether a slot already lies in the past.

These are the only functions in the domain layer that may read the clock,
and only when no ``now`` is passed in.
"""

from typing import Optional

import pendulum
from pendulum import DateTime

DEFAULT_TIMEZONE = "Europe/Berlin"
DEFAULT_PAST_BUFFER_MINUTES = 5


def _resolve_now(now: Optional[DateTime], tz: str) -> DateTime:
    return now if now is not None else pendulum.now(tz)


def is_slot_in_past(
    date: str,
    time_slot: Optional[str],
    now: Optional[DateTime] = None,
    buffer_minutes: int = DEFAULT_PAST_BUFFER_MINUTES,
    tz: str = DEFAULT_TIMEZONE
) -> bool:
    """
    Check whether a slot on ``date`` has started (or is about to).

    Args:
        date: Day of the slot (YYYY-MM-DD)
        time_slot: "HH:MM" or "HH:MM-HH:MM"; empty means "no slot chosen"
        now: Reference instant, defaults to the current time in ``tz``
        buffer_minutes: Slots starting within this many minutes count as past
        tz: IANA timezone used when ``now`` is not given

    Returns:
        True if the slot start is before now + buffer
    """
    if not time_slot:
        return False

    current = _resolve_now(now, tz)
    slot_day = pendulum.from_format(date, "YYYY-MM-DD", tz=current.tz)
    today = current.start_of("day")

    if slot_day.date() > today.date():
        return False
    if slot_day.date() < today.date():
        return True

    start = time_slot.split("-")[0].strip()
    hours, minutes = start.split(":")[:2]
    slot_start = slot_day.set(hour=int(hours), minute=int(minutes), second=0, microsecond=0)

    return slot_start < current.add(minutes=buffer_minutes)


def current_time(now: Optional[DateTime] = None, tz: str = DEFAULT_TIMEZONE) -> str:
    """Current wall-clock time as "HH:MM"."""
    return _resolve_now(now, tz).format("HH:mm")


def today_date(now: Optional[DateTime] = None, tz: str = DEFAULT_TIMEZONE) -> str:
    """Today's date as "YYYY-MM-DD"."""
    return _resolve_now(now, tz).format("YYYY-MM-DD")


def is_today(date: str, now: Optional[DateTime] = None, tz: str = DEFAULT_TIMEZONE) -> bool:
    return date == today_date(now, tz)
