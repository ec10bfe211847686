"""
Duration helpers for a selected set of services.
"""

from typing import Iterable, Optional, Protocol

from .time_arithmetic import minutes_to_time, time_to_minutes

DEFAULT_MIN_SERVICE_DURATION = 30


class HasDuration(Protocol):
    duration: int


def min_service_duration(services: Optional[Iterable[HasDuration]]) -> int:
    """
    Shortest duration among the services, used to parameterize the reflow.

    Falls back to ``DEFAULT_MIN_SERVICE_DURATION`` when nothing is selected.
    """
    durations = [service.duration for service in services or []]
    if not durations:
        return DEFAULT_MIN_SERVICE_DURATION
    return min(durations)


def total_duration(services: Iterable[HasDuration]) -> int:
    """Sum of all service durations (0 for no services)."""
    return sum(service.duration for service in services)


def end_time(start_time: str, duration_minutes: int) -> str:
    """
    Add a duration to a clock time.

    No wraparound past midnight: end_time("23:30", 60) -> "24:30".
    """
    return minutes_to_time(time_to_minutes(start_time) + duration_minutes)
