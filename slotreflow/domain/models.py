"""
Domain models for slots, bookings and reflow results.
"""

from dataclasses import dataclass
from enum import Enum

from .time_arithmetic import normalize_time, time_to_minutes


@dataclass(frozen=True)
class TimeSlot:
    """
    A fixed window on one day during which a service could begin.

    ``is_booked`` is the single source of truth for whether this physical
    slot has been reserved.
    """
    id: str
    start_time: str  # "HH:MM" or "HH:MM:SS"
    end_time: str
    slot_date: str  # YYYY-MM-DD
    is_booked: bool = False

    @property
    def start_minutes(self) -> int:
        return time_to_minutes(self.start_time)

    @property
    def end_minutes(self) -> int:
        return time_to_minutes(self.end_time)

    def __str__(self) -> str:
        return f"{normalize_time(self.start_time)} - {normalize_time(self.end_time)}"


@dataclass(frozen=True)
class Booking:
    """
    A committed booking. Only its time span matters to the reflow engine.
    """
    id: str
    date: str  # YYYY-MM-DD
    start_time: str
    end_time: str
    duration: int  # minutes

    @property
    def start_minutes(self) -> int:
        return time_to_minutes(self.start_time)

    @property
    def end_minutes(self) -> int:
        return time_to_minutes(self.end_time)


@dataclass(frozen=True)
class Service:
    """A bookable service and how long it takes."""
    name: str
    duration: int  # minutes


@dataclass(frozen=True)
class ReflowedSlot:
    """
    A slot as it should be presented after accounting for spillover.
    """
    original_slot: TimeSlot
    display_time: str  # "HH:MM"
    available: bool


class SlotDecision(Enum):
    EXCLUDED = "excluded"
    INCLUDED = "included"


@dataclass(frozen=True)
class SlotOutcome:
    """
    Result of evaluating one slot against the shift cursor.

    Excluded slots are dropped from the output entirely; included slots are
    shown, but may still be unavailable.
    """
    slot: TimeSlot
    decision: SlotDecision
    display_start: int  # minutes since midnight
    remaining: int  # minutes left in the slot after the shift
    available: bool = False

    @property
    def is_included(self) -> bool:
        return self.decision is SlotDecision.INCLUDED
