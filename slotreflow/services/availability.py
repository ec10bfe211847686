"""
Application service for a day's slot availability.

The service fetches slots and bookings via a schedule source and delegates
the reflow to the domain-level ``SlotReflowEngine``. Source failures never
reach the engine: they are logged and replaced by an empty day.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Protocol, Tuple

from ..domain.durations import HasDuration, min_service_duration
from ..domain.exceptions import ScheduleSourceError
from ..domain.models import Booking, ReflowedSlot, TimeSlot
from ..domain.slot_reflow import SlotReflowEngine

logger = logging.getLogger(__name__)


class ScheduleSourceProtocol(Protocol):
    """Protocol describing the schedule source behaviour needed by the service."""

    async def get_day(self, day: str) -> Tuple[List[TimeSlot], List[Booking]]:
        """Return slots and bookings for one day."""


class AvailabilityService:
    """
    Orchestrates schedule retrieval and slot reflow.
    """

    def __init__(
        self,
        schedule_source: ScheduleSourceProtocol,
        engine: Optional[SlotReflowEngine] = None,
    ) -> None:
        self._schedule_source = schedule_source
        self._engine = engine or SlotReflowEngine()

    async def day_availability(
        self,
        day: str,
        services: Optional[Iterable[HasDuration]] = None,
        *,
        min_duration: Optional[int] = None,
    ) -> List[ReflowedSlot]:
        """
        Reflow the slots of ``day``.

        ``min_duration`` overrides the value derived from ``services``.
        """
        slots, bookings = await self.fetch_day(day)
        threshold = min_duration if min_duration is not None else min_service_duration(services)
        return self._engine.reflow(slots, bookings, threshold)

    async def fetch_day(self, day: str) -> Tuple[List[TimeSlot], List[Booking]]:
        """
        Fetch slots and bookings for ``day``, keeping only entries of that day.

        Falls back to an empty day when the source fails.
        """
        try:
            slots, bookings = await self._schedule_source.get_day(day)
        except ScheduleSourceError as exc:
            logger.warning("Could not load schedule for %s: %s", day, exc)
            return [], []

        return self._same_day(day, slots, bookings)

    @staticmethod
    def _same_day(
        day: str,
        slots: Iterable[TimeSlot],
        bookings: Iterable[Booking],
    ) -> Tuple[List[TimeSlot], List[Booking]]:
        """
        Drop entries belonging to other days.

        The engine works on a single clock scale, so mixing days would
        produce meaningless shifts.
        """
        slot_list = list(slots)
        booking_list = list(bookings)
        day_slots = [slot for slot in slot_list if slot.slot_date == day]
        day_bookings = [booking for booking in booking_list if booking.date == day]

        dropped = len(slot_list) - len(day_slots) + len(booking_list) - len(day_bookings)
        if dropped:
            logger.debug("Ignored %d entries not dated %s", dropped, day)

        return day_slots, day_bookings
