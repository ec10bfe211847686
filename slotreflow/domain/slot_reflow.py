"""
Core business logic for reflowing a day's slots around its bookings.

Pure domain logic: no I/O, no clock access, inputs are never mutated.
"""

import logging
from typing import List, Sequence

from .models import Booking, ReflowedSlot, SlotDecision, SlotOutcome, TimeSlot
from .time_arithmetic import minutes_to_time, normalize_time

logger = logging.getLogger(__name__)


class SlotReflowEngine:
    """
    Derives display times and availability for one day's slots.

    Algorithm (sweep line over two sorted streams):
    1. Sort slots and bookings by start time
    2. Keep a ``shift`` cursor: the earliest instant any slot may begin
    3. Before each slot, consume every booking starting at or before the
       slot's start and fold its end time into ``shift`` with ``max``
    4. Shift the slot's start to ``max(start, shift)`` and measure what is left
    5. Keep slots with at least ``min_service_duration`` minutes left;
       booked slots are kept but marked unavailable

    The booking cursor only moves forward, so the pass is
    O(slots + bookings) after sorting. Bookings starting after the last
    slot's start are never consumed and so never move the cursor.

    ``min_service_duration`` is expected to be positive. Values of zero or
    less are not rejected; they only lower the retention threshold.
    """

    def reflow(
        self,
        slots: Sequence[TimeSlot],
        bookings: Sequence[Booking],
        min_service_duration: int
    ) -> List[ReflowedSlot]:
        """
        Reflow slots around bookings.

        Args:
            slots: All slots for the day, booked or not, in any order
            bookings: All bookings for the same day, in any order
            min_service_duration: Shortest service that must fit, in minutes

        Returns:
            Retained slots in chronological order with display time and
            availability
        """
        return [
            ReflowedSlot(
                original_slot=outcome.slot,
                display_time=minutes_to_time(outcome.display_start),
                available=outcome.available,
            )
            for outcome in self.evaluate(slots, bookings, min_service_duration)
            if outcome.is_included
        ]

    def evaluate(
        self,
        slots: Sequence[TimeSlot],
        bookings: Sequence[Booking],
        min_service_duration: int
    ) -> List[SlotOutcome]:
        """
        Evaluate every slot, including the ones that would be dropped.

        Returns one ``SlotOutcome`` per input slot in chronological order.
        """
        sorted_slots = sorted(slots, key=lambda s: s.start_minutes)
        sorted_bookings = sorted(bookings, key=lambda b: b.start_minutes)

        logger.debug(
            "Reflowing %d slots against %d bookings (min service duration %d min)",
            len(sorted_slots), len(sorted_bookings), min_service_duration
        )

        outcomes: List[SlotOutcome] = []
        shift = 0
        booking_index = 0

        for slot in sorted_slots:
            slot_start = slot.start_minutes

            while (
                booking_index < len(sorted_bookings)
                and sorted_bookings[booking_index].start_minutes <= slot_start
            ):
                booking = sorted_bookings[booking_index]
                shift = max(shift, booking.end_minutes)
                logger.debug(
                    "Booking %s ends at %s, shift now %s",
                    booking.id, normalize_time(booking.end_time), minutes_to_time(shift)
                )
                booking_index += 1

            outcome = self._evaluate_slot(slot, shift, min_service_duration)
            logger.debug(
                "Slot %s -> display %s, %d min remaining, %s",
                slot, minutes_to_time(outcome.display_start), outcome.remaining,
                "available" if outcome.available else outcome.decision.value
            )
            outcomes.append(outcome)

        if booking_index < len(sorted_bookings):
            logger.debug(
                "%d booking(s) start after the last slot and were not applied",
                len(sorted_bookings) - booking_index
            )

        return outcomes

    @staticmethod
    def _evaluate_slot(
        slot: TimeSlot,
        shift: int,
        min_service_duration: int
    ) -> SlotOutcome:
        display_start = max(slot.start_minutes, shift)
        remaining = slot.end_minutes - display_start

        if remaining < min_service_duration:
            return SlotOutcome(
                slot=slot,
                decision=SlotDecision.EXCLUDED,
                display_start=display_start,
                remaining=remaining,
            )

        return SlotOutcome(
            slot=slot,
            decision=SlotDecision.INCLUDED,
            display_start=display_start,
            remaining=remaining,
            available=not slot.is_booked,
        )


def reflow_slots(
    slots: Sequence[TimeSlot],
    bookings: Sequence[Booking],
    min_service_duration: int
) -> List[ReflowedSlot]:
    """Convenience wrapper around ``SlotReflowEngine().reflow``."""
    return SlotReflowEngine().reflow(slots, bookings, min_service_duration)
