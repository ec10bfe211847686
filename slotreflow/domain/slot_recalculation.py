"""
Plans how a day's remaining open slots change once one of them is booked.

Rules:
1. Booking a service reserves only the selected slot
2. The booking ends at selected start + total service duration
3. Open slots starting before that end are deleted
4. The next open slot is moved to start exactly where the previous one ended
5. Slots behind a gap shorter than the minimum service duration are deleted
"""

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from .time_arithmetic import minutes_to_time, time_to_minutes

logger = logging.getLogger(__name__)

AVAILABLE_STATUS = "available"


@dataclass(frozen=True)
class PlannableSlot:
    """A stored slot as seen by the recalculation planner."""
    id: str
    slot_date: str
    start_time: str
    end_time: str
    status: str = AVAILABLE_STATUS
    is_available: bool = True


@dataclass(frozen=True)
class SlotUpdate:
    id: str
    new_start_time: str  # "HH:MM:SS"
    new_end_time: str


@dataclass
class SlotRecalculationPlan:
    slots_to_delete: List[str] = field(default_factory=list)
    slots_to_update: List[SlotUpdate] = field(default_factory=list)


def _minutes_to_clock(minutes: int) -> str:
    return f"{minutes_to_time(minutes)}:00"


def plan_slot_recalculation(
    selected_slot: PlannableSlot,
    service_duration: int,
    min_service_duration: int,
    day_slots: Sequence[PlannableSlot]
) -> SlotRecalculationPlan:
    """
    Work out which open slots to delete or move after booking ``selected_slot``.

    Args:
        selected_slot: The slot being booked
        service_duration: Total duration of the booked services, in minutes
        min_service_duration: Shortest service offered, in minutes
        day_slots: All stored slots for the provider on that day

    Returns:
        SlotRecalculationPlan with slot ids to delete and slots to move
    """
    booking_end = time_to_minutes(selected_slot.start_time) + service_duration

    candidates = sorted(
        (
            slot for slot in day_slots
            if slot.slot_date == selected_slot.slot_date
            and slot.id != selected_slot.id
            and slot.status == AVAILABLE_STATUS
            and slot.is_available is True
        ),
        key=lambda s: time_to_minutes(s.start_time)
    )

    logger.debug(
        "Recalculating %d open slots after booking %s until %s",
        len(candidates), selected_slot.id, _minutes_to_clock(booking_end)
    )

    plan = SlotRecalculationPlan()
    next_expected = booking_end

    for slot in candidates:
        slot_start = time_to_minutes(slot.start_time)
        slot_end = time_to_minutes(slot.end_time)
        slot_length = slot_end - slot_start

        if slot_start < booking_end:
            logger.debug("Delete %s: starts before the booking ends", slot.id)
            plan.slots_to_delete.append(slot.id)
            continue

        gap = slot_start - next_expected
        if 0 < gap < min_service_duration:
            logger.debug("Delete %s: %d min gap fits no service", slot.id, gap)
            plan.slots_to_delete.append(slot.id)
            continue

        if slot_start != next_expected:
            update = SlotUpdate(
                id=slot.id,
                new_start_time=_minutes_to_clock(next_expected),
                new_end_time=_minutes_to_clock(next_expected + slot_length),
            )
            logger.debug(
                "Move %s to %s - %s", slot.id, update.new_start_time, update.new_end_time
            )
            plan.slots_to_update.append(update)
            next_expected += slot_length
        else:
            next_expected = slot_end

    logger.debug(
        "Recalculation result: %d to delete, %d to update",
        len(plan.slots_to_delete), len(plan.slots_to_update)
    )
    return plan
