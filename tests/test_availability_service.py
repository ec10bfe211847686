"""
Tests for the AvailabilityService orchestration layer.
"""

import asyncio
from typing import List, Tuple

from slotreflow.domain.exceptions import ScheduleSourceError
from slotreflow.domain.models import Booking, Service, TimeSlot
from slotreflow.services.availability import AvailabilityService

DAY = "2024-11-25"


class StubScheduleSource:
    """Minimal stub matching ScheduleSourceProtocol."""

    def __init__(self, slots: List[TimeSlot], bookings: List[Booking]):
        self._slots = slots
        self._bookings = bookings
        self.calls: List[str] = []

    async def get_day(self, day: str) -> Tuple[List[TimeSlot], List[Booking]]:
        self.calls.append(day)
        return self._slots, self._bookings


class FailingScheduleSource:
    async def get_day(self, day: str):
        raise ScheduleSourceError("storage unavailable")


def _slots() -> List[TimeSlot]:
    return [
        TimeSlot(id="s1", start_time="09:00:00", end_time="09:30:00", slot_date=DAY, is_booked=True),
        TimeSlot(id="s2", start_time="09:30:00", end_time="10:00:00", slot_date=DAY),
        TimeSlot(id="s3", start_time="10:00:00", end_time="10:30:00", slot_date=DAY),
        TimeSlot(id="other", start_time="09:00:00", end_time="09:30:00", slot_date="2024-11-26"),
    ]


def _bookings() -> List[Booking]:
    return [
        Booking(id="b1", date=DAY, start_time="09:00:00", end_time="09:45:00", duration=45),
        Booking(id="other", date="2024-11-26", start_time="09:00:00", end_time="12:00:00", duration=180),
    ]


def test_day_availability_uses_shortest_service():
    """The minimum service duration is derived from the selected services."""
    source = StubScheduleSource(_slots(), _bookings())
    service = AvailabilityService(schedule_source=source)

    result = asyncio.run(
        service.day_availability(
            DAY,
            [Service(name="Haarschnitt", duration=30), Service(name="Bart", duration=15)],
        )
    )

    assert source.calls == [DAY]
    # s2 keeps 15 minutes after the 09:45 spillover, enough for a 15 min service
    assert [(r.original_slot.id, r.display_time, r.available) for r in result] == [
        ("s2", "09:45", True),
        ("s3", "10:00", True),
    ]


def test_day_availability_defaults_to_30_minutes():
    service = AvailabilityService(schedule_source=StubScheduleSource(_slots(), _bookings()))

    result = asyncio.run(service.day_availability(DAY))

    assert [r.original_slot.id for r in result] == ["s3"]


def test_min_duration_override():
    service = AvailabilityService(schedule_source=StubScheduleSource(_slots(), _bookings()))

    result = asyncio.run(
        service.day_availability(DAY, [Service(name="Färben", duration=90)], min_duration=10)
    )

    assert [r.original_slot.id for r in result] == ["s2", "s3"]


def test_fetch_day_drops_other_days():
    """Entries for other days must not leak into the reflow."""
    service = AvailabilityService(schedule_source=StubScheduleSource(_slots(), _bookings()))

    slots, bookings = asyncio.run(service.fetch_day(DAY))

    assert [s.id for s in slots] == ["s1", "s2", "s3"]
    assert [b.id for b in bookings] == ["b1"]


def test_source_failure_yields_empty_day(caplog):
    service = AvailabilityService(schedule_source=FailingScheduleSource())

    with caplog.at_level("WARNING"):
        result = asyncio.run(service.day_availability(DAY))

    assert result == []
    assert "storage unavailable" in caplog.text
