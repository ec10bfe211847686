"""
Schedule source backed by a JSON file of slots and bookings.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple

from ..domain.exceptions import ScheduleSourceError
from ..domain.models import Booking, TimeSlot

logger = logging.getLogger(__name__)


class JsonScheduleSource:
    """
    Loads one provider's slots and bookings from a JSON document.

    Expected layout::

        {
          "slots": [{"id", "start_time", "end_time", "slot_date", "is_booked"}],
          "bookings": [{"id", "date", "start_time", "end_time", "duration"}]
        }

    A missing file is treated as an empty schedule.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    async def get_day(self, day: str) -> Tuple[List[TimeSlot], List[Booking]]:
        """
        Return the slots and bookings stored for ``day`` (YYYY-MM-DD).

        Raises:
            ScheduleSourceError: If the file cannot be read or parsed
        """
        data = self._load()

        try:
            slots = [
                self._parse_slot(raw) for raw in data.get("slots", [])
                if raw.get("slot_date") == day
            ]
            bookings = [
                self._parse_booking(raw) for raw in data.get("bookings", [])
                if raw.get("date") == day
            ]
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise ScheduleSourceError(f"Invalid schedule entry in {self.path}: {exc}") from exc

        logger.debug(
            "Loaded %d slots and %d bookings for %s from %s",
            len(slots), len(bookings), day, self.path
        )
        return slots, bookings

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            logger.info("Schedule file %s not found, using an empty schedule", self.path)
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise ScheduleSourceError(f"Could not read schedule file {self.path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ScheduleSourceError("Schedule file must contain a mapping at the root level.")

        return data

    @staticmethod
    def _parse_slot(raw: Dict[str, Any]) -> TimeSlot:
        is_booked = raw.get("is_booked", False)
        if not isinstance(is_booked, bool):
            raise ScheduleSourceError(
                f"Slot {raw.get('id')!r} has a non-boolean is_booked value: {is_booked!r}"
            )

        return TimeSlot(
            id=str(raw["id"]),
            start_time=str(raw["start_time"]),
            end_time=str(raw["end_time"]),
            slot_date=str(raw["slot_date"]),
            is_booked=is_booked,
        )

    @staticmethod
    def _parse_booking(raw: Dict[str, Any]) -> Booking:
        return Booking(
            id=str(raw["id"]),
            date=str(raw["date"]),
            start_time=str(raw["start_time"]),
            end_time=str(raw["end_time"]),
            duration=int(raw["duration"]),
        )
