"""
Domain layer - Pure business logic without external dependencies.
"""

from .durations import end_time, min_service_duration, total_duration
from .models import Booking, ReflowedSlot, Service, SlotDecision, SlotOutcome, TimeSlot
from .slot_recalculation import PlannableSlot, SlotRecalculationPlan, SlotUpdate, plan_slot_recalculation
from .slot_reflow import SlotReflowEngine, reflow_slots
from .time_arithmetic import minutes_to_time, normalize_time, time_to_minutes

__all__ = [
    "Booking",
    "PlannableSlot",
    "ReflowedSlot",
    "Service",
    "SlotDecision",
    "SlotOutcome",
    "SlotRecalculationPlan",
    "SlotReflowEngine",
    "SlotUpdate",
    "TimeSlot",
    "end_time",
    "min_service_duration",
    "minutes_to_time",
    "normalize_time",
    "plan_slot_recalculation",
    "reflow_slots",
    "time_to_minutes",
    "total_duration",
]
