"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .availability import AvailabilityService, ScheduleSourceProtocol

__all__ = ["AvailabilityService", "ScheduleSourceProtocol"]
