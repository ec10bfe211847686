"""
Adapters layer - External schedule sources.
"""

from .json_schedule_source import JsonScheduleSource

__all__ = ["JsonScheduleSource"]
