"""
Domain-specific exception hierarchy for the slot reflow application.
"""


class SlotReflowError(Exception):
    """Base class for all application-level errors."""


class ScheduleSourceError(SlotReflowError):
    """Raised when schedule data cannot be read or parsed."""


class ConfigurationError(SlotReflowError, ValueError):
    """Raised when the configuration file is unusable."""
