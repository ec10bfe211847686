"""
slotreflow - Reflow a day's bookable slots around the bookings already placed.
"""

__version__ = "0.1.0"
