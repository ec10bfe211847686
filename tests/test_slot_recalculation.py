"""
Tests for the post-booking slot recalculation planner.
"""

from slotreflow.domain.slot_recalculation import PlannableSlot, SlotUpdate, plan_slot_recalculation

DAY = "2024-11-25"


def _slot(slot_id: str, start: str, end: str, **kwargs) -> PlannableSlot:
    return PlannableSlot(id=slot_id, slot_date=kwargs.pop("slot_date", DAY), start_time=start, end_time=end, **kwargs)


class TestPlanSlotRecalculation:
    """Tests for plan_slot_recalculation."""

    def test_deletes_overlapped_and_gap_slots_and_moves_next(self):
        """Test the delete/move plan after a booking runs past its slot."""
        selected = _slot("s1", "09:00:00", "09:30:00")
        day_slots = [
            selected,
            _slot("s2", "09:30:00", "10:00:00"),
            _slot("s3", "10:00:00", "10:30:00"),
            _slot("s4", "10:30:00", "11:00:00"),
        ]

        plan = plan_slot_recalculation(selected, 45, 30, day_slots)

        # Booking ends 09:45: s2 starts before it, s3 leaves a 15 min gap
        assert plan.slots_to_delete == ["s2", "s3"]
        assert plan.slots_to_update == [
            SlotUpdate(id="s4", new_start_time="09:45:00", new_end_time="10:15:00")
        ]

    def test_aligned_slots_are_kept(self):
        selected = _slot("s1", "09:00", "09:30")
        day_slots = [
            selected,
            _slot("s2", "09:30", "10:00"),
            _slot("s3", "10:00", "10:30"),
        ]

        plan = plan_slot_recalculation(selected, 30, 30, day_slots)

        assert plan.slots_to_delete == []
        assert plan.slots_to_update == []

    def test_successive_moves_chain(self):
        """Each moved slot starts where the previous moved slot ends."""
        selected = _slot("s1", "09:00", "09:30")
        day_slots = [
            _slot("s3", "11:00", "11:30"),
            _slot("s2", "10:00", "10:30"),
        ]

        plan = plan_slot_recalculation(selected, 40, 15, day_slots)

        assert plan.slots_to_delete == []
        assert plan.slots_to_update == [
            SlotUpdate(id="s2", new_start_time="09:40:00", new_end_time="10:10:00"),
            SlotUpdate(id="s3", new_start_time="10:10:00", new_end_time="10:40:00"),
        ]

    def test_ignores_other_days_and_unavailable_slots(self):
        selected = _slot("s1", "09:00", "09:30")
        day_slots = [
            _slot("other-day", "09:30", "10:00", slot_date="2024-11-26"),
            _slot("booked", "09:30", "10:00", status="booked"),
            _slot("hidden", "09:30", "10:00", is_available=False),
        ]

        plan = plan_slot_recalculation(selected, 60, 30, day_slots)

        assert plan.slots_to_delete == []
        assert plan.slots_to_update == []

    def test_short_gap_before_next_slot_deletes_it(self):
        """A 20 min gap fits no 30 min service, so the slot behind it goes."""
        selected = _slot("s1", "09:00", "09:30")
        day_slots = [
            _slot("s3", "11:00", "11:30"),
            _slot("s2", "10:00", "10:30"),
        ]

        plan = plan_slot_recalculation(selected, 40, 30, day_slots)

        assert plan.slots_to_delete == ["s2"]
        assert plan.slots_to_update == [
            SlotUpdate(id="s3", new_start_time="09:40:00", new_end_time="10:10:00")
        ]
