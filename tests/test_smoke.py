"""Smoke tests to verify basic functionality."""

import pytest

from slotroster.domain.errors import PatternViolationError, UnknownWorkerError
from slotroster.domain.models import Day
from slotroster.scheduling.engine import SchedulingEngine
from slotroster.scheduling.stats import StaffingStatus


class TestSmoke:
    """End-to-end smoke tests for the roster engine."""

    def test_imports(self):
        """Verify all modules can be imported."""
        from slotroster import __version__
        from slotroster.domain import Day, SlotCatalog, WorkerRegistry
        from slotroster.output import PDFGenerator, TextReportGenerator
        from slotroster.scheduling import AutoFillScheduler, SchedulingEngine
        from slotroster.validation import ConstraintValidator

        assert __version__

    def test_default_engine(self):
        """The default engine starts from an empty week and the seed roster."""
        engine = SchedulingEngine.create_default()

        assert len(engine.list_slots()) == 7
        assert len(engine.list_workers()) == 11
        assert engine.get_contiguity_mode() is True
        assert list(engine.worker_tiers().keys()) == [28, 14, 8]
        for day in Day:
            for slot in engine.list_slots():
                assert engine.assigned(day, slot.id) == []

    def test_manual_workflow(self):
        """Assign, reject, remove and reset through the engine."""
        engine = SchedulingEngine.create_default()

        engine.assign("Eunseo", Day.MONDAY, 1)
        engine.assign("Eunseo", Day.MONDAY, 2)
        engine.assign("Eunseo", Day.MONDAY, 4)
        assert engine.get_stats().get("Eunseo").daily_hours == {Day.MONDAY: 6}

        with pytest.raises(UnknownWorkerError):
            engine.assign("Nobody", Day.MONDAY, 5)

        assert engine.remove("Eunseo", Day.MONDAY, 4) is True
        with pytest.raises(PatternViolationError):
            engine.assign("Eunseo", Day.MONDAY, 3)

        assert engine.reset_day(Day.MONDAY) == 2
        assert engine.list_workers()[2].remaining_hours == 28

    def test_contiguity_toggle_does_not_revalidate(self):
        """Switching the rule on keeps earlier split placements in place."""
        engine = SchedulingEngine.create_default(contiguity_mode=False)
        engine.assign("Suhee", Day.TUESDAY, 1)
        engine.assign("Suhee", Day.TUESDAY, 3)

        engine.set_contiguity_mode(True)

        assert engine.assigned(Day.TUESDAY, 3) == ["Suhee"]
        audit = engine.audit()
        assert not audit.is_valid
        assert audit.violations[0].worker_name == "Suhee"

    def test_full_week(self):
        """Auto-fill the seed roster and check the result end to end."""
        engine = SchedulingEngine.create_default(seed=2024)
        result = engine.auto_fill()

        assert result.added_count > 0
        assert engine.audit().is_valid

        stats = engine.get_stats()
        assert stats.total_assigned_hours == result.added_count * 2
        for shortfall in result.shortfalls:
            assert engine.staffing_status(shortfall.day, shortfall.slot_id) == (
                StaffingStatus.UNDER
            )

        engine.reset_all()
        assert engine.get_stats().total_assigned_hours == 0
        assert engine.get_required_staff(2) == 3

    def test_capacity_edit_changes_tiers(self):
        engine = SchedulingEngine.create_default()
        engine.set_capacity("Jaesun", 14)
        tiers = engine.worker_tiers()
        assert [w.name for w in tiers[14]] == ["Junhyuk", "Jaesun"]

    def test_listed_workers_are_copies(self):
        """Writing to a listed worker does not touch the engine's balances."""
        engine = SchedulingEngine.create_default()
        listed = engine.list_workers()[0]
        listed.remaining_hours = 999

        assert engine.list_workers()[0].remaining_hours == 28
        assert engine.worker_tiers()[28][0] is not engine.registry.get("Sukyung")
        assert engine.audit().is_valid

    def test_worker_held_across_auto_fill_and_reset(self):
        """Registry workers stay the live objects through auto-fill and resets."""
        engine = SchedulingEngine.create_default(seed=8)
        held = engine.registry.get("Sukyung")

        engine.auto_fill()
        assert engine.registry.get("Sukyung") is held
        assert held.remaining_hours == engine.list_workers()[0].remaining_hours
        assert held.remaining_hours == 28 - engine.schedule.assigned_hours("Sukyung")

        engine.reset_all()
        engine.assign("Sukyung", Day.MONDAY, 1)
        assert engine.registry.get("Sukyung") is held
        assert held.remaining_hours == 26
        assert engine.list_workers()[0].remaining_hours == 26
