"""Tests for stats and staffing status."""

import pytest

from slotroster.domain.models import Day, SlotCatalog, WeekSchedule, WorkerRegistry
from slotroster.scheduling.stats import (
    RemainingLevel,
    StaffingStatus,
    StatsAggregator,
    WorkerStats,
)


@pytest.fixture
def aggregator():
    return StatsAggregator()


class TestWorkerStats:
    """Tests for WorkerStats properties."""

    def test_usage_rate(self):
        stats = WorkerStats(name="Ann", total_hours=8, remaining_hours=2)
        assert stats.usage_rate == pytest.approx(75.0)

    def test_usage_rate_zero_budget(self):
        stats = WorkerStats(name="Ann", total_hours=0, remaining_hours=0)
        assert stats.usage_rate == 0.0

    @pytest.mark.parametrize(
        "remaining,level",
        [
            (0, RemainingLevel.EXHAUSTED),
            (2, RemainingLevel.LOW),
            (4, RemainingLevel.LOW),
            (6, RemainingLevel.OK),
        ],
    )
    def test_remaining_level(self, remaining, level):
        stats = WorkerStats(name="Ann", total_hours=28, remaining_hours=remaining)
        assert stats.remaining_level == level


class TestStatsAggregator:
    """Tests for StatsAggregator.compute."""

    def test_compute(self, aggregator):
        registry = WorkerRegistry([("Ann", 28), ("Ben", 8)])
        schedule = WeekSchedule(range(1, 8))
        schedule.add(Day.MONDAY, 1, "Ann")
        schedule.add(Day.MONDAY, 2, "Ann")
        schedule.add(Day.SATURDAY, 5, "Ann")
        schedule.add(Day.MONDAY, 1, "Ben")
        registry.get("Ann").remaining_hours = 22
        registry.get("Ben").remaining_hours = 6

        stats = aggregator.compute(schedule, registry)

        ann = stats.get("Ann")
        assert ann.daily_hours == {Day.MONDAY: 4, Day.SATURDAY: 2}
        assert ann.total_assigned == 6
        assert ann.remaining_hours == 22
        assert stats.get("Ben").total_assigned == 2
        assert stats.total_assigned_hours == 8
        assert stats.day_totals[Day.MONDAY] == 6
        assert stats.day_totals[Day.SATURDAY] == 2
        assert stats.day_totals[Day.FRIDAY] == 0

    def test_workers_in_registry_order(self, aggregator):
        registry = WorkerRegistry.create_default()
        stats = aggregator.compute(WeekSchedule(range(1, 8)), registry)
        assert [w.name for w in stats.workers] == [
            w.name for w in registry.list_workers()
        ]

    def test_unknown_name(self, aggregator):
        registry = WorkerRegistry([("Ann", 28)])
        stats = aggregator.compute(WeekSchedule(range(1, 8)), registry)
        with pytest.raises(KeyError):
            stats.get("Zed")


class TestStaffingStatus:
    """Tests for StatsAggregator.staffing_status."""

    @pytest.fixture
    def catalog(self):
        catalog = SlotCatalog.create_default()
        catalog.set_required_staff(1, 2)
        catalog.set_required_staff(2, 0)
        return catalog

    def test_statuses(self, aggregator, catalog):
        schedule = WeekSchedule.for_catalog(catalog)
        assert aggregator.staffing_status(schedule, catalog, Day.MONDAY, 1) == (
            StaffingStatus.UNDER
        )
        assert aggregator.staffing_status(schedule, catalog, Day.MONDAY, 2) == (
            StaffingStatus.EMPTY
        )

        schedule.add(Day.MONDAY, 1, "Ann")
        schedule.add(Day.MONDAY, 1, "Ben")
        schedule.add(Day.MONDAY, 2, "Ann")
        assert aggregator.staffing_status(schedule, catalog, Day.MONDAY, 1) == (
            StaffingStatus.MET
        )
        assert aggregator.staffing_status(schedule, catalog, Day.MONDAY, 2) == (
            StaffingStatus.OVER
        )
