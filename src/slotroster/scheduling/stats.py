"""Per-worker and per-day totals derived from the schedule.

Stats are a pure projection: nothing is cached, every read recomputes
from the current schedule and registry.
"""

from dataclasses import dataclass, field
from enum import Enum

from slotroster.domain.models import Day, SlotCatalog, WeekSchedule, WorkerRegistry


class RemainingLevel(Enum):
    """How close a worker is to using up their weekly hours."""

    EXHAUSTED = "exhausted"  # Nothing left
    LOW = "low"  # One or two slots left
    OK = "ok"


class StaffingStatus(Enum):
    """Headcount of a cell compared to its target."""

    EMPTY = "empty"  # Nobody assigned, nobody required
    UNDER = "under"
    MET = "met"
    OVER = "over"


LOW_REMAINING_HOURS = 4


@dataclass
class WorkerStats:
    """Weekly totals for one worker.

    Attributes:
        name: Worker name.
        total_hours: Weekly budget.
        remaining_hours: Budget not yet allocated.
        daily_hours: Hours held per day (days with no hours are omitted).
        total_assigned: Hours held across the week.
    """

    name: str
    total_hours: int
    remaining_hours: int
    daily_hours: dict[Day, int] = field(default_factory=dict)
    total_assigned: int = 0

    @property
    def usage_rate(self) -> float:
        """Percentage of the budget in use; 0.0 for a zero budget."""
        if self.total_hours == 0:
            return 0.0
        return (self.total_hours - self.remaining_hours) / self.total_hours * 100.0

    @property
    def remaining_level(self) -> RemainingLevel:
        if self.remaining_hours <= 0:
            return RemainingLevel.EXHAUSTED
        if self.remaining_hours <= LOW_REMAINING_HOURS:
            return RemainingLevel.LOW
        return RemainingLevel.OK


@dataclass
class WeekStats:
    """Aggregate view of the week."""

    workers: list[WorkerStats] = field(default_factory=list)

    @property
    def total_assigned_hours(self) -> int:
        return sum(w.total_assigned for w in self.workers)

    @property
    def day_totals(self) -> dict[Day, int]:
        """Hours scheduled on each day, across all workers."""
        return {
            day: sum(w.daily_hours.get(day, 0) for w in self.workers) for day in Day
        }

    def get(self, name: str) -> WorkerStats:
        for worker_stats in self.workers:
            if worker_stats.name == name:
                return worker_stats
        raise KeyError(name)


class StatsAggregator:
    """Computes WeekStats from a schedule and registry."""

    def compute(self, schedule: WeekSchedule, registry: WorkerRegistry) -> WeekStats:
        snapshot = schedule.snapshot()
        daily = snapshot.daily_hours()

        stats = WeekStats()
        for worker in registry:
            daily_hours = {
                day: daily[day][worker.name] for day in Day if worker.name in daily[day]
            }
            stats.workers.append(
                WorkerStats(
                    name=worker.name,
                    total_hours=worker.total_hours,
                    remaining_hours=worker.remaining_hours,
                    daily_hours=daily_hours,
                    total_assigned=sum(daily_hours.values()),
                )
            )
        return stats

    def staffing_status(
        self,
        schedule: WeekSchedule,
        catalog: SlotCatalog,
        day: Day,
        slot_id: int,
    ) -> StaffingStatus:
        count = len(schedule.assigned(day, slot_id))
        required = catalog.get_required_staff(slot_id)
        if count < required:
            return StaffingStatus.UNDER
        if count > required:
            return StaffingStatus.OVER
        if count == 0:
            return StaffingStatus.EMPTY
        return StaffingStatus.MET
