"""Scheduling engine: manual assignment, auto-fill and stats."""

from slotroster.scheduling.assignment import AssignmentService
from slotroster.scheduling.auto_fill import (
    AutoFillResult,
    AutoFillScheduler,
    Placement,
    RandomSource,
    Shortfall,
)
from slotroster.scheduling.engine import SchedulingEngine
from slotroster.scheduling.stats import (
    RemainingLevel,
    StaffingStatus,
    StatsAggregator,
    WeekStats,
    WorkerStats,
)

__all__ = [
    # Engine
    "SchedulingEngine",
    # Services
    "AssignmentService",
    "AutoFillScheduler",
    "StatsAggregator",
    # Results
    "AutoFillResult",
    "Placement",
    "RandomSource",
    "RemainingLevel",
    "Shortfall",
    "StaffingStatus",
    "WeekStats",
    "WorkerStats",
]
