"""Main engine interface.

This module provides the SchedulingEngine class that owns the week's state
(catalog, worker registry, schedule, settings) and exposes every operation
a front end needs: manual placement, auto-fill, resets, capacity and
staffing edits, stats and audits.
"""

import logging
from dataclasses import replace
from typing import Optional, Union

from slotroster.domain.models import (
    Day,
    ScheduleSettings,
    SlotCatalog,
    TimeSlot,
    WeekSchedule,
    Worker,
    WorkerRegistry,
)
from slotroster.domain.policies import (
    AutoFillConfig,
    DefaultStaffingPolicy,
    StaffingPolicy,
)
from slotroster.scheduling.assignment import AssignmentService
from slotroster.scheduling.auto_fill import AutoFillResult, AutoFillScheduler, RandomSource
from slotroster.scheduling.stats import StaffingStatus, StatsAggregator, WeekStats
from slotroster.validation.validator import AuditResult, ConstraintValidator

logger = logging.getLogger(__name__)


class SchedulingEngine:
    """High-level engine for building a weekly slot roster.

    The engine is constructed once per session and is the sole owner of the
    schedule and worker balances; everything else reads them through it.

    Example:
        >>> engine = SchedulingEngine.create_default(seed=7)
        >>> engine.assign("Sukyung", Day.MONDAY, 1)
        >>> result = engine.auto_fill()
        >>> stats = engine.get_stats()
    """

    def __init__(
        self,
        catalog: SlotCatalog,
        registry: WorkerRegistry,
        policy: Optional[StaffingPolicy] = None,
        auto_fill_config: Optional[AutoFillConfig] = None,
        rng: Optional[RandomSource] = None,
        settings: Optional[ScheduleSettings] = None,
    ):
        """Initialize the engine with an empty week.

        Args:
            catalog: Slots and staffing targets.
            registry: Workers and their budgets.
            policy: Staffing rules (slot length, weekday cap, pattern).
            auto_fill_config: Scorer settings for auto-fill.
            rng: Random source for auto-fill; overrides the config seed.
            settings: Session toggles (contiguity mode).
        """
        self.policy = policy or DefaultStaffingPolicy()
        self.catalog = catalog
        self.registry = registry
        self.settings = settings or ScheduleSettings()
        self.schedule = WeekSchedule.for_catalog(catalog, slot_hours=self.policy.slot_hours())

        self.validator = ConstraintValidator(policy=self.policy)
        self.assignments = AssignmentService(
            catalog=self.catalog,
            registry=self.registry,
            schedule=self.schedule,
            settings=self.settings,
            validator=self.validator,
        )
        self.auto_filler = AutoFillScheduler(
            validator=self.validator,
            config=auto_fill_config,
            rng=rng,
        )
        self.stats_aggregator = StatsAggregator()

    @classmethod
    def create_default(
        cls,
        seed: Optional[int] = None,
        contiguity_mode: bool = True,
    ) -> "SchedulingEngine":
        """Engine over the standard catalog and seed roster."""
        return cls(
            catalog=SlotCatalog.create_default(),
            registry=WorkerRegistry.create_default(),
            auto_fill_config=AutoFillConfig(seed=seed),
            settings=ScheduleSettings(contiguity_mode=contiguity_mode),
        )

    # Catalog

    def list_slots(self) -> list[TimeSlot]:
        return list(self.catalog.slots)

    def get_required_staff(self, slot_id: int) -> int:
        return self.catalog.get_required_staff(slot_id)

    def set_required_staff(self, slot_id: int, count: int) -> None:
        self.assignments.set_required_staff(slot_id, count)

    # Workers

    def list_workers(self) -> list[Worker]:
        """Copies of every worker, in registry order.

        Balances change only through the engine; re-read after any operation.
        """
        return [replace(worker) for worker in self.registry]

    def worker_tiers(self) -> dict[int, list[Worker]]:
        """Copies of the workers grouped by weekly budget, highest first."""
        return {
            hours: [replace(worker) for worker in workers]
            for hours, workers in self.registry.tiers().items()
        }

    def set_capacity(self, worker_name: str, hours: int) -> None:
        self.assignments.set_capacity(worker_name, hours)

    # Placement

    def assigned(self, day: Union[Day, str], slot_id: int) -> list[str]:
        day = Day.parse(day)
        return self.schedule.assigned(day, slot_id)

    def assign(self, worker_name: str, day: Union[Day, str], slot_id: int) -> None:
        self.assignments.assign(worker_name, day, slot_id)

    def remove(self, worker_name: str, day: Union[Day, str], slot_id: int) -> bool:
        return self.assignments.remove(day, slot_id, worker_name)

    def auto_fill(self) -> AutoFillResult:
        return self.auto_filler.fill(
            self.catalog, self.registry, self.schedule, self.settings
        )

    def reset_all(self) -> None:
        self.assignments.reset_all()

    def reset_day(self, day: Union[Day, str]) -> int:
        return self.assignments.reset_day(day)

    # Settings

    def set_contiguity_mode(self, enabled: bool) -> None:
        """Toggle the weekday pattern rule for future placements only."""
        self.settings.contiguity_mode = enabled
        logger.info("Contiguity mode %s", "enabled" if enabled else "disabled")

    def get_contiguity_mode(self) -> bool:
        return self.settings.contiguity_mode

    # Read-only projections

    def get_stats(self) -> WeekStats:
        return self.stats_aggregator.compute(self.schedule, self.registry)

    def staffing_status(self, day: Union[Day, str], slot_id: int) -> StaffingStatus:
        day = Day.parse(day)
        return self.stats_aggregator.staffing_status(
            self.schedule, self.catalog, day, slot_id
        )

    def audit(self) -> AuditResult:
        """Re-check the whole week against the current rules."""
        return self.validator.audit(
            self.schedule, self.registry, self.catalog, self.settings.contiguity_mode
        )
