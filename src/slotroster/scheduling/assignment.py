"""Manual assignment operations.

The AssignmentService is the only path for hand-made changes to the week:
placing and removing workers, resetting days, and editing capacities or
staffing targets. Each operation validates fully before its first write,
so a rejected call leaves every balance and cell untouched.
"""

import logging
from typing import Optional, Union

from slotroster.domain.errors import CapacityBelowAssignedError, error_for
from slotroster.domain.models import (
    Day,
    ScheduleSettings,
    SlotCatalog,
    WeekSchedule,
    WorkerRegistry,
)
from slotroster.validation.validator import ConstraintValidator

logger = logging.getLogger(__name__)


class AssignmentService:
    """Validated, all-or-nothing mutations of the schedule and worker balances."""

    def __init__(
        self,
        catalog: SlotCatalog,
        registry: WorkerRegistry,
        schedule: WeekSchedule,
        settings: Optional[ScheduleSettings] = None,
        validator: Optional[ConstraintValidator] = None,
    ):
        self.catalog = catalog
        self.registry = registry
        self.schedule = schedule
        self.settings = settings or ScheduleSettings()
        self.validator = validator or ConstraintValidator()

    @property
    def slot_hours(self) -> int:
        return self.validator.policy.slot_hours()

    def assign(self, worker_name: str, day: Union[Day, str], slot_id: int) -> None:
        """Place a worker into (day, slot_id).

        `day` may be a Day or a day name such as "monday" or "mon".

        Raises:
            UnknownDayError: `day` is not a day of the week.
            UnknownWorkerError: No worker by that name.
            UnknownSlotError: No slot with that id.
            InsufficientHoursError: Fewer than one slot's hours remain.
            DuplicateAssignmentError: Worker already holds the slot.
            DailyCapExceededError: Weekday hour limit already reached.
            PatternViolationError: Weekday contiguity pattern would break.
        """
        day = Day.parse(day)
        worker = self.registry.get(worker_name)
        self.catalog.get_slot(slot_id)

        snapshot = self.schedule.snapshot()
        violation = self.validator.check(
            worker,
            day,
            slot_id,
            snapshot,
            snapshot.daily_hours(),
            self.settings.contiguity_mode,
        )
        if violation is not None:
            logger.debug(
                "Rejected %s for %s slot %d: %s",
                worker_name, day.value, slot_id, violation.value,
            )
            raise error_for(violation, worker_name, day, slot_id)

        self.schedule.add(day, slot_id, worker_name)
        worker.remaining_hours -= self.slot_hours
        logger.info(
            "Assigned %s to %s slot %d (%dh remaining)",
            worker_name, day.value, slot_id, worker.remaining_hours,
        )

    def remove(self, day: Union[Day, str], slot_id: int, worker_name: str) -> bool:
        """Take a worker out of (day, slot_id) and return their hours.

        Removing a worker who is not in the slot changes nothing.

        Returns:
            True if the worker was removed.
        """
        day = Day.parse(day)
        worker = self.registry.get(worker_name)
        self.catalog.get_slot(slot_id)

        if not self.schedule.remove(day, slot_id, worker_name):
            return False

        worker.remaining_hours += self.slot_hours
        logger.info(
            "Removed %s from %s slot %d (%dh remaining)",
            worker_name, day.value, slot_id, worker.remaining_hours,
        )
        return True

    def reset_day(self, day: Union[Day, str]) -> int:
        """Clear every slot of one day, returning hours to the workers in it.

        Staffing targets are untouched.

        Returns:
            Number of assignments cleared.
        """
        day = Day.parse(day)
        cleared = 0
        refunds: dict[str, int] = {}
        for names in self.schedule.day_assignments(day).values():
            for name in names:
                refunds[name] = refunds.get(name, 0) + self.slot_hours
                cleared += 1

        for name, hours in refunds.items():
            if name in self.registry:
                self.registry.get(name).remaining_hours += hours
        self.schedule.clear_day(day)

        logger.info("Reset %s (%d assignments cleared)", day.value, cleared)
        return cleared

    def reset_all(self) -> None:
        """Restore every worker to seed capacity and empty the whole week."""
        self.registry.reset()
        self.schedule.clear()
        logger.info("Reset all days and restored seed capacities")

    def set_capacity(self, worker_name: str, total_hours: int) -> None:
        """Change a worker's weekly budget.

        Remaining hours are recomputed from the hours the worker holds in
        the schedule.

        Raises:
            ValueError: Negative capacity.
            CapacityBelowAssignedError: New budget is below hours already held.
        """
        worker = self.registry.get(worker_name)
        if total_hours < 0:
            raise ValueError(f"Capacity cannot be negative, got {total_hours}")

        assigned = self.schedule.assigned_hours(worker_name)
        if total_hours < assigned:
            raise CapacityBelowAssignedError(worker_name, total_hours, assigned)

        worker.total_hours = total_hours
        worker.remaining_hours = total_hours - assigned
        logger.info(
            "Set %s capacity to %dh (%dh assigned)", worker_name, total_hours, assigned
        )

    def set_required_staff(self, slot_id: int, count: int) -> None:
        """Set a slot's target headcount for every day.

        Existing assignments are not adjusted; cells may end up over or
        under target.
        """
        self.catalog.set_required_staff(slot_id, count)
        logger.info("Required staff for slot %d set to %d", slot_id, count)
