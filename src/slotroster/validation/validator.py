"""Validation module for slot placements and whole-week schedules.

This module is the single source of truth for the placement rules. The
assignment service and auto-fill both ask it before writing anything, and
`audit` re-checks a finished week on demand.
"""

from dataclasses import dataclass, field
from typing import Optional

from slotroster.domain.errors import ViolationType
from slotroster.domain.models import (
    DailyHours,
    Day,
    ScheduleSnapshot,
    SlotCatalog,
    WeekSchedule,
    Worker,
    WorkerRegistry,
)
from slotroster.domain.policies import DefaultStaffingPolicy, StaffingPolicy


@dataclass
class Violation:
    """A single rule broken by an existing schedule."""

    violation_type: ViolationType
    message: str
    worker_name: Optional[str] = None
    day: Optional[Day] = None
    slot_id: Optional[int] = None

    def __str__(self) -> str:
        parts = [f"[{self.violation_type.value}]"]
        if self.worker_name:
            parts.append(f"{self.worker_name}:")
        parts.append(self.message)
        if self.day is not None:
            where = self.day.value
            if self.slot_id is not None:
                where += f" slot {self.slot_id}"
            parts.append(f"({where})")
        return " ".join(parts)


@dataclass
class AuditResult:
    """Result of auditing a week."""

    is_valid: bool
    violations: list[Violation] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_violation(self, violation: Violation) -> None:
        """Add a violation and mark as invalid."""
        self.violations.append(violation)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        """Add a warning (doesn't affect validity)."""
        self.warnings.append(warning)


class ConstraintValidator:
    """Decides whether a worker may take a slot.

    The validator is pure: it reads a snapshot and a daily-hours map and
    never mutates anything.

    Example:
        >>> validator = ConstraintValidator()
        >>> snapshot = schedule.snapshot()
        >>> validator.can_assign(worker, Day.MONDAY, 3, snapshot,
        ...                      snapshot.daily_hours(), contiguity_mode=True)
        True
    """

    def __init__(self, policy: Optional[StaffingPolicy] = None):
        self.policy = policy or DefaultStaffingPolicy()

    def check(
        self,
        worker: Worker,
        day: Day,
        slot_id: int,
        snapshot: ScheduleSnapshot,
        daily_hours: DailyHours,
        contiguity_mode: bool,
    ) -> Optional[ViolationType]:
        """Return the first rule the placement breaks, or None if it is allowed."""
        if worker.remaining_hours < self.policy.slot_hours():
            return ViolationType.INSUFFICIENT_HOURS

        if snapshot.is_assigned(day, slot_id, worker.name):
            return ViolationType.DUPLICATE_ASSIGNMENT

        if day.is_weekend:
            return None

        if daily_hours.get(day, {}).get(worker.name, 0) >= self.policy.daily_cap_hours():
            return ViolationType.DAILY_CAP_EXCEEDED

        if not contiguity_mode:
            return None

        proposed = sorted(snapshot.slots_for(day, worker.name) + [slot_id])
        if not self.policy.is_valid_weekday_pattern(proposed):
            return ViolationType.PATTERN_VIOLATION

        return None

    def can_assign(
        self,
        worker: Worker,
        day: Day,
        slot_id: int,
        snapshot: ScheduleSnapshot,
        daily_hours: DailyHours,
        contiguity_mode: bool,
    ) -> bool:
        """Check whether the worker may take (day, slot_id)."""
        return (
            self.check(worker, day, slot_id, snapshot, daily_hours, contiguity_mode)
            is None
        )

    def audit(
        self,
        schedule: WeekSchedule,
        registry: WorkerRegistry,
        catalog: SlotCatalog,
        contiguity_mode: bool,
    ) -> AuditResult:
        """Re-check an entire week against the rules.

        Args:
            schedule: The week to audit.
            registry: Worker balances to reconcile against the schedule.
            catalog: Slot catalog holding the staffing targets.
            contiguity_mode: Whether to check the weekday pattern rule.

        Returns:
            AuditResult with is_valid flag, violations and staffing warnings.
        """
        result = AuditResult(is_valid=True)
        snapshot = schedule.snapshot()

        for day in Day:
            for slot_id in catalog.slot_ids:
                names = snapshot.assigned(day, slot_id)
                for name in names:
                    if name not in registry:
                        result.add_violation(
                            Violation(
                                violation_type=ViolationType.UNKNOWN_WORKER,
                                message="Not in the worker registry",
                                worker_name=name,
                                day=day,
                                slot_id=slot_id,
                            )
                        )
                self._check_staffing(day, slot_id, len(names), catalog, result)

        for worker in registry:
            self._check_worker(worker, schedule, snapshot, contiguity_mode, result)

        return result

    def _check_worker(
        self,
        worker: Worker,
        schedule: WeekSchedule,
        snapshot: ScheduleSnapshot,
        contiguity_mode: bool,
        result: AuditResult,
    ) -> None:
        """Reconcile one worker's balance and per-day rules."""
        held_hours = schedule.assigned_hours(worker.name)
        if worker.remaining_hours != worker.total_hours - held_hours:
            result.add_violation(
                Violation(
                    violation_type=ViolationType.HOURS_MISMATCH,
                    message=(
                        f"Remaining {worker.remaining_hours}h does not match "
                        f"{worker.total_hours}h total minus {held_hours}h assigned"
                    ),
                    worker_name=worker.name,
                )
            )

        for day in Day.weekdays():
            slots = snapshot.slots_for(day, worker.name)
            day_hours = len(slots) * self.policy.slot_hours()
            if day_hours > self.policy.daily_cap_hours():
                result.add_violation(
                    Violation(
                        violation_type=ViolationType.DAILY_CAP_EXCEEDED,
                        message=f"{day_hours}h exceeds the {self.policy.daily_cap_hours()}h weekday limit",
                        worker_name=worker.name,
                        day=day,
                    )
                )
            elif contiguity_mode and not self.policy.is_valid_weekday_pattern(slots):
                result.add_violation(
                    Violation(
                        violation_type=ViolationType.PATTERN_VIOLATION,
                        message=f"Slots {slots} do not form an allowed pattern",
                        worker_name=worker.name,
                        day=day,
                    )
                )

    def _check_staffing(
        self,
        day: Day,
        slot_id: int,
        count: int,
        catalog: SlotCatalog,
        result: AuditResult,
    ) -> None:
        required = catalog.get_required_staff(slot_id)
        if count < required:
            result.add_warning(
                f"{day.value} slot {slot_id} understaffed ({count}/{required})"
            )
        elif count > required:
            result.add_warning(
                f"{day.value} slot {slot_id} overstaffed ({count}/{required})"
            )
