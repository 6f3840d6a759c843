"""Exceptions raised by the scheduling engine.

Every error is raised before any state is touched, so catching one leaves
the schedule and the worker balances exactly as they were.
"""

from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from slotroster.domain.models import Day


class ViolationType(Enum):
    """Rules a placement or a schedule can break."""

    INSUFFICIENT_HOURS = "insufficient_hours"
    DUPLICATE_ASSIGNMENT = "duplicate_assignment"
    DAILY_CAP_EXCEEDED = "daily_cap_exceeded"
    PATTERN_VIOLATION = "pattern_violation"
    HOURS_MISMATCH = "hours_mismatch"
    UNKNOWN_WORKER = "unknown_worker"


class SchedulingError(Exception):
    """Base class for all engine errors."""


class UnknownWorkerError(SchedulingError, LookupError):
    pass


class UnknownSlotError(SchedulingError, LookupError):
    pass


class UnknownDayError(SchedulingError, LookupError):
    pass


class AssignmentError(SchedulingError):
    """A placement was rejected by one of the assignment rules."""

    violation: ViolationType

    def __init__(
        self,
        message: str,
        worker_name: Optional[str] = None,
        day: Optional["Day"] = None,
        slot_id: Optional[int] = None,
    ):
        super().__init__(message)
        self.worker_name = worker_name
        self.day = day
        self.slot_id = slot_id


class InsufficientHoursError(AssignmentError):
    violation = ViolationType.INSUFFICIENT_HOURS


class DuplicateAssignmentError(AssignmentError):
    violation = ViolationType.DUPLICATE_ASSIGNMENT


class DailyCapExceededError(AssignmentError):
    violation = ViolationType.DAILY_CAP_EXCEEDED


class PatternViolationError(AssignmentError):
    violation = ViolationType.PATTERN_VIOLATION


class CapacityBelowAssignedError(SchedulingError):
    """A capacity edit would drop below hours the worker already holds."""

    def __init__(self, worker_name: str, requested_hours: int, assigned_hours: int):
        super().__init__(
            f"{worker_name} already holds {assigned_hours}h; "
            f"capacity cannot be set to {requested_hours}h"
        )
        self.worker_name = worker_name
        self.requested_hours = requested_hours
        self.assigned_hours = assigned_hours


_MESSAGES = {
    ViolationType.INSUFFICIENT_HOURS: "{worker} does not have enough remaining hours",
    ViolationType.DUPLICATE_ASSIGNMENT: "{worker} is already assigned to this slot",
    ViolationType.DAILY_CAP_EXCEEDED: "{worker} would exceed the weekday daily hour limit",
    ViolationType.PATTERN_VIOLATION: (
        "{worker} would break the weekday pattern "
        "(4h must be contiguous; 6h must be 4h + break + 2h or 2h + break + 4h)"
    ),
}

_ERROR_CLASSES = {
    ViolationType.INSUFFICIENT_HOURS: InsufficientHoursError,
    ViolationType.DUPLICATE_ASSIGNMENT: DuplicateAssignmentError,
    ViolationType.DAILY_CAP_EXCEEDED: DailyCapExceededError,
    ViolationType.PATTERN_VIOLATION: PatternViolationError,
}


def error_for(
    violation: ViolationType,
    worker_name: str,
    day: "Day",
    slot_id: int,
) -> AssignmentError:
    """Build the exception matching a rejected placement."""
    try:
        error_class = _ERROR_CLASSES[violation]
    except KeyError:
        raise ValueError(f"{violation} is not a placement rule") from None
    message = _MESSAGES[violation].format(worker=worker_name)
    return error_class(
        f"{message} ({day.value} slot {slot_id})",
        worker_name=worker_name,
        day=day,
        slot_id=slot_id,
    )
