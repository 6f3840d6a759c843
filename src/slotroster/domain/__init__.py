"""Domain models and business rules for slot rostering."""

from slotroster.domain.errors import (
    AssignmentError,
    CapacityBelowAssignedError,
    DailyCapExceededError,
    DuplicateAssignmentError,
    InsufficientHoursError,
    PatternViolationError,
    SchedulingError,
    UnknownDayError,
    UnknownSlotError,
    UnknownWorkerError,
    ViolationType,
)
from slotroster.domain.models import (
    MAX_REQUIRED_STAFF,
    SEED_ROSTER,
    DailyHours,
    Day,
    ScheduleSettings,
    ScheduleSnapshot,
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

__all__ = [
    # Models
    "DailyHours",
    "Day",
    "MAX_REQUIRED_STAFF",
    "ScheduleSettings",
    "ScheduleSnapshot",
    "SEED_ROSTER",
    "SlotCatalog",
    "TimeSlot",
    "WeekSchedule",
    "Worker",
    "WorkerRegistry",
    # Policies
    "AutoFillConfig",
    "DefaultStaffingPolicy",
    "StaffingPolicy",
    # Errors
    "AssignmentError",
    "CapacityBelowAssignedError",
    "DailyCapExceededError",
    "DuplicateAssignmentError",
    "InsufficientHoursError",
    "PatternViolationError",
    "SchedulingError",
    "UnknownDayError",
    "UnknownSlotError",
    "UnknownWorkerError",
    "ViolationType",
]
