"""Domain models for the weekly slot roster.

This module contains the core data structures used throughout the engine:
days, time slots and their staffing targets, workers and their hour
budgets, and the week-by-day-by-slot assignment table.
"""

from collections import defaultdict
from dataclasses import dataclass, field, replace
from datetime import time
from enum import Enum
from typing import Iterable, Mapping, Optional, Union

from slotroster.domain.errors import (
    UnknownDayError,
    UnknownSlotError,
    UnknownWorkerError,
)

MAX_REQUIRED_STAFF = 5

# Hours used per worker per day, keyed by day then worker name.
DailyHours = dict["Day", dict[str, int]]


class Day(Enum):
    """Days of the scheduling week, in week order."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @property
    def is_weekend(self) -> bool:
        """Weekend days are exempt from the daily cap and pattern rule."""
        return self in (Day.SATURDAY, Day.SUNDAY)

    @property
    def label(self) -> str:
        """Three-letter label (e.g. "Mon")."""
        return self.value[:3].capitalize()

    @classmethod
    def weekdays(cls) -> list["Day"]:
        return [d for d in cls if not d.is_weekend]

    @classmethod
    def parse(cls, value: Union["Day", str]) -> "Day":
        """Return a Day from a Day, a full day name or a three-letter abbreviation."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnknownDayError(f"Unknown day: {value!r}")
        key = value.strip().lower()
        for day in cls:
            if key == day.value or key == day.value[:3]:
                return day
        raise UnknownDayError(f"Unknown day: {value!r}")


@dataclass(frozen=True)
class TimeSlot:
    """A fixed two-hour scheduling unit, shared by every day of the week.

    Attributes:
        id: Position of the slot within the day (1-based, ordered by start).
        start: Time the slot starts.
        end: Time the slot ends.
    """

    id: int
    start: time
    end: time

    @property
    def label(self) -> str:
        return f"{self.start.strftime('%H:%M')}-{self.end.strftime('%H:%M')}"

    def __repr__(self) -> str:
        return f"TimeSlot({self.id}, {self.label})"


@dataclass
class SlotCatalog:
    """Static definition of the day's slots plus the required headcount per slot.

    Required-staff targets apply identically to every day of the week.
    """

    slots: tuple[TimeSlot, ...]
    required_staff: dict[int, int] = field(default_factory=dict)

    def __post_init__(self):
        self.slots = tuple(sorted(self.slots, key=lambda s: s.id))
        for slot in self.slots:
            self.required_staff.setdefault(slot.id, 0)

    @classmethod
    def create_default(cls) -> "SlotCatalog":
        """Create the standard 07:00-21:00 catalog.

        Seven two-hour slots with targets of 2 at the edges of the day and
        3 in between.
        """
        slots = tuple(
            TimeSlot(id=i + 1, start=time(hour=7 + 2 * i), end=time(hour=9 + 2 * i))
            for i in range(7)
        )
        return cls(
            slots=slots,
            required_staff={1: 2, 2: 3, 3: 3, 4: 3, 5: 3, 6: 3, 7: 2},
        )

    @property
    def slot_ids(self) -> list[int]:
        return [s.id for s in self.slots]

    def get_slot(self, slot_id: int) -> TimeSlot:
        for slot in self.slots:
            if slot.id == slot_id:
                return slot
        raise UnknownSlotError(f"Unknown slot id: {slot_id}")

    def get_required_staff(self, slot_id: int) -> int:
        self.get_slot(slot_id)
        return self.required_staff[slot_id]

    def set_required_staff(self, slot_id: int, count: int) -> None:
        """Set the target headcount for a slot across all days."""
        self.get_slot(slot_id)
        if not 0 <= count <= MAX_REQUIRED_STAFF:
            raise ValueError(
                f"Required staff must be between 0 and {MAX_REQUIRED_STAFF}, got {count}"
            )
        self.required_staff[slot_id] = count


@dataclass
class Worker:
    """A worker who can be placed into slots.

    Attributes:
        name: Unique display name; used as the key everywhere.
        total_hours: Weekly hour budget.
        remaining_hours: Budget not yet allocated to a slot this week.
    """

    name: str
    total_hours: int
    remaining_hours: Optional[int] = None

    def __post_init__(self):
        if self.remaining_hours is None:
            self.remaining_hours = self.total_hours

    @property
    def assigned_hours(self) -> int:
        """Hours currently allocated to slots."""
        return self.total_hours - self.remaining_hours


# Fixed roster the registry starts from and resets to.
SEED_ROSTER: tuple[tuple[str, int], ...] = (
    ("Sukyung", 28),
    ("Yunjae", 28),
    ("Eunseo", 28),
    ("Suhee", 28),
    ("Youngjung", 28),
    ("Byungchul", 28),
    ("Jieun", 28),
    ("Junhyuk", 14),
    ("Kihwan", 8),
    ("Byungtaek", 8),
    ("Jaesun", 8),
)


class WorkerRegistry:
    """Holds every worker's capacity and remaining-hours balance.

    Workers keep their registration order; that order is used for listing
    and as the tie-break order during auto-fill.
    """

    def __init__(self, seed: Iterable[tuple[str, int]]):
        self._seed = tuple(seed)
        names = [name for name, _ in self._seed]
        if len(set(names)) != len(names):
            raise ValueError("Worker names must be unique")
        self._workers: dict[str, Worker] = {}
        self.reset()

    @classmethod
    def create_default(cls) -> "WorkerRegistry":
        return cls(SEED_ROSTER)

    def __len__(self) -> int:
        return len(self._workers)

    def __iter__(self):
        return iter(self._workers.values())

    def __contains__(self, name: str) -> bool:
        return name in self._workers

    def get(self, name: str) -> Worker:
        try:
            return self._workers[name]
        except KeyError:
            raise UnknownWorkerError(f"Unknown worker: {name!r}") from None

    def list_workers(self) -> list[Worker]:
        return list(self._workers.values())

    def seed_capacity(self, name: str) -> int:
        """Capacity the worker had when the registry was created."""
        self.get(name)
        return dict(self._seed)[name]

    def reset(self) -> None:
        """Restore every worker to the seed capacity with nothing allocated.

        Existing Worker objects are updated in place.
        """
        for name, hours in self._seed:
            worker = self._workers.setdefault(name, Worker(name=name, total_hours=hours))
            worker.total_hours = hours
            worker.remaining_hours = hours

    def tiers(self) -> dict[int, list[Worker]]:
        """Group workers by total hours, highest tier first.

        A display grouping only; recomputed from the current capacities.
        """
        grouped: dict[int, list[Worker]] = defaultdict(list)
        for worker in self._workers.values():
            grouped[worker.total_hours].append(worker)
        return {hours: grouped[hours] for hours in sorted(grouped, reverse=True)}

    def copy(self) -> "WorkerRegistry":
        """Detached copy sharing no Worker objects with this registry."""
        clone = WorkerRegistry.__new__(WorkerRegistry)
        clone._seed = self._seed
        clone._workers = {name: replace(w) for name, w in self._workers.items()}
        return clone

    def replace_with(self, other: "WorkerRegistry") -> None:
        """Adopt the balances of another registry (used to commit a working copy).

        Workers already registered keep their identity; only their hours change.
        """
        for name, source in other._workers.items():
            worker = self._workers.get(name)
            if worker is None:
                self._workers[name] = replace(source)
                continue
            worker.total_hours = source.total_hours
            worker.remaining_hours = source.remaining_hours


@dataclass(frozen=True)
class ScheduleSnapshot:
    """Read-only view of a week's assignments.

    The validator only ever sees snapshots, so a check can never observe or
    cause a half-applied mutation.
    """

    assignments: Mapping[Day, Mapping[int, tuple[str, ...]]]
    slot_hours: int = 2

    def assigned(self, day: Day, slot_id: int) -> tuple[str, ...]:
        return self.assignments.get(day, {}).get(slot_id, ())

    def is_assigned(self, day: Day, slot_id: int, worker_name: str) -> bool:
        return worker_name in self.assigned(day, slot_id)

    def slots_for(self, day: Day, worker_name: str) -> list[int]:
        """Slot ids the worker holds on a day, ascending."""
        return sorted(
            slot_id
            for slot_id, names in self.assignments.get(day, {}).items()
            if worker_name in names
        )

    def daily_hours(self) -> DailyHours:
        """Hours used per worker on each day."""
        hours: DailyHours = {day: {} for day in Day}
        for day, cells in self.assignments.items():
            for names in cells.values():
                for name in names:
                    hours[day][name] = hours[day].get(name, 0) + self.slot_hours
        return hours


class WeekSchedule:
    """The mutable Day x TimeSlot assignment table.

    Each cell holds worker names in insertion order; a name appears at most
    once per cell.
    """

    def __init__(self, slot_ids: Iterable[int], slot_hours: int = 2):
        self.slot_ids = sorted(slot_ids)
        self.slot_hours = slot_hours
        self._cells: dict[Day, dict[int, list[str]]] = {}
        self.clear()

    @classmethod
    def for_catalog(cls, catalog: SlotCatalog, slot_hours: int = 2) -> "WeekSchedule":
        return cls(catalog.slot_ids, slot_hours=slot_hours)

    def _cell(self, day: Day, slot_id: int) -> list[str]:
        try:
            return self._cells[day][slot_id]
        except KeyError:
            raise UnknownSlotError(f"Unknown slot id: {slot_id}") from None

    def assigned(self, day: Day, slot_id: int) -> list[str]:
        return list(self._cell(day, slot_id))

    def is_assigned(self, day: Day, slot_id: int, worker_name: str) -> bool:
        return worker_name in self._cell(day, slot_id)

    def add(self, day: Day, slot_id: int, worker_name: str) -> None:
        cell = self._cell(day, slot_id)
        if worker_name in cell:
            raise ValueError(f"{worker_name} already holds {day.value} slot {slot_id}")
        cell.append(worker_name)

    def remove(self, day: Day, slot_id: int, worker_name: str) -> bool:
        """Remove a name from a cell. Returns False if it was not there."""
        cell = self._cell(day, slot_id)
        if worker_name not in cell:
            return False
        cell.remove(worker_name)
        return True

    def clear_day(self, day: Day) -> None:
        self._cells[day] = {slot_id: [] for slot_id in self.slot_ids}

    def clear(self) -> None:
        for day in Day:
            self.clear_day(day)

    def day_assignments(self, day: Day) -> dict[int, list[str]]:
        return {slot_id: list(names) for slot_id, names in self._cells[day].items()}

    def slots_for(self, day: Day, worker_name: str) -> list[int]:
        return [s for s in self.slot_ids if worker_name in self._cells[day][s]]

    def assignment_count(self, worker_name: str) -> int:
        """Number of cells the worker holds across the week."""
        return sum(
            1
            for cells in self._cells.values()
            for names in cells.values()
            if worker_name in names
        )

    def assigned_hours(self, worker_name: str) -> int:
        return self.assignment_count(worker_name) * self.slot_hours

    def snapshot(self) -> ScheduleSnapshot:
        return ScheduleSnapshot(
            assignments={
                day: {slot_id: tuple(names) for slot_id, names in cells.items()}
                for day, cells in self._cells.items()
            },
            slot_hours=self.slot_hours,
        )

    def copy(self) -> "WeekSchedule":
        clone = WeekSchedule(self.slot_ids, slot_hours=self.slot_hours)
        clone._cells = {
            day: {slot_id: list(names) for slot_id, names in cells.items()}
            for day, cells in self._cells.items()
        }
        return clone

    def replace_with(self, other: "WeekSchedule") -> None:
        """Adopt every cell of another schedule (used to commit a working copy)."""
        self._cells = {
            day: {slot_id: list(names) for slot_id, names in cells.items()}
            for day, cells in other._cells.items()
        }


@dataclass
class ScheduleSettings:
    """Session-wide toggles shared by the assignment service and auto-fill.

    Attributes:
        contiguity_mode: Enforce the weekday pattern rule. Changing it does
            not re-validate assignments already made.
    """

    contiguity_mode: bool = True
