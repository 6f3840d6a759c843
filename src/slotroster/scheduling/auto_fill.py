"""Greedy auto-fill for weekday staffing shortfalls.

This module implements a randomized greedy pass that:
1. Leaves every existing assignment in place
2. Tops up each weekday slot to its required headcount
3. Prefers workers with the most remaining hours, with random jitter
4. Nudges picks toward contiguous blocks while contiguity is enforced

Weekend days are never touched.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Optional, Protocol

from slotroster.domain.models import (
    DailyHours,
    Day,
    ScheduleSettings,
    SlotCatalog,
    WeekSchedule,
    Worker,
    WorkerRegistry,
)
from slotroster.domain.policies import AutoFillConfig
from slotroster.validation.validator import ConstraintValidator

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything with a `random()` returning a float in [0, 1)."""

    def random(self) -> float: ...


@dataclass(frozen=True)
class Placement:
    """One worker placed by auto-fill."""

    day: Day
    slot_id: int
    worker_name: str


@dataclass(frozen=True)
class Shortfall:
    """A cell auto-fill could not bring up to target."""

    day: Day
    slot_id: int
    required: int
    assigned: int

    @property
    def missing(self) -> int:
        return self.required - self.assigned


@dataclass
class AutoFillResult:
    """Outcome of one auto-fill pass."""

    placements: list[Placement] = field(default_factory=list)
    shortfalls: list[Shortfall] = field(default_factory=list)

    @property
    def added_count(self) -> int:
        return len(self.placements)

    @property
    def is_fully_staffed(self) -> bool:
        return not self.shortfalls


@dataclass
class ScoredCandidate:
    """A candidate worker and the score it was ranked by."""

    worker: Worker
    score: float


class AutoFillScheduler:
    """Fills weekday shortfalls without moving anything already placed.

    The scheduler works on copies of the schedule and registry and commits
    both in one step at the end, so callers never see a half-filled week.
    Cells that run out of valid candidates are left short; that is reported
    in the result, not raised.

    Ties between equal scores go to the worker registered first.
    """

    def __init__(
        self,
        validator: Optional[ConstraintValidator] = None,
        config: Optional[AutoFillConfig] = None,
        rng: Optional[RandomSource] = None,
    ):
        self.validator = validator or ConstraintValidator()
        self.config = config or AutoFillConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)

    def fill(
        self,
        catalog: SlotCatalog,
        registry: WorkerRegistry,
        schedule: WeekSchedule,
        settings: ScheduleSettings,
    ) -> AutoFillResult:
        """Top up every weekday slot and commit the result.

        Args:
            catalog: Slot catalog holding the staffing targets.
            registry: Live worker registry; updated on commit.
            schedule: Live schedule; updated on commit.
            settings: Session settings (contiguity mode).

        Returns:
            AutoFillResult listing the placements made and cells left short.
        """
        slot_hours = self.validator.policy.slot_hours()
        working_schedule = schedule.copy()
        working_registry = registry.copy()

        # Balances are rebuilt from the schedule itself
        for worker in working_registry:
            held = working_schedule.assigned_hours(worker.name)
            worker.remaining_hours = max(0, worker.total_hours - held)

        daily_hours = working_schedule.snapshot().daily_hours()
        result = AutoFillResult()

        for day in Day.weekdays():
            for slot_id in catalog.slot_ids:
                required = catalog.get_required_staff(slot_id)
                already = len(working_schedule.assigned(day, slot_id))
                need = max(0, required - already)
                if need == 0:
                    continue

                for _ in range(need):
                    picked = self._pick(
                        day,
                        slot_id,
                        working_schedule,
                        working_registry,
                        daily_hours,
                        settings.contiguity_mode,
                    )
                    if picked is None:
                        break

                    working_schedule.add(day, slot_id, picked.name)
                    picked.remaining_hours -= slot_hours
                    daily_hours[day][picked.name] = (
                        daily_hours[day].get(picked.name, 0) + slot_hours
                    )
                    result.placements.append(Placement(day, slot_id, picked.name))

                filled = len(working_schedule.assigned(day, slot_id))
                if filled < required:
                    result.shortfalls.append(
                        Shortfall(day, slot_id, required=required, assigned=filled)
                    )

        schedule.replace_with(working_schedule)
        registry.replace_with(working_registry)

        logger.info(
            "Auto-fill placed %d workers; %d cells remain short",
            result.added_count, len(result.shortfalls),
        )
        for shortfall in result.shortfalls:
            logger.debug(
                "%s slot %d short by %d",
                shortfall.day.value, shortfall.slot_id, shortfall.missing,
            )
        return result

    def _pick(
        self,
        day: Day,
        slot_id: int,
        schedule: WeekSchedule,
        registry: WorkerRegistry,
        daily_hours: DailyHours,
        contiguity_mode: bool,
    ) -> Optional[Worker]:
        """Choose the best-scoring valid candidate for one seat, if any."""
        snapshot = schedule.snapshot()

        candidates = [
            worker
            for worker in registry
            if self.validator.can_assign(
                worker, day, slot_id, snapshot, daily_hours, contiguity_mode
            )
        ]
        if not candidates:
            return None

        best: Optional[ScoredCandidate] = None
        for worker in candidates:
            held_slots = snapshot.slots_for(day, worker.name)
            scored = ScoredCandidate(
                worker=worker,
                score=self._score(worker, slot_id, held_slots, contiguity_mode),
            )
            logger.debug(
                "%s slot %d candidate %s score %.3f",
                day.value, slot_id, worker.name, scored.score,
            )
            # Strictly greater keeps the earlier worker on a tie
            if best is None or scored.score > best.score:
                best = scored

        return best.worker

    def _score(
        self,
        worker: Worker,
        slot_id: int,
        held_slots: list[int],
        contiguity_mode: bool,
    ) -> float:
        """Remaining hours plus jitter, plus a bonus for extending a block."""
        score = worker.remaining_hours + self.rng.random()
        if contiguity_mode and any(abs(s - slot_id) == 1 for s in held_slots):
            score += self.config.adjacency_bonus
        return score
