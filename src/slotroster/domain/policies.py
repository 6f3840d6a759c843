"""Policy definitions for staffing rules.

This module contains configurable policies that define the business rules
for slot length, the weekday hour cap and the weekday contiguity pattern.
Policies are kept separate from the engine to allow independent testing
and easy modification.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence


class StaffingPolicy(ABC):
    """Abstract base class for per-day staffing rules."""

    @abstractmethod
    def slot_hours(self) -> int:
        """Hours covered by one slot assignment."""
        pass

    @abstractmethod
    def daily_cap_hours(self) -> int:
        """Maximum hours a worker may hold on a weekday."""
        pass

    @abstractmethod
    def is_valid_weekday_pattern(self, ordered_slot_ids: Sequence[int]) -> bool:
        """Check whether a worker's slots on one weekday form an allowed pattern.

        Args:
            ordered_slot_ids: Slot ids held by the worker that day, ascending.

        Returns:
            True if the pattern is allowed when contiguity is enforced.
        """
        pass


@dataclass
class DefaultStaffingPolicy(StaffingPolicy):
    """Default staffing policy implementation.

    Weekday rules:
    - Each slot is 2 hours; at most 6 hours (3 slots) per weekday
    - 2 slots must be adjacent (one contiguous 4h run)
    - 3 slots must be a contiguous 4h run and a 2h run separated by at
      least one empty slot, in either order

    Weekend days are exempt from both rules.
    """

    hours_per_slot: int = 2
    weekday_daily_cap_hours: int = 6
    min_gap_slots: int = 1  # Empty slots required between the 4h and 2h runs

    def slot_hours(self) -> int:
        return self.hours_per_slot

    def daily_cap_hours(self) -> int:
        return self.weekday_daily_cap_hours

    @property
    def max_weekday_slots(self) -> int:
        return self.weekday_daily_cap_hours // self.hours_per_slot

    def is_valid_weekday_pattern(self, ordered_slot_ids: Sequence[int]) -> bool:
        slots = sorted(ordered_slot_ids)
        n = len(slots)
        if n <= 1:
            return True
        if n > self.max_weekday_slots:
            return False
        if n == 2:
            return slots[1] - slots[0] == 1
        if n == 3:
            a, b, c = slots
            step = self.min_gap_slots + 1
            long_then_short = b == a + 1 and c >= b + step
            short_then_long = c == b + 1 and a <= b - step
            return long_then_short or short_then_long
        return False


@dataclass
class AutoFillConfig:
    """Configuration for the auto-fill scorer.

    Attributes:
        adjacency_bonus: Score added to a candidate who already holds a slot
            next to the one being filled (only while contiguity is enforced).
        seed: Seed for the default random source; None for an unseeded run.
    """

    adjacency_bonus: float = 0.6
    seed: Optional[int] = None
