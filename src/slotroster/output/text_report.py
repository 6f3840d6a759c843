"""Plain-text week report.

This module creates a text report of the current week showing:
- The slot-by-day grid with headcount against target
- Per-worker hours per day, remaining hours and usage
- Day totals and cells still under target
"""

from pathlib import Path
from typing import Union

from slotroster.domain.models import Day
from slotroster.scheduling.engine import SchedulingEngine
from slotroster.scheduling.stats import RemainingLevel, StaffingStatus

STATUS_MARKS = {
    StaffingStatus.EMPTY: " ",
    StaffingStatus.UNDER: "-",
    StaffingStatus.MET: " ",
    StaffingStatus.OVER: "+",
}

LEVEL_MARKS = {
    RemainingLevel.EXHAUSTED: "!",
    RemainingLevel.LOW: "*",
    RemainingLevel.OK: "",
}


class TextReportGenerator:
    """Generates a human-readable text report of the week.

    Example:
        >>> report = TextReportGenerator().generate_to_string(engine)
        >>> print(report)
    """

    def __init__(self, cell_width: int = 9, names_per_cell: int = 5):
        self.cell_width = cell_width
        self.names_per_cell = names_per_cell

    def generate(self, engine: SchedulingEngine, output_path: Union[str, Path]) -> str:
        """Generate the report and save it to a file.

        Returns:
            The generated text content.
        """
        content = self._generate_content(engine)
        Path(output_path).write_text(content, encoding="utf-8")
        return content

    def generate_to_string(self, engine: SchedulingEngine) -> str:
        return self._generate_content(engine)

    def _generate_content(self, engine: SchedulingEngine) -> str:
        lines = []
        stats = engine.get_stats()

        lines.append("=" * 80)
        lines.append("WEEKLY SLOT ROSTER")
        lines.append("=" * 80)
        lines.append(f"Contiguity mode: {'on' if engine.get_contiguity_mode() else 'off'}")
        lines.append(f"Total assigned: {stats.total_assigned_hours}h")
        lines.append("")

        lines.extend(self._grid_lines(engine))
        lines.append("")
        lines.extend(self._stats_lines(engine))
        lines.append("")
        lines.extend(self._shortfall_lines(engine))

        return "\n".join(lines) + "\n"

    def _grid_lines(self, engine: SchedulingEngine) -> list[str]:
        """Slot rows, one column per day; each cell shows count/target."""
        w = self.cell_width
        lines = ["-" * 80, "SCHEDULE (count/target; '-' under, '+' over)", "-" * 80]
        lines.append(f"{'Slot':<12}" + "".join(f"{d.label:^{w}}" for d in Day))

        for slot in engine.list_slots():
            required = engine.get_required_staff(slot.id)
            cells = []
            for day in Day:
                count = len(engine.assigned(day, slot.id))
                mark = STATUS_MARKS[engine.staffing_status(day, slot.id)]
                cells.append(f"{f'{count}/{required}{mark}':^{w}}")
            lines.append(f"{slot.label:<12}" + "".join(cells))

            # Names listed underneath, one row per position in the cell
            columns = [engine.assigned(day, slot.id) for day in Day]
            depth = min(self.names_per_cell, max(len(c) for c in columns))
            for row in range(depth):
                names = [c[row][: w - 1] if row < len(c) else "" for c in columns]
                lines.append(" " * 12 + "".join(f"{n:^{w}}" for n in names))

        return lines

    def _stats_lines(self, engine: SchedulingEngine) -> list[str]:
        stats = engine.get_stats()
        lines = ["-" * 80, "WORKER HOURS ('*' low, '!' none left)", "-" * 80]
        header = f"{'Name':<12}{'Total':>6}" + "".join(f"{d.label:>5}" for d in Day)
        lines.append(header + f"{'Left':>6}{'Used':>6}")

        for worker in stats.workers:
            days = "".join(
                f"{(str(worker.daily_hours[d]) + 'h') if d in worker.daily_hours else '-':>5}"
                for d in Day
            )
            left = f"{worker.remaining_hours}h{LEVEL_MARKS[worker.remaining_level]}"
            lines.append(
                f"{worker.name[:11]:<12}{str(worker.total_assigned) + 'h':>6}{days}"
                f"{left:>6}{worker.usage_rate:>5.0f}%"
            )

        totals = stats.day_totals
        day_cells = "".join(
            f"{(str(totals[d]) + 'h') if totals[d] else '-':>5}" for d in Day
        )
        lines.append(f"{'Total':<12}{str(stats.total_assigned_hours) + 'h':>6}{day_cells}")
        return lines

    def _shortfall_lines(self, engine: SchedulingEngine) -> list[str]:
        lines = ["-" * 80, "UNDERSTAFFED CELLS", "-" * 80]
        short = []
        for day in Day:
            for slot in engine.list_slots():
                if engine.staffing_status(day, slot.id) == StaffingStatus.UNDER:
                    count = len(engine.assigned(day, slot.id))
                    required = engine.get_required_staff(slot.id)
                    short.append(f"{day.label} {slot.label}: {count}/{required}")
        lines.extend(short or ["None"])
        return lines
