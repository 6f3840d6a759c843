"""PDF generation for a printable week roster.

This module creates a printable PDF showing:
- The slot-by-day grid with assigned names and headcount against target
- A worker hours summary with usage bars
"""

from io import BytesIO
from pathlib import Path
from typing import Union

from slotroster.domain.models import Day
from slotroster.scheduling.engine import SchedulingEngine
from slotroster.scheduling.stats import StaffingStatus

# Color definitions (RGB tuples, 0-1 scale)
COLORS = {
    StaffingStatus.EMPTY: (1.0, 1.0, 1.0),  # White
    StaffingStatus.UNDER: (1.0, 0.93, 0.7),  # Amber
    StaffingStatus.MET: (0.82, 0.94, 0.82),  # Green
    StaffingStatus.OVER: (0.98, 0.78, 0.78),  # Red
    "header": (0.88, 0.9, 0.95),
    "usage_bar": (0.4, 0.55, 0.85),
    "bar_track": (0.92, 0.92, 0.92),
}


class PDFGenerator:
    """Generates a printable PDF of the current week.

    Example:
        >>> generator = PDFGenerator()
        >>> generator.generate(engine, "roster.pdf")
    """

    def __init__(
        self,
        page_width: float = 792,  # Letter landscape width (11")
        page_height: float = 612,  # Letter landscape height (8.5")
        margin: float = 36,  # 0.5 inch margins
    ):
        self.page_width = page_width
        self.page_height = page_height
        self.margin = margin

    def generate(
        self,
        engine: SchedulingEngine,
        output_path: Union[str, Path],
        include_summary: bool = True,
    ) -> None:
        """Generate the PDF and save it to a file.

        Args:
            engine: Engine whose current week is rendered.
            output_path: Path to save the PDF.
            include_summary: Whether to add the worker hours page.
        """
        try:
            from reportlab.lib.pagesizes import landscape, letter
            from reportlab.pdfgen import canvas
        except ImportError:
            raise ImportError(
                "reportlab is required for PDF generation. "
                "Install with: pip install reportlab"
            )

        c = canvas.Canvas(str(output_path), pagesize=landscape(letter))
        self._draw(c, engine, include_summary)
        c.save()

    def generate_to_buffer(
        self,
        engine: SchedulingEngine,
        include_summary: bool = True,
    ) -> BytesIO:
        """Generate the PDF and return it as a bytes buffer."""
        try:
            from reportlab.lib.pagesizes import landscape, letter
            from reportlab.pdfgen import canvas
        except ImportError:
            raise ImportError(
                "reportlab is required for PDF generation. "
                "Install with: pip install reportlab"
            )

        buffer = BytesIO()
        c = canvas.Canvas(buffer, pagesize=landscape(letter))
        self._draw(c, engine, include_summary)
        c.save()
        buffer.seek(0)
        return buffer

    def _draw(self, c, engine: SchedulingEngine, include_summary: bool) -> None:
        self._draw_grid_page(c, engine)
        if include_summary:
            self._draw_summary_page(c, engine)

    def _draw_header(self, c, title: str, subtitle: str) -> None:
        c.setFillColorRGB(0, 0, 0)
        c.setFont("Helvetica-Bold", 16)
        c.drawString(self.margin, self.page_height - self.margin - 20, title)
        c.setFont("Helvetica", 10)
        c.drawString(self.margin, self.page_height - self.margin - 35, subtitle)

    def _draw_grid_page(self, c, engine: SchedulingEngine) -> None:
        """Draw the slot x day grid."""
        stats = engine.get_stats()
        mode = "on" if engine.get_contiguity_mode() else "off"
        self._draw_header(
            c,
            "Weekly Slot Roster",
            f"Total assigned: {stats.total_assigned_hours}h   Contiguity mode: {mode}",
        )

        slots = engine.list_slots()
        label_width = 80
        top = self.page_height - self.margin - 55
        col_width = (self.page_width - 2 * self.margin - label_width) / len(Day)
        header_height = 18
        row_height = (top - header_height - self.margin - 20) / len(slots)

        # Day headers
        c.setFont("Helvetica-Bold", 9)
        for i, day in enumerate(Day):
            x = self.margin + label_width + i * col_width
            c.setFillColorRGB(*COLORS["header"])
            c.rect(x, top - header_height, col_width, header_height, fill=1, stroke=1)
            c.setFillColorRGB(0, 0, 0)
            c.drawCentredString(x + col_width / 2, top - header_height + 5, day.label)

        y = top - header_height
        for slot in slots:
            y -= row_height
            required = engine.get_required_staff(slot.id)

            c.setFillColorRGB(0, 0, 0)
            c.setFont("Helvetica-Bold", 8)
            c.drawString(self.margin, y + row_height - 12, slot.label)
            c.setFont("Helvetica", 7)
            c.drawString(self.margin, y + row_height - 22, f"need {required}")

            for i, day in enumerate(Day):
                x = self.margin + label_width + i * col_width
                self._draw_cell(
                    c, engine, day, slot.id, required, x, y, col_width, row_height
                )

        c.setFont("Helvetica", 7)
        c.setFillColorRGB(0, 0, 0)
        c.drawString(
            self.margin,
            self.margin,
            "Amber: under target   Green: on target   Red: over target",
        )
        c.showPage()

    def _draw_cell(
        self,
        c,
        engine: SchedulingEngine,
        day: Day,
        slot_id: int,
        required: int,
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> None:
        """Draw one grid cell: status fill, names, and count/target."""
        names = engine.assigned(day, slot_id)
        status = engine.staffing_status(day, slot_id)

        c.setFillColorRGB(*COLORS[status])
        c.setStrokeColorRGB(0.6, 0.6, 0.6)
        c.rect(x, y, width, height, fill=1, stroke=1)

        c.setFillColorRGB(0, 0, 0)
        c.setFont("Helvetica", 7)
        line_y = y + height - 10
        for name in names:
            if line_y < y + 12:
                break
            c.drawString(x + 3, line_y, name[:16])
            line_y -= 8

        c.setFont("Helvetica-Bold", 7)
        c.drawRightString(x + width - 3, y + 3, f"{len(names)}/{required}")

    def _draw_summary_page(self, c, engine: SchedulingEngine) -> None:
        """Draw the worker hours table with usage bars."""
        stats = engine.get_stats()
        self._draw_header(
            c,
            "Worker Hours",
            f"{len(stats.workers)} workers, {stats.total_assigned_hours}h assigned",
        )

        columns = ["Name", "Assigned"] + [d.label for d in Day] + ["Left", "Usage"]
        widths = [110, 60] + [45] * len(Day) + [50, 150]
        y = self.page_height - self.margin - 70
        row_height = 16

        c.setFont("Helvetica-Bold", 9)
        x = self.margin
        for title, width in zip(columns, widths):
            c.drawString(x, y, title)
            x += width

        c.setFont("Helvetica", 9)
        for worker in stats.workers:
            y -= row_height
            values = (
                [worker.name, f"{worker.total_assigned}h"]
                + [
                    f"{worker.daily_hours[d]}h" if d in worker.daily_hours else "-"
                    for d in Day
                ]
                + [f"{worker.remaining_hours}h"]
            )
            x = self.margin
            for value, width in zip(values, widths):
                c.setFillColorRGB(0, 0, 0)
                c.drawString(x, y, value)
                x += width

            bar_width = widths[-1] - 40
            c.setFillColorRGB(*COLORS["bar_track"])
            c.rect(x, y - 2, bar_width, 10, fill=1, stroke=0)
            c.setFillColorRGB(*COLORS["usage_bar"])
            c.rect(x, y - 2, bar_width * min(worker.usage_rate, 100.0) / 100.0, 10, fill=1, stroke=0)
            c.setFillColorRGB(0, 0, 0)
            c.drawString(x + bar_width + 4, y, f"{worker.usage_rate:.0f}%")

        y -= row_height
        totals = stats.day_totals
        values = (
            ["Total", f"{stats.total_assigned_hours}h"]
            + [f"{totals[d]}h" if totals[d] else "-" for d in Day]
        )
        c.setFont("Helvetica-Bold", 9)
        x = self.margin
        for value, width in zip(values, widths):
            c.drawString(x, y, value)
            x += width

        c.showPage()
