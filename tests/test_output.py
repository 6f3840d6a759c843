"""Tests for text and PDF output."""

import pytest

from slotroster.domain.models import Day
from slotroster.output.pdf_generator import PDFGenerator
from slotroster.output.text_report import TextReportGenerator
from slotroster.scheduling.engine import SchedulingEngine


@pytest.fixture
def engine():
    engine = SchedulingEngine.create_default(seed=1)
    engine.assign("Sukyung", Day.MONDAY, 1)
    engine.assign("Sukyung", Day.MONDAY, 2)
    engine.assign("Kihwan", Day.SATURDAY, 1)
    return engine


class TestTextReport:
    """Tests for TextReportGenerator."""

    def test_sections(self, engine):
        content = TextReportGenerator().generate_to_string(engine)
        assert "WEEKLY SLOT ROSTER" in content
        assert "Contiguity mode: on" in content
        assert "Total assigned: 6h" in content
        assert "SCHEDULE (count/target" in content
        assert "WORKER HOURS" in content
        assert "UNDERSTAFFED CELLS" in content

    def test_grid_shows_names_and_counts(self, engine):
        content = TextReportGenerator().generate_to_string(engine)
        assert "07:00-09:00" in content
        assert "1/2-" in content
        assert "Sukyung" in content
        assert "Kihwan" in content

    def test_shortfalls_listed(self, engine):
        content = TextReportGenerator().generate_to_string(engine)
        assert "Mon 07:00-09:00: 1/2" in content

    def test_no_shortfalls(self, engine):
        for slot in engine.list_slots():
            engine.set_required_staff(slot.id, 0)
        content = TextReportGenerator().generate_to_string(engine)
        assert content.rstrip().endswith("None")

    def test_contiguity_off(self, engine):
        engine.set_contiguity_mode(False)
        content = TextReportGenerator().generate_to_string(engine)
        assert "Contiguity mode: off" in content

    def test_generate_writes_file(self, engine, tmp_path):
        path = tmp_path / "week.txt"
        content = TextReportGenerator().generate(engine, path)
        assert path.read_text(encoding="utf-8") == content


class TestPDFGenerator:
    """Tests for PDFGenerator."""

    def test_buffer_is_pdf(self, engine):
        pytest.importorskip("reportlab")
        buffer = PDFGenerator().generate_to_buffer(engine)
        assert buffer.getvalue().startswith(b"%PDF")

    def test_generate_after_auto_fill(self, engine, tmp_path):
        pytest.importorskip("reportlab")
        engine.auto_fill()
        path = tmp_path / "week.pdf"
        PDFGenerator().generate(engine, path, include_summary=False)
        assert path.exists()
        assert path.read_bytes()[:4] == b"%PDF"
