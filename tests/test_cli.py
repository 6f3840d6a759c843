"""Tests for the command-line interface."""

import pytest

from slotroster.cli import main


class TestDemo:
    """Tests for the demo command."""

    def test_demo_prints_report(self, capsys):
        assert main(["demo", "--seed", "7"]) == 0
        out = capsys.readouterr().out
        assert "Auto-fill placed" in out
        assert "WEEKLY SLOT ROSTER" in out
        assert "Audit: PASSED" in out

    def test_demo_without_contiguity(self, capsys):
        assert main(["demo", "--seed", "7", "--no-contiguity"]) == 0
        out = capsys.readouterr().out
        assert "Contiguity mode: off" in out
        assert "Audit: PASSED" in out

    def test_demo_writes_report_file(self, capsys, tmp_path):
        path = tmp_path / "week.txt"
        assert main(["demo", "-s", "3", "--report", str(path)]) == 0
        out = capsys.readouterr().out
        assert f"Report written to {path}" in out
        assert "WEEKLY SLOT ROSTER" in path.read_text(encoding="utf-8")

    def test_demo_writes_pdf(self, capsys, tmp_path):
        pytest.importorskip("reportlab")
        path = tmp_path / "week.pdf"
        assert main(["demo", "-s", "3", "-o", str(path)]) == 0
        assert path.exists()


class TestCheckPattern:
    """Tests for the check-pattern command."""

    def test_valid_pattern(self, capsys):
        assert main(["check-pattern", "4", "1", "2"]) == 0
        assert "[1, 2, 4]: valid (6h)" in capsys.readouterr().out

    def test_invalid_pattern(self, capsys):
        assert main(["check-pattern", "1", "3"]) == 1
        assert "[1, 3]: invalid" in capsys.readouterr().out

    def test_repeated_slot(self, capsys):
        assert main(["check-pattern", "2", "2"]) == 1
        assert "repeated slot" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out.lower()
