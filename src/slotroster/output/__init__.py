"""Output generation for week rosters (text, PDF)."""

from slotroster.output.pdf_generator import PDFGenerator
from slotroster.output.text_report import TextReportGenerator

__all__ = [
    "PDFGenerator",
    "TextReportGenerator",
]
