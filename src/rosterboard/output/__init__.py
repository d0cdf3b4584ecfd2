"""Output generation for availability results (text, PDF)."""

from rosterboard.output.pdf_generator import BoardPDFGenerator
from rosterboard.output.text_report import TextReportGenerator

__all__ = [
    "BoardPDFGenerator",
    "TextReportGenerator",
]
