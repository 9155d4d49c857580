"""Spreadsheet report generation."""

from .builder import (
    BACKEND_HEADERS,
    BACKEND_SHEET,
    DEFAULT_OUTPUT_FILE,
    WEB_HEADERS,
    WEB_SHEET,
    ReportBuilder,
)
from .row import ReportRow

__all__ = [
    "BACKEND_HEADERS",
    "BACKEND_SHEET",
    "DEFAULT_OUTPUT_FILE",
    "WEB_HEADERS",
    "WEB_SHEET",
    "ReportBuilder",
    "ReportRow",
]
