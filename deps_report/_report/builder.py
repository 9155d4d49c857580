"""Workbook builder for the dependency report."""

import threading
from pathlib import Path
from typing import Dict, List, Union

from openpyxl import Workbook
from openpyxl.worksheet.worksheet import Worksheet

from deps_report.exceptions import ReportWriteError
from deps_report.logging_config import logger

from .formatter import style_header_cell, style_url_cell
from .row import LINK_COLUMNS, ReportRow

DEFAULT_OUTPUT_FILE = "deps_report.xlsx"

WEB_SHEET = "Web"
BACKEND_SHEET = "Backend"

WEB_HEADERS = ["Name", "Version", "Homepage/Doc-link", "License", "License-link"]
BACKEND_HEADERS = ["Name", "Version", "Doc-link", "License", "License-link"]


class ReportBuilder:
    """
    Accumulates report rows into named sheets and saves them as .xlsx.

    Nothing touches the filesystem until ``save`` is called, so a run that
    fails part way leaves no output file behind. Row writes are serialized
    with a lock because openpyxl worksheets are not safe for concurrent
    mutation.

    Example:
        builder = ReportBuilder("deps_report.xlsx")
        builder.add_sheet("Web", WEB_HEADERS)
        builder.write_row("Web", ReportRow(name="react", version="18.2.0"))
        builder.save()
    """

    def __init__(self, output_path: Union[str, Path] = DEFAULT_OUTPUT_FILE) -> None:
        self.output_path = Path(output_path)
        self._workbook = Workbook()
        # Drop the default empty sheet; every sheet is added explicitly
        self._workbook.remove(self._workbook.active)
        self._sheets: Dict[str, Worksheet] = {}
        self._lock = threading.Lock()

    def add_sheet(self, name: str, headers: List[str]) -> None:
        """
        Create a sheet and write its header row.

        Args:
            name: Sheet title
            headers: Column titles

        Raises:
            ReportWriteError: If a sheet with this name already exists
        """
        with self._lock:
            if name in self._sheets:
                raise ReportWriteError(f"Failed to create worksheet: '{name}' already exists")
            worksheet = self._workbook.create_sheet(title=name)
            worksheet.append(headers)
            for cell in worksheet[1]:
                style_header_cell(cell)
            self._sheets[name] = worksheet

    def write_row(self, sheet: str, row: ReportRow) -> None:
        """
        Append a row to a sheet.

        Args:
            sheet: Name of a sheet created with add_sheet
            row: Row to append

        Raises:
            ReportWriteError: If the sheet does not exist
        """
        with self._lock:
            worksheet = self._sheets.get(sheet)
            if worksheet is None:
                raise ReportWriteError(f"Unknown worksheet: '{sheet}'")

            worksheet.append(row.cells())
            for column in LINK_COLUMNS:
                cell = worksheet.cell(row=worksheet.max_row, column=column + 1)
                if cell.value:
                    style_url_cell(cell)

    def rows(self, sheet: str) -> List[tuple]:
        """Return the data rows of a sheet (header excluded) as value tuples."""
        worksheet = self._sheets[sheet]
        return [tuple(r) for r in worksheet.iter_rows(min_row=2, values_only=True)]

    def save(self) -> Path:
        """
        Write the workbook to disk.

        Returns:
            Path of the written file

        Raises:
            ReportWriteError: If the file cannot be written
        """
        try:
            self._workbook.save(self.output_path)
        except OSError as e:
            raise ReportWriteError(f"Failed to save workbook {self.output_path}: {e}") from e
        logger.info(f"Report saved to {self.output_path}")
        return self.output_path
