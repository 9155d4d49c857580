"""Cell styles for the report workbook."""

from openpyxl.styles import Alignment, Font

URL_FONT = Font(color="0000FF", underline="single")
URL_ALIGNMENT = Alignment(horizontal="left")
HEADER_FONT = Font(bold=True)


def style_url_cell(cell) -> None:
    """Render a cell holding a URL as a clickable hyperlink."""
    cell.hyperlink = cell.value
    cell.font = URL_FONT
    cell.alignment = URL_ALIGNMENT


def style_header_cell(cell) -> None:
    cell.font = HEADER_FONT
