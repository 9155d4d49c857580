"""Positional report row shared by both sheets."""

from dataclasses import dataclass
from typing import List, Optional, Tuple

# Column indexes of cells rendered as hyperlinks
LINK_COLUMNS = (2, 4)


@dataclass
class ReportRow:
    """
    One row of a report sheet.

    Columns are fixed: name, version, homepage/doc link, license,
    license link. Unknown cells stay None and are left empty.
    """

    name: str
    version: str
    link: Optional[str] = None
    license: Optional[str] = None
    license_link: Optional[str] = None

    def cells(self) -> List[Optional[str]]:
        return [self.name, self.version, self.link, self.license, self.license_link]

    def as_tuple(self) -> Tuple[Optional[str], ...]:
        return tuple(self.cells())
