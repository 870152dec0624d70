"""Get-or-create accessors for rows and cells.

All indices are 0-based.  openpyxl has no row object of its own, so a
:class:`Row` is a lightweight handle on a worksheet and a row index; cells
are real openpyxl ``Cell`` objects, created on first access.

The "next available" scans walk upward from index 0 and stop at the first
blank probe cell.  They assume a densely packed, append-only sheet.
"""

import logging
from dataclasses import dataclass

from openpyxl.cell import Cell
from openpyxl.worksheet.worksheet import Worksheet

from cellkit.utils import is_blank

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Row:
    """Handle on row ``index`` of ``sheet``.

    Handles are cheap values: two handles for the same sheet and index compare
    equal.  ``cells`` lists only cells that already exist and never creates
    new ones.
    """

    sheet: Worksheet
    index: int   # 0-based

    @property
    def number(self) -> int:
        """1-based row number as shown in Excel."""
        return self.index + 1

    @property
    def cells(self) -> tuple[Cell, ...]:
        """Cells already materialised in this row, ordered by column."""
        found = [
            cell for (row, _col), cell in self.sheet._cells.items()
            if row == self.number
        ]
        return tuple(sorted(found, key=lambda c: c.column))


def get_cell(row: Row, index: int) -> Cell:
    """Return the cell at column ``index`` of ``row``, creating it if absent."""
    return row.sheet.cell(row=row.number, column=index + 1)


def get_row(sheet: Worksheet, index: int) -> Row:
    """Return the row at ``index`` of ``sheet``."""
    return Row(sheet, index)


def get_next_available_header_cell(sheet: Worksheet) -> Cell:
    """Return the first blank cell of row 0, scanning from column 0."""
    header = get_row(sheet, 0)
    i = 0
    while True:
        cell = get_cell(header, i)
        if is_blank(cell.value):
            logger.debug("Next header cell in '%s': %s", sheet.title, cell.coordinate)
            return cell
        i += 1


def get_next_available_row(sheet: Worksheet) -> Row:
    """Return the first row whose column-0 cell is blank."""
    i = 0
    while True:
        row = get_row(sheet, i)
        if is_blank(get_cell(row, 0).value):
            logger.debug("Next row in '%s': %d", sheet.title, row.number)
            return row
        i += 1
