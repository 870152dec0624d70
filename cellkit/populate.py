"""Write lists of values down a column or along a row.

Existing content is overwritten without being cleared first; cells beyond
the supplied values are left alone.
"""

import logging
from collections.abc import Sequence

from openpyxl.cell import Cell
from openpyxl.styles import NamedStyle

from cellkit.accessors import Row, get_cell, get_row
from cellkit.utils import autofit_column

logger = logging.getLogger(__name__)

Style = NamedStyle | str | None


def _write(cell: Cell, value: str, style: Style) -> None:
    if style is not None:
        cell.style = style
    cell.value = value


def populate_column_of_cell(anchor_cell: Cell, values: Sequence[str], style: Style = None) -> None:
    """Write ``values`` downward starting at ``anchor_cell``.

    ``values[0]`` lands on the anchor itself, ``values[1]`` on the row below,
    and so on, all in the anchor's column.  The column is auto-fitted once
    everything is written.

    Args:
        anchor_cell: Top cell of the run.
        values:      Values to write, in order.
        style:       A ``NamedStyle`` (or registered style name) applied to
                     every written cell.  ``None`` keeps existing styling.
    """
    sheet = anchor_cell.parent
    column = anchor_cell.column - 1
    first_row = anchor_cell.row - 1

    for offset, value in enumerate(values):
        _write(get_cell(get_row(sheet, first_row + offset), column), value, style)

    autofit_column(sheet, column)
    logger.debug(
        "Wrote %d values down '%s'!%s", len(values), sheet.title, anchor_cell.coordinate,
    )


def populate_row_with_list(row: Row, values: Sequence[str], style: Style = None) -> None:
    """Write ``values`` into ``row`` from column 0, auto-fitting each column."""
    for i, value in enumerate(values):
        _write(get_cell(row, i), value, style)
        autofit_column(row.sheet, i)
    logger.debug("Wrote %d values along '%s' row %d", len(values), row.sheet.title, row.number)
