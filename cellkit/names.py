"""Workbook-level named ranges anchored on a cell.

A named range is stored as an absolute-reference formula::

    Data!$B$2:$D$5

The start column is always the anchor's own column.  ``skip_first_row``
moves the start row down by one (typically to skip a header) and shortens
the span by one so the end row stays where it was.
"""

import logging

from openpyxl.cell import Cell
from openpyxl.workbook.defined_name import DefinedName

from cellkit.utils import column_letter, quote_sheet_title

logger = logging.getLogger(__name__)


def range_formula(sheet_title: str, start_col: str, start_row: int, end_col: str, end_row: int) -> str:
    """Build ``Sheet!$A$1:$B$2`` from column letters and 1-based row numbers."""
    return (
        f'{quote_sheet_title(sheet_title)}!'
        f'${start_col}${start_row}:${end_col}${end_row}'
    )


def mark_named_range(
    anchor_cell: Cell,
    row_span: int,
    col_span: int,
    range_name: str,
    skip_first_row: bool = False,
) -> DefinedName:
    """Create or update the named range ``range_name`` anchored at ``anchor_cell``.

    Args:
        anchor_cell:    Cell whose coordinates start the range.
        row_span:       Rows to extend below the start row.
        col_span:       Columns to extend right of the anchor column.
        range_name:     Workbook-level name.  An existing name, compared
                        case-insensitively, is repointed and keeps its
                        original spelling.
        skip_first_row: Start one row below the anchor.

    Returns:
        The ``DefinedName`` now holding the formula.
    """
    sheet = anchor_cell.parent
    start_row = anchor_cell.row + 1 if skip_first_row else anchor_cell.row
    end_row = start_row + (row_span - 1 if skip_first_row else row_span)
    end_col = column_letter(anchor_cell.column - 1 + col_span)

    formula = range_formula(sheet.title, anchor_cell.column_letter, start_row, end_col, end_row)

    names = sheet.parent.defined_names
    # Excel matches defined names case-insensitively
    defined = next(
        (d for key, d in names.items() if key.casefold() == range_name.casefold()),
        None,
    )
    if defined is None:
        defined = DefinedName(range_name, attr_text=formula)
        names.add(defined)
        logger.debug("Created named range %s = %s", range_name, formula)
    else:
        logger.debug("Repointed named range %s: %s -> %s", range_name, defined.attr_text, formula)
        defined.attr_text = formula
    return defined
