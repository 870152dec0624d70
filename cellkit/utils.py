"""Helper functions for cellkit.

openpyxl addresses rows and columns from 1; the public cellkit API is
zero-based.
"""

import re

from openpyxl.utils import get_column_letter

_PLAIN_TITLE = re.compile(r'^[A-Za-z_][A-Za-z0-9_.]*$')
_CELL_LIKE = re.compile(r'^[A-Za-z]{1,3}\d+$')

AUTOFIT_PADDING = 2


def is_blank(value) -> bool:
    """True for an empty probe value (``None`` or ``''``)."""
    return value is None or value == ''


def column_letter(index: int) -> str:
    """Convert a 0-based column index to its letter label (0 -> 'A')."""
    return get_column_letter(index + 1)


def quote_sheet_title(title: str) -> str:
    """Quote a sheet title for use in a formula, e.g. ``'My Sheet'``."""
    if _PLAIN_TITLE.match(title) and not _CELL_LIKE.match(title):
        return title
    return "'" + title.replace("'", "''") + "'"


def autofit_column(sheet, index: int) -> None:
    """Resize a 0-based column to the longest value it holds.

    Width is measured in characters.  Empty columns keep their width.
    """
    widths = [
        len(str(value))
        for (value,) in sheet.iter_rows(min_col=index + 1, max_col=index + 1, values_only=True)
        if not is_blank(value)
    ]
    if not widths:
        return
    sheet.column_dimensions[column_letter(index)].width = max(widths) + AUTOFIT_PADDING
