"""Get-or-create helpers for cells, rows, named ranges and styles on openpyxl workbooks."""

from cellkit.accessors import (
    Row,
    get_cell,
    get_next_available_header_cell,
    get_next_available_row,
    get_row,
)
from cellkit.names import mark_named_range, range_formula
from cellkit.populate import populate_column_of_cell, populate_row_with_list
from cellkit.styles import get_cell_style

__all__ = [
    'Row',
    'get_cell',
    'get_cell_style',
    'get_next_available_header_cell',
    'get_next_available_row',
    'get_row',
    'mark_named_range',
    'populate_column_of_cell',
    'populate_row_with_list',
    'range_formula',
]
