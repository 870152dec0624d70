"""Tests for the row and cell accessors."""

import openpyxl

from cellkit.accessors import (
    Row,
    get_cell,
    get_next_available_header_cell,
    get_next_available_row,
    get_row,
)


def _sheet():
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Sheet1"
    return ws


# ─── get-or-create ───────────────────────────────────────────────────────────

def test_get_cell_creates_empty_cell():
    ws = _sheet()
    cell = get_cell(get_row(ws, 4), 2)

    assert cell.coordinate == "C5"
    assert cell.value is None


def test_get_cell_returns_same_cell():
    ws = _sheet()
    row = get_row(ws, 0)

    first = get_cell(row, 3)
    first.value = "kept"
    second = get_cell(row, 3)

    assert second is first
    assert second.value == "kept"


def test_get_cell_returns_existing_content():
    ws = _sheet()
    ws["B1"] = "Hello"

    assert get_cell(get_row(ws, 0), 1).value == "Hello"


def test_get_row_is_idempotent():
    ws = _sheet()

    assert get_row(ws, 7) == get_row(ws, 7)
    assert get_row(ws, 7) != get_row(ws, 8)
    assert get_row(ws, 7).number == 8


def test_row_cells_sorted_by_column():
    ws = _sheet()
    ws["C2"] = "c"
    ws["A2"] = "a"
    ws["B3"] = "other row"

    cells = Row(ws, 1).cells
    assert [c.value for c in cells] == ["a", "c"]


# ─── next available header cell ──────────────────────────────────────────────

def test_next_header_cell_empty_sheet():
    ws = _sheet()
    cell = get_next_available_header_cell(ws)

    assert cell.row == 1
    assert cell.column == 1


def test_next_header_cell_after_filled_columns():
    ws = _sheet()
    for i, title in enumerate(["Id", "Name", "Qty"]):
        get_cell(get_row(ws, 0), i).value = title

    cell = get_next_available_header_cell(ws)
    assert cell.coordinate == "D1"


def test_next_header_cell_stops_at_empty_string():
    ws = _sheet()
    ws["A1"] = "Id"
    ws["B1"] = ""
    ws["C1"] = "After gap"

    assert get_next_available_header_cell(ws).coordinate == "B1"


def test_next_header_cell_numeric_value_is_occupied():
    ws = _sheet()
    ws["A1"] = 0

    assert get_next_available_header_cell(ws).coordinate == "B1"


# ─── next available row ──────────────────────────────────────────────────────

def test_next_row_empty_sheet():
    ws = _sheet()
    assert get_next_available_row(ws) == get_row(ws, 0)


def test_next_row_after_filled_rows():
    ws = _sheet()
    ws["A1"] = "header"
    ws["A2"] = "x"
    ws["A3"] = "y"

    row = get_next_available_row(ws)
    assert row.index == 3
    assert row.number == 4


def test_next_row_probes_first_column_only():
    ws = _sheet()
    ws["A1"] = "header"
    ws["B2"] = "no probe in A"

    assert get_next_available_row(ws).index == 1


def test_next_row_numeric_probe_is_occupied():
    ws = _sheet()
    ws["A1"] = 0

    assert get_next_available_row(ws).index == 1
