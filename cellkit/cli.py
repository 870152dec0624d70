"""CLI entry point for cellkit."""

import argparse
import logging
from pathlib import Path

import openpyxl
from openpyxl.utils.cell import coordinate_from_string

from cellkit.accessors import get_next_available_header_cell, get_next_available_row
from cellkit.names import mark_named_range
from cellkit.populate import populate_column_of_cell, populate_row_with_list
from cellkit.styles import STYLE_NAME, get_cell_style

logger = logging.getLogger(__name__)


def _default_output(input_path: str) -> str:
    p = Path(input_path)
    return str(p.with_name(f'{p.stem}_edited{p.suffix}'))


def _open_sheet(wb, title: str | None):
    """Return the sheet named ``title`` (created if missing), or the active sheet."""
    if title is None:
        return wb.active
    if title not in wb.sheetnames:
        logger.info("Sheet '%s' not found, creating it.", title)
        return wb.create_sheet(title)
    return wb[title]


def _bordered_style(wb):
    """Reuse the workbook's bordered style if an earlier run registered one."""
    if STYLE_NAME in wb.named_styles:
        return STYLE_NAME
    return get_cell_style(wb)


def _add_row(ws, args) -> str:
    row = get_next_available_row(ws)
    populate_row_with_list(row, args.values, _bordered_style(ws.parent))
    return f'row {row.number}'


def _add_column(ws, args) -> str:
    header = get_next_available_header_cell(ws)
    populate_column_of_cell(header, args.values, _bordered_style(ws.parent))
    return f'column {header.column_letter}'


def _name_range(ws, args) -> str:
    col, row = coordinate_from_string(args.cell)
    defined = mark_named_range(ws[f'{col}{row}'], args.rows, args.cols, args.name, args.skip_first)
    return f'{defined.name} = {defined.attr_text}'


COMMANDS = {
    'add-row': _add_row,
    'add-column': _add_column,
    'name-range': _name_range,
}


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="cellkit",
        description="Append rows and columns and mark named ranges in an Excel workbook.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--input", "-i", required=True, help="Input Excel file")
    common.add_argument("--output", "-o", default=None, help="Output Excel file (default: *_edited.xlsx)")
    common.add_argument("--sheet", "-s", default=None, help="Sheet name (default: active sheet)")

    # add-row
    p_row = subparsers.add_parser("add-row", parents=[common], help="Write values into the next empty row")
    p_row.add_argument("values", nargs="+", help="Cell values, left to right")

    # add-column
    p_col = subparsers.add_parser("add-column", parents=[common], help="Write a header and values into the next empty column")
    p_col.add_argument("values", nargs="+", help="Header followed by cell values, top to bottom")

    # name-range
    p_name = subparsers.add_parser("name-range", parents=[common], help="Create or update a named range")
    p_name.add_argument("--cell", "-c", required=True, help="Anchor cell, e.g. B2")
    p_name.add_argument("--rows", type=int, required=True, help="Rows below the anchor to cover")
    p_name.add_argument("--cols", type=int, required=True, help="Columns right of the anchor to cover")
    p_name.add_argument("--name", "-n", required=True, help="Range name")
    p_name.add_argument("--skip-first", action="store_true", default=False, help="Start one row below the anchor")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    output = args.output or _default_output(args.input)

    wb = openpyxl.load_workbook(args.input)
    ws = _open_sheet(wb, args.sheet)
    result = COMMANDS[args.command](ws, args)
    wb.save(output)
    wb.close()

    logger.info("%s: %s in '%s' -> %s", args.command, result, ws.title, output)
    print(f"Output written to: {output}")


if __name__ == "__main__":
    main()
