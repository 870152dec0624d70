"""The bordered cell style used for generated tables."""

import logging

from openpyxl import Workbook
from openpyxl.styles import Border, NamedStyle, Side

logger = logging.getLogger(__name__)

STYLE_NAME = 'Bordered'
BORDER_COLOR = 'FF000000'


def _unused_name(workbook: Workbook) -> str:
    taken = set(workbook.named_styles)
    name, n = STYLE_NAME, 1
    while name in taken:
        n += 1
        name = f'{STYLE_NAME} {n}'
    return name


def get_cell_style(workbook: Workbook) -> NamedStyle:
    """Create a new style with thin black borders on all four sides.

    Every call registers a fresh ``NamedStyle`` on ``workbook``; callers that
    want one shared style should keep the returned object.
    """
    thin = Side(style='thin', color=BORDER_COLOR)
    style = NamedStyle(
        name=_unused_name(workbook),
        border=Border(left=thin, right=thin, top=thin, bottom=thin),
    )
    workbook.add_named_style(style)
    logger.debug("Registered cell style '%s'", style.name)
    return style
