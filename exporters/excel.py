"""
Writes a ``ShapeTable`` into an openpyxl worksheet.

The table is anchored at A1:
  1. Column widths (points → Excel character units) and row heights.
  2. One merged range per cell spanning more than one row or column.
  3. Cell text and solid background fill, written at each cell's origin.

Filler cells only contribute their merge range; they carry no value.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Optional

from openpyxl import Workbook
from openpyxl.styles import PatternFill
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from dto.table import ShapeTable, TableCell

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"^#?([0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")


def char_width_from_points(points: float) -> float:
    """
    Convert 72pt/inch units to Excel character widths of the default
    Arial 10 "Normal" style: 720 pt measure as 137.140625 characters.
    """
    return points * 137.140625 / 720


def _argb(color: Optional[str]) -> Optional[str]:
    """``#RRGGBB`` / ``#AARRGGBB`` → openpyxl ARGB, or None if not a hex colour."""
    if not color:
        return None
    m = _HEX_COLOR.match(color.strip())
    if not m:
        logger.debug("Ignoring unsupported fill colour %r", color)
        return None
    value = m.group(1).upper()
    return value if len(value) == 8 else f"FF{value}"


def _cell_text(content: Any) -> Optional[str]:
    if content is None:
        return None
    # Excel doesn't render tabs
    return str(content).replace("\t", " ")


class ExcelTableWriter:
    """
    Usage::

        writer = ExcelTableWriter()
        writer.write(table, ws)
    """

    def __init__(self, show_gridlines: bool = False) -> None:
        self.show_gridlines = show_gridlines

    def _write_dimensions(self, table: ShapeTable, ws: Worksheet) -> None:
        for col in range(table.col_count):
            letter = get_column_letter(col + 1)
            ws.column_dimensions[letter].width = char_width_from_points(
                table.col_width(col)
            )
        for row in range(table.row_count):
            ws.row_dimensions[row + 1].height = table.row_height(row)

    def _write_cell(self, table: ShapeTable, cell: TableCell, ws: Worksheet) -> None:
        if (cell.row_span > 1 or cell.col_span > 1) and table.is_intact(cell):
            ws.merge_cells(
                start_row=cell.row + 1,
                start_column=cell.col + 1,
                end_row=cell.last_row + 1,
                end_column=cell.last_col + 1,
            )

        if cell.is_filler:
            return

        xl_cell = ws.cell(row=cell.row + 1, column=cell.col + 1)
        xl_cell.value = _cell_text(cell.content)

        argb = _argb(cell.fill)
        if argb is not None:
            xl_cell.fill = PatternFill(fill_type="solid", fgColor=argb)

    def write(self, table: ShapeTable, ws: Worksheet) -> None:
        self._write_dimensions(table, ws)

        # get_cell() returns the same cell for every position it spans;
        # only its origin position is written.
        for row in range(table.row_count):
            for col in range(table.col_count):
                cell = table.get_cell(row, col)
                if cell.is_origin(row, col):
                    self._write_cell(table, cell, ws)

        ws.sheet_view.showGridLines = self.show_gridlines
        logger.info(
            "Wrote %d x %d table to sheet '%s'",
            table.row_count,
            table.col_count,
            ws.title,
        )


def write_workbook(
    table: ShapeTable,
    path: str,
    sheet_title: str = "Sheet1",
    show_gridlines: bool = False,
) -> None:
    """Write *table* to a new single-sheet workbook at *path*."""
    wb = Workbook()
    ws = wb.active
    ws.title = sheet_title
    ExcelTableWriter(show_gridlines=show_gridlines).write(table, ws)
    wb.save(path)
    wb.close()
