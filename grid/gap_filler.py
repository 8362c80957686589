"""
GapFiller — covers unclaimed grid positions with invisible filler cells.

The scan is row-major: at the first empty position take the longest empty
run to the right, then extend it downward while the same column range is
empty in the next row.  This greedy partition is not minimal, and
exporters rely on the exact regions it produces.
"""

from __future__ import annotations

import logging
from typing import Sequence

from dto.table import TableCell
from grid.mapper import CellGrid, cell_bounds

logger = logging.getLogger(__name__)


def _run_is_empty(grid: CellGrid, row: int, col: int, col_span: int) -> bool:
    return all(grid[row][c] is None for c in range(col, col + col_span))


def fill_gaps(
    grid: CellGrid,
    row_bounds: Sequence[float],
    col_bounds: Sequence[float],
) -> int:
    """Fill every ``None`` in *grid* in place; return the number of fillers."""
    row_count = len(grid)
    col_count = len(grid[0]) if grid else 0
    fillers = 0

    for row in range(row_count):
        col = 0
        while col < col_count:
            if grid[row][col] is not None:
                col += 1
                continue

            col_span = 1
            while col + col_span < col_count and grid[row][col + col_span] is None:
                col_span += 1

            row_span = 1
            while row + row_span < row_count and _run_is_empty(
                grid, row + row_span, col, col_span
            ):
                row_span += 1

            filler = TableCell(
                row=row,
                col=col,
                row_span=row_span,
                col_span=col_span,
                bounds=cell_bounds(row_bounds, col_bounds, row, col, row_span, col_span),
                content=None,
                visible=False,
            )
            for r in range(row, row + row_span):
                for c in range(col, col + col_span):
                    grid[r][c] = filler

            fillers += 1
            col += col_span

    logger.debug("Created %d filler cell(s)", fillers)
    return fillers
