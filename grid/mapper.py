"""
GridMapper — places every surviving shape on the boundary grid.

For each shape, in input order:
  1. Look up its origin row/column from its top-left edges.
  2. Grow its row/column span until the far edge matches a boundary.
  3. Create one ``TableCell`` and write it into every position it covers.

Input order defines precedence: a position that is already claimed keeps
its occupant and the collision is recorded as an overlap.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from dto.diagnostics import BuildDiagnostics
from dto.geometry import Rect
from dto.shape import InputShape
from dto.table import TableCell
from grid.boundaries import search_boundary
from grid.errors import GridStructureError

logger = logging.getLogger(__name__)

CellGrid = List[List[Optional[TableCell]]]


def empty_grid(row_count: int, col_count: int) -> CellGrid:
    return [[None] * col_count for _ in range(row_count)]


def cell_bounds(
    row_bounds: Sequence[float],
    col_bounds: Sequence[float],
    row: int,
    col: int,
    row_span: int,
    col_span: int,
) -> Rect:
    """Bounds of a grid region, relative to the first row/column boundary."""
    return Rect(
        x=col_bounds[col] - col_bounds[0],
        y=row_bounds[row] - row_bounds[0],
        width=col_bounds[col + col_span] - col_bounds[col],
        height=row_bounds[row + row_span] - row_bounds[row],
    )


def _locate(boundaries: Sequence[float], value: float, tolerance: float, axis: str) -> int:
    index = search_boundary(boundaries, value, tolerance)
    if index < 0 or index >= len(boundaries) - 1:
        raise GridStructureError(
            f"Internal error: {axis} origin {value!r} not found among boundaries"
        )
    return index


def _span(
    boundaries: Sequence[float],
    start: int,
    end_value: float,
    tolerance: float,
    axis: str,
) -> int:
    """Number of intervals from *start* until a boundary matches *end_value*."""
    span = 1
    while abs(boundaries[start + span] - end_value) > tolerance:
        span += 1
        if start + span >= len(boundaries):
            raise GridStructureError(
                f"Internal error: couldn't find last {axis} boundary for {end_value!r}"
            )
    return span


def map_shapes(
    shapes: Sequence[Tuple[int, InputShape]],
    row_bounds: Sequence[float],
    col_bounds: Sequence[float],
    tolerance: float,
    diagnostics: BuildDiagnostics,
) -> CellGrid:
    """
    Return a partially filled grid of ``TableCell`` references.  Positions no
    shape covers are left as ``None`` for the gap filler.
    """
    grid = empty_grid(len(row_bounds) - 1, len(col_bounds) - 1)

    for index, shape in shapes:
        bounds = shape.bounds
        col = _locate(col_bounds, bounds.x, tolerance, "column")
        row = _locate(row_bounds, bounds.y, tolerance, "row")

        occupant = grid[row][col]
        if occupant is not None:
            diagnostics.record_overlap(index, row, col, occupant.shape_index)
            continue

        row_span = _span(row_bounds, row, bounds.max_y, tolerance, "row")
        col_span = _span(col_bounds, col, bounds.max_x, tolerance, "column")

        cell = TableCell(
            row=row,
            col=col,
            row_span=row_span,
            col_span=col_span,
            bounds=cell_bounds(row_bounds, col_bounds, row, col, row_span, col_span),
            content=shape.content,
            visible=True,
            fill=shape.effective_fill(),
            shape_index=index,
        )

        for r in range(row, row + row_span):
            for c in range(col, col + col_span):
                occupant = grid[r][c]
                if occupant is None:
                    grid[r][c] = cell
                elif occupant is not cell:
                    diagnostics.record_overlap(index, r, c, occupant.shape_index)

    return grid
