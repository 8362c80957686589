"""
Table builder — turns absolutely positioned shapes into a row/column grid.

    build_table(shapes, min_bounds)  ← Main Entry Point
    │
    ├─ filter_shapes()       hairline shapes are dropped
    ├─ extract_boundaries()  None → "no table"
    ├─ map_shapes()          content cells, spans, overlap precedence
    ├─ fill_gaps()           invisible filler cells
    └─ ShapeTable            read-only result for the exporters

The same tolerance is used by every stage.  The build is a pure function
of its input; warnings go to the per-build ``BuildDiagnostics``.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from dto.diagnostics import BuildDiagnostics
from dto.geometry import Rect
from dto.shape import InputShape
from dto.table import ShapeTable
from grid import (
    CELL_ALIGNMENT_TOLERANCE,
    extract_boundaries,
    fill_gaps,
    filter_shapes,
    map_shapes,
)

logger = logging.getLogger(__name__)


def build_table(
    shapes: Sequence[InputShape],
    min_bounds: Optional[Rect] = None,
    tolerance: Optional[float] = None,
    diagnostics: Optional[BuildDiagnostics] = None,
) -> Optional[ShapeTable]:
    """
    Build a ``ShapeTable`` from *shapes*.

    *min_bounds*, if given, is a rectangle the table must cover at least
    (e.g. the page's printable area).  Returns ``None`` when the shapes do
    not define at least one row and one column.
    """
    if tolerance is None:
        tolerance = CELL_ALIGNMENT_TOLERANCE
    if diagnostics is None:
        diagnostics = BuildDiagnostics()

    if not shapes and min_bounds is None:
        return None

    survivors = filter_shapes(shapes, tolerance, diagnostics)

    boundaries = extract_boundaries(
        [shape.bounds for _, shape in survivors], min_bounds, tolerance
    )
    if boundaries is None:
        return None
    row_bounds, col_bounds = boundaries

    grid = map_shapes(survivors, row_bounds, col_bounds, tolerance, diagnostics)
    fillers = fill_gaps(grid, row_bounds, col_bounds)

    table = ShapeTable(
        origin_x=col_bounds[0],
        origin_y=row_bounds[0],
        row_heights=[b - a for a, b in zip(row_bounds, row_bounds[1:])],
        col_widths=[b - a for a, b in zip(col_bounds, col_bounds[1:])],
        grid=grid,
        diagnostics=diagnostics,
    )

    logger.info(
        "Built %d x %d table from %d shape(s): %d content cell(s), %d filler(s), %d overlap(s)",
        table.row_count,
        table.col_count,
        len(shapes),
        len(table.content_cells),
        fillers,
        len(diagnostics.overlaps),
    )
    return table
