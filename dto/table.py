"""
Table model DTOs: the read-only result of a table build.

    ShapeTable
      ├─ row_heights / col_widths   (consecutive boundary deltas)
      └─ grid[row][col] -> TableCell
           a spanning cell is the same object at every position it covers

Exporters (spreadsheet, HTML) only ever read these objects.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field, computed_field

from dto.diagnostics import BuildDiagnostics
from dto.geometry import Rect


class TableCell(BaseModel):
    row: int
    col: int
    row_span: int = 1
    col_span: int = 1

    # Relative to the table origin (top-left of the overall bounding region)
    bounds: Rect

    content: Any = None
    visible: bool = True
    fill: Optional[str] = None

    # Position of the originating shape in the builder's input; None for fillers
    shape_index: Optional[int] = None

    model_config = {"frozen": True}

    @property
    def is_filler(self) -> bool:
        return not self.visible

    @property
    def last_row(self) -> int:
        return self.row + self.row_span - 1

    @property
    def last_col(self) -> int:
        return self.col + self.col_span - 1

    def covers(self, row: int, col: int) -> bool:
        return self.row <= row <= self.last_row and self.col <= col <= self.last_col

    def is_origin(self, row: int, col: int) -> bool:
        return self.row == row and self.col == col


class ShapeTable(BaseModel):
    """Row/column grid reconstructed from a set of absolutely placed shapes."""

    origin_x: float = 0.0
    origin_y: float = 0.0
    row_heights: List[float]
    col_widths: List[float]
    grid: List[List[TableCell]]
    diagnostics: BuildDiagnostics = Field(default_factory=BuildDiagnostics)

    model_config = {"frozen": True}

    # ------------------------------------------------------------------
    # Read API
    # ------------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return len(self.row_heights)

    @property
    def col_count(self) -> int:
        return len(self.col_widths)

    @property
    def width(self) -> float:
        return sum(self.col_widths)

    @property
    def height(self) -> float:
        return sum(self.row_heights)

    def row_height(self, index: int) -> float:
        return self.row_heights[index]

    def col_width(self, index: int) -> float:
        return self.col_widths[index]

    def get_cell(self, row: int, col: int) -> TableCell:
        return self.grid[row][col]

    @computed_field  # type: ignore[misc]
    @property
    def cells(self) -> List[TableCell]:
        """Every distinct cell once, in row-major order of its origin."""
        return [
            cell
            for r, grid_row in enumerate(self.grid)
            for c, cell in enumerate(grid_row)
            if cell.is_origin(r, c)
        ]

    @property
    def content_cells(self) -> List[TableCell]:
        return [c for c in self.cells if c.visible]

    @property
    def filler_cells(self) -> List[TableCell]:
        return [c for c in self.cells if not c.visible]

    def is_intact(self, cell: TableCell) -> bool:
        """
        True when every position inside the cell's span references the cell.

        Only false after an overlap, where an earlier shape kept part of the
        region this cell's span describes.
        """
        return all(
            self.grid[r][c] is cell
            for r in range(cell.row, cell.last_row + 1)
            for c in range(cell.col, cell.last_col + 1)
        )
