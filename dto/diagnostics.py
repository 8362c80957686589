"""
Per-build diagnostics.

A fresh ``BuildDiagnostics`` is created for every table build (or passed in
by the caller), so concurrent builds never share warning state.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class OverlapWarning(BaseModel):
    """A shape that tried to claim a grid position another cell already holds."""

    shape_index: int
    row: int
    col: int
    occupant_index: Optional[int] = None


class BuildDiagnostics(BaseModel):
    overlaps: List[OverlapWarning] = []

    # Input indices of shapes dropped as too thin to form a cell.
    filtered: List[int] = []

    @property
    def has_overlaps(self) -> bool:
        return bool(self.overlaps)

    def record_overlap(
        self,
        shape_index: int,
        row: int,
        col: int,
        occupant_index: Optional[int] = None,
    ) -> None:
        # Only the first overlap of a build reaches the log.
        if not self.overlaps:
            logger.warning(
                "Overlapping shapes: shape %d collides with shape %s at row %d, col %d",
                shape_index,
                occupant_index,
                row,
                col,
            )
        self.overlaps.append(
            OverlapWarning(
                shape_index=shape_index,
                row=row,
                col=col,
                occupant_index=occupant_index,
            )
        )

    def record_filtered(self, shape_index: int) -> None:
        self.filtered.append(shape_index)
