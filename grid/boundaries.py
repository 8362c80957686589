"""
Row / column boundary extraction.

Every surviving shape contributes its top and bottom edge as row candidates
and its left and right edge as column candidates.  The candidates are
sorted and collapsed so that edges closer than the tolerance become one
grid line; the earliest (smallest) value of each run is kept.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from dto.geometry import Rect

logger = logging.getLogger(__name__)


def unique_sorted(values: Sequence[float], tolerance: float) -> List[float]:
    """
    Collapse an ascending sequence: a value is kept only when it lies more
    than *tolerance* above the last kept value.
    """
    unique: List[float] = []
    for value in values:
        if not unique or abs(value - unique[-1]) > tolerance:
            unique.append(float(value))
    return unique


def search_boundary(boundaries: Sequence[float], value: float, tolerance: float) -> int:
    """
    Binary search over ascending *boundaries* treating any entry within
    *tolerance* of *value* as a match.  Returns the index, or -1.
    """
    first, last = 0, len(boundaries) - 1
    while first <= last:
        middle = (first + last) // 2
        candidate = boundaries[middle]
        if abs(candidate - value) <= tolerance:
            return middle
        if value < candidate:
            last = middle - 1
        else:
            first = middle + 1
    return -1


def _axis_boundaries(edges: Iterable[float], tolerance: float) -> List[float]:
    ordered = np.sort(np.fromiter(edges, dtype=float))
    return unique_sorted(ordered.tolist(), tolerance)


def extract_boundaries(
    rects: Sequence[Rect],
    min_bounds: Optional[Rect],
    tolerance: float,
) -> Optional[Tuple[List[float], List[float]]]:
    """
    Return ``(row_boundaries, col_boundaries)`` or ``None`` when either axis
    has fewer than two distinct lines (no measurable interval, so no table).
    """
    extents = list(rects)
    if min_bounds is not None:
        extents.append(min_bounds)

    row_bounds = _axis_boundaries(
        (edge for r in extents for edge in (r.y, r.max_y)), tolerance
    )
    col_bounds = _axis_boundaries(
        (edge for r in extents for edge in (r.x, r.max_x)), tolerance
    )

    if len(row_bounds) < 2 or len(col_bounds) < 2:
        logger.debug(
            "No table: %d row boundaries, %d column boundaries",
            len(row_bounds),
            len(col_bounds),
        )
        return None
    return row_bounds, col_bounds
