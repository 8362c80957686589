"""
Grid-topology inference stages.

The table builder runs them strictly in this order:
  1. filter_shapes       — drop hairline shapes
  2. extract_boundaries  — sorted, tolerance-merged row/column lines
  3. map_shapes          — origin + span per shape, overlap resolution
  4. fill_gaps           — invisible fillers for unclaimed positions
"""

from grid.boundaries import extract_boundaries, search_boundary, unique_sorted
from grid.constants import CELL_ALIGNMENT_TOLERANCE
from grid.errors import GridStructureError
from grid.gap_filler import fill_gaps
from grid.mapper import map_shapes
from grid.shape_filter import filter_shapes

__all__ = [
    "CELL_ALIGNMENT_TOLERANCE",
    "GridStructureError",
    "extract_boundaries",
    "fill_gaps",
    "filter_shapes",
    "map_shapes",
    "search_boundary",
    "unique_sorted",
]
