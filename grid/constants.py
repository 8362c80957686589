import os

from typing import Literal

# Edges within this distance (in points) are treated as the same grid line.
# One value governs boundary merging, origin lookup and span termination.
CELL_ALIGNMENT_TOLERANCE: float = float(
    os.getenv("CELL_ALIGNMENT_TOLERANCE", "0.5")
)

OUTPUT_FORMAT: Literal["json", "xlsx", "html"] = os.getenv(
    "SHAPE_TABLE_OUTPUT_FORMAT", "json"
).lower()
