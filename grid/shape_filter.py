"""
Drops hairline shapes before any boundary is derived from them.

A shape whose width or height does not exceed the alignment tolerance can
never own a grid interval; it is noise from the canvas, not an error.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from dto.diagnostics import BuildDiagnostics
from dto.shape import InputShape

logger = logging.getLogger(__name__)


def is_degenerate(shape: InputShape, tolerance: float) -> bool:
    return shape.bounds.width <= tolerance or shape.bounds.height <= tolerance


def filter_shapes(
    shapes: Sequence[InputShape],
    tolerance: float,
    diagnostics: BuildDiagnostics,
) -> List[Tuple[int, InputShape]]:
    """Return ``(input_index, shape)`` for every shape large enough to map."""
    survivors: List[Tuple[int, InputShape]] = []
    for index, shape in enumerate(shapes):
        if is_degenerate(shape, tolerance):
            logger.debug(
                "Skipping shape %d: %.3f x %.3f is below tolerance %.3f",
                index,
                shape.bounds.width,
                shape.bounds.height,
                tolerance,
            )
            diagnostics.record_filtered(index)
            continue
        survivors.append((index, shape))
    return survivors
