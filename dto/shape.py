"""
InputShape: one laid-out shape handed to the table builder.

Bounds are already expressed in the page's shared coordinate space; the
builder never transforms coordinates.
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel

from dto.geometry import Rect


class InputShape(BaseModel):
    bounds: Rect
    content: Any = None
    fill: Optional[str] = None

    # Fills of the enclosing shapes, nearest parent first.
    ancestor_fills: List[Optional[str]] = []

    model_config = {"frozen": True}

    def effective_fill(self) -> Optional[str]:
        """Own fill, else the fill of the nearest ancestor that has one."""
        if self.fill is not None:
            return self.fill
        return next((f for f in self.ancestor_fills if f is not None), None)


class ShapeLayout(BaseModel):
    """The JSON document read by the CLI."""

    shapes: List[InputShape] = []
    min_bounds: Optional[Rect] = None
