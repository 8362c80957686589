from __future__ import annotations

from pydantic import BaseModel


class Rect(BaseModel):
    """Axis-aligned rectangle in report points (y grows downward)."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    model_config = {"frozen": True}

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    def union(self, other: Rect) -> Rect:
        """Return the smallest rectangle covering both rectangles."""
        x = min(self.x, other.x)
        y = min(self.y, other.y)
        return Rect(
            x=x,
            y=y,
            width=max(self.max_x, other.max_x) - x,
            height=max(self.max_y, other.max_y) - y,
        )
