"""
Axis-aligned rectangle class.
"""
from dataclasses import dataclass

@dataclass(frozen=True)
class Rect:
    """Rectangle in [x_min, y_min, x_max, y_max] format."""

    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @classmethod
    def from_origin_size(cls, x: float, y: float, width: float, height: float) -> "Rect":
        """Build a rectangle from its minimum corner and its size."""
        return cls(x, y, x + width, y + height)

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def mid_x(self) -> float:
        return self.x_min + self.width / 2.0

    @property
    def mid_y(self) -> float:
        return self.y_min + self.height / 2.0
