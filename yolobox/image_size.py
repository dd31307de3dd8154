"""
Image size class carrying the dimensions boxes are normalized against.
"""
from dataclasses import dataclass

from PIL import Image


@dataclass(frozen=True)
class ImageSize:
    """Image dimensions in pixels."""

    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"image size must be positive, got {self.width}x{self.height}"
            )

    @classmethod
    def from_image(cls, image: Image.Image) -> "ImageSize":
        """Read the size of an already opened PIL image."""
        width, height = image.size
        return cls(float(width), float(height))
