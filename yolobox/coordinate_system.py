"""
Coordinate system enumeration.
"""
from enum import Enum, auto

class CoordinateSystem(Enum):
    """
    Enum for absolute (pixel) or relative (fraction of image size) coordinates.
    """
    ABSOLUTE = auto()
    RELATIVE = auto()
