"""
Coordinate type enumeration.
"""
from enum import Enum, auto

class CoordType(Enum):
    """
    Enum for the ways four raw numbers can encode a box.

    CENTER_SIZE is (x, y, w, h) with (x, y) the center.
    CORNER_CORNER is (x_min, y_min, x_max, y_max).
    """
    CENTER_SIZE = auto()
    CORNER_CORNER = auto()
