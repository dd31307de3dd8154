"""
Detection bounding boxes with coordinate conversion and IoU.
"""

# Import enum classes
from yolobox.coord_type import CoordType
from yolobox.coordinate_system import CoordinateSystem
from yolobox.role import RoleKind, GroundTruth, Detection
from yolobox.box_error import BoxErrorKind, BoxError, is_error

# Import dataclasses
from yolobox.image_size import ImageSize
from yolobox.rect import Rect
from yolobox.box import Box, make_box, make_box_from_rect, compute_iou

# Import config classes
from yolobox.box_config import BoxConfig, BoxSetConfig

# Import geometry functions
from yolobox.geometry import (
    EPSILON,
    center_to_corners,
    corners_to_center,
    to_relative,
    to_absolute,
    iou_center_size,
    pairwise_iou,
)
