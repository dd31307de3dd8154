"""
Pure geometry on box coordinates.

Conversions work on plain 4-tuples so they can be shared by the Box type,
the config layer and the batch IoU code. Center-size tuples are (x, y, w, h)
with (x, y) the center, corner tuples are (x_min, y_min, x_max, y_max).
"""
from typing import Sequence, Tuple

import numpy as np

from yolobox.image_size import ImageSize

Coords = Tuple[float, float, float, float]

# Smallest positive float64. Added to the union so an empty union never
# divides by exactly zero.
EPSILON = float(np.finfo(np.float64).smallest_subnormal)


def center_to_corners(x: float, y: float, w: float, h: float) -> Coords:
    """Convert (x, y, w, h) to (x_min, y_min, x_max, y_max)."""
    return (x - w / 2.0, y - h / 2.0, x + w / 2.0, y + h / 2.0)


def corners_to_center(x_min: float, y_min: float, x_max: float, y_max: float) -> Coords:
    """Convert (x_min, y_min, x_max, y_max) to (x, y, w, h)."""
    w = x_max - x_min
    h = y_max - y_min
    return (x_min + w / 2.0, y_min + h / 2.0, w, h)


def to_relative(a: float, b: float, c: float, d: float, img_size: ImageSize) -> Coords:
    """Divide x-like values (a, c) by the width and y-like values (b, d) by the height."""
    return (
        a / img_size.width,
        b / img_size.height,
        c / img_size.width,
        d / img_size.height,
    )


def to_absolute(a: float, b: float, c: float, d: float, img_size: ImageSize) -> Coords:
    """Inverse of to_relative."""
    return (
        a * img_size.width,
        b * img_size.height,
        c * img_size.width,
        d * img_size.height,
    )


def iou_center_size(first: Coords, second: Coords) -> float:
    """
    Intersection over union of two absolute center-size boxes.

    Returns exactly 0.0 when the boxes do not overlap or only touch.
    """
    x_min1, y_min1, x_max1, y_max1 = center_to_corners(*first)
    x_min2, y_min2, x_max2, y_max2 = center_to_corners(*second)

    x_a, y_a = max(x_min1, x_min2), max(y_min1, y_min2)
    x_b, y_b = min(x_max1, x_max2), min(y_max1, y_max2)

    # Clamp each side so two disjoint axes cannot multiply to a positive area
    intersection = max(0.0, x_b - x_a) * max(0.0, y_b - y_a)

    if intersection > 0.0:
        area1 = (x_max1 - x_min1) * (y_max1 - y_min1)
        area2 = (x_max2 - x_min2) * (y_max2 - y_min2)
        union = area1 + area2 - intersection
        return intersection / (union + EPSILON)
    return 0.0


def _corner_array(boxes: Sequence) -> np.ndarray:
    """Stack the canonical geometry of boxes into an (N, 4) corner array."""
    centers = np.array([(b.x, b.y, b.w, b.h) for b in boxes], dtype=np.float64)
    centers = centers.reshape(-1, 4)
    x, y, w, h = centers[:, 0], centers[:, 1], centers[:, 2], centers[:, 3]
    return np.stack([x - w / 2.0, y - h / 2.0, x + w / 2.0, y + h / 2.0], axis=1)


def pairwise_iou(boxes_a: Sequence, boxes_b: Sequence) -> np.ndarray:
    """
    IoU between every box of `boxes_a` and every box of `boxes_b`.

    Args:
        boxes_a: Sequence of N boxes (anything with x, y, w, h attributes)
        boxes_b: Sequence of M boxes

    Returns:
        Float64 array of shape (N, M), element-wise equal to iou_center_size.
    """
    corners_a = _corner_array(boxes_a)[:, None, :]
    corners_b = _corner_array(boxes_b)[None, :, :]

    x_a = np.maximum(corners_a[..., 0], corners_b[..., 0])
    y_a = np.maximum(corners_a[..., 1], corners_b[..., 1])
    x_b = np.minimum(corners_a[..., 2], corners_b[..., 2])
    y_b = np.minimum(corners_a[..., 3], corners_b[..., 3])

    intersection = np.maximum(0.0, x_b - x_a) * np.maximum(0.0, y_b - y_a)

    area_a = (corners_a[..., 2] - corners_a[..., 0]) * (corners_a[..., 3] - corners_a[..., 1])
    area_b = (corners_b[..., 2] - corners_b[..., 0]) * (corners_b[..., 3] - corners_b[..., 1])
    union = area_a + area_b - intersection

    overlap = intersection > 0.0
    iou = np.zeros(intersection.shape, dtype=np.float64)
    np.divide(intersection, union + EPSILON, out=iou, where=overlap)
    return iou
