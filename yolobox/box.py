"""
Bounding box value type for detection annotation and evaluation.

A Box always stores its geometry as absolute center-size (x, y, w, h),
whatever encoding it was built from. The coord_type and coord_system tags
only remember how the raw numbers were supplied.

Widths and heights are expected to be non-negative; this is not checked.
"""
from dataclasses import dataclass, field
from typing import Optional, Union

from yolobox.box_error import BoxError, BoxErrorKind
from yolobox.coord_type import CoordType
from yolobox.coordinate_system import CoordinateSystem
from yolobox.geometry import (
    Coords,
    center_to_corners,
    corners_to_center,
    iou_center_size,
    to_absolute,
    to_relative,
)
from yolobox.image_size import ImageSize
from yolobox.rect import Rect
from yolobox.role import Detection, GroundTruth, Role, RoleKind


@dataclass(frozen=True)
class Box:
    """One labelled rectangle, ground truth or detection."""

    name: str
    label: str
    x: float
    y: float
    w: float
    h: float
    img_size: Optional[ImageSize] = None
    role: Role = field(default_factory=GroundTruth)
    coord_type: CoordType = CoordType.CENTER_SIZE
    coord_system: CoordinateSystem = CoordinateSystem.ABSOLUTE

    @property
    def confidence(self) -> Optional[float]:
        """Detection confidence, None for ground truth."""
        if isinstance(self.role, Detection):
            return self.role.confidence
        return None

    @property
    def is_detection(self) -> bool:
        return self.role.kind is RoleKind.DETECTION

    def get_raw_bounding_box(
        self,
        coord_type: CoordType = CoordType.CENTER_SIZE,
        coord_system: CoordinateSystem = CoordinateSystem.ABSOLUTE,
        img_size: Optional[ImageSize] = None,
    ) -> Union[Coords, BoxError]:
        """
        Re-encode the box geometry.

        The type conversion is applied first and the resulting values are
        then scaled, so corner-corner relative output is the relative corners.

        Args:
            coord_type: Encoding of the returned tuple
            coord_system: ABSOLUTE for pixels, RELATIVE for image fractions
            img_size: Size to normalize by, overrides the stored size

        Returns:
            The 4-tuple, or a BoxError if relative output was requested and
            no image size is available.
        """
        if coord_type is CoordType.CORNER_CORNER:
            coords = center_to_corners(self.x, self.y, self.w, self.h)
        else:
            coords = (self.x, self.y, self.w, self.h)

        if coord_system is CoordinateSystem.RELATIVE:
            size = img_size if img_size is not None else self.img_size
            if size is None:
                return BoxError(
                    BoxErrorKind.MISSING_IMAGE_SIZE,
                    "must provide img size when requesting relative coordinates",
                )
            coords = to_relative(*coords, size)

        return coords

    def compute_iou(self, other: "Box") -> float:
        """Intersection over union with another box, in [0, 1]."""
        return compute_iou(self, other)

    def description(self) -> str:
        """Human-readable one-liner, for diagnostics only."""
        text = f"{self.label}:"
        if self.coord_type is CoordType.CORNER_CORNER:
            text += f" (xMin: {self.x}, yMin: {self.y}, xMax: {self.w}, yMax: {self.h})"
        else:
            text += f" (x: {self.x}, y: {self.y}, w: {self.w}, h: {self.h})"

        if self.coord_system is CoordinateSystem.ABSOLUTE:
            text += " abs. coords"
        else:
            text += " rel. coords"

        if self.role.kind is RoleKind.DETECTION:
            text += f", detection with confidence {self.role.confidence}"
        else:
            text += ", ground truth"
        return text

    def __str__(self) -> str:
        return self.description()


def compute_iou(box_a: Box, box_b: Box) -> float:
    """Intersection over union of two boxes, in [0, 1]."""
    return iou_center_size(
        (box_a.x, box_a.y, box_a.w, box_a.h),
        (box_b.x, box_b.y, box_b.w, box_b.h),
    )


def _resolve_role(
    role: Union[Role, RoleKind, None], confidence: Optional[float]
) -> Union[Role, BoxError]:
    if isinstance(role, Detection):
        confidence = role.confidence
        role = RoleKind.DETECTION
    elif isinstance(role, GroundTruth) or role is None:
        role = RoleKind.GROUND_TRUTH
    elif not isinstance(role, RoleKind):
        raise TypeError(
            f"role must be a GroundTruth, Detection or RoleKind, got {role!r}"
        )

    if role is RoleKind.DETECTION:
        if confidence is None:
            return BoxError(
                BoxErrorKind.MISSING_CONFIDENCE,
                "must provide confidence when using detection mode",
            )
        return Detection(float(confidence))
    return GroundTruth()


def make_box(
    name: str,
    a: float,
    b: float,
    c: float,
    d: float,
    label: str,
    coord_type: CoordType = CoordType.CENTER_SIZE,
    coord_system: CoordinateSystem = CoordinateSystem.ABSOLUTE,
    img_size: Optional[ImageSize] = None,
    role: Union[Role, RoleKind, None] = None,
    confidence: Optional[float] = None,
) -> Union[Box, BoxError]:
    """
    Build a Box from four raw numbers.

    Args:
        name: Identifier, e.g. the image the box belongs to
        a, b, c, d: (x, y, w, h) or (x_min, y_min, x_max, y_max) depending on coord_type
        label: Class label
        coord_type: How to read (a, b, c, d)
        coord_system: Whether (a, b, c, d) are pixels or image fractions
        img_size: Image dimensions, required for relative input
        role: A GroundTruth/Detection value, or a RoleKind tag used together
            with `confidence`. Defaults to ground truth.
        confidence: Detection score, required with RoleKind.DETECTION

    Returns:
        The Box, or a BoxError naming the missing image size or confidence.
    """
    if coord_type is CoordType.CORNER_CORNER:
        coords = corners_to_center(a, b, c, d)
    else:
        coords = (a, b, c, d)

    if coord_system is CoordinateSystem.RELATIVE:
        if img_size is None:
            return BoxError(
                BoxErrorKind.MISSING_IMAGE_SIZE,
                "must provide img size when using relative coordinates",
            )
        coords = to_absolute(*coords, img_size)

    resolved = _resolve_role(role, confidence)
    if isinstance(resolved, BoxError):
        return resolved

    x, y, w, h = (float(v) for v in coords)
    return Box(
        name=name,
        label=label,
        x=x,
        y=y,
        w=w,
        h=h,
        img_size=img_size,
        role=resolved,
        coord_type=coord_type,
        coord_system=coord_system,
    )


def make_box_from_rect(
    name: str,
    rect: Rect,
    label: str,
    coord_system: CoordinateSystem = CoordinateSystem.ABSOLUTE,
    img_size: Optional[ImageSize] = None,
    role: Union[Role, RoleKind, None] = None,
    confidence: Optional[float] = None,
) -> Union[Box, BoxError]:
    """Build a Box from a Rect. Same failure modes as make_box."""
    return make_box(
        name,
        rect.mid_x,
        rect.mid_y,
        rect.width,
        rect.height,
        label,
        coord_type=CoordType.CENTER_SIZE,
        coord_system=coord_system,
        img_size=img_size,
        role=role,
        confidence=confidence,
    )
