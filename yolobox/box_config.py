"""
Configuration for sets of boxes loaded from YAML.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from yolobox.box import Box, make_box
from yolobox.box_error import BoxError
from yolobox.coord_type import CoordType
from yolobox.coordinate_system import CoordinateSystem
from yolobox.image_size import ImageSize
from yolobox.role import RoleKind

E = TypeVar("E", bound=Enum)


def parse_enum(enum_class: Type[E], value: Union[str, E], field_name: str) -> E:
    """Look up an enum member by case-insensitive name, e.g. 'corner-corner'."""
    if isinstance(value, enum_class):
        return value
    key = str(value).strip().upper().replace("-", "_")
    if key not in enum_class.__members__:
        valid = [name.lower() for name in enum_class.__members__]
        raise ValueError(f"{field_name} must be one of {', '.join(valid)}")
    return enum_class[key]


def parse_image_size(value: Optional[List[float]]) -> Optional[ImageSize]:
    if value is None:
        return None
    if len(value) != 2:
        raise ValueError(f"image_size must be [width, height], got {value}")
    return ImageSize(float(value[0]), float(value[1]))


@dataclass
class BoxConfig:
    """Configuration for a single box."""

    name: str
    label: str
    coords: List[float]  # Four numbers, read according to coord_type
    coord_type: str = "center_size"
    coord_system: str = "absolute"
    role: str = "ground_truth"
    confidence: Optional[float] = None
    image_size: Optional[List[float]] = None

    def __post_init__(self):
        if len(self.coords) != 4:
            raise ValueError(f"coords must have 4 values, got {len(self.coords)}")
        self.coords = [float(v) for v in self.coords]
        if self.confidence is not None:
            self.confidence = float(self.confidence)
        # Validate names early so a bad file fails before any box is built
        parse_enum(CoordType, self.coord_type, "coord_type")
        parse_enum(CoordinateSystem, self.coord_system, "coord_system")
        parse_enum(RoleKind, self.role, "role")
        parse_image_size(self.image_size)

    def to_box(self, default_size: Optional[ImageSize] = None) -> Union[Box, BoxError]:
        """Build the Box. The per-box image size wins over `default_size`."""
        img_size = parse_image_size(self.image_size) or default_size
        return make_box(
            self.name,
            *self.coords,
            self.label,
            coord_type=parse_enum(CoordType, self.coord_type, "coord_type"),
            coord_system=parse_enum(CoordinateSystem, self.coord_system, "coord_system"),
            img_size=img_size,
            role=parse_enum(RoleKind, self.role, "role"),
            confidence=self.confidence,
        )


@dataclass
class BoxSetConfig:
    """Configuration for a list of boxes sharing an optional image size."""

    boxes: List[Any]
    image_size: Optional[List[float]] = None

    def __post_init__(self):
        self.boxes = [
            b if isinstance(b, BoxConfig) else BoxConfig(**b) for b in self.boxes
        ]
        parse_image_size(self.image_size)

    @property
    def default_size(self) -> Optional[ImageSize]:
        return parse_image_size(self.image_size)

    def to_boxes(self) -> List[Union[Box, BoxError]]:
        size = self.default_size
        return [b.to_box(size) for b in self.boxes]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoxSetConfig":
        return cls(**data)
