"""
Box role: ground truth annotation or model detection.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class RoleKind(Enum):
    """
    Enum for the semantic role of a box.
    """
    GROUND_TRUTH = auto()
    DETECTION = auto()


@dataclass(frozen=True)
class GroundTruth:
    """Human-annotated reference box. Carries no confidence."""

    @property
    def kind(self) -> RoleKind:
        return RoleKind.GROUND_TRUTH


@dataclass(frozen=True)
class Detection:
    """Model-produced box with its confidence score."""

    confidence: float

    @property
    def kind(self) -> RoleKind:
        return RoleKind.DETECTION


Role = Union[GroundTruth, Detection]
