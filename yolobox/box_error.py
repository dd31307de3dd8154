"""
Structured errors returned by fallible box operations.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class BoxErrorKind(Enum):
    """
    Enum for the preconditions a box operation can violate.
    """
    MISSING_IMAGE_SIZE = auto()
    MISSING_CONFIDENCE = auto()


@dataclass(frozen=True)
class BoxError:
    """Failed construction or conversion. Returned, never raised."""

    kind: BoxErrorKind
    message: str

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"{self.kind.name.lower()}: {self.message}"


def is_error(result: Any) -> bool:
    """Return True if `result` is a BoxError."""
    return isinstance(result, BoxError)
