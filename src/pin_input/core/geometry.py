"""
Plain geometry values used by the slot layout.

Coordinates are logical pixels, origin top-left, y growing downwards.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Offset:
    x: float
    y: float


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_ltwh(cls, left: float, top: float, width: float, height: float) -> "Rect":
        return cls(left, top, left + width, top + height)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def center(self) -> Offset:
        return Offset((self.left + self.right) / 2, (self.top + self.bottom) / 2)
