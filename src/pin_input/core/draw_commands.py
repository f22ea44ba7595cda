"""
Draw commands produced by the slot layout, and the capabilities they need.

A layout pass yields an ordered tuple of commands; ``replay`` sends them to
any object implementing ``DrawSurface`` (a QPainter adapter, a recorder in
tests...). Text sizes come from a ``TextMeasurer``.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Protocol, Union

from pin_input.core.decoration import TextStyle
from pin_input.core.geometry import Offset, Rect, Size


class PaintStyle(Enum):
    FILL = auto()
    STROKE = auto()


@dataclass(frozen=True)
class Paint:
    color: str
    style: PaintStyle = PaintStyle.STROKE
    stroke_width: float = 0.0


@dataclass(frozen=True)
class DrawRRect:
    """Rounded rectangle; radius 0 draws a plain rectangle."""
    rect: Rect
    radius: float
    paint: Paint


@dataclass(frozen=True)
class DrawLine:
    start: Offset
    end: Offset
    paint: Paint


@dataclass(frozen=True)
class DrawGlyph:
    """Text whose measured box has its top-left corner at origin."""
    text: str
    origin: Offset
    size: Size
    style: TextStyle


DrawCommand = Union[DrawRRect, DrawLine, DrawGlyph]


class TextMeasurer(Protocol):
    def measure(self, text: str, style: TextStyle) -> Size:
        ...


class DrawSurface(Protocol):
    def draw_rrect(self, rect: Rect, radius: float, paint: Paint) -> None:
        ...

    def draw_line(self, start: Offset, end: Offset, paint: Paint) -> None:
        ...

    def draw_glyph(self, text: str, origin: Offset, size: Size, style: TextStyle) -> None:
        ...


def replay(commands: Iterable[DrawCommand], surface: DrawSurface) -> None:
    """Send each command, in order, to the surface."""
    for command in commands:
        if isinstance(command, DrawRRect):
            surface.draw_rrect(command.rect, command.radius, command.paint)
        elif isinstance(command, DrawLine):
            surface.draw_line(command.start, command.end, command.paint)
        elif isinstance(command, DrawGlyph):
            surface.draw_glyph(command.text, command.origin, command.size, command.style)
        else:
            raise TypeError(f"Unknown draw command: {command!r}")
