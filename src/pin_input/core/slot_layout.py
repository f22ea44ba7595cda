"""
Slot layout engine.

Pure mapping from (display text, pin length, decoration, canvas size) to the
slot rectangles and the draw commands of one paint pass. The only
collaborator is a TextMeasurer; nothing is cached between calls.

Glyph placement is shared by the three variants: glyph i is centered
horizontally in slot i, and every glyph uses the same top y, derived from
the height of the first glyph measured in the pass.
"""
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from pin_input.core.decoration import (
    BoxLooseDecoration, BoxTightDecoration, PinDecoration, PinEntryType,
    UnderlineDecoration, effective_text_style, is_obscure_on,
)
from pin_input.core.draw_commands import (
    DrawCommand, DrawGlyph, DrawLine, DrawRRect, Paint, PaintStyle, TextMeasurer,
)
from pin_input.core.geometry import Offset, Rect, Size


@dataclass(frozen=True)
class PinLayout:
    """Result of one layout pass."""
    slots: Tuple[Rect, ...]
    commands: Tuple[DrawCommand, ...]

    @property
    def glyphs(self) -> Tuple[DrawGlyph, ...]:
        return tuple(c for c in self.commands if isinstance(c, DrawGlyph))


def layout_pin(
    text: str,
    pin_length: int,
    decoration: PinDecoration,
    size: Size,
    measurer: TextMeasurer,
) -> PinLayout:
    """
    Compute the geometry of every slot and the glyphs drawn inside them.

    Args:
        text: Display text, at most pin_length code points
        pin_length: Number of slots
        decoration: Slot style
        size: Canvas size
        measurer: Text measurement capability

    Returns:
        PinLayout with one rect per slot and the ordered draw commands
    """
    entry_type = decoration.pin_entry_type
    if entry_type is PinEntryType.UNDERLINE:
        return _layout_underline(text, pin_length, decoration, size, measurer)
    elif entry_type is PinEntryType.BOX_TIGHT:
        return _layout_box_tight(text, pin_length, decoration, size, measurer)
    elif entry_type is PinEntryType.BOX_LOOSE:
        return _layout_box_loose(text, pin_length, decoration, size, measurer)
    else:
        raise ValueError(f"Unsupported pin entry type: {entry_type!r}")


# ------------------------------------------------------------------
# Shared glyph placement
# ------------------------------------------------------------------

def _glyph_commands(
    text: str,
    decoration: PinDecoration,
    size: Size,
    measurer: TextMeasurer,
    glyph_left: Callable[[int, float], float],
) -> List[DrawGlyph]:
    """glyph_left(index, glyph_width) returns the x of glyph index."""
    style = effective_text_style(decoration)
    obscure_on = is_obscure_on(decoration)

    commands = []
    start_y: Optional[float] = None
    for index, char in enumerate(text):
        code = decoration.obscure_style.obscure_text if obscure_on else char
        glyph_size = measurer.measure(code, style)

        # Computed once, from the first glyph
        if start_y is None:
            start_y = size.height / 2 - glyph_size.height / 2

        origin = Offset(glyph_left(index, glyph_size.width), start_y)
        commands.append(DrawGlyph(code, origin, glyph_size, style))
    return commands


def _border_color(index: int, text: str, base: str, entered: Optional[str]) -> str:
    if index < len(text) and entered is not None:
        return entered
    return base


# ------------------------------------------------------------------
# Variants
# ------------------------------------------------------------------

def _layout_underline(
    text: str,
    pin_length: int,
    dr: UnderlineDecoration,
    size: Size,
    measurer: TextMeasurer,
) -> PinLayout:
    single_width = (size.width - (pin_length - 1) * dr.gap_space) / pin_length
    line_y = size.height - dr.line_height

    slots = []
    commands: List[DrawCommand] = []
    start_x = 0.0
    for i in range(pin_length):
        paint = Paint(
            _border_color(i, text, dr.color, dr.entered_color),
            PaintStyle.STROKE,
            dr.line_height,
        )
        commands.append(DrawLine(Offset(start_x, line_y), Offset(start_x + single_width, line_y), paint))
        slots.append(Rect(start_x, 0.0, start_x + single_width, size.height))
        start_x += single_width + dr.gap_space

    def glyph_left(index: int, glyph_width: float) -> float:
        return (single_width * index + single_width / 2 - glyph_width / 2
                + dr.gap_space * index)

    commands.extend(_glyph_commands(text, dr, size, measurer, glyph_left))
    return PinLayout(tuple(slots), tuple(commands))


def _layout_box_tight(
    text: str,
    pin_length: int,
    dr: BoxTightDecoration,
    size: Size,
    measurer: TextMeasurer,
) -> PinLayout:
    sw = dr.stroke_width
    border_paint = Paint(dr.stroke_color, PaintStyle.STROKE, sw)
    outline = Rect(sw / 2, sw / 2, size.width - sw / 2, size.height - sw / 2)

    commands: List[DrawCommand] = []
    if dr.solid_color is not None:
        commands.append(DrawRRect(outline, dr.radius, Paint(dr.solid_color, PaintStyle.FILL, sw)))
    commands.append(DrawRRect(outline, dr.radius, border_paint))

    single_width = (size.width - sw * (pin_length + 1)) / pin_length

    for i in range(1, pin_length):
        offset_x = single_width * i + sw * i + sw / 2
        commands.append(DrawLine(Offset(offset_x, sw), Offset(offset_x, size.height - sw), border_paint))

    slots = tuple(
        Rect.from_ltwh(sw * (i + 1) + single_width * i, sw, single_width, size.height - 2 * sw)
        for i in range(pin_length)
    )

    def glyph_left(index: int, glyph_width: float) -> float:
        return (sw * (index + 1) + single_width * index + single_width / 2
                - glyph_width / 2)

    commands.extend(_glyph_commands(text, dr, size, measurer, glyph_left))
    return PinLayout(slots, tuple(commands))


def _layout_box_loose(
    text: str,
    pin_length: int,
    dr: BoxLooseDecoration,
    size: Size,
    measurer: TextMeasurer,
) -> PinLayout:
    sw = dr.stroke_width
    single_width = (size.width - sw * 2 * pin_length - (pin_length - 1) * dr.gap_space) / pin_length

    slots = []
    commands: List[DrawCommand] = []
    start_x = sw / 2
    bottom = size.height - sw / 2
    for i in range(pin_length):
        rect = Rect(start_x, sw / 2, start_x + single_width + sw, bottom)
        if dr.solid_color is not None:
            commands.append(DrawRRect(rect, dr.radius, Paint(dr.solid_color, PaintStyle.FILL)))
        border_paint = Paint(
            _border_color(i, text, dr.stroke_color, dr.entered_color),
            PaintStyle.STROKE,
            sw,
        )
        commands.append(DrawRRect(rect, dr.radius, border_paint))
        slots.append(rect)
        start_x += single_width + dr.gap_space + sw * 2

    def glyph_left(index: int, glyph_width: float) -> float:
        return (single_width * index + single_width / 2 - glyph_width / 2
                + dr.gap_space * index + sw * index * 2 + sw)

    commands.extend(_glyph_commands(text, dr, size, measurer, glyph_left))
    return PinLayout(tuple(slots), tuple(commands))
