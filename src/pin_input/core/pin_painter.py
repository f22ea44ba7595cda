"""
Pin painter — one immutable paint description per display text.
"""
from pin_input.core.decoration import PinDecoration
from pin_input.core.draw_commands import DrawSurface, TextMeasurer, replay
from pin_input.core.geometry import Size
from pin_input.core.slot_layout import PinLayout, layout_pin


class PinPainter:
    """
    Paints the slots of a pin field for a given display text.

    The text is stripped of surrounding whitespace. A new painter is built
    for every state change; should_repaint() tells whether it would paint
    anything different from the previous one.
    """

    def __init__(self, text: str, pin_length: int, decoration: PinDecoration,
                 measurer: TextMeasurer):
        self.text = (text or "").strip()
        self.pin_length = pin_length
        self.decoration = decoration
        self.measurer = measurer

    def should_repaint(self, old: "PinPainter") -> bool:
        return not (
            isinstance(old, PinPainter)
            and old.text == self.text
            and old.pin_length == self.pin_length
            and old.decoration == self.decoration
        )

    def layout(self, size: Size) -> PinLayout:
        return layout_pin(self.text, self.pin_length, self.decoration, size, self.measurer)

    def paint(self, surface: DrawSurface, size: Size) -> PinLayout:
        pin_layout = self.layout(size)
        replay(pin_layout.commands, surface)
        return pin_layout
