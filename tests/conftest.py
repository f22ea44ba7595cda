"""
Shared fixtures: a fixed-metric measurer and a recording draw surface.
"""
import os

import pytest

from pin_input.core.geometry import Size

# Qt tests render without a display server
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FixedMeasurer:
    """Every character is font_size/2 wide and font_size tall."""

    def __init__(self):
        self.calls = 0

    def measure(self, text, style):
        self.calls += 1
        return Size(style.font_size / 2 * len(text), style.font_size)


class RecordingSurface:
    """Draw surface keeping every call it receives."""

    def __init__(self):
        self.calls = []

    @property
    def call_count(self):
        return len(self.calls)

    def draw_rrect(self, rect, radius, paint):
        self.calls.append(("rrect", rect, radius, paint))

    def draw_line(self, start, end, paint):
        self.calls.append(("line", start, end, paint))

    def draw_glyph(self, text, origin, size, style):
        self.calls.append(("glyph", text, origin, size, style))


@pytest.fixture
def measurer():
    return FixedMeasurer()


@pytest.fixture
def surface():
    return RecordingSurface()
