import pytest

QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from PySide6.QtGui import QColor, QImage, QPainter  # noqa: E402

from pin_input.core.decoration import BoxTightDecoration, TextStyle  # noqa: E402
from pin_input.core.draw_commands import Paint, PaintStyle  # noqa: E402
from pin_input.core.field_config import PinFieldConfig  # noqa: E402
from pin_input.core.geometry import Offset, Rect, Size  # noqa: E402
from pin_input.core.text_buffer import PinTextBuffer  # noqa: E402
from pin_input.ui.components.pin_input_widget import PinInputTextField  # noqa: E402
from pin_input.ui.qt_surface import QPainterSurface, QtTextMeasurer  # noqa: E402


@pytest.fixture(scope="module")
def qapp():
    app = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield app


def render(draw):
    image = QImage(100, 50, QImage.Format.Format_ARGB32)
    image.fill(QColor(0, 0, 0, 0))
    painter = QPainter(image)
    try:
        surface = QPainterSurface(painter)
        draw(surface)
    finally:
        painter.end()
    return surface, image


class TestQtSurface:

    def test_line(self, qapp):
        paint = Paint("#FF0000", PaintStyle.STROKE, 2.0)
        surface, image = render(lambda s: s.draw_line(Offset(0, 25), Offset(100, 25), paint))

        assert surface.draw_calls == 1
        assert image.pixelColor(50, 25) == QColor("#FF0000")
        assert image.pixelColor(50, 5).alpha() == 0

    def test_filled_rect(self, qapp):
        paint = Paint("#00FF00", PaintStyle.FILL)
        _, image = render(lambda s: s.draw_rrect(Rect(10, 10, 90, 40), 0.0, paint))

        assert image.pixelColor(50, 25) == QColor("#00FF00")
        assert image.pixelColor(5, 5).alpha() == 0

    def test_measurer_returns_size(self, qapp):
        size = QtTextMeasurer().measure("8", TextStyle(font_size=24.0))
        assert isinstance(size, Size)
        assert size.width >= 0
        assert size.height >= 0


class TestPinInputTextField:

    def test_user_edit_is_formatted(self, qapp):
        widget = PinInputTextField(PinFieldConfig(pin_length=4))
        changes = []
        completed = []
        widget.text_changed.connect(changes.append)
        widget.pin_completed.connect(completed.append)

        widget._line_edit.textEdited.emit("1a2")
        assert widget.get_pin() == "12"
        assert widget._line_edit.text() == "12"

        widget._line_edit.textEdited.emit("123456")
        assert widget.display_text == "1234"
        assert changes == ["12", "1234"]
        assert completed == ["1234"]
        widget.dispose()

    def test_external_buffer_drives_line_edit(self, qapp):
        external = PinTextBuffer()
        widget = PinInputTextField(PinFieldConfig(pin_length=6, buffer=external))

        external.text = "321"

        assert widget.display_text == "321"
        assert widget._line_edit.text() == "321"
        widget.dispose()
        assert not external.is_disposed

    def test_submit_on_return(self, qapp):
        received = []
        widget = PinInputTextField(PinFieldConfig(pin_length=4, on_submit=received.append))
        emitted = []
        widget.submitted.connect(emitted.append)
        widget._line_edit.textEdited.emit("4321")

        widget._line_edit.returnPressed.emit()

        assert received == ["4321"]
        assert emitted == ["4321"]
        widget.dispose()

    def test_shrinking_config_truncates_line_edit(self, qapp):
        widget = PinInputTextField(PinFieldConfig(pin_length=6))
        widget._line_edit.textEdited.emit("123456")

        widget.set_config(PinFieldConfig(pin_length=3))

        assert widget.get_pin() == "123"
        assert widget._line_edit.text() == "123"
        assert widget._line_edit.maxLength() == 3
        widget.dispose()

    def test_disabled_widget_keeps_text(self, qapp):
        widget = PinInputTextField(PinFieldConfig(pin_length=4))
        widget._line_edit.textEdited.emit("12")

        widget.set_enabled(False)

        assert not widget._line_edit.isEnabled()
        assert widget.display_text == "12"
        widget.dispose()

    def test_grab_paints(self, qapp):
        decoration = BoxTightDecoration(solid_color="#FAFAFA", stroke_color="#000000")
        widget = PinInputTextField(PinFieldConfig(pin_length=4, decoration=decoration))
        widget.resize(200, 50)
        widget._line_edit.textEdited.emit("12")

        pixmap = widget.grab()

        assert not pixmap.isNull()
        image = pixmap.toImage()
        # Inside the strip, away from glyphs and dividers
        assert image.pixelColor(75, 45) == QColor("#FAFAFA")
        widget.dispose()
