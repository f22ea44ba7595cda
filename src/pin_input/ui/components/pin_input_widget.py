"""
PIN input widget — one transparent line edit painted over as styled slots.

The QLineEdit captures keyboard, IME and focus; its text is hidden and the
widget paints the slots of the current display text instead. Painting goes
through a pixmap back buffer that is only redrawn when the field changes.
"""
from dataclasses import replace
from typing import Optional

from PySide6.QtWidgets import QWidget, QLineEdit, QSizePolicy
from PySide6.QtCore import Signal, Qt, QSize, QTimer
from PySide6.QtGui import QPainter, QPixmap

from pin_input.config.settings import settings
from pin_input.core.field_config import PinFieldConfig
from pin_input.core.geometry import Size
from pin_input.core.input_formatters import KeyboardType
from pin_input.core.pin_field import PinInputField
from pin_input.core.text_buffer import TextBuffer
from pin_input.state.input_state import RedrawReason
from pin_input.ui.qt_surface import QPainterSurface, QtTextMeasurer
from pin_input.utils.logger import logger


_BASE_HINTS = (
    Qt.InputMethodHint.ImhSensitiveData
    | Qt.InputMethodHint.ImhNoPredictiveText
    | Qt.InputMethodHint.ImhNoAutoUppercase
)

_KEYBOARD_HINTS = {
    KeyboardType.PHONE: Qt.InputMethodHint.ImhDialableCharactersOnly,
    KeyboardType.NUMBER: Qt.InputMethodHint.ImhDigitsOnly,
    KeyboardType.TEXT: Qt.InputMethodHint.ImhNone,
}


class PinInputTextField(QWidget):
    """
    Fixed-length code entry drawn as underlines or boxes.

    Emits text_changed(str) when the display text changes,
    pin_completed(str) when every slot is filled and
    submitted(str) when the user presses Enter.
    """

    text_changed = Signal(str)
    pin_completed = Signal(str)
    submitted = Signal(str)

    def __init__(self, config: Optional[PinFieldConfig] = None, parent: Optional[QWidget] = None):
        super().__init__(parent)
        if config is None:
            config = PinFieldConfig(pin_length=settings.DEFAULT_PIN_LENGTH)
        self._field = PinInputField(config, QtTextMeasurer())
        self._backbuffer: Optional[QPixmap] = None
        self._last_emitted = self._field.display_text
        self._disposed = False
        self._setup_ui()
        self._wire_signals()
        self._apply_config()

    def _setup_ui(self):
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.setMinimumHeight(settings.FIELD_HEIGHT)

        self._line_edit = QLineEdit(self)
        self._line_edit.setFrame(False)
        self._line_edit.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._line_edit.setEchoMode(QLineEdit.EchoMode.Password)
        self._line_edit.setContextMenuPolicy(Qt.ContextMenuPolicy.NoContextMenu)
        # Hide the edited text, the selection and the frame
        self._line_edit.setStyleSheet(
            "QLineEdit { color: transparent; background: transparent; border: none;"
            " selection-color: transparent; selection-background-color: transparent; }"
        )
        self._line_edit.setGeometry(self.rect())
        self.setFocusProxy(self._line_edit)

    def _wire_signals(self):
        self._line_edit.textEdited.connect(self._on_text_edited)
        self._line_edit.returnPressed.connect(self._on_return_pressed)
        self._field.add_redraw_listener(self._on_redraw_requested)

    def _apply_config(self):
        config = self._field.config
        self._line_edit.setMaxLength(config.pin_length)
        self._line_edit.setEnabled(config.enabled)
        self._line_edit.setInputMethodHints(_BASE_HINTS | _KEYBOARD_HINTS[config.keyboard_type])
        self._sync_line_edit()
        if config.autofocus:
            QTimer.singleShot(0, self._line_edit.setFocus)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def config(self) -> PinFieldConfig:
        return self._field.config

    def set_config(self, config: PinFieldConfig):
        """Replace the configuration; a shorter pin length truncates the text."""
        self._field.update_config(config)
        self._apply_config()
        self.updateGeometry()
        self.update()

    @property
    def buffer(self) -> TextBuffer:
        return self._field.buffer

    @property
    def display_text(self) -> str:
        return self._field.display_text

    def get_pin(self) -> str:
        return self._field.text

    def clear(self):
        self._field.clear()
        self._line_edit.setFocus()

    def set_enabled(self, enabled: bool):
        self.set_config(replace(self._field.config, enabled=enabled))

    def dispose(self):
        """Release the internal buffer. The widget must not be used afterwards."""
        if self._disposed:
            return
        self._field.remove_redraw_listener(self._on_redraw_requested)
        self._field.dispose()
        self._disposed = True

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    def _on_text_edited(self, text: str):
        self._field.handle_input(text)
        # Formatters may have rejected part of the edit
        self._sync_line_edit()

    def _on_return_pressed(self):
        text = self._field.text
        self._field.submit()
        self.submitted.emit(text)

    def _on_redraw_requested(self, reason: RedrawReason):
        self._sync_line_edit()
        self.update()

        display_text = self._field.display_text
        if display_text != self._last_emitted:
            self._last_emitted = display_text
            self.text_changed.emit(display_text)
            if self._field.is_complete:
                logger.debug("PinInputTextField: all slots filled")
                self.pin_completed.emit(display_text)

    def _sync_line_edit(self):
        text = self._field.text
        if self._line_edit.text() != text:
            # setText() does not emit textEdited, so this cannot loop
            self._line_edit.setText(text)

    # ------------------------------------------------------------------
    # QWidget overrides
    # ------------------------------------------------------------------

    def sizeHint(self) -> QSize:
        height = settings.FIELD_HEIGHT
        return QSize(height * self._field.config.pin_length, height)

    def resizeEvent(self, event):
        self._line_edit.setGeometry(self.rect())
        self._backbuffer = None
        super().resizeEvent(event)

    def paintEvent(self, event):
        if self._disposed:
            return
        dpr = self.devicePixelRatioF()
        if self._backbuffer is None:
            self._backbuffer = QPixmap(max(1, round(self.width() * dpr)),
                                       max(1, round(self.height() * dpr)))
            self._backbuffer.setDevicePixelRatio(dpr)
            self._field.invalidate()

        size = Size(self.width(), self.height())
        if self._field.needs_paint(size):
            self._backbuffer.fill(Qt.GlobalColor.transparent)
            painter = QPainter(self._backbuffer)
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
            try:
                self._field.paint(QPainterSurface(painter), size)
            finally:
                painter.end()

        painter = QPainter(self)
        painter.drawPixmap(0, 0, self._backbuffer)
        painter.end()
