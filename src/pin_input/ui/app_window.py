"""
AppWindow — demo window showing the three slot styles.

Manages:
  - one PinInputTextField per decoration variant
  - a slot count selector shared by all fields
  - the status bar reporting submitted / completed codes
"""
from dataclasses import replace
from typing import List

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QLabel,
    QSpinBox, QCheckBox, QPushButton,
)

from pin_input.config.settings import settings
from pin_input.core.decoration import (
    BoxLooseDecoration, BoxTightDecoration, ObscureStyle, TextStyle, UnderlineDecoration,
)
from pin_input.core.field_config import PinFieldConfig
from pin_input.core.text_buffer import PinTextBuffer
from pin_input.ui.components.pin_input_widget import PinInputTextField
from pin_input.utils.logger import logger
from pin_input.utils.validators import validate_pin


_TEXT_STYLE = TextStyle(font_size=settings.DEFAULT_FONT_SIZE, color="#212121")


class AppWindow(QMainWindow):
    """Root demo window."""

    def __init__(self):
        super().__init__()
        # Shared with the loose-box field to show an externally owned buffer
        self._shared_buffer = PinTextBuffer()
        self._fields: List[PinInputTextField] = []
        self._setup_ui()
        self._wire_signals()

    # ------------------------------------------------------------------
    # UI setup
    # ------------------------------------------------------------------

    def _setup_ui(self):
        self.setWindowTitle(settings.APP_TITLE)
        self.resize(settings.WINDOW_WIDTH, settings.WINDOW_HEIGHT)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        options_row = QHBoxLayout()
        options_row.addWidget(QLabel("Slots:"))
        self._length_spin = QSpinBox()
        self._length_spin.setRange(1, 12)
        self._length_spin.setValue(settings.DEFAULT_PIN_LENGTH)
        options_row.addWidget(self._length_spin)
        self._obscure_check = QCheckBox("Obscure")
        options_row.addWidget(self._obscure_check)
        self._clear_btn = QPushButton("Clear")
        options_row.addWidget(self._clear_btn)
        options_row.addStretch()
        layout.addLayout(options_row)

        decorations = [
            ("Underline", UnderlineDecoration(
                text_style=_TEXT_STYLE, color="#9E9E9E", entered_color="#00BCD4")),
            ("Box (tight)", BoxTightDecoration(
                text_style=_TEXT_STYLE, solid_color="#FAFAFA", stroke_color="#9E9E9E")),
            ("Box (loose)", BoxLooseDecoration(
                text_style=_TEXT_STYLE, solid_color="#FAFAFA", stroke_color="#9E9E9E",
                entered_color="#00BCD4")),
        ]
        for title, decoration in decorations:
            group = QGroupBox(title)
            g_layout = QVBoxLayout(group)
            config = PinFieldConfig(
                pin_length=settings.DEFAULT_PIN_LENGTH,
                decoration=decoration,
                buffer=self._shared_buffer if isinstance(decoration, BoxLooseDecoration) else None,
            )
            field = PinInputTextField(config)
            g_layout.addWidget(field)
            layout.addWidget(group)
            self._fields.append(field)

        layout.addStretch()
        self.setCentralWidget(central)
        self.statusBar().showMessage("Type a code and press Enter")

    def _wire_signals(self):
        self._length_spin.valueChanged.connect(self._on_length_changed)
        self._obscure_check.toggled.connect(self._on_obscure_toggled)
        self._clear_btn.clicked.connect(self._on_clear_clicked)
        for field in self._fields:
            field.submitted.connect(self._on_submitted)
            field.pin_completed.connect(self._on_completed)

    # ------------------------------------------------------------------
    # Slots
    # ------------------------------------------------------------------

    def _on_length_changed(self, pin_length: int):
        for field in self._fields:
            field.set_config(replace(field.config, pin_length=pin_length))
        logger.info(f"Slot count changed to {pin_length}")

    def _on_obscure_toggled(self, checked: bool):
        obscure = ObscureStyle(is_text_obscure=checked, obscure_text=settings.DEFAULT_OBSCURE_TEXT)
        for field in self._fields:
            decoration = replace(field.config.decoration, obscure_style=obscure)
            field.set_config(replace(field.config, decoration=decoration))

    def _on_clear_clicked(self):
        for field in self._fields:
            field.clear()
        self.statusBar().showMessage("Cleared")

    def _on_completed(self, pin: str):
        self.statusBar().showMessage(f"All {len(pin)} slots filled")

    def _on_submitted(self, pin: str):
        ok, error = validate_pin(pin, self._length_spin.value())
        if ok:
            self.statusBar().showMessage(f"Submitted code {pin}")
            logger.info("Code submitted")
        else:
            self.statusBar().showMessage(error)
            logger.warning(f"Rejected submission: {error}")

    def closeEvent(self, event):
        for field in self._fields:
            field.dispose()
        super().closeEvent(event)
