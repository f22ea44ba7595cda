"""
Toolkit-independent pin field.

Ties a PinFieldConfig, an InputStateController and the painter together.
Host widgets forward user edits to handle_input(), submissions to submit(),
and paint through paint(), which skips the pass when nothing changed since
the previous one.
"""
from typing import Callable, Optional

from pin_input.core.draw_commands import DrawSurface, TextMeasurer
from pin_input.core.field_config import PinFieldConfig
from pin_input.core.geometry import Size
from pin_input.core.pin_painter import PinPainter
from pin_input.core.text_buffer import TextBuffer, TextEditingValue
from pin_input.state.input_state import InputStateController, RedrawReason
from pin_input.utils.logger import logger


class PinInputField:
    """One pin field instance, from attach to dispose."""

    def __init__(self, config: Optional[PinFieldConfig], measurer: TextMeasurer):
        self._config = config if config is not None else PinFieldConfig()
        self._measurer = measurer
        self._last_painter: Optional[PinPainter] = None
        self._last_size: Optional[Size] = None

        self._controller = InputStateController(self._config.pin_length)
        self._controller.attach(self._config.buffer)
        self._controller.add_listener(self._on_redraw_requested)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> PinFieldConfig:
        return self._config

    @property
    def controller(self) -> InputStateController:
        return self._controller

    @property
    def buffer(self) -> TextBuffer:
        return self._controller.buffer

    @property
    def text(self) -> str:
        """Raw buffer text."""
        return self._controller.buffer.text

    @property
    def display_text(self) -> str:
        return self._controller.display_text

    @property
    def is_complete(self) -> bool:
        return len(self._controller.display_text) == self._config.pin_length

    def add_redraw_listener(self, callback: Callable[[RedrawReason], None]) -> None:
        self._controller.add_listener(callback)

    def remove_redraw_listener(self, callback: Callable[[RedrawReason], None]) -> None:
        self._controller.remove_listener(callback)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def handle_input(self, new_text: str) -> bool:
        """
        Apply an edit coming from the host input widget.

        Args:
            new_text: Full text proposed by the input widget

        Returns:
            False when the field is disabled and the edit was ignored
        """
        if not self._config.enabled:
            logger.debug("PinInputField: edit ignored, field is disabled")
            return False

        old_text = self.buffer.text
        text = new_text
        for formatter in self._config.effective_input_formatters:
            text = formatter(old_text, text)
        self.buffer.value = TextEditingValue.with_caret_at_end(text)
        return True

    def clear(self) -> None:
        self.buffer.value = TextEditingValue.with_caret_at_end("")

    def submit(self) -> bool:
        """Forward the buffer text to on_submit, if configured."""
        if self._config.on_submit is None:
            return False
        text = self.buffer.text
        logger.debug(f"PinInputField: submitting {len(text)} characters")
        self._config.on_submit(text)
        return True

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def update_config(self, new_config: PinFieldConfig) -> None:
        old_config = self._config
        self._config = new_config
        self._controller.reconcile(old_config, new_config)

    # ------------------------------------------------------------------
    # Painting
    # ------------------------------------------------------------------

    def painter(self) -> PinPainter:
        return PinPainter(
            self._controller.display_text,
            self._config.pin_length,
            self._config.decoration,
            self._measurer,
        )

    def needs_paint(self, size: Size) -> bool:
        if self._last_painter is None or size != self._last_size:
            return True
        return self.painter().should_repaint(self._last_painter)

    def paint(self, surface: DrawSurface, size: Size) -> bool:
        """
        Paint the field unless the previous pass painted the same thing.

        Returns:
            True when the surface was drawn on
        """
        painter = self.painter()
        if self._last_painter is not None and size == self._last_size \
                and not painter.should_repaint(self._last_painter):
            logger.debug("PinInputField: repaint skipped, display text unchanged")
            return False
        painter.paint(surface, size)
        self._last_painter = painter
        self._last_size = size
        return True

    def invalidate(self) -> None:
        """Force the next paint() to draw, e.g. after the surface was cleared."""
        self._last_painter = None
        self._last_size = None

    def _on_redraw_requested(self, reason: RedrawReason) -> None:
        logger.debug(f"PinInputField: redraw requested ({reason.name})")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def dispose(self) -> None:
        self._controller.remove_listener(self._on_redraw_requested)
        self._controller.detach()
        self._controller.dispose()
