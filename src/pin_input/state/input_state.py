"""
Input state controller.

Keeps exactly one buffer associated with a pin field, derives the display
text from it and reconciles configuration changes:

  attach → on_buffer_changed* → reconcile* → detach

Redraw requests go to the controller's own listeners with a RedrawReason.
Everything runs synchronously on the UI thread.
"""
from enum import Enum, auto
from typing import Optional

from pin_input.core.change_notifier import ChangeNotifier
from pin_input.core.errors import ConfigurationError, StateInconsistencyError
from pin_input.core.field_config import PinFieldConfig
from pin_input.core.text_buffer import PinTextBuffer, TextBuffer, TextEditingValue
from pin_input.utils.logger import logger
from pin_input.utils.validators import validate_pin_length


class RedrawReason(Enum):
    TEXT_CHANGED = auto()
    DIMENSIONS_CHANGED = auto()


def clamp_text(text: str, pin_length: int) -> str:
    """First pin_length code points of text."""
    if len(text) > pin_length:
        return text[:pin_length]
    return text


class InputStateController(ChangeNotifier):
    """
    Mediates between the active text buffer and the painter.

    An internal buffer is created by attach() when no external one is given
    and disposed by detach(). An external buffer is only borrowed: the
    controller adds and removes its listener, nothing else.
    """

    def __init__(self, pin_length: int):
        super().__init__()
        is_valid, error_message = validate_pin_length(pin_length)
        if not is_valid:
            raise ConfigurationError(error_message)
        self._pin_length = pin_length
        self._display_text = ""
        self._internal_buffer: Optional[PinTextBuffer] = None
        self._external_buffer: Optional[TextBuffer] = None
        self._attached = False

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def pin_length(self) -> int:
        return self._pin_length

    @property
    def display_text(self) -> str:
        return self._display_text

    @property
    def is_attached(self) -> bool:
        return self._attached

    @property
    def owns_buffer(self) -> bool:
        return self._internal_buffer is not None

    @property
    def buffer(self) -> TextBuffer:
        """The buffer currently driving the field."""
        self._check_attached()
        if self._external_buffer is not None:
            return self._external_buffer
        return self._internal_buffer

    def _check_attached(self) -> None:
        if not self._attached:
            raise StateInconsistencyError("InputStateController is not attached to a buffer")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def attach(self, buffer: Optional[TextBuffer] = None) -> None:
        """
        Associate a buffer with the field.

        Args:
            buffer: Caller-owned buffer to adopt, or None to create an
                internal one
        """
        if self._attached:
            raise StateInconsistencyError("InputStateController is already attached")

        if buffer is None:
            self._internal_buffer = PinTextBuffer()
            logger.debug("InputStateController: created internal buffer")
        else:
            self._external_buffer = buffer
            logger.debug(f"InputStateController: adopted external buffer {buffer!r}")
        self._attached = True
        self.buffer.add_listener(self.on_buffer_changed)

        # The adopted buffer may already hold text
        self._display_text = clamp_text(self.buffer.text, self._pin_length)

    def detach(self) -> None:
        """Unsubscribe and release the internal buffer, if any."""
        self._check_attached()
        self.buffer.remove_listener(self.on_buffer_changed)
        if self._internal_buffer is not None:
            self._internal_buffer.dispose()
            self._internal_buffer = None
            logger.debug("InputStateController: disposed internal buffer")
        self._external_buffer = None
        self._attached = False

    # ------------------------------------------------------------------
    # Buffer changes
    # ------------------------------------------------------------------

    def on_buffer_changed(self) -> None:
        """Recompute the display text; request a redraw when it changed."""
        self._check_attached()
        new_text = clamp_text(self.buffer.text, self._pin_length)
        if new_text == self._display_text:
            logger.debug("InputStateController: display text unchanged, no redraw")
            return
        self._display_text = new_text
        self.notify_listeners(RedrawReason.TEXT_CHANGED)

    # ------------------------------------------------------------------
    # Configuration changes
    # ------------------------------------------------------------------

    def reconcile(self, old_config: PinFieldConfig, new_config: PinFieldConfig) -> None:
        """
        Apply a configuration replacement.

        Buffer transitions are handled first (ownership change, then external
        buffer swap). A slot-count change then recomputes the display text
        from the active buffer; when the count shrank below the buffer's
        length the extra characters are permanently dropped from it.
        """
        self._check_attached()
        old_buffer = old_config.buffer
        new_buffer = new_config.buffer
        self._pin_length = new_config.pin_length

        if new_buffer is None and old_buffer is not None:
            old_buffer.remove_listener(self.on_buffer_changed)
            self._internal_buffer = PinTextBuffer.from_value(old_buffer.value)
            self._external_buffer = None
            self._internal_buffer.add_listener(self.on_buffer_changed)
            logger.debug("InputStateController: external buffer released, internal buffer created")
        elif new_buffer is not None and old_buffer is None:
            self._internal_buffer.remove_listener(self.on_buffer_changed)
            self._internal_buffer.dispose()
            self._internal_buffer = None
            self._external_buffer = new_buffer
            new_buffer.add_listener(self.on_buffer_changed)
            logger.debug(f"InputStateController: internal buffer replaced by {new_buffer!r}")
            if self._display_text != new_buffer.text:
                self.on_buffer_changed()
        elif new_buffer is not old_buffer:
            old_buffer.remove_listener(self.on_buffer_changed)
            self._external_buffer = new_buffer
            new_buffer.add_listener(self.on_buffer_changed)
            logger.debug(f"InputStateController: external buffer swapped for {new_buffer!r}")

        if old_config.pin_length == new_config.pin_length:
            return
        # Measured against the active buffer, which after a swap is the new one
        if len(self.buffer.text) > new_config.pin_length \
                and old_config.pin_length > new_config.pin_length:
            self._truncate(new_config.pin_length)
        else:
            self._display_text = clamp_text(self.buffer.text, new_config.pin_length)
            self.notify_listeners(RedrawReason.DIMENSIONS_CHANGED)

    def _truncate(self, pin_length: int) -> None:
        text = self.buffer.text[:pin_length]
        logger.debug(f"InputStateController: truncating text to {pin_length} characters")
        # Set first so the buffer write below is seen as a no-op change
        self._display_text = text
        self.buffer.value = TextEditingValue.with_caret_at_end(text)
        self.notify_listeners(RedrawReason.DIMENSIONS_CHANGED)
