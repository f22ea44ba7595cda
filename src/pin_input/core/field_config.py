"""
Immutable configuration of one pin field.
"""
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence, Tuple

from pin_input.core.decoration import DECORATION_TYPES, BoxLooseDecoration, PinDecoration
from pin_input.core.errors import ConfigurationError
from pin_input.core.input_formatters import (
    KeyboardType, LengthLimitingFormatter, TextInputFormatter, digits_only,
)
from pin_input.core.text_buffer import TextBuffer
from pin_input.utils.validators import validate_pin_length


@dataclass(frozen=True)
class PinFieldConfig:
    """
    Snapshot of a pin field's options.

    Never mutated: give the field a new config (dataclasses.replace works)
    to change the slot count, style or buffer.

    buffer, when set, is owned by the caller. The field subscribes to it but
    never disposes it.
    """
    pin_length: int = 6
    decoration: PinDecoration = field(default_factory=BoxLooseDecoration)
    input_formatters: Optional[Sequence[TextInputFormatter]] = None
    keyboard_type: KeyboardType = KeyboardType.PHONE
    buffer: Optional[TextBuffer] = field(default=None, compare=False)
    enabled: bool = True
    autofocus: bool = False
    on_submit: Optional[Callable[[str], None]] = field(default=None, compare=False)

    def __post_init__(self):
        is_valid, error_message = validate_pin_length(self.pin_length)
        if not is_valid:
            raise ConfigurationError(error_message)
        if not isinstance(self.decoration, DECORATION_TYPES):
            raise ConfigurationError(f"Unsupported decoration: {self.decoration!r}")
        if self.input_formatters is not None:
            # Freeze the caller's list
            object.__setattr__(self, 'input_formatters', tuple(self.input_formatters))

    @property
    def effective_input_formatters(self) -> Tuple[TextInputFormatter, ...]:
        """Caller formatters (digits only by default), always length limited."""
        formatters = self.input_formatters if self.input_formatters is not None else (digits_only,)
        return tuple(formatters) + (LengthLimitingFormatter(self.pin_length),)

    @property
    def has_external_buffer(self) -> bool:
        return self.buffer is not None
