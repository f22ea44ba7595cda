"""
Input formatters applied to text typed into a pin field.

A formatter receives the current text and the proposed text and returns the
text to accept. They run in order; the host widget passes them through.
"""
import re
from enum import Enum, auto
from typing import Callable, Pattern, Union

from pin_input.core.errors import ConfigurationError
from pin_input.utils.validators import validate_pin_length


TextInputFormatter = Callable[[str, str], str]


class KeyboardType(Enum):
    """Keyboard hint forwarded to the host input method."""
    PHONE = auto()
    NUMBER = auto()
    TEXT = auto()


class AllowPatternFormatter:
    """Keeps only the characters matching a single-character pattern."""

    def __init__(self, pattern: Union[str, Pattern[str]]):
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    def __repr__(self) -> str:
        return f"AllowPatternFormatter({self.pattern.pattern!r})"

    def __call__(self, old_text: str, new_text: str) -> str:
        return "".join(self.pattern.findall(new_text))


class LengthLimitingFormatter:
    """Truncates the proposed text to max_length code points."""

    def __init__(self, max_length: int):
        is_valid, error_message = validate_pin_length(max_length)
        if not is_valid:
            raise ConfigurationError(error_message)
        self.max_length = max_length

    def __repr__(self) -> str:
        return f"LengthLimitingFormatter({self.max_length})"

    def __eq__(self, other) -> bool:
        return isinstance(other, LengthLimitingFormatter) and other.max_length == self.max_length

    def __hash__(self) -> int:
        return hash((LengthLimitingFormatter, self.max_length))

    def __call__(self, old_text: str, new_text: str) -> str:
        if len(new_text) <= self.max_length:
            return new_text
        return new_text[:self.max_length]


digits_only = AllowPatternFormatter(r"[0-9]")
