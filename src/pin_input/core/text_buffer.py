"""
Editable text buffer backing a pin field.

The field only needs get/set of the text and selection plus change
subscription; ``TextBuffer`` describes that capability and ``PinTextBuffer``
is the implementation used for internally owned buffers (and by callers that
want to share one with the field).
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Protocol

from pin_input.core.change_notifier import ChangeNotifier


@dataclass(frozen=True)
class TextSelection:
    """Selection range in code point offsets; collapsed when both ends match."""
    base_offset: int = -1
    extent_offset: int = -1

    @classmethod
    def collapsed(cls, offset: int) -> "TextSelection":
        return cls(offset, offset)

    @property
    def is_collapsed(self) -> bool:
        return self.base_offset == self.extent_offset

    @property
    def is_valid(self) -> bool:
        return self.base_offset >= 0 and self.extent_offset >= 0


@dataclass(frozen=True)
class TextEditingValue:
    """Snapshot of a buffer: its text and selection."""
    text: str = ""
    selection: TextSelection = field(default_factory=TextSelection)

    @classmethod
    def with_caret_at_end(cls, text: str) -> "TextEditingValue":
        return cls(text, TextSelection.collapsed(len(text)))


class TextBuffer(Protocol):
    """Capability consumed by the input state controller."""

    text: str
    selection: TextSelection
    value: TextEditingValue

    def add_listener(self, callback: Callable[..., Any]) -> None:
        ...

    def remove_listener(self, callback: Callable[..., Any]) -> None:
        ...


class PinTextBuffer(ChangeNotifier):
    """
    Observable text buffer.

    Writing a value equal to the current one does not notify, which keeps
    listeners that write back into the buffer from looping.
    """

    def __init__(self, text: str = "", value: Optional[TextEditingValue] = None):
        super().__init__()
        self._value = value if value is not None else TextEditingValue.with_caret_at_end(text)

    @classmethod
    def from_value(cls, value: TextEditingValue) -> "PinTextBuffer":
        return cls(value=value)

    def __repr__(self) -> str:
        return f"PinTextBuffer(text={self._value.text!r}, selection={self._value.selection})"

    @property
    def value(self) -> TextEditingValue:
        return self._value

    @value.setter
    def value(self, new_value: TextEditingValue) -> None:
        self._check_not_disposed()
        if new_value == self._value:
            return
        self._value = new_value
        self.notify_listeners()

    @property
    def text(self) -> str:
        return self._value.text

    @text.setter
    def text(self, new_text: str) -> None:
        # Replacing the text puts the caret at its end
        self.value = TextEditingValue.with_caret_at_end(new_text)

    @property
    def selection(self) -> TextSelection:
        return self._value.selection

    @selection.setter
    def selection(self, new_selection: TextSelection) -> None:
        self.value = TextEditingValue(self._value.text, new_selection)

    def clear(self) -> None:
        self.value = TextEditingValue.with_caret_at_end("")
