"""
Pin decorations — the closed set of slot styles.

Three variants share the text style and obscure style options:

  UNDERLINE  — one underline segment per slot, separated by a gap
  BOX_TIGHT  — one rounded strip divided by separator lines
  BOX_LOOSE  — one rounded box per slot, separated by a gap

Colors are hex strings (#RGB, #RRGGBB or #AARRGGBB).
Invalid parameters raise ConfigurationError at construction.
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union

from pin_input.core.errors import ConfigurationError
from pin_input.utils.validators import (
    validate_color, validate_non_negative, validate_obscure_text,
)


CYAN = "#00BCD4"
WHITE = "#FFFFFF"


def _require(result) -> None:
    is_valid, error_message = result
    if not is_valid:
        raise ConfigurationError(error_message)


class PinEntryType(Enum):
    UNDERLINE = auto()
    BOX_TIGHT = auto()
    BOX_LOOSE = auto()


@dataclass(frozen=True)
class TextStyle:
    """Style of the glyphs painted inside the slots."""
    font_size: float = 24.0
    color: str = WHITE
    font_family: Optional[str] = None
    bold: bool = False

    def __post_init__(self):
        if isinstance(self.font_size, bool) or not isinstance(self.font_size, (int, float)) \
                or self.font_size <= 0:
            raise ConfigurationError(f"Font size must be positive, got {self.font_size!r}")
        _require(validate_color(self.color))


DEFAULT_TEXT_STYLE = TextStyle()


@dataclass(frozen=True)
class ObscureStyle:
    """
    Masking of the entered characters.

    When is_text_obscure is set every character is painted as obscure_text.
    The buffer keeps the real characters.
    """
    is_text_obscure: bool = False
    obscure_text: str = "*"

    def __post_init__(self):
        _require(validate_obscure_text(self.obscure_text))


@dataclass(frozen=True)
class UnderlineDecoration:
    text_style: Optional[TextStyle] = None
    obscure_style: Optional[ObscureStyle] = None
    entered_color: Optional[str] = None
    gap_space: float = 16.0
    color: str = CYAN
    line_height: float = 2.0

    def __post_init__(self):
        _require(validate_color(self.entered_color, required=False))
        _require(validate_color(self.color))
        _require(validate_non_negative(self.gap_space, "gap_space"))
        _require(validate_non_negative(self.line_height, "line_height"))

    @property
    def pin_entry_type(self) -> PinEntryType:
        return PinEntryType.UNDERLINE


@dataclass(frozen=True)
class BoxTightDecoration:
    text_style: Optional[TextStyle] = None
    obscure_style: Optional[ObscureStyle] = None
    # Fill of the whole strip, usually the field background
    solid_color: Optional[str] = None
    stroke_width: float = 1.0
    radius: float = 8.0
    stroke_color: str = CYAN

    def __post_init__(self):
        _require(validate_color(self.solid_color, required=False))
        _require(validate_color(self.stroke_color))
        _require(validate_non_negative(self.stroke_width, "stroke_width"))
        _require(validate_non_negative(self.radius, "radius"))

    @property
    def pin_entry_type(self) -> PinEntryType:
        return PinEntryType.BOX_TIGHT


@dataclass(frozen=True)
class BoxLooseDecoration:
    text_style: Optional[TextStyle] = None
    obscure_style: Optional[ObscureStyle] = None
    entered_color: Optional[str] = None
    # Fill of each box, usually the field background
    solid_color: Optional[str] = None
    radius: float = 8.0
    stroke_width: float = 1.0
    gap_space: float = 16.0
    stroke_color: str = CYAN

    def __post_init__(self):
        _require(validate_color(self.entered_color, required=False))
        _require(validate_color(self.solid_color, required=False))
        _require(validate_color(self.stroke_color))
        _require(validate_non_negative(self.radius, "radius"))
        _require(validate_non_negative(self.stroke_width, "stroke_width"))
        _require(validate_non_negative(self.gap_space, "gap_space"))

    @property
    def pin_entry_type(self) -> PinEntryType:
        return PinEntryType.BOX_LOOSE


PinDecoration = Union[UnderlineDecoration, BoxTightDecoration, BoxLooseDecoration]

DECORATION_TYPES = (UnderlineDecoration, BoxTightDecoration, BoxLooseDecoration)


def effective_text_style(decoration: PinDecoration) -> TextStyle:
    return decoration.text_style if decoration.text_style is not None else DEFAULT_TEXT_STYLE


def is_obscure_on(decoration: PinDecoration) -> bool:
    return decoration.obscure_style is not None and decoration.obscure_style.is_text_obscure
