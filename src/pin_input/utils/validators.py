"""
Validation utilities for field configuration and entered codes.
"""
import re
from typing import Optional, Tuple


_HEX_COLOR = re.compile(r'^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$')


def validate_pin_length(pin_length: int) -> Tuple[bool, str]:
    """
    Validate the number of slots of a pin field.

    Args:
        pin_length: Slot count to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if isinstance(pin_length, bool) or not isinstance(pin_length, int):
        return False, "Pin length must be an integer"

    if pin_length <= 0:
        return False, f"Pin length must be larger than 0, got {pin_length}"

    return True, ""


def validate_obscure_text(obscure_text: str) -> Tuple[bool, str]:
    """
    Validate the glyph shown in place of each obscured character.

    Args:
        obscure_text: Mask glyph to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not isinstance(obscure_text, str) or not obscure_text:
        return False, "Obscure text must be a non-empty string"

    # str.splitlines() knows every line boundary, not just '\n'
    if obscure_text.splitlines() != [obscure_text]:
        return False, "Obscure text must not contain line breaks"

    return True, ""


def validate_color(color: Optional[str], required: bool = True) -> Tuple[bool, str]:
    """
    Validate a hex color string (#RGB, #RRGGBB or #AARRGGBB).

    Args:
        color: Color to validate
        required: Whether None is rejected

    Returns:
        Tuple of (is_valid, error_message)
    """
    if color is None:
        if required:
            return False, "Color is required"
        return True, ""

    if not isinstance(color, str) or not _HEX_COLOR.match(color):
        return False, f"Invalid color format: {color!r}"

    return True, ""


def validate_non_negative(value: float, name: str) -> Tuple[bool, str]:
    """
    Validate a geometry parameter (gap, stroke width, radius).

    Args:
        value: Number to validate
        name: Parameter name used in the error message

    Returns:
        Tuple of (is_valid, error_message)
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False, f"{name} must be a number"

    if value < 0:
        return False, f"{name} must not be negative, got {value}"

    return True, ""


def validate_pin(pin: str, pin_length: int = 6) -> Tuple[bool, str]:
    """
    Validate PIN code format.

    Args:
        pin: PIN code to validate
        pin_length: Expected number of digits

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not pin:
        return False, "PIN is required"

    if not pin.isdigit():
        return False, "PIN must contain only digits"

    if len(pin) != pin_length:
        return False, f"PIN must be exactly {pin_length} digits"

    return True, ""
