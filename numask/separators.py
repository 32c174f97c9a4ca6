"""Character rules and separator remapping between text representations.

Internally numbers are rendered with ``.`` as decimal mark and ``,`` as the
grouping mark.  The helpers below translate that internal form into whatever
the field is configured to display and decide which typed characters may reach
the field at all.
"""
from __future__ import annotations

from .mask_config import MaskConfig

INTERNAL_DECIMAL = "."
INTERNAL_GROUP = ","

# Grouping marks are parked on this character while the decimal mark is
# substituted.
_PARKED_GROUP = " "


def is_allowed_keystroke(char: str, config: MaskConfig) -> bool:
    """Return ``True`` when *char* may be typed into the field.

    Only ASCII digits and the configured decimal separator pass.  The grouping
    separator is rejected as a typed character.
    """
    if len(char) != 1:
        return False
    return char in "0123456789" or char == config.decimal_separator


def find_decimal(text: str, config: MaskConfig) -> int:
    """Return the offset of the decimal separator in *text* or ``-1``."""
    return text.find(config.decimal_separator)


def to_display(internal: str, config: MaskConfig) -> str:
    """Map internally formatted text to the configured separators.

    The order of substitution matters: with ``.`` configured as grouping
    mark, replacing the decimal dot before the grouping commas would leave no
    way to tell both apart afterwards.

    1. grouping commas are parked on a space,
    2. the decimal dot becomes the configured decimal separator,
    3. parked grouping marks become the configured grouping separator.
    """
    text = internal.replace(INTERNAL_GROUP, _PARKED_GROUP)
    text = text.replace(INTERNAL_DECIMAL, config.decimal_separator)
    if config.thousand_separator != _PARKED_GROUP:
        text = text.replace(_PARKED_GROUP, config.thousand_separator)
    return text


def localize_decimal(unmasked: str, config: MaskConfig) -> str:
    """Replace the normalised decimal dot by the configured separator."""
    if config.decimal_separator == INTERNAL_DECIMAL:
        return unmasked
    return unmasked.replace(INTERNAL_DECIMAL, config.decimal_separator)


__all__ = [
    "INTERNAL_DECIMAL",
    "INTERNAL_GROUP",
    "is_allowed_keystroke",
    "find_decimal",
    "to_display",
    "localize_decimal",
]
