"""Utilities for converting between masked text and numeric values.

This module centralises formatting and parsing for masked numeric fields.  The
live editor, the Qt adapter and the settings layer all rely on these helpers
instead of keeping local copies.

Three text forms are involved:

* masked text, e.g. ``1.234,50`` (grouped, configured separators),
* editing text, e.g. ``1234,50`` (grouping stripped),
* unmasked text, e.g. ``1234.50`` (parseable, ``.`` decimal).
"""
from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from .mask_config import DISABLED_SEPARATOR, MaskConfig
from .separators import INTERNAL_DECIMAL, to_display

NumberLike = Union[int, float, Decimal, str, None]


def parse_number(unmasked: str) -> Optional[float]:
    """Convert unmasked text to ``float``; ``None`` when it holds no number."""
    if not unmasked:
        return None
    try:
        number = float(unmasked)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def _coerce_number(value: NumberLike) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        try:
            number = float(value)
        except (TypeError, ValueError, InvalidOperation):
            return None
    return number if math.isfinite(number) else None


def format_masked(
    value: NumberLike,
    precision: int,
    decimal_separator: str = ".",
    thousand_separator: str = ",",
) -> str:
    """Return *value* as grouped text with exactly *precision* fraction digits.

    Anything that is not a finite number renders as an empty string, and so
    does every value while masking is disabled.
    """
    config = MaskConfig(precision, decimal_separator, thousand_separator)
    number = _coerce_number(value)
    if number is None or config.disabled:
        return ""
    return to_display(f"{number:,.{precision}f}", config)


def unmask(text: str, decimal_separator: str = ".") -> str:
    """Strip *text* down to sign, digits and decimal mark.

    Grouping characters are always dropped, whatever they are, so parsing
    never sees them.  A ``-`` survives only in front of the first digit or
    separator.  The decimal separator is normalised to ``.``.
    """
    kept: list[str] = []
    negative = False
    for char in text or "":
        if char.isdigit() and char.isascii():
            kept.append(char)
        elif char == decimal_separator:
            kept.append(INTERNAL_DECIMAL)
        elif char == "-" and not kept:
            negative = True
    result = "".join(kept)
    return f"-{result}" if negative else result


def to_canonical(text: str, config: MaskConfig) -> Optional[float]:
    """Return the canonical value of field text under *config*."""
    if config.disabled:
        return None
    return parse_number(unmask(text, config.decimal_separator))


def fixed_point(value: Optional[float], precision: int) -> Optional[Decimal]:
    """Return *value* rounded to exactly *precision* fraction digits."""
    if value is None:
        return None
    return Decimal(f"{value:.{precision}f}")


def truncate_fraction(text: str, decimal_separator: str, precision: int) -> str:
    """Cut the fraction of *text* to at most *precision* digits."""
    if decimal_separator == DISABLED_SEPARATOR:
        return text
    index = text.find(decimal_separator)
    if index < 0:
        return text
    if len(text) - index - 1 <= precision:
        return text
    return text[: index + precision + 1]


__all__ = [
    "NumberLike",
    "parse_number",
    "format_masked",
    "unmask",
    "to_canonical",
    "fixed_point",
    "truncate_fraction",
]
