"""Per-field mask configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

DISABLED_SEPARATOR = " "

DECIMAL_SEPARATORS = (".", ",", DISABLED_SEPARATOR)
THOUSAND_SEPARATORS = (",", ".", " ")

DEFAULT_PRECISION = 1
DEFAULT_DECIMAL_SEPARATOR = "."
DEFAULT_THOUSAND_SEPARATOR = ","


class MaskConfigError(ValueError):
    """Raised when a mask configuration cannot produce consistent output."""


@dataclass(frozen=True)
class MaskConfig:
    """Immutable configuration of one masked field.

    ``decimal_separator`` set to a space disables masking: the field never
    shows digits and the reported value is always ``None``.
    """

    precision: int = DEFAULT_PRECISION
    decimal_separator: str = DEFAULT_DECIMAL_SEPARATOR
    thousand_separator: str = DEFAULT_THOUSAND_SEPARATOR

    def __post_init__(self) -> None:
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise MaskConfigError(f"precision must be an integer, got {self.precision!r}")
        if self.precision < 0:
            raise MaskConfigError(f"precision must not be negative, got {self.precision}")
        if self.decimal_separator not in DECIMAL_SEPARATORS:
            raise MaskConfigError(
                f"unsupported decimal separator {self.decimal_separator!r}"
            )
        if self.thousand_separator not in THOUSAND_SEPARATORS:
            raise MaskConfigError(
                f"unsupported thousand separator {self.thousand_separator!r}"
            )
        if not self.disabled and self.decimal_separator == self.thousand_separator:
            raise MaskConfigError(
                "decimal and thousand separators must differ "
                f"(both are {self.decimal_separator!r})"
            )

    @property
    def disabled(self) -> bool:
        return self.decimal_separator == DISABLED_SEPARATOR

    @classmethod
    def for_lang(cls, lang: str, precision: int = DEFAULT_PRECISION) -> "MaskConfig":
        """Return the separator convention used for amounts in *lang*.

        English interfaces use ``1,234.50`` while all other languages use
        ``1 234,50``.
        """
        if (lang or "").lower().startswith("en"):
            return cls(precision, ".", ",")
        return cls(precision, ",", " ")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "MaskConfig":
        """Build a config from a settings dictionary, defaults for missing keys."""
        precision = data.get("precision", DEFAULT_PRECISION)
        if isinstance(precision, str):
            try:
                precision = int(precision.strip())
            except ValueError:
                raise MaskConfigError(f"precision must be an integer, got {precision!r}") from None
        return cls(
            precision=precision,
            decimal_separator=data.get("decimal_separator", DEFAULT_DECIMAL_SEPARATOR),
            thousand_separator=data.get("thousand_separator", DEFAULT_THOUSAND_SEPARATOR),
        )

    def to_mapping(self) -> dict[str, Any]:
        return {
            "precision": self.precision,
            "decimal_separator": self.decimal_separator,
            "thousand_separator": self.thousand_separator,
        }


__all__ = [
    "DISABLED_SEPARATOR",
    "DECIMAL_SEPARATORS",
    "THOUSAND_SEPARATORS",
    "MaskConfig",
    "MaskConfigError",
]
