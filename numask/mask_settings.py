"""Persistent storage of the default mask configuration."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from .env_loader import load_mask_env
from .mask_config import (
    DECIMAL_SEPARATORS,
    DEFAULT_DECIMAL_SEPARATOR,
    DEFAULT_PRECISION,
    DEFAULT_THOUSAND_SEPARATOR,
    THOUSAND_SEPARATORS,
    MaskConfig,
)
from .user_config import get_appdata_dir

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "mask_settings.json"
MAX_PRECISION = 10

ENV_PRECISION = "NUMASK_PRECISION"
ENV_DECIMAL_SEPARATOR = "NUMASK_DECIMAL_SEPARATOR"
ENV_THOUSAND_SEPARATOR = "NUMASK_THOUSAND_SEPARATOR"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "precision": DEFAULT_PRECISION,
    "decimal_separator": DEFAULT_DECIMAL_SEPARATOR,
    "thousand_separator": DEFAULT_THOUSAND_SEPARATOR,
}


def _settings_path() -> Path:
    """Return absolute path to the settings JSON file."""

    path = Path(get_appdata_dir()) / SETTINGS_FILENAME
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def _load_raw() -> Dict[str, Any]:
    path = _settings_path()
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable mask settings %s: %s", path, exc)
        return {}
    if isinstance(data, dict):
        return data
    return {}


def _validate_precision(value: Any) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        return DEFAULT_PRECISION
    return max(0, min(MAX_PRECISION, number))


def _validate_separator(value: Any, allowed: tuple, default: str) -> str:
    if isinstance(value, str) and value in allowed:
        return value
    return default


def _normalize(data: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "precision": _validate_precision(data.get("precision", DEFAULT_PRECISION)),
        "decimal_separator": _validate_separator(
            data.get("decimal_separator"), DECIMAL_SEPARATORS, DEFAULT_DECIMAL_SEPARATOR
        ),
        "thousand_separator": _validate_separator(
            data.get("thousand_separator"), THOUSAND_SEPARATORS, DEFAULT_THOUSAND_SEPARATOR
        ),
    }


def load_settings() -> Dict[str, Any]:
    """Return sanitized mask settings, defaults for anything missing or invalid."""

    return _normalize(_load_raw())


def save_settings(settings: Dict[str, Any]) -> None:
    """Persist *settings* to disk after validation."""

    path = _settings_path()
    with path.open("w", encoding="utf-8") as fh:
        json.dump(_normalize(settings), fh, ensure_ascii=False, indent=2)


def _env_overrides() -> Dict[str, Any]:
    load_mask_env()
    overrides: Dict[str, Any] = {}
    precision = os.getenv(ENV_PRECISION)
    if precision:
        overrides["precision"] = precision
    # Separators may legitimately be a single space, so only unset means absent.
    decimal = os.getenv(ENV_DECIMAL_SEPARATOR)
    if decimal is not None and decimal != "":
        overrides["decimal_separator"] = decimal
    thousand = os.getenv(ENV_THOUSAND_SEPARATOR)
    if thousand is not None and thousand != "":
        overrides["thousand_separator"] = thousand
    return overrides


def load_mask_config() -> MaskConfig:
    """Return the default mask configuration.

    Settings file values are applied first, then environment overrides.
    Colliding separators raise :class:`~numask.mask_config.MaskConfigError`.
    """

    settings = _normalize({**load_settings(), **_env_overrides()})
    return MaskConfig.from_mapping(settings)


__all__ = [
    "DEFAULT_SETTINGS",
    "MAX_PRECISION",
    "load_settings",
    "save_settings",
    "load_mask_config",
]
