from __future__ import annotations

import json

import pytest

from numask import mask_settings
from numask.mask_config import MaskConfig, MaskConfigError


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    monkeypatch.setenv("NUMASK_CONFIG_DIR", str(tmp_path))
    for name in (
        mask_settings.ENV_PRECISION,
        mask_settings.ENV_DECIMAL_SEPARATOR,
        mask_settings.ENV_THOUSAND_SEPARATOR,
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(mask_settings, "load_mask_env", lambda: None)
    return tmp_path


def test_defaults_without_settings_file():
    assert mask_settings.load_settings() == mask_settings.DEFAULT_SETTINGS
    assert mask_settings.load_mask_config() == MaskConfig()


def test_save_and_load_round_trip(isolated_settings):
    mask_settings.save_settings({"precision": 3, "decimal_separator": ",", "thousand_separator": "."})
    stored = json.loads((isolated_settings / mask_settings.SETTINGS_FILENAME).read_text("utf-8"))
    assert stored == {"precision": 3, "decimal_separator": ",", "thousand_separator": "."}
    assert mask_settings.load_mask_config() == MaskConfig(3, ",", ".")


def test_invalid_values_fall_back_to_defaults(isolated_settings):
    path = isolated_settings / mask_settings.SETTINGS_FILENAME
    path.write_text(
        json.dumps({"precision": 99, "decimal_separator": ";", "thousand_separator": 5}),
        encoding="utf-8",
    )
    settings = mask_settings.load_settings()
    assert settings == {
        "precision": mask_settings.MAX_PRECISION,
        "decimal_separator": ".",
        "thousand_separator": ",",
    }


def test_unreadable_file_is_ignored(isolated_settings):
    (isolated_settings / mask_settings.SETTINGS_FILENAME).write_text("{not json", encoding="utf-8")
    assert mask_settings.load_settings() == mask_settings.DEFAULT_SETTINGS


def test_environment_overrides_settings(monkeypatch):
    mask_settings.save_settings({"precision": 3})
    monkeypatch.setenv(mask_settings.ENV_PRECISION, "0")
    monkeypatch.setenv(mask_settings.ENV_DECIMAL_SEPARATOR, ",")
    monkeypatch.setenv(mask_settings.ENV_THOUSAND_SEPARATOR, " ")
    assert mask_settings.load_mask_config() == MaskConfig(0, ",", " ")


def test_colliding_separators_raise(monkeypatch):
    monkeypatch.setenv(mask_settings.ENV_DECIMAL_SEPARATOR, ",")
    with pytest.raises(MaskConfigError):
        mask_settings.load_mask_config()
