"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from tonightsmoon.config import DEFAULT_ASSETS_DIR, ConfigError, load_settings


def test_defaults():
    settings = load_settings({})
    assert settings.assets_dir == DEFAULT_ASSETS_DIR
    assert settings.tz_name == "UTC"
    assert settings.lang == "en"
    assert settings.log_level == "WARNING"


def test_default_assets_ship_with_the_repo():
    assert (DEFAULT_ASSETS_DIR / "exclamations.txt").is_file()
    assert (DEFAULT_ASSETS_DIR / "quotes.txt").is_file()


def test_overrides(tmp_path):
    settings = load_settings(
        {
            "TONIGHTSMOON_ASSETS_DIR": str(tmp_path),
            "TONIGHTSMOON_TZ": "Asia/Seoul",
            "TONIGHTSMOON_LANG": "KO",
            "TONIGHTSMOON_LOG_LEVEL": "debug",
        }
    )
    assert settings.assets_dir == Path(tmp_path)
    assert settings.tz.zone == "Asia/Seoul"
    assert settings.lang == "ko"
    assert settings.log_level == "DEBUG"


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv("TONIGHTSMOON_LANG", "ko")
    assert load_settings().lang == "ko"


@pytest.mark.parametrize(
    "key, value",
    [
        ("TONIGHTSMOON_TZ", "Mars/Olympus_Mons"),
        ("TONIGHTSMOON_LANG", "fr"),
        ("TONIGHTSMOON_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_values(key, value):
    with pytest.raises(ConfigError):
        load_settings({key: value})
