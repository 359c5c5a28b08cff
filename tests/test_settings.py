"""Tests for the default pin size setting."""

import json

import pytest

from pinpane.config.constants import DEFAULT_PIN_SIZE
from pinpane.config.settings import (
    PinSettings,
    get_config_path,
    get_default_size,
    load_config,
    read_config_file,
    resolve_default_size,
    set_default_size,
    validate_default_size,
)
from pinpane.exceptions import ConfigurationError


def test_builtin_default():
    """Without env or file the default is 0.3."""
    assert DEFAULT_PIN_SIZE == 0.3
    assert resolve_default_size() == (0.3, "default")
    assert PinSettings().default_size == 0.3


def test_config_path_respects_env(isolated_config):
    assert get_config_path() == isolated_config / "config.json"


def test_set_default_size_persists(isolated_config):
    """set_default_size writes config.json and get_default_size reads it back."""
    assert set_default_size("25") == 25.0

    assert get_default_size() == 25.0
    assert resolve_default_size() == (25.0, "file")
    stored = json.loads((isolated_config / "config.json").read_text())
    assert stored["default_size"] == 25.0


def test_env_overrides_file(monkeypatch):
    set_default_size(0.4)
    monkeypatch.setenv("PINPANE_DEFAULT_SIZE", "0.2")

    assert resolve_default_size() == (0.2, "env")


def test_invalid_env_falls_back(monkeypatch, caplog):
    monkeypatch.setenv("PINPANE_DEFAULT_SIZE", "wide")

    with caplog.at_level("WARNING"):
        assert resolve_default_size() == (0.3, "default")
    assert "PINPANE_DEFAULT_SIZE" in caplog.text


def test_invalid_file_value_falls_back(isolated_config):
    isolated_config.mkdir(parents=True)
    (isolated_config / "config.json").write_text(json.dumps({"default_size": -2}) + "\n")

    assert get_default_size() == 0.3


def test_corrupt_config_file_uses_defaults(isolated_config):
    isolated_config.mkdir(parents=True)
    (isolated_config / "config.json").write_text("{not json")

    assert load_config() == {"default_size": 0.3}
    assert get_default_size() == 0.3


def test_non_object_config_file_uses_defaults(isolated_config):
    isolated_config.mkdir(parents=True)
    (isolated_config / "config.json").write_text("[1, 2]\n")

    assert load_config() == {"default_size": 0.3}


def test_unknown_keys_are_kept(isolated_config):
    isolated_config.mkdir(parents=True)
    (isolated_config / "config.json").write_text(json.dumps({"other": 1}) + "\n")

    set_default_size(0.5)

    stored = json.loads((isolated_config / "config.json").read_text())
    assert stored == {"default_size": 0.5, "other": 1}


@pytest.mark.parametrize("value", ["0", "-1", "abc", "", 0, -3, True, None])
def test_invalid_values_rejected(value):
    with pytest.raises(ConfigurationError):
        validate_default_size(value)


def test_set_invalid_value_does_not_write(isolated_config):
    with pytest.raises(ConfigurationError, match="default_size"):
        set_default_size("0")

    assert not (isolated_config / "config.json").exists()


def test_numeric_strings_accepted():
    assert validate_default_size(" 0.25 ") == 0.25
    assert validate_default_size(12) == 12


def test_pin_settings_validates():
    with pytest.raises(ConfigurationError):
        PinSettings(default_size=0)


def test_pin_settings_load(monkeypatch):
    monkeypatch.setenv("PINPANE_DEFAULT_SIZE", "40")

    assert PinSettings.load().default_size == 40.0


def test_explicit_default_in_file_reports_file(isolated_config):
    """A config file that spells out 0.3 is still the source."""
    set_default_size(0.3)

    assert resolve_default_size() == (0.3, "file")
    assert read_config_file() == {"default_size": 0.3}


def test_read_config_file_has_no_defaults(isolated_config):
    assert read_config_file() == {}
    assert load_config() == {"default_size": DEFAULT_PIN_SIZE}


def test_pin_settings_stores_parsed_value():
    settings = PinSettings(default_size=" 0.5 ")

    assert settings.default_size == 0.5
    assert isinstance(settings.default_size, float)
