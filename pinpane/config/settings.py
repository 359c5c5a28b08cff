"""
pinpane settings.

A single numeric setting, the default size of new pinned regions,
resolved from (first match wins):

1. the PINPANE_DEFAULT_SIZE environment variable
2. ``default_size`` in ~/.config/pinpane/config.json
3. DEFAULT_PIN_SIZE (0.3)
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Tuple

from ..core.types import validate_size
from ..exceptions import ConfigurationError, InvalidArgumentError
from .constants import (
    CONFIG_FILE_NAME,
    DEFAULT_PIN_SIZE,
    ENV_CONFIG_DIR,
    ENV_DEFAULT_SIZE,
    PINPANE_CONFIG_DIR,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "default_size": DEFAULT_PIN_SIZE,
}


@dataclass(frozen=True)
class PinSettings:
    """Settings consulted by the pin factory."""

    default_size: float = DEFAULT_PIN_SIZE

    def __post_init__(self) -> None:
        # Frozen dataclass; keep the parsed number rather than the raw input
        object.__setattr__(self, "default_size", validate_default_size(self.default_size))

    @classmethod
    def load(cls) -> "PinSettings":
        """Build settings from the environment and config file."""
        return cls(default_size=get_default_size())


def get_config_dir() -> Path:
    """Config directory, respecting the PINPANE_CONFIG_DIR environment variable."""
    override = os.environ.get(ENV_CONFIG_DIR)
    if override:
        return Path(override).expanduser()
    return PINPANE_CONFIG_DIR


def get_config_path() -> Path:
    """Path to config.json."""
    return get_config_dir() / CONFIG_FILE_NAME


def read_config_file() -> dict[str, Any]:
    """
    Read the settings stored in the config file, without defaults.

    Returns:
        Stored config dict, or an empty dict if the file doesn't exist or is invalid
    """
    path = get_config_path()
    if not path.exists():
        return {}
    try:
        config = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Ignoring unreadable config file {path}: {e}")
        return {}
    if not isinstance(config, dict):
        logger.warning(f"Ignoring config file {path}: top level is not an object")
        return {}
    return config


def load_config() -> dict[str, Any]:
    """
    Load configuration from file.

    Returns:
        Config dict, or defaults if file doesn't exist or is invalid
    """
    # Merge with defaults to handle missing keys
    return {**DEFAULT_CONFIG, **read_config_file()}


def save_config(config: dict[str, Any]) -> None:
    """
    Save configuration to file.

    Raises:
        ConfigurationError: If the file cannot be written
    """
    path = get_config_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(config, indent=2) + "\n")
    except OSError as e:
        raise ConfigurationError(
            f"Could not write config file: {e}", setting="default_size", path=str(path)
        ) from e


def validate_default_size(value: Any) -> float:
    """Parse and validate a default size value.

    Accepts numbers and numeric strings (as found in the environment).

    Raises:
        ConfigurationError: If the value is not a positive number
    """
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            raise ConfigurationError(
                f"Default size must be a number, got {value!r}", setting="default_size"
            ) from None
    try:
        return validate_size(value)
    except InvalidArgumentError as e:
        raise ConfigurationError(e.message, setting="default_size") from e


def resolve_default_size() -> Tuple[float, str]:
    """Resolve the default size and report where it came from.

    Invalid values are logged and skipped in favour of the next source.

    Returns:
        Tuple of (size, source) where source is "env", "file" or "default".
    """
    env_value = os.environ.get(ENV_DEFAULT_SIZE)
    if env_value:
        try:
            return validate_default_size(env_value), "env"
        except ConfigurationError as e:
            logger.warning(f"Ignoring {ENV_DEFAULT_SIZE}: {e}")

    stored = read_config_file()
    if "default_size" in stored:
        try:
            return validate_default_size(stored["default_size"]), "file"
        except ConfigurationError as e:
            logger.warning(f"Ignoring default_size in {get_config_path()}: {e}")

    return DEFAULT_PIN_SIZE, "default"


def get_default_size() -> float:
    """Default size of new pinned regions."""
    return resolve_default_size()[0]


def set_default_size(value: Any) -> float:
    """Validate and persist the default size.

    Returns:
        The stored size
    """
    size = validate_default_size(value)
    config = load_config()
    config["default_size"] = size
    save_config(config)
    logger.debug(f"Default pin size set to {size}")
    return size
