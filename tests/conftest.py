"""Shared pytest fixtures for pinpane tests."""

import pytest

from pinpane.config.settings import PinSettings
from pinpane.host.memory import MemoryHost
from pinpane.sticky import StickyRegions


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the real ~/.config/pinpane."""
    config_dir = tmp_path / "pinpane-config"
    monkeypatch.setenv("PINPANE_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("PINPANE_DEFAULT_SIZE", raising=False)
    return config_dir


@pytest.fixture
def host():
    """A 1000x600 frame showing a single body region called "main"."""
    host = MemoryHost(width=1000, height=600)
    host.display("main")
    return host


@pytest.fixture
def main_region(host):
    return host.live_regions()[0]


@pytest.fixture
def sticky(host):
    """Sticky regions over ``host``, enabled, with the built-in default size."""
    sticky = StickyRegions(host, PinSettings())
    sticky.set_enabled(True)
    return sticky
