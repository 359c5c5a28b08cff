"""CLI tests using typer's CliRunner."""

import json
import logging

import pytest
from typer.testing import CliRunner

from pinpane import __version__
from pinpane.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def reset_cli_logging():
    """Drop the stderr handler the CLI callback installs."""
    yield
    logger = logging.getLogger("pinpane")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def run_json(args):
    result = runner.invoke(app, args)
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


class TestCLIBasics:
    """Basic CLI functionality."""

    def test_cli_help(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "Usage:" in result.stdout
        assert "simulate" in result.stdout

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert f"pinpane version {__version__}" in result.stdout

    def test_invalid_command(self):
        result = runner.invoke(app, ["nonexistent-command"])
        assert result.exit_code != 0

    def test_demo_rejects_bad_size(self):
        result = runner.invoke(app, ["demo", "--size", "0"])

        assert result.exit_code == 1
        assert "Error" in result.stdout


class TestSimulate:
    """pinpane simulate drives a MemoryHost."""

    def test_ratio_follows_resize(self):
        data = run_json(
            [
                "simulate",
                "--width", "1000",
                "--height", "600",
                "--pin", "left:0.3",
                "--resize", "800x600",
                "--json",
            ]
        )

        left = next(r for r in data["regions"] if r["edge"] == "left")
        assert left["pinned"] is True
        assert left["width"] == 240
        assert data["frame"] == {"width": 800, "height": 600}
        assert data["enabled"] is True

    def test_disabled_keeps_initial_size(self):
        data = run_json(
            [
                "simulate", "-W", "1000", "-H", "600",
                "-p", "left:0.3", "-r", "800x600", "--disabled", "--json",
            ]
        )

        left = next(r for r in data["regions"] if r["edge"] == "left")
        assert left["width"] == 300
        assert data["enabled"] is False

    def test_collapse_keeps_pinned(self):
        data = run_json(
            ["simulate", "-p", "bottom:8", "-p", "right", "--collapse", "--json"]
        )

        edges = sorted(r["edge"] for r in data["regions"])
        assert edges == ["body", "bottom", "right"]

    def test_table_output(self):
        result = runner.invoke(app, ["simulate", "--pin", "top:5"])

        assert result.exit_code == 0
        assert "Frame 120x40" in result.stdout
        assert "top" in result.stdout

    def test_bad_pin_argument(self):
        result = runner.invoke(app, ["simulate", "--pin", "middle:0.3"])
        assert result.exit_code != 0

    def test_bad_resize_argument(self):
        result = runner.invoke(app, ["simulate", "--resize", "big"])
        assert result.exit_code != 0

    def test_allocation_failure(self):
        result = runner.invoke(app, ["simulate", "-W", "30", "-p", "left:25"])

        assert result.exit_code == 1
        assert "Not enough room" in result.stdout


class TestConfigCommands:
    """pinpane config show / set-size."""

    def test_show_default(self):
        data = run_json(["config", "show", "--json"])

        assert data["default_size"] == 0.3
        assert data["source"] == "default"

    def test_set_size_then_show(self):
        result = runner.invoke(app, ["config", "set-size", "0.25"])
        assert result.exit_code == 0
        assert "0.25" in result.stdout

        data = run_json(["config", "show", "--json"])
        assert data["default_size"] == 0.25
        assert data["source"] == "file"

    def test_set_size_rejects_invalid(self):
        result = runner.invoke(app, ["config", "set-size", "0"])

        assert result.exit_code == 1
        assert "Error" in result.stdout

    def test_show_table(self):
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "default_size" in result.stdout
