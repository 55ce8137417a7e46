"""Tests for the ipwatch command-line interface."""

import json
import logging

import pytest
from click.testing import CliRunner
from conftest import FakeBackend, make_link

from ipwatch import cli
from ipwatch.config import WatchConfig
from ipwatch.utils.logger import Logger
from ipwatch.watcher import InterfaceWatcher


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def captured(monkeypatch):
    """Replace run_watch and record the configuration it receives."""
    calls = []

    def fake_run_watch(config, once=False):
        calls.append((config, once))
        return 1

    monkeypatch.setattr("ipwatch.commands.watch_cmd.run_watch", fake_run_watch)
    return calls


@pytest.mark.parametrize("flag", ["-help", "--help", "-h"])
def test_help_exits_cleanly(runner, flag):
    """Help prints usage and exits with status 0."""
    result = runner.invoke(cli.ipwatch, [flag])

    assert result.exit_code == 0
    assert "-restful-url" in result.output
    assert "Seconds between each check." in result.output


def test_single_dash_flags_build_config(runner, captured):
    """Go-style single-dash options populate the configuration."""
    result = runner.invoke(
        cli.ipwatch,
        [
            "-output",
            "/tmp/ifaces.json",
            "-filter",
            "eth0",
            "-restful-url",
            "http://hooks.local/ip",
            "-restful-method",
            "put",
            "-restful-header",
            "X-Token:abc123",
            "-interval",
            "5",
        ],
    )

    assert result.exit_code == 0, result.output
    config, once = captured[0]
    assert config == WatchConfig(
        output="/tmp/ifaces.json",
        filter="eth0",
        restful_url="http://hooks.local/ip",
        restful_method="PUT",
        restful_header="X-Token:abc123",
        interval=5,
    )
    assert once is False


def test_defaults_and_once(runner, captured):
    """Without options the defaults apply; --once is forwarded."""
    result = runner.invoke(cli.ipwatch, ["--once"])

    assert result.exit_code == 0, result.output
    config, once = captured[0]
    assert config == WatchConfig()
    assert once is True


def test_negative_interval_is_usage_error(runner, captured):
    """Negative intervals are refused before the watcher starts."""
    result = runner.invoke(cli.ipwatch, ["-interval", "-1"])

    assert result.exit_code == 2
    assert captured == []


def test_once_writes_snapshot(runner, tmp_path, monkeypatch):
    """A single run persists the snapshot and exits."""
    backend = FakeBackend({"eth0": (make_link("eth0", 2), ["10.1.2.3/24"])})
    monkeypatch.setattr(
        "ipwatch.commands.watch_cmd.InterfaceWatcher",
        lambda config: InterfaceWatcher(config, backend=backend),
    )
    output = tmp_path / "ip_info.json"

    result = runner.invoke(cli.ipwatch, ["-output", str(output), "--once"])

    assert result.exit_code == 0, result.output
    assert json.loads(output.read_bytes())[0]["ip"] == ["10.1.2.3/24"]


def test_version_command(runner, captured):
    """The version subcommand prints and does not start watching."""
    result = runner.invoke(cli.ipwatch, ["version"])

    assert result.exit_code == 0
    assert result.output.startswith("ipwatch 0.")
    assert captured == []


def test_version_command_verbose(runner):
    """Verbose version output includes the user agent."""
    result = runner.invoke(cli.ipwatch, ["version", "-v"])

    assert result.exit_code == 0
    assert "User-Agent:" in result.output


def test_log_level_from_environment(runner, captured, monkeypatch):
    """IPWATCH_LOG_LEVEL selects the level when logging is not yet set up."""
    monkeypatch.setattr(Logger, "_configured", False)
    monkeypatch.setenv("IPWATCH_LOG_LEVEL", "warning")

    result = runner.invoke(cli.ipwatch, ["--once"])

    assert result.exit_code == 0, result.output
    assert Logger.get().level == logging.WARNING


def test_unknown_log_level_is_usage_error(runner, captured, monkeypatch):
    """An unknown level name stops the CLI before watching."""
    monkeypatch.setattr(Logger, "_configured", False)
    monkeypatch.setenv("IPWATCH_LOG_LEVEL", "chatty")

    result = runner.invoke(cli.ipwatch, ["--once"])

    assert result.exit_code == 2
    assert "IPWATCH_LOG_LEVEL" in result.output
    assert captured == []
