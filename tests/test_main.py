"""Unit tests for main.py - the CLI entry point.

FocusApp is patched out so no terminal is touched.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from focusdo_cli import __version__
from focusdo_cli.exceptions import TerminalError
from focusdo_cli.main import app
from focusdo_cli.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_TERMINAL,
    get_exit_code_description,
)

runner = CliRunner()


def _invoke(*args):
    return runner.invoke(app, list(args))


# ---------------------------------------------------------------------------
# Help / version
# ---------------------------------------------------------------------------


class TestHelpAndVersion:
    def test_help_flag_exits_zero(self):
        result = _invoke("--help")
        assert result.exit_code == 0
        assert "--no-alt-screen" in result.output

    def test_version(self):
        result = _invoke("--version")
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_version_does_not_start_app(self):
        with patch("focusdo_cli.main.FocusApp") as focus_app:
            _invoke("--version")
        focus_app.assert_not_called()


# ---------------------------------------------------------------------------
# Running
# ---------------------------------------------------------------------------


class TestRun:
    def test_runs_app_and_exits_zero(self):
        with patch("focusdo_cli.main.FocusApp") as focus_app:
            result = _invoke()
        assert result.exit_code == 0
        focus_app.return_value.run.assert_called_once()

    def test_options_reach_config(self):
        with patch("focusdo_cli.main.FocusApp") as focus_app:
            _invoke("--no-alt-screen", "--tick-ms", "8", "--fps", "30")
        config = focus_app.call_args.kwargs["config"]
        assert config.ui.alt_screen is False
        assert config.ui.tick_interval_ms == 8
        assert config.ui.refresh_per_second == 30

    @pytest.mark.parametrize("args", [["--tick-ms", "0"], ["--fps", "1000"]])
    def test_invalid_option_values(self, args):
        with patch("focusdo_cli.main.FocusApp") as focus_app:
            result = _invoke(*args)
        assert result.exit_code == ERROR_INVALID_ARGS
        focus_app.assert_not_called()

    def test_terminal_error_exit_code(self, isolated_log_dir):
        with patch("focusdo_cli.main.FocusApp") as focus_app:
            focus_app.return_value.run.side_effect = TerminalError("not a tty")
            result = _invoke()
        assert result.exit_code == ERROR_TERMINAL

        for handler in logging.getLogger("focusdo_cli").handlers:
            handler.flush()
        log_text = (isolated_log_dir / "focusdo.log").read_text()
        assert "not a tty" in log_text
        assert "exit 3 (ERROR_TERMINAL)" in log_text

    def test_terminal_error_explains_exit_code(self):
        with patch("focusdo_cli.main.FocusApp") as focus_app:
            focus_app.return_value.run.side_effect = TerminalError("not a tty")
            result = _invoke()
        assert "Something broke: not a tty" in result.output
        assert get_exit_code_description(ERROR_TERMINAL) in result.output

    def test_unexpected_error_exit_code(self):
        with patch("focusdo_cli.main.FocusApp") as focus_app:
            focus_app.return_value.run.side_effect = RuntimeError("boom")
            result = _invoke()
        assert result.exit_code == ERROR_GENERAL

    def test_unexpected_error_points_at_log_file(self, isolated_log_dir):
        with patch("focusdo_cli.main.FocusApp") as focus_app:
            focus_app.return_value.run.side_effect = RuntimeError("boom")
            result = _invoke()
        assert result.exit_code == ERROR_GENERAL
        assert "Details in" in result.output


# ---------------------------------------------------------------------------
# Log level
# ---------------------------------------------------------------------------


class TestLogLevel:
    def test_defaults_to_info(self, monkeypatch):
        monkeypatch.delenv("FOCUSDO_LOG_LEVEL", raising=False)
        with patch("focusdo_cli.main.FocusApp"):
            _invoke()
        assert logging.getLogger("focusdo_cli").level == logging.INFO

    def test_option_sets_level(self):
        with patch("focusdo_cli.main.FocusApp") as focus_app:
            _invoke("--log-level", "debug")
        assert focus_app.call_args.kwargs["config"].log.level == "DEBUG"
        assert logging.getLogger("focusdo_cli").level == logging.DEBUG

    def test_env_var_sets_level(self, monkeypatch):
        monkeypatch.setenv("FOCUSDO_LOG_LEVEL", "warning")
        with patch("focusdo_cli.main.FocusApp"):
            _invoke()
        assert logging.getLogger("focusdo_cli").level == logging.WARNING

    def test_unknown_level_rejected(self):
        with patch("focusdo_cli.main.FocusApp") as focus_app:
            result = _invoke("--log-level", "loud")
        assert result.exit_code == ERROR_INVALID_ARGS
        assert "log.level" in result.output
        focus_app.assert_not_called()
