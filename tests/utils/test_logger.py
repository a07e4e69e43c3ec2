"""Tests for the application logger utility.

The autouse ``isolated_log_dir`` fixture points user_log_dir at tmp_path.
"""

from __future__ import annotations

import logging


def _flush(logger: logging.Logger) -> None:
    for handler in logger.handlers:
        handler.flush()


def test_get_logger_creates_log_file(isolated_log_dir):
    """Logger creates the log file inside user_log_dir."""
    from focusdo_cli.utils.logger import get_logger

    logger = get_logger()

    assert (isolated_log_dir / "focusdo.log").exists()
    assert isinstance(logger, logging.Logger)


def test_get_logger_returns_singleton():
    from focusdo_cli.utils.logger import get_logger

    assert get_logger() is get_logger()


def test_get_logger_writes_message(isolated_log_dir):
    from focusdo_cli.utils.logger import get_logger

    logger = get_logger()
    logger.info("hello from test")
    _flush(logger)

    assert "hello from test" in (isolated_log_dir / "focusdo.log").read_text()


def test_module_loggers_write_through_app_logger(isolated_log_dir):
    """Child loggers such as focusdo_cli.models.timers reach the same file."""
    from focusdo_cli.models.timers import TimerPair
    from focusdo_cli.utils.logger import get_logger

    logger = get_logger("DEBUG")
    TimerPair().start()
    _flush(logger)

    assert "focus timer started" in (isolated_log_dir / "focusdo.log").read_text()


def test_logger_does_not_propagate():
    from focusdo_cli.utils.logger import get_logger

    assert get_logger().propagate is False


def test_default_level_skips_debug(isolated_log_dir):
    from focusdo_cli.models.timers import TimerPair
    from focusdo_cli.utils.logger import get_logger

    logger = get_logger()
    TimerPair().start()
    _flush(logger)

    assert logger.level == logging.INFO
    assert "focus timer started" not in (isolated_log_dir / "focusdo.log").read_text()


def test_level_can_change_after_first_call():
    from focusdo_cli.utils.logger import get_logger

    logger = get_logger()
    assert get_logger("warning") is logger
    assert logger.level == logging.WARNING


def test_log_file_path(isolated_log_dir):
    from focusdo_cli.utils.logger import log_file_path

    assert log_file_path() == isolated_log_dir / "focusdo.log"
