"""Shared test fixtures and configuration.

Keeps the application log inside *tmp_path* and provides ready-made state.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from focusdo_cli.models.state import AppState
from focusdo_cli.models.timers import TimerPair
from focusdo_cli.router import Router


class FakeClock:
    """Monotonic clock stand-in that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ---------------------------------------------------------------------------
# Log isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path):
    """Point the logger at tmp_path and reset its singleton around each test."""
    import focusdo_cli.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("focusdo_cli").handlers.clear()

    log_dir = tmp_path / "logs"
    with patch("focusdo_cli.utils.logger.user_log_dir", return_value=str(log_dir)):
        yield log_dir

    for handler in logging.getLogger("focusdo_cli").handlers:
        handler.close()
    logging.getLogger("focusdo_cli").handlers.clear()
    logger_mod._logger = None


# ---------------------------------------------------------------------------
# State helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def timers(clock):
    return TimerPair(clock=clock)


@pytest.fixture()
def state(timers):
    return AppState(timers=timers)


@pytest.fixture()
def router(state):
    return Router(state)
