"""Unit tests for format_duration."""

from __future__ import annotations

from datetime import timedelta

import pytest

from focusdo_cli.ui.formatters import format_duration


@pytest.mark.parametrize(
    "duration, expected",
    [
        (timedelta(), "0.0"),
        (timedelta(milliseconds=125500), "2:05.5"),
        (timedelta(milliseconds=3725000), "1:02:05.0"),
        (timedelta(seconds=5.3), "5.3"),
        (timedelta(seconds=59.99), "1:00.0"),
        (timedelta(milliseconds=49), "0.0"),
        (timedelta(milliseconds=50), "0.1"),
        (timedelta(milliseconds=149), "0.1"),
        (timedelta(minutes=10), "10:00.0"),
        (timedelta(hours=12, seconds=1), "12:00:01.0"),
        (timedelta(hours=1, minutes=59, seconds=59.96), "2:00:00.0"),
    ],
)
def test_format_duration(duration, expected):
    assert format_duration(duration) == expected


def test_days_roll_into_hours():
    assert format_duration(timedelta(days=1, minutes=1)) == "24:01:00.0"
