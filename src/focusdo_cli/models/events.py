"""Inbound events for the router and outbound effects for the host loop."""

from dataclasses import dataclass
from datetime import timedelta


@dataclass(frozen=True)
class KeyEvent:
    key: str


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


@dataclass(frozen=True)
class TickEvent:
    delta: timedelta


@dataclass(frozen=True)
class ResumeEvent:
    """The process was continued after a job-control stop."""


Event = KeyEvent | ResizeEvent | TickEvent | ResumeEvent


@dataclass(frozen=True)
class EnterAltScreen:
    pass


@dataclass(frozen=True)
class ExitAltScreen:
    pass


@dataclass(frozen=True)
class Suspend:
    pass


@dataclass(frozen=True)
class Quit:
    pass


Effect = EnterAltScreen | ExitAltScreen | Suspend | Quit
