"""Focus/break stopwatch pair with suspend-offset correction."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Literal

TimerName = Literal["focus", "rest"]

logger = logging.getLogger(__name__)


class Availability(Enum):
    """Which of the start/switch/pause affordances are live."""

    NEVER_STARTED = "never_started"
    RUNNING = "running"
    PAUSED_AFTER_START = "paused_after_start"

    @property
    def can_start(self) -> bool:
        return self is not Availability.RUNNING

    @property
    def can_switch(self) -> bool:
        return self is Availability.RUNNING

    @property
    def can_pause(self) -> bool:
        return self is Availability.RUNNING


@dataclass
class Stopwatch:
    """A countup stopwatch advanced by ticks."""

    running: bool = False
    elapsed: timedelta = field(default_factory=timedelta)

    def start(self) -> None:
        self.running = True

    def stop(self) -> None:
        self.running = False

    def toggle(self) -> None:
        self.running = not self.running

    def tick(self, delta: timedelta) -> None:
        """Accumulate *delta* if running."""
        if self.running:
            self.elapsed += delta


@dataclass
class TimerPair:
    """Two mutually exclusive stopwatches: focus and rest (break).

    Elapsed time only advances on ticks, and ticks do not fire while the
    process is stopped by the OS. ``record_suspend``/``record_resume`` measure
    the gap on the injected clock and keep it as a display-only offset.
    """

    focus: Stopwatch = field(default_factory=Stopwatch)
    rest: Stopwatch = field(default_factory=Stopwatch)
    focus_offset: timedelta = field(default_factory=timedelta)
    rest_offset: timedelta = field(default_factory=timedelta)
    timers_started: bool = False
    suspended_at: float | None = None
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)

    @property
    def availability(self) -> Availability:
        """Derive the affordance state from the stopwatches."""
        if not self.timers_started:
            return Availability.NEVER_STARTED
        if self.focus.running or self.rest.running:
            return Availability.RUNNING
        return Availability.PAUSED_AFTER_START

    def _watch(self, which: TimerName) -> Stopwatch:
        if which == "focus":
            return self.focus
        if which == "rest":
            return self.rest
        raise ValueError(f"Unknown timer: {which!r}")

    def start(self) -> bool:
        """(Re)start the focus timer. Returns False when start is disabled."""
        if not self.availability.can_start:
            return False
        self.timers_started = True
        self.focus.start()
        logger.debug("focus timer started")
        return True

    def toggle_switch(self) -> bool:
        """Stop the running timer and start the other one."""
        if not self.availability.can_switch:
            return False
        self.rest.toggle()
        self.focus.toggle()
        logger.debug("switched to %s timer", "focus" if self.focus.running else "rest")
        return True

    def pause_both(self) -> bool:
        """Stop whichever timer is running."""
        if not self.availability.can_pause:
            return False
        if self.focus.running:
            self.focus.stop()
        else:
            self.rest.stop()
        logger.debug("timers paused")
        return True

    def tick(self, delta: timedelta) -> None:
        self.focus.tick(delta)
        self.rest.tick(delta)

    def is_running(self, which: TimerName) -> bool:
        return self._watch(which).running

    def elapsed(self, which: TimerName) -> timedelta:
        """Displayed elapsed time: accumulated ticks plus suspend offset."""
        if which == "focus":
            return self.focus.elapsed + self.focus_offset
        return self._watch(which).elapsed + self.rest_offset

    def record_suspend(self) -> None:
        self.suspended_at = self.clock()

    def record_resume(self) -> timedelta:
        """Credit the suspended gap to the running timer's offset.

        Returns the gap that was credited (zero if nothing was running or no
        suspend was recorded).
        """
        if self.suspended_at is None:
            return timedelta()

        gap = timedelta(seconds=max(0.0, self.clock() - self.suspended_at))
        self.suspended_at = None

        if self.focus.running:
            self.focus_offset += gap
        elif self.rest.running:
            self.rest_offset += gap
        else:
            return timedelta()

        logger.info("resumed after %.1fs suspend", gap.total_seconds())
        return gap
