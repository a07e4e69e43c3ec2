"""Terminal host: reads keys, ticks the timers and redraws with rich Live."""

import logging
import os
import signal
import time
from collections.abc import Callable
from datetime import timedelta

from rich.console import Console
from rich.live import Live

from focusdo_cli.config import AppConfig
from focusdo_cli.exceptions import TerminalError
from focusdo_cli.models.events import (
    Effect,
    EnterAltScreen,
    Event,
    ExitAltScreen,
    KeyEvent,
    Quit,
    ResizeEvent,
    ResumeEvent,
    Suspend,
    TickEvent,
)
from focusdo_cli.models.keyboard import KeyboardHandler
from focusdo_cli.models.keymap import Keymap
from focusdo_cli.models.state import AppState
from focusdo_cli.router import Router

from .view import RenderStyle, render_frame

logger = logging.getLogger(__name__)


class FocusApp:
    """Single-threaded event loop around a ``Router``.

    Each loop iteration waits for at most one tick interval for a key, checks
    the terminal size, feeds a tick with the measured time since the last
    one, and redraws. Redraws after ticks are throttled to
    ``refresh_per_second``; redraws after keys happen immediately.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        console: Console | None = None,
        keyboard_factory: Callable[[], KeyboardHandler] = KeyboardHandler,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.config = config or AppConfig()
        self.console = console or Console()
        self.keyboard_factory = keyboard_factory
        self.clock = clock

        self.state = AppState.from_config(self.config)
        self.state.timers.clock = clock
        self.keymap = Keymap()
        self.router = Router(self.state, self.keymap)

        self._keyboard: KeyboardHandler | None = None
        self._live: Live | None = None
        self._last_tick = 0.0
        self._last_refresh = 0.0
        self._running = False

    def render(self):
        style = RenderStyle.from_config(self.config.style, self.state.todo_width)
        return render_frame(self.state, self.keymap, style)

    def run(self) -> None:
        """Run until quit. Raises ``TerminalError`` on terminal failures."""
        self._keyboard = self.keyboard_factory()
        self._running = True
        logger.info("starting (alt_screen=%s)", self.state.alt_screen)

        try:
            self._open_live(self.state.alt_screen)
            self.dispatch(ResizeEvent(self.console.width, self.console.height))
            self._last_tick = self.clock()

            while self._running:
                self._step()
        except OSError as e:
            raise TerminalError(f"terminal I/O failed: {e}") from e
        finally:
            self._close_live()
            if self._keyboard is not None:
                self._keyboard.stop()
            logger.info("stopped")

    def _step(self) -> None:
        interval = self.config.ui.tick_interval_ms / 1000
        key = self._keyboard.get_key(timeout=interval)
        if key is not None:
            self.dispatch(KeyEvent(key))
            if not self._running:
                return

        width, height = self.console.width, self.console.height
        if width != self.state.width:
            self.dispatch(ResizeEvent(width, height))

        now = self.clock()
        self.dispatch(TickEvent(timedelta(seconds=now - self._last_tick)), refresh=False)
        self._last_tick = now

        if now - self._last_refresh >= 1 / self.config.ui.refresh_per_second:
            self._refresh()

    def dispatch(self, event: Event, refresh: bool = True) -> None:
        """Route one event, run its effects in order, then redraw."""
        effects = self.router.dispatch(event)
        for effect in effects:
            self._apply(effect)
        if refresh and self._running:
            self._refresh()

    def _apply(self, effect: Effect) -> None:
        if isinstance(effect, EnterAltScreen):
            self._open_live(True)
        elif isinstance(effect, ExitAltScreen):
            self._open_live(False)
        elif isinstance(effect, Suspend):
            self._suspend()
        elif isinstance(effect, Quit):
            # Final frame goes to the normal buffer, without the help footer.
            self._refresh()
            self._running = False

    def _suspend(self) -> None:
        """Stop the process with SIGTSTP and pick up again on SIGCONT."""
        alt_screen = self.state.alt_screen
        self._close_live()
        self._keyboard.stop()

        if hasattr(signal, "SIGTSTP"):
            os.kill(os.getpid(), signal.SIGTSTP)

        self._keyboard.start()
        self._open_live(alt_screen)
        self.dispatch(ResumeEvent())
        # Ticks did not fire while stopped; the gap is credited by record_resume.
        self._last_tick = self.clock()

    def _open_live(self, screen: bool) -> None:
        self._close_live()
        self._live = Live(
            self.render(),
            console=self.console,
            screen=screen,
            auto_refresh=False,
            transient=False,
        )
        self._live.start()

    def _close_live(self) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None

    def _refresh(self) -> None:
        if self._live is None:
            return
        self._live.update(self.render(), refresh=True)
        self._last_refresh = self.clock()
