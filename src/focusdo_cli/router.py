"""Event dispatch: routes each inbound event to the handler for the current mode."""

import logging

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
from focusdo_cli.models.keymap import Keymap
from focusdo_cli.models.state import AppState, EnteringMode, NormalMode

logger = logging.getLogger(__name__)


class Router:
    """Mutates ``state`` in place for every event and returns host effects.

    Effects come back in the order the host must run them, e.g. leaving the
    alternate screen before quitting.
    """

    def __init__(self, state: AppState, keymap: Keymap | None = None):
        self.state = state
        self.keymap = keymap or Keymap()

    def dispatch(self, event: Event) -> list[Effect]:
        if isinstance(event, TickEvent):
            self.state.timers.tick(event.delta)
            return []
        if isinstance(event, ResizeEvent):
            self._resize(event.width)
            return []
        if isinstance(event, ResumeEvent):
            self.state.suspended = False
            self.state.timers.record_resume()
            return []
        if isinstance(event, KeyEvent):
            if isinstance(self.state.input_mode, EnteringMode):
                return self._handle_entering(self.state.input_mode, event.key)
            return self._handle_normal(event.key)
        raise TypeError(f"Unsupported event: {event!r}")

    def _resize(self, width: int) -> None:
        self.state.width = width
        if isinstance(self.state.input_mode, EnteringMode):
            self.state.input_mode.buffer.set_width(self.state.todo_width)

    def _handle_entering(self, mode: EnteringMode, key: str) -> list[Effect]:
        state = self.state
        if key == "enter":
            text = mode.buffer.value
            if mode.is_edit:
                state.todos.edit(state.todos.cursor, text)
            else:
                state.todos.create(text)
            state.input_mode = NormalMode()
        elif key == "esc":
            state.input_mode = NormalMode()
        else:
            mode.buffer.handle_key(key)
        return []

    def _handle_normal(self, key: str) -> list[Effect]:
        state = self.state
        timers = state.timers
        todos = state.todos

        action = self.keymap.match(key, timers.availability)
        if action is None:
            return []

        if action == "quit":
            return self._quit()
        if action == "suspend":
            state.suspended = True
            timers.record_suspend()
            logger.info("suspending")
            return [Suspend()]
        if action == "first_start":
            timers.start()
        elif action == "pause_watches":
            timers.pause_both()
        elif action == "switch_watch":
            timers.toggle_switch()
        elif action == "help":
            state.show_full_help = not state.show_full_help
        elif action == "up":
            todos.move_cursor(-1)
        elif action == "down":
            todos.move_cursor(1)
        elif action == "create":
            state.input_mode = EnteringMode(is_edit=False, buffer=state.new_buffer())
        elif action == "edit":
            if todos.current is not None:
                state.input_mode = EnteringMode(
                    is_edit=True, buffer=state.new_buffer(todos.current.text)
                )
        elif action == "remove":
            todos.remove(todos.cursor)
        elif action == "strike_through":
            todos.toggle_strike(todos.cursor)
        elif action == "toggle_alt_screen":
            state.alt_screen = not state.alt_screen
            return [EnterAltScreen() if state.alt_screen else ExitAltScreen()]
        return []

    def _quit(self) -> list[Effect]:
        self.state.quitting = True
        effects: list[Effect] = []
        if self.state.alt_screen:
            self.state.alt_screen = False
            effects.append(ExitAltScreen())
        effects.append(Quit())
        logger.info("quit requested")
        return effects
