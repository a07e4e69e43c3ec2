"""Focusdo CLI state models.

Timers, todos, the text field, key bindings and the events that drive them.
Everything here is plain in-memory state with no terminal access, except
``keyboard`` which reads raw terminal input.
"""

from .events import (
    EnterAltScreen,
    ExitAltScreen,
    KeyEvent,
    Quit,
    ResizeEvent,
    ResumeEvent,
    Suspend,
    TickEvent,
)
from .keymap import KeyBinding, Keymap
from .state import AppState, EnteringMode, NormalMode
from .text_input import TextInput
from .timers import Availability, Stopwatch, TimerPair
from .todos import Todo, TodoList

__all__ = [
    # State
    "AppState",
    "EnteringMode",
    "NormalMode",
    "TextInput",
    # Timers
    "Availability",
    "Stopwatch",
    "TimerPair",
    # Todos
    "Todo",
    "TodoList",
    # Keys
    "KeyBinding",
    "Keymap",
    # Events and effects
    "KeyEvent",
    "ResizeEvent",
    "TickEvent",
    "ResumeEvent",
    "EnterAltScreen",
    "ExitAltScreen",
    "Suspend",
    "Quit",
]
