"""Application state shared by the router and the renderer."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .text_input import TextInput
from .timers import TimerPair
from .todos import TodoList

if TYPE_CHECKING:
    from focusdo_cli.config import AppConfig

DEFAULT_WIDTH = 80


@dataclass
class NormalMode:
    """Keys map to timer and todo commands."""


@dataclass
class EnteringMode:
    """Keys edit ``buffer``; on submit it becomes a new todo or replaces one."""

    is_edit: bool
    buffer: TextInput


InputMode = NormalMode | EnteringMode


@dataclass
class AppState:
    """Single mutable aggregate owned by the event loop."""

    timers: TimerPair = field(default_factory=TimerPair)
    todos: TodoList = field(default_factory=TodoList)
    input_mode: InputMode = field(default_factory=NormalMode)
    width: int = DEFAULT_WIDTH
    width_margin: int = 10
    min_todo_width: int = 20
    char_limit: int = 256
    placeholder: str = "todo..."
    alt_screen: bool = True
    show_full_help: bool = False
    suspended: bool = False
    quitting: bool = False

    @property
    def entering(self) -> bool:
        return isinstance(self.input_mode, EnteringMode)

    @property
    def todo_width(self) -> int:
        """Render width for todo rows and the text field."""
        return max(self.width - self.width_margin, self.min_todo_width)

    def new_buffer(self, value: str = "") -> TextInput:
        buffer = TextInput(
            char_limit=self.char_limit,
            width=self.todo_width,
            placeholder=self.placeholder,
        )
        buffer.set_value(value)
        return buffer

    @classmethod
    def from_config(cls, config: "AppConfig") -> "AppState":
        return cls(
            width_margin=config.todo.width_margin,
            min_todo_width=config.todo.min_width,
            char_limit=config.todo.char_limit,
            placeholder=config.todo.placeholder,
            alt_screen=config.ui.alt_screen,
        )
