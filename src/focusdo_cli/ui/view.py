"""Render the application state as a single rich renderable."""

from dataclasses import dataclass
from itertools import zip_longest

from rich.console import Group, RenderableType
from rich.style import Style
from rich.table import Table
from rich.text import Text

from focusdo_cli.config import StyleConfig
from focusdo_cli.models.keymap import KeyBinding, Keymap
from focusdo_cli.models.state import AppState, EnteringMode
from focusdo_cli.models.text_input import TextInput

from .formatters import format_duration

PROMPT_TITLE = "Enter a to-do:"
PROMPT_HINT = "(press Enter to submit, Esc to quit)"
HELP_SEPARATOR = " • "


@dataclass(frozen=True)
class RenderStyle:
    """Styles handed to ``render_frame``."""

    header: Style
    cursor: Style
    todo: Style
    stricken: Style
    placeholder: Style
    help_key: Style
    help_desc: Style
    todo_width: int

    @classmethod
    def from_config(cls, config: StyleConfig, todo_width: int) -> "RenderStyle":
        return cls(
            header=Style(bold=True, color=f"color({config.header_color})"),
            cursor=Style(bold=True, color=f"color({config.cursor_color})"),
            todo=Style(),
            stricken=Style(strike=True, color=f"color({config.stricken_color})"),
            placeholder=Style(color=f"color({config.placeholder_color})"),
            help_key=Style(color=f"color({config.help_key_color})"),
            help_desc=Style(color=f"color({config.help_desc_color})"),
            todo_width=todo_width,
        )


def render_frame(state: AppState, keymap: Keymap, style: RenderStyle) -> Group:
    """Build the whole screen for the current state."""
    parts: list[RenderableType] = [
        _timer_line("Focus time:", format_duration(state.timers.elapsed("focus")), style),
        _timer_line("Break time:", format_duration(state.timers.elapsed("rest")), style),
    ]

    if len(state.todos) > 0:
        parts.append(Text(""))
        parts.append(Text("To do list:", style=style.header))
        parts.append(render_todos(state, style))

    if isinstance(state.input_mode, EnteringMode):
        parts.extend(
            [
                Text(""),
                Text(PROMPT_TITLE),
                Text(""),
                render_text_input(state.input_mode.buffer, style),
                Text(""),
                Text(PROMPT_HINT),
            ]
        )

    if not state.quitting:
        parts.append(Text(""))
        if state.show_full_help:
            parts.append(render_full_help(keymap.full_help(state.timers.availability), style))
        else:
            parts.append(render_short_help(keymap.short_help(), style))

    return Group(*parts)


def _timer_line(label: str, value: str, style: RenderStyle) -> Text:
    line = Text(label, style=style.header)
    line.append(" " + value)
    return line


def render_todos(state: AppState, style: RenderStyle) -> Table:
    """One row per todo: cursor marker, then the text at the todo width."""
    table = Table.grid(padding=(0, 1))
    table.add_column(width=1, no_wrap=True)
    table.add_column(width=style.todo_width, overflow="fold")

    for i, todo in enumerate(state.todos):
        marker = Text(">", style=style.cursor) if i == state.todos.cursor else Text(" ")
        item_style = style.stricken if todo.stricken else style.todo
        table.add_row(marker, Text(todo.text, style=item_style))
    return table


def render_text_input(field: TextInput, style: RenderStyle) -> Text:
    """The text field with a block caret, or the placeholder when empty."""
    line = Text("> ")
    caret = Style(reverse=True)

    if not field.value:
        if field.placeholder:
            line.append(field.placeholder[0], style=caret + style.placeholder)
            line.append(field.placeholder[1:], style=style.placeholder)
        else:
            line.append(" ", style=caret)
        return line

    visible, col = field.visible()
    line.append(visible[:col])
    if col < len(visible):
        line.append(visible[col], style=caret)
        line.append(visible[col + 1 :])
    else:
        line.append(" ", style=caret)
    return line


def render_short_help(bindings: list[KeyBinding], style: RenderStyle) -> Text:
    line = Text()
    for i, binding in enumerate(bindings):
        if i:
            line.append(HELP_SEPARATOR, style=style.help_desc)
        line.append(binding.help_key, style=style.help_key)
        line.append(" ")
        line.append(binding.help_desc, style=style.help_desc)
    return line


def render_full_help(groups: list[list[KeyBinding]], style: RenderStyle) -> Table:
    """Columns of ``key  description`` pairs, one column pair per group."""
    table = Table.grid(padding=(0, 1))
    for i, _ in enumerate(groups):
        if i:
            table.add_column(width=2)
        table.add_column(no_wrap=True)
        table.add_column(no_wrap=True)

    for row in zip_longest(*groups):
        cells: list[Text] = []
        for i, binding in enumerate(row):
            if i:
                cells.append(Text(""))
            if binding is None:
                cells.extend([Text(""), Text("")])
            else:
                cells.append(Text(binding.help_key, style=style.help_key))
                cells.append(Text(binding.help_desc, style=style.help_desc))
        table.add_row(*cells)
    return table
