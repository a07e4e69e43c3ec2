"""In-memory todo list addressed by a cursor."""

import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class Todo:
    """A single todo item. Strike state travels with the item."""

    text: str
    stricken: bool = False


@dataclass
class TodoList:
    """Ordered todos plus the cursor that addresses them.

    Every mutation is total: operations on an empty list are no-ops, and the
    cursor is kept inside ``[0, len(items) - 1]`` whenever the list is not
    empty.
    """

    items: list[Todo] = field(default_factory=list)
    cursor: int = 0

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    @property
    def current(self) -> Todo | None:
        """The todo under the cursor, if any."""
        if not self.items:
            return None
        return self.items[self.cursor]

    def create(self, text: str) -> Todo:
        """Append a new todo. The cursor does not follow it."""
        todo = Todo(text=text)
        self.items.append(todo)
        logger.debug("todo created at %d", len(self.items) - 1)
        return todo

    def edit(self, index: int, text: str) -> None:
        if not self.items:
            return
        self.items[index].text = text

    def remove(self, index: int) -> None:
        """Delete the todo at *index* and pull the cursor back inside the list."""
        if not self.items:
            return
        del self.items[index]
        logger.debug("todo removed at %d", index)

        if self.cursor > len(self.items) - 1 and self.cursor > 0:
            self.cursor -= 1

    def toggle_strike(self, index: int) -> None:
        if not self.items:
            return
        todo = self.items[index]
        todo.stricken = not todo.stricken

    def move_cursor(self, delta: int) -> None:
        if not self.items:
            return
        self.cursor = max(0, min(self.cursor + delta, len(self.items) - 1))
