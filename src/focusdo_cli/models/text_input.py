"""Single-line text field used while creating or editing a todo."""

from dataclasses import dataclass

DEFAULT_CHAR_LIMIT = 256
DEFAULT_WIDTH = 50


@dataclass
class TextInput:
    """Editable buffer with a caret, a character limit and a scroll window.

    ``width`` is the number of visible cells; ``offset`` is the index of the
    first visible character and is kept so the caret is always on screen.
    """

    value: str = ""
    position: int = 0
    char_limit: int = DEFAULT_CHAR_LIMIT
    width: int = DEFAULT_WIDTH
    placeholder: str = "todo..."
    offset: int = 0

    def set_value(self, value: str) -> None:
        """Replace the buffer and move the caret to the end."""
        self.value = value[: self.char_limit] if self.char_limit > 0 else value
        self.position = len(self.value)
        self._scroll()

    def set_width(self, width: int) -> None:
        self.width = max(1, width)
        self._scroll()

    def insert(self, text: str) -> None:
        if self.char_limit > 0:
            text = text[: max(0, self.char_limit - len(self.value))]
        if not text:
            return
        self.value = self.value[: self.position] + text + self.value[self.position :]
        self.position += len(text)
        self._scroll()

    def delete_backward(self) -> None:
        if self.position == 0:
            return
        self.value = self.value[: self.position - 1] + self.value[self.position :]
        self.position -= 1
        self._scroll()

    def delete_forward(self) -> None:
        self.value = self.value[: self.position] + self.value[self.position + 1 :]
        self._scroll()

    def delete_word_backward(self) -> None:
        """Delete the word before the caret, plus any spaces after it."""
        start = self.position
        while start > 0 and self.value[start - 1] == " ":
            start -= 1
        while start > 0 and self.value[start - 1] != " ":
            start -= 1
        self.value = self.value[:start] + self.value[self.position :]
        self.position = start
        self._scroll()

    def delete_to_start(self) -> None:
        self.value = self.value[self.position :]
        self.position = 0
        self._scroll()

    def delete_to_end(self) -> None:
        self.value = self.value[: self.position]
        self._scroll()

    def move(self, delta: int) -> None:
        self.position = max(0, min(self.position + delta, len(self.value)))
        self._scroll()

    def home(self) -> None:
        self.position = 0
        self._scroll()

    def end(self) -> None:
        self.position = len(self.value)
        self._scroll()

    def handle_key(self, key: str) -> bool:
        """Apply an editing key. Returns False if the key means nothing here."""
        actions = {
            "backspace": self.delete_backward,
            "ctrl+h": self.delete_backward,
            "delete": self.delete_forward,
            "ctrl+d": self.delete_forward,
            "ctrl+w": self.delete_word_backward,
            "ctrl+u": self.delete_to_start,
            "ctrl+k": self.delete_to_end,
            "left": lambda: self.move(-1),
            "ctrl+b": lambda: self.move(-1),
            "right": lambda: self.move(1),
            "ctrl+f": lambda: self.move(1),
            "home": self.home,
            "ctrl+a": self.home,
            "end": self.end,
            "ctrl+e": self.end,
        }
        action = actions.get(key)
        if action is not None:
            action()
            return True

        if len(key) == 1 and key.isprintable():
            self.insert(key)
            return True
        return False

    def visible(self) -> tuple[str, int]:
        """Return the on-screen slice of the value and the caret column in it."""
        return self.value[self.offset : self.offset + self.width], self.position - self.offset

    def _scroll(self) -> None:
        if self.position < self.offset:
            self.offset = self.position
        elif self.position >= self.offset + self.width:
            self.offset = self.position - self.width + 1
        # The caret at the end of the value takes a cell of its own.
        self.offset = max(0, min(self.offset, len(self.value) + 1 - self.width))
