"""Keyboard input handler: raw terminal bytes to key names."""

import codecs
import os
import select
import sys
import termios
import tty
from collections import deque
from typing import Optional

from focusdo_cli.exceptions import TerminalError

ESCAPE_SEQUENCES = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x1b[1~": "home",
    "\x1b[4~": "end",
    "\x1b[3~": "delete",
}

SINGLE_KEYS = {
    "\r": "enter",
    "\n": "enter",
    "\t": "tab",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x1b": "esc",
}


def split_incomplete_escape(data: str) -> tuple[str, str]:
    """Split off a trailing partial escape sequence.

    Returns ``(complete, rest)``; *rest* is a proper prefix of a known
    sequence that may be completed by the next read.
    """
    start = data.rfind("\x1b")
    if start == -1:
        return data, ""
    tail = data[start:]
    if any(seq != tail and seq.startswith(tail) for seq in ESCAPE_SEQUENCES):
        return data[:start], tail
    return data, ""


def parse_keys(data: str) -> list[str]:
    """Split a chunk of terminal input into key names.

    Printable characters come back as themselves (space is ``" "``), control
    characters as ``ctrl+<letter>``.
    """
    keys = []
    i = 0
    while i < len(data):
        if data[i] == "\x1b":
            for seq, name in ESCAPE_SEQUENCES.items():
                if data.startswith(seq, i):
                    keys.append(name)
                    i += len(seq)
                    break
            else:
                keys.append("esc")
                i += 1
            continue

        ch = data[i]
        i += 1
        if ch in SINGLE_KEYS:
            keys.append(SINGLE_KEYS[ch])
        elif "\x01" <= ch <= "\x1a":
            keys.append(f"ctrl+{chr(ord(ch) + 96)}")
        elif ch.isprintable():
            keys.append(ch)
    return keys


class KeyboardHandler:
    """Non-blocking keyboard reader in cbreak mode with signals disabled.

    With ``ISIG`` off, ctrl+c and ctrl+z reach the application as keys; the
    application decides how to quit or suspend.
    """

    def __init__(self, stream=None):
        self.stream = stream or sys.stdin
        self.old_settings = None
        self._pending: deque[str] = deque()
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._held = ""
        try:
            self.fd = self.stream.fileno()
        except (AttributeError, ValueError, OSError) as e:
            raise TerminalError(f"stdin is not a terminal: {e}") from e
        self.start()

    def start(self) -> None:
        """Put the terminal in cbreak mode with ISIG cleared."""
        try:
            self.old_settings = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
            attrs = termios.tcgetattr(self.fd)
            attrs[3] &= ~termios.ISIG
            termios.tcsetattr(self.fd, termios.TCSADRAIN, attrs)
        except (termios.error, OSError) as e:
            raise TerminalError(f"could not configure terminal: {e}") from e

    def get_key(self, timeout: float = 0) -> Optional[str]:
        """
        Wait up to *timeout* seconds for a keypress.

        Returns the key name or None if no key was pressed.
        """
        if self._pending:
            return self._pending.popleft()

        try:
            ready, _, _ = select.select([self.fd], [], [], timeout)
            if not ready:
                return self._flush_held()
            data = os.read(self.fd, 64)
        except InterruptedError:
            return None
        except OSError as e:
            raise TerminalError(f"could not read from terminal: {e}") from e

        if not data:
            raise TerminalError("terminal input closed")

        text, self._held = split_incomplete_escape(self._held + self._decoder.decode(data))
        self._pending.extend(parse_keys(text))
        return self._pending.popleft() if self._pending else None

    def _flush_held(self) -> Optional[str]:
        """Nothing followed a partial sequence in time; emit it as typed."""
        if not self._held:
            return None
        self._pending.extend(parse_keys(self._held))
        self._held = ""
        return self._pending.popleft() if self._pending else None

    def stop(self) -> None:
        """Restore terminal settings."""
        if self.old_settings:
            try:
                termios.tcsetattr(self.fd, termios.TCSADRAIN, self.old_settings)
            except termios.error:
                pass
