"""Normal-mode key bindings and their help text."""

from dataclasses import dataclass, field, fields

from .timers import Availability


@dataclass(frozen=True)
class KeyBinding:
    """Keys that trigger one action, plus how the help footer shows it."""

    keys: tuple[str, ...]
    help_key: str
    help_desc: str

    def matches(self, key: str) -> bool:
        return key in self.keys


def _binding(keys: tuple[str, ...], help_key: str, help_desc: str) -> KeyBinding:
    return field(default_factory=lambda: KeyBinding(keys, help_key, help_desc))


@dataclass
class Keymap:
    """All normal-mode bindings.

    Field order is the order in which a key press is matched, so the quit and
    suspend bindings win over everything else. ``first_start`` and
    ``switch_watch`` share the space key; only one of them is enabled at a time.
    """

    quit: KeyBinding = _binding(("q", "ctrl+c"), "q/ctrl+c", "quit")
    suspend: KeyBinding = _binding(
        ("ctrl+z",),
        "ctrl+z",
        "suspend program (timers will be updated upon resume)",
    )
    first_start: KeyBinding = _binding((" ",), "space", "start focus stopwatch")
    pause_watches: KeyBinding = _binding(("p",), "p", "stop stopwatches")
    switch_watch: KeyBinding = _binding((" ",), "space", "switch stopwatch")
    help: KeyBinding = _binding(("?",), "?", "toggle help")
    up: KeyBinding = _binding(("k", "up"), "k/↑", "move up")
    down: KeyBinding = _binding(("j", "down"), "j/↓", "move down")
    create: KeyBinding = _binding(("enter",), "enter", "create a todo")
    edit: KeyBinding = _binding(("e",), "e", "edit a todo")
    remove: KeyBinding = _binding(("r",), "r", "remove a todo")
    strike_through: KeyBinding = _binding(("s",), "s", "strike a todo")
    toggle_alt_screen: KeyBinding = _binding(("f",), "f", "toggle alt screen")

    def is_enabled(self, name: str, availability: Availability) -> bool:
        """Timer bindings follow the availability state; the rest are always on."""
        if name == "first_start":
            return availability.can_start
        if name == "switch_watch":
            return availability.can_switch
        if name == "pause_watches":
            return availability.can_pause
        return True

    def match(self, key: str, availability: Availability) -> str | None:
        """Name of the first enabled binding for *key*, or None."""
        for f in fields(self):
            binding: KeyBinding = getattr(self, f.name)
            if binding.matches(key) and self.is_enabled(f.name, availability):
                return f.name
        return None

    def short_help(self) -> list[KeyBinding]:
        return [self.help, self.quit]

    def full_help(self, availability: Availability) -> list[list[KeyBinding]]:
        """Grouped bindings for the expanded help, disabled ones left out."""
        groups = [
            ["create", "edit", "remove", "strike_through", "up", "down"],
            [
                "first_start",
                "switch_watch",
                "toggle_alt_screen",
                "help",
                "quit",
                "suspend",
                "pause_watches",
            ],
        ]
        return [
            [getattr(self, name) for name in group if self.is_enabled(name, availability)]
            for group in groups
        ]
