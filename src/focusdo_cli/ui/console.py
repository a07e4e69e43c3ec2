"""Console utilities for Focusdo CLI."""

from functools import lru_cache

from rich.console import Console


@lru_cache(maxsize=2)
def get_console(stderr: bool = False) -> Console:
    """Get a Rich Console instance, optionally bound to stderr."""
    return Console(stderr=stderr)
