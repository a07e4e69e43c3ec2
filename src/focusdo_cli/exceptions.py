"""Custom exceptions for Focusdo CLI."""


class FocusdoError(Exception):
    """Base exception for all Focusdo errors."""


class TerminalError(FocusdoError):
    """Raised when the terminal cannot be set up, read, or drawn to."""
