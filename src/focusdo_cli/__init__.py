"""Focusdo CLI - focus/break stopwatches and a todo list in one terminal screen."""

__version__ = "0.3.0"
