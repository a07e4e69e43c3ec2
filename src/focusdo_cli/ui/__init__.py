"""Terminal rendering and the host event loop."""

from .display import FocusApp
from .formatters import format_duration
from .view import RenderStyle, render_frame

__all__ = [
    "FocusApp",
    "RenderStyle",
    "format_duration",
    "render_frame",
]
