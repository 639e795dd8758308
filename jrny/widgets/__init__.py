"""Terminal widget state used by the session controller."""

from jrny.widgets.line_input import LineInput
from jrny.widgets.viewport import KeyBinding, Viewport, ViewportKeyMap

__all__ = [
    "KeyBinding",
    "LineInput",
    "Viewport",
    "ViewportKeyMap",
]
