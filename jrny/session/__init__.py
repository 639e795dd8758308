"""Interactive journal session: controller, content views and rendering."""

from jrny.session.controller import (
    FORCE_QUIT_KEY,
    SUBMIT_KEY,
    Event,
    KeyPress,
    Resize,
    SessionController,
    SessionState,
)
from jrny.session.render import render_frame
from jrny.session.views import ContentView, ListContentView, TextContentView, create_view

__all__ = [
    "FORCE_QUIT_KEY",
    "SUBMIT_KEY",
    "ContentView",
    "Event",
    "KeyPress",
    "ListContentView",
    "Resize",
    "SessionController",
    "SessionState",
    "TextContentView",
    "create_view",
    "render_frame",
]
