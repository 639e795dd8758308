"""Textual application hosting a journal session.

The app owns no journal logic: it turns textual key and resize events
into controller events and paints whatever frame the controller renders.
"""

import logging
from typing import Optional

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Static

from jrny.db import JournalIOError
from jrny.session import FORCE_QUIT_KEY, Event, KeyPress, Resize, SessionController

logger = logging.getLogger(__name__)


class JournalApp(App):
    """Full-screen journal session."""

    CSS = """
    Screen {
        overflow: hidden;
    }
    #frame {
        width: 100%;
        height: 100%;
    }
    """

    ENABLE_COMMAND_PALETTE = False

    # Priority bindings run before any widget sees the key
    BINDINGS = [
        Binding("ctrl+c", "force_quit", "Quit", priority=True, show=False),
        Binding("ctrl+q", "force_quit", "Quit", priority=True, show=False),
    ]

    def __init__(self, controller: SessionController):
        super().__init__()
        self.controller = controller
        self.error: Optional[JournalIOError] = None

    def compose(self) -> ComposeResult:
        yield Static(self.controller.render(), id="frame")

    def on_mount(self) -> None:
        self._dispatch(Resize(width=self.size.width, height=self.size.height))

    def on_resize(self, event: events.Resize) -> None:
        self._dispatch(Resize(width=event.size.width, height=event.size.height))

    def on_key(self, event: events.Key) -> None:
        event.stop()
        self._dispatch(KeyPress(key=event.key, character=event.character))

    def action_force_quit(self) -> None:
        self._dispatch(KeyPress(key=FORCE_QUIT_KEY))

    def _dispatch(self, event: Event) -> None:
        try:
            self.controller.handle(event)
        except JournalIOError as e:
            logger.error("Fatal journal error: %s", e)
            self.error = e
            self.exit(return_code=1)
            return

        if self.controller.terminated:
            self.exit()
            return

        self.query_one("#frame", Static).update(self.controller.render())
