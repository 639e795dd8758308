"""Interactive session controller for jrny.

Receives terminal events one at a time and turns them into journal
appends, draft edits and view updates. Rendering is left to
``jrny.session.render``.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Callable, Iterable, Optional, Union

from pydantic import BaseModel, Field
from rich.text import Text

from jrny.db import JournalIOError, JournalStore
from jrny.models import JournalEntry, RenderStyle
from jrny.session.render import chrome_height, render_frame
from jrny.session.views import ContentView, TextContentView
from jrny.widgets import LineInput

logger = logging.getLogger(__name__)

FORCE_QUIT_KEY = "ctrl+c"
SUBMIT_KEY = "enter"


class SessionState(str, Enum):
    """Lifecycle of a session."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"
    TERMINATED = "terminated"


class KeyPress(BaseModel):
    """A key event; ``key`` uses textual's key names."""

    key: str = Field(..., min_length=1)
    character: Optional[str] = None

    model_config = {"frozen": True}


class Resize(BaseModel):
    """Terminal dimensions, sent at start-up and on every resize."""

    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)

    model_config = {"frozen": True}


Event = Union[KeyPress, Resize]


class SessionController:
    """State machine binding keystrokes to journal and view updates."""

    def __init__(
        self,
        journal: JournalStore,
        view: Optional[ContentView] = None,
        style: Optional[RenderStyle] = None,
        clock: Callable[[], datetime] = datetime.now,
        quit_keys: Iterable[str] = (),
        title: Optional[str] = None,
    ):
        """Initialize the controller.

        Args:
            journal: Open journal store; the controller is its only writer.
            view: Content view for the body (defaults to scrolling text).
            style: Render style shared by the view and the frame.
            clock: Source of submission times.
            quit_keys: Extra keys that end the session besides ctrl+c.
            title: Header title, defaults to the journal path.
        """
        self.journal = journal
        self.style = style or RenderStyle()
        self.view = view or TextContentView(self.style)
        self.clock = clock
        self.quit_keys = frozenset(quit_keys) | {FORCE_QUIT_KEY}
        self.title = title if title is not None else str(journal.path)
        self.line_input = LineInput(prompt=self.style.prompt, placeholder=self.style.placeholder)
        self.state = SessionState.UNINITIALIZED
        self.dimensions = (0, 0)

        self.view.set_entries(journal.entries)

    @property
    def ready(self) -> bool:
        return self.state is SessionState.READY

    @property
    def terminated(self) -> bool:
        return self.state is SessionState.TERMINATED

    @property
    def draft(self) -> str:
        return self.line_input.value

    @property
    def rendered_content(self) -> str:
        return self.journal.content

    def handle(self, event: Event) -> None:
        """Process one event to completion.

        Raises:
            JournalIOError: If a submission cannot be written. The session
                must end; nothing is retried.
        """
        if self.terminated:
            return

        if isinstance(event, Resize):
            self._on_resize(event)
        elif event.key in self.quit_keys:
            logger.info("Quit requested with %s", event.key)
            self.state = SessionState.TERMINATED
        elif event.key == SUBMIT_KEY:
            self.submit()
        elif self.view.handles(event.key):
            self.view.update(event.key)
        else:
            self.line_input.update(event.key, event.character)

    def submit(self) -> Optional[JournalEntry]:
        """Append the draft as a new entry.

        Returns:
            The appended entry, or None if the draft was empty.

        Raises:
            JournalIOError: If the write fails. The session is terminated
                first so the entry is never written twice.
        """
        if not self.draft:
            return None

        entry = JournalEntry.stamp(self.draft, self.clock())
        try:
            self.journal.append(entry)
        except JournalIOError:
            logger.error("Write failed, ending session")
            self.state = SessionState.TERMINATED
            raise
        self.line_input.reset()
        self.view.set_entries(self.journal.entries)
        self.view.goto_bottom()
        return entry

    def _on_resize(self, event: Resize) -> None:
        logger.debug("Resize to %dx%d", event.width, event.height)
        self.dimensions = (event.width, event.height)
        header_height, footer_height = chrome_height(self.style)
        body_height = max(0, event.height - header_height - footer_height)

        if self.state is SessionState.UNINITIALIZED:
            # Dimensions arrive asynchronously after start-up; the view
            # can only be built once they are known.
            self.view.open(event.width, body_height, y_position=header_height + 1)
            self.view.key_map.line_only()
            self.view.goto_bottom()
            self.state = SessionState.READY
        else:
            self.view.resize(event.width, body_height)

    def render(self) -> Text:
        return render_frame(self)
