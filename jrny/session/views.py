"""Content views shown in the body of a session.

The controller talks to a ``ContentView``; which presentation is used
(scrolling text or a list of entries) is a configuration choice.
"""

from abc import ABC, abstractmethod
from typing import Optional

from rich.text import Text

from jrny.models import JournalEntry, RenderStyle
from jrny.session.render import wrap_text
from jrny.widgets import Viewport, ViewportKeyMap


class ContentView(ABC):
    """Abstract base class for journal content views.

    A view has no size until ``open`` is called with the terminal
    dimensions; before that it holds entries but renders nothing.
    """

    name = ""

    def __init__(self, style: Optional[RenderStyle] = None):
        self.style = style or RenderStyle()
        self.viewport: Optional[Viewport] = None
        self._entries: list[JournalEntry] = []

    @property
    def ready(self) -> bool:
        return self.viewport is not None

    @property
    def width(self) -> int:
        return self.viewport.width if self.ready else 0

    @property
    def height(self) -> int:
        return self.viewport.height if self.ready else 0

    @property
    def key_map(self) -> ViewportKeyMap:
        return self.viewport.key_map

    @property
    def content_width(self) -> int:
        """Columns available to text once the body margin is taken off."""
        return max(1, self.width - self.style.body_margin)

    def open(self, width: int, height: int, y_position: int = 0) -> None:
        """Create the viewport and load the current entries into it."""
        self.viewport = Viewport(width, height)
        self.viewport.y_position = y_position
        self._reload()

    def resize(self, width: int, height: int) -> None:
        at_bottom = self.viewport.at_bottom()
        self.viewport.width = width
        self.viewport.height = height
        self._reload()
        self.viewport.set_y_offset(self.viewport.y_offset)
        self._keep_in_view(at_bottom)

    def set_entries(self, entries: list[JournalEntry]) -> None:
        self._entries = list(entries)
        if self.ready:
            self._reload()

    def handles(self, key: str) -> bool:
        """True if ``key`` is an enabled scroll key for this view."""
        return self.ready and self.key_map.action_for(key) is not None

    def visible_lines(self) -> list[Text]:
        return self.viewport.visible_lines() if self.ready else []

    def scroll_percent(self) -> float:
        return self.viewport.scroll_percent() if self.ready else 1.0

    def _reload(self) -> None:
        self.viewport.set_lines(self._build_lines())

    def _keep_in_view(self, was_at_bottom: bool) -> None:
        if was_at_bottom:
            self.goto_bottom()

    @abstractmethod
    def _build_lines(self) -> list[Text]:
        """Lay the entries out as lines for the viewport."""
        pass

    @abstractmethod
    def update(self, key: str) -> bool:
        """Handle a scroll key.

        Returns:
            True if the key moved the view.
        """
        pass

    @abstractmethod
    def goto_bottom(self) -> None:
        """Bring the newest entry into view at the bottom."""
        pass


class TextContentView(ContentView):
    """Entries as ``timestamp-text`` lines in a scrolling text buffer."""

    name = "text"

    def _build_lines(self) -> list[Text]:
        lines = []
        for entry in self._entries:
            lines.extend(wrap_text(Text(entry.to_line().rstrip("\n")), self.content_width))
        return lines

    def update(self, key: str) -> bool:
        if not self.ready:
            return False
        return self.viewport.update(key)

    def goto_bottom(self) -> None:
        if self.ready:
            self.viewport.goto_bottom()


class ListContentView(ContentView):
    """Entries as two-line list items with a movable selection.

    Each item is the entry text over its timestamp, followed by a blank
    spacer line. The window scrolls to keep the selection visible.
    """

    name = "list"

    ITEM_HEIGHT = 3

    def __init__(self, style: Optional[RenderStyle] = None):
        super().__init__(style)
        self.selected = 0

    def set_entries(self, entries: list[JournalEntry]) -> None:
        self.selected = min(self.selected, max(0, len(entries) - 1))
        super().set_entries(entries)

    def _build_lines(self) -> list[Text]:
        lines = []
        for index, entry in enumerate(self._entries):
            is_selected = index == self.selected
            marker = self.style.border_vertical + " " if is_selected else "  "
            title = Text(marker + entry.text, style=self.style.selected_style if is_selected else "")
            description = Text(marker + entry.timestamp, style=self.style.timestamp_style)
            for line in (title, description):
                line.truncate(self.content_width, overflow="ellipsis")
            lines.extend([title, description, Text("")])
        # No spacer after the last item
        return lines[:-1]

    def select(self, index: int) -> None:
        """Select the item at ``index`` (clamped) and scroll to it."""
        if not self._entries:
            self.selected = 0
            return
        self.selected = min(max(index, 0), len(self._entries) - 1)
        if not self.ready:
            return

        self._reload()
        top = self.selected * self.ITEM_HEIGHT
        bottom = top + self.ITEM_HEIGHT - 2
        viewport = self.viewport
        if top < viewport.y_offset:
            viewport.set_y_offset(top)
        elif bottom >= viewport.y_offset + viewport.height:
            viewport.set_y_offset(bottom - viewport.height + 1)

    def _keep_in_view(self, was_at_bottom: bool) -> None:
        self.select(self.selected)

    def update(self, key: str) -> bool:
        if not self.ready:
            return False
        action = self.key_map.action_for(key)
        if action is None:
            return False

        per_page = max(1, self.height // self.ITEM_HEIGHT)
        steps = {
            "down": 1,
            "up": -1,
            "page_down": per_page,
            "page_up": -per_page,
            "half_page_down": max(1, per_page // 2),
            "half_page_up": -max(1, per_page // 2),
        }
        self.select(self.selected + steps[action])
        return True

    def goto_bottom(self) -> None:
        self.select(len(self._entries) - 1)


VIEWS = {
    TextContentView.name: TextContentView,
    ListContentView.name: ListContentView,
}


def create_view(name: str, style: Optional[RenderStyle] = None) -> ContentView:
    """Build the content view registered under ``name``.

    Raises:
        ValueError: If no view has that name.
    """
    try:
        view_cls = VIEWS[name]
    except KeyError:
        raise ValueError(f"Unknown view '{name}', expected one of: {', '.join(sorted(VIEWS))}") from None
    return view_cls(style)
