"""Scrollable viewport over a buffer of lines."""

from typing import Optional

from pydantic import BaseModel, Field
from rich.text import Text


class KeyBinding(BaseModel):
    """Keys bound to one viewport action."""

    keys: list[str] = Field(default_factory=list)
    enabled: bool = True

    def matches(self, key: str) -> bool:
        return self.enabled and key in self.keys


class ViewportKeyMap(BaseModel):
    """Key names (textual naming) for each scroll action."""

    page_down: KeyBinding = Field(default_factory=lambda: KeyBinding(keys=["pagedown", "space", "f"]))
    page_up: KeyBinding = Field(default_factory=lambda: KeyBinding(keys=["pageup", "b"]))
    half_page_down: KeyBinding = Field(default_factory=lambda: KeyBinding(keys=["d", "ctrl+d"]))
    half_page_up: KeyBinding = Field(default_factory=lambda: KeyBinding(keys=["u", "ctrl+u"]))
    down: KeyBinding = Field(default_factory=lambda: KeyBinding(keys=["down", "j"]))
    up: KeyBinding = Field(default_factory=lambda: KeyBinding(keys=["up", "k"]))

    def action_for(self, key: str) -> Optional[str]:
        """Return the enabled action bound to ``key``, if any."""
        for action in ("page_down", "page_up", "half_page_down", "half_page_up", "down", "up"):
            if getattr(self, action).matches(key):
                return action
        return None

    def line_only(self) -> None:
        """Restrict scrolling to single lines with the arrow keys."""
        self.page_down.enabled = False
        self.page_up.enabled = False
        self.half_page_down.enabled = False
        self.half_page_up.enabled = False
        self.down.keys = ["down"]
        self.up.keys = ["up"]


class Viewport:
    """A window of ``height`` lines over a larger list of lines."""

    def __init__(self, width: int = 0, height: int = 0):
        self.width = width
        self.height = height
        self.y_offset = 0
        self.y_position = 0
        self.key_map = ViewportKeyMap()
        self._lines: list[Text] = []

    @property
    def total_lines(self) -> int:
        return len(self._lines)

    def set_lines(self, lines: list[Text]) -> None:
        """Replace the buffer; the offset is kept unless it runs past the end."""
        self._lines = list(lines)
        if self.y_offset > len(self._lines) - 1:
            self.goto_bottom()

    def max_y_offset(self) -> int:
        return max(0, len(self._lines) - self.height)

    def at_bottom(self) -> bool:
        return self.y_offset >= self.max_y_offset()

    def set_y_offset(self, offset: int) -> None:
        self.y_offset = min(max(offset, 0), self.max_y_offset())

    def line_down(self, n: int = 1) -> None:
        self.set_y_offset(self.y_offset + n)

    def line_up(self, n: int = 1) -> None:
        self.set_y_offset(self.y_offset - n)

    def goto_bottom(self) -> None:
        self.y_offset = self.max_y_offset()

    def scroll_percent(self) -> float:
        """Fraction of the scrollable range above the window, 0.0 to 1.0."""
        if self.height >= len(self._lines):
            return 1.0
        percent = self.y_offset / (len(self._lines) - self.height)
        return min(max(percent, 0.0), 1.0)

    def visible_lines(self) -> list[Text]:
        """Lines inside the window, padded with blanks up to ``height``."""
        if self.height <= 0:
            return []
        lines = self._lines[self.y_offset:self.y_offset + self.height]
        return lines + [Text("") for _ in range(self.height - len(lines))]

    def update(self, key: str) -> bool:
        """Apply a scroll key.

        Returns:
            True if the key is bound to an enabled action.
        """
        action = self.key_map.action_for(key)
        if action is None:
            return False

        half = max(1, self.height // 2)
        if action == "page_down":
            self.line_down(max(1, self.height))
        elif action == "page_up":
            self.line_up(max(1, self.height))
        elif action == "half_page_down":
            self.line_down(half)
        elif action == "half_page_up":
            self.line_up(half)
        elif action == "down":
            self.line_down()
        elif action == "up":
            self.line_up()
        return True
