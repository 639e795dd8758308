"""Single-line text input buffer."""

from typing import Optional

from rich.text import Text


class LineInput:
    """Draft text plus a cursor, edited one key at a time.

    Key names follow textual's naming (``left``, ``ctrl+a``, ...).
    """

    def __init__(self, prompt: str = "> ", placeholder: str = ""):
        """Initialize the input.

        Args:
            prompt: Text rendered before the draft.
            placeholder: Text rendered dimmed while the draft is empty.
        """
        self.prompt = prompt
        self.placeholder = placeholder
        self._value = ""
        self.cursor = 0

    @property
    def value(self) -> str:
        return self._value

    def set_value(self, value: str) -> None:
        self._value = value
        self.cursor = len(value)

    def reset(self) -> None:
        self.set_value("")

    def insert(self, text: str) -> None:
        self._value = self._value[:self.cursor] + text + self._value[self.cursor:]
        self.cursor += len(text)

    def delete_backward(self) -> None:
        if self.cursor > 0:
            self._value = self._value[:self.cursor - 1] + self._value[self.cursor:]
            self.cursor -= 1

    def delete_forward(self) -> None:
        self._value = self._value[:self.cursor] + self._value[self.cursor + 1:]

    def delete_word_backward(self) -> None:
        start = self.cursor
        while start > 0 and self._value[start - 1].isspace():
            start -= 1
        while start > 0 and not self._value[start - 1].isspace():
            start -= 1
        self._value = self._value[:start] + self._value[self.cursor:]
        self.cursor = start

    def update(self, key: str, character: Optional[str] = None) -> bool:
        """Apply an editing key or insert a printable character.

        Returns:
            True if the key changed the draft or the cursor.
        """
        if key in ("backspace", "ctrl+h"):
            self.delete_backward()
        elif key in ("delete", "ctrl+d"):
            self.delete_forward()
        elif key == "ctrl+w":
            self.delete_word_backward()
        elif key == "ctrl+u":
            self._value = self._value[self.cursor:]
            self.cursor = 0
        elif key == "ctrl+k":
            self._value = self._value[:self.cursor]
        elif key in ("left", "ctrl+b"):
            self.cursor = max(0, self.cursor - 1)
        elif key in ("right", "ctrl+f"):
            self.cursor = min(len(self._value), self.cursor + 1)
        elif key in ("home", "ctrl+a"):
            self.cursor = 0
        elif key in ("end", "ctrl+e"):
            self.cursor = len(self._value)
        elif character is not None and len(character) == 1 and character.isprintable():
            self.insert(character)
        else:
            return False
        return True

    def render(self, cursor_style: str = "reverse") -> Text:
        """Render prompt, draft and cursor as one line."""
        line = Text(self.prompt)
        if not self._value and self.placeholder:
            line.append(self.placeholder[0], style=cursor_style)
            line.append(self.placeholder[1:], style="dim")
            return line

        line.append(self._value[:self.cursor])
        under_cursor = self._value[self.cursor:self.cursor + 1] or " "
        line.append(under_cursor, style=cursor_style)
        line.append(self._value[self.cursor + 1:])
        return line
