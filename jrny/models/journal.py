"""JournalEntry data model."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

# Separates the timestamp from the entry text on disk
DELIMITER = "-"

# 24-hour local time, minute resolution (e.g. 2023/01/01 10:00)
TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M"


class JournalEntry(BaseModel):
    """Represents a single timestamped journal line."""

    timestamp: str = Field(..., description="Submission time, YYYY/MM/DD HH:MM")
    text: str = Field(..., description="User-authored line")

    model_config = {"frozen": True}

    @field_validator("timestamp")
    @classmethod
    def _check_timestamp(cls, value: str) -> str:
        if DELIMITER in value or "\n" in value or "\r" in value:
            raise ValueError(f"timestamp must not contain {DELIMITER!r} or line breaks")
        return value

    @field_validator("text")
    @classmethod
    def _check_text(cls, value: str) -> str:
        if "\n" in value or "\r" in value:
            raise ValueError("entry text must be a single line")
        return value

    @classmethod
    def stamp(cls, text: str, when: datetime) -> "JournalEntry":
        """Create an entry for ``text`` stamped with ``when``.

        Args:
            text: Entry text.
            when: Wall-clock time of submission; seconds are discarded.

        Returns:
            New JournalEntry.
        """
        return cls(timestamp=when.strftime(TIMESTAMP_FORMAT), text=text)

    def to_line(self) -> str:
        """Format the entry as it is stored on disk, newline included."""
        return f"{self.timestamp}{DELIMITER}{self.text}\n"
