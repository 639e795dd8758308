"""Data models for jrny."""

from jrny.models.journal import DELIMITER, TIMESTAMP_FORMAT, JournalEntry
from jrny.models.style import RenderStyle

__all__ = [
    "DELIMITER",
    "TIMESTAMP_FORMAT",
    "JournalEntry",
    "RenderStyle",
]
