"""Journal persistence for jrny."""

from jrny.db.store import JournalIOError, JournalStore, format_entries, parse_journal

__all__ = [
    "JournalIOError",
    "JournalStore",
    "format_entries",
    "parse_journal",
]
