"""Append-only journal file store for jrny."""

import logging
from pathlib import Path
from typing import BinaryIO, Optional

from jrny.models import DELIMITER, JournalEntry

logger = logging.getLogger(__name__)

ENCODING = "utf-8"


class JournalIOError(IOError):
    """Raised when the journal file cannot be created, read or written.

    Always fatal for a session: callers stop rather than retry.
    """


def parse_journal(raw: str) -> list[JournalEntry]:
    """Parse journal text into entries.

    Each non-empty line is split at the first delimiter into timestamp
    and text. Lines without a delimiter are skipped; the file itself is
    never rewritten, so skipped lines stay on disk.

    Args:
        raw: Journal file contents.

    Returns:
        Entries in file order.
    """
    entries = []
    for line in raw.split("\n"):
        line = line.removesuffix("\r")
        timestamp, sep, text = line.partition(DELIMITER)
        if not sep:
            continue
        # Stored lines are taken as-is, without model validation
        entries.append(JournalEntry.model_construct(timestamp=timestamp, text=text))
    return entries


def format_entries(entries: list[JournalEntry]) -> str:
    """Format entries exactly as they appear on disk."""
    return "".join(entry.to_line() for entry in entries)


class JournalStore:
    """Plain-text, append-only journal store.

    Holds one read+append handle for its whole lifetime. All writes go
    through ``append``; nothing is ever rewritten.
    """

    def __init__(self, path: Path):
        """Open (or create) the journal at ``path``.

        Args:
            path: Journal file location. Missing parent directories are
                created.

        Raises:
            JournalIOError: If the file or its directory cannot be
                created, opened or read.
        """
        self.path = Path(path)
        self._handle: Optional[BinaryIO] = None
        self._entries: list[JournalEntry] = []
        self.raw_content = ""

        if self.path.exists():
            self._open_handle()
            self._load()
        else:
            self._ensure_journal_dir()
            self._open_handle()
        logger.info("Opened journal %s with %d entries", self.path, len(self._entries))

    def _ensure_journal_dir(self) -> None:
        """Ensure the journal directory exists."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise JournalIOError(f"Cannot create directory {self.path.parent}: {e}") from e

    def _open_handle(self) -> None:
        # Unbuffered so every write reaches the OS before append() returns
        try:
            self._handle = open(self.path, "a+b", buffering=0)
        except OSError as e:
            raise JournalIOError(f"Cannot open journal {self.path}: {e}") from e

    def _load(self) -> None:
        """Read the existing file and parse it into entries."""
        try:
            self._handle.seek(0)
            raw = self._handle.read()
            self.raw_content = raw.decode(ENCODING)
        except (OSError, UnicodeDecodeError) as e:
            raise JournalIOError(f"Failed to read journal {self.path}: {e}") from e
        self._entries = parse_journal(self.raw_content)

    @property
    def entries(self) -> list[JournalEntry]:
        """Entries loaded at open plus everything appended since."""
        return list(self._entries)

    @property
    def content(self) -> str:
        """All entries formatted as ``timestamp-text`` lines."""
        return format_entries(self._entries)

    @property
    def closed(self) -> bool:
        return self._handle is None or self._handle.closed

    def append(self, entry: JournalEntry) -> None:
        """Append an entry to the file, then to the in-memory list.

        Args:
            entry: Entry to persist.

        Raises:
            JournalIOError: If the write fails or is short. The in-memory
                list is left unchanged.
        """
        if self.closed:
            raise JournalIOError(f"Journal {self.path} is closed")

        data = entry.to_line().encode(ENCODING)
        try:
            written = self._handle.write(data)
        except OSError as e:
            raise JournalIOError(f"Failed to write journal {self.path}: {e}") from e

        if written != len(data):
            raise JournalIOError(
                f"Short write to journal {self.path}: {written} of {len(data)} bytes"
            )

        self._entries.append(entry)
        logger.info("Appended entry at %s", entry.timestamp)

    def close(self) -> None:
        """Release the file handle."""
        if self._handle is not None and not self._handle.closed:
            self._handle.close()

    def __enter__(self) -> "JournalStore":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
