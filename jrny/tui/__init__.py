"""Terminal front end for jrny sessions."""

from jrny.tui.app import JournalApp

__all__ = ["JournalApp"]
