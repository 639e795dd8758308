"""jrny - a terminal append-only journal."""

__version__ = "0.1.0"
