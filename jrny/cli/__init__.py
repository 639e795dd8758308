"""CLI commands for jrny."""

from jrny.cli.main import cli, main

__all__ = ["cli", "main"]
