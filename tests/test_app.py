"""Smoke tests for the textual front end."""

import asyncio
import tempfile
from datetime import datetime
from pathlib import Path

import pytest

from jrny.db import JournalStore
from jrny.session import SessionController
from jrny.tui import JournalApp

FIXED_TIME = datetime(2024, 3, 9, 14, 30)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


def run_keys(app: JournalApp, *keys: str) -> None:
    """Drive the app headlessly, pressing ``keys`` in order."""

    async def drive() -> None:
        async with app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            await pilot.press(*keys)

    asyncio.run(drive())


class TestJournalApp:
    """Events flow from textual through the controller to the journal."""

    def test_typed_entry_is_written(self, temp_dir: Path):
        path = temp_dir / "j.jrnl"
        controller = SessionController(JournalStore(path), clock=lambda: FIXED_TIME)
        app = JournalApp(controller)

        run_keys(app, "h", "i", "enter")

        assert controller.ready
        assert path.read_text() == "2024/03/09 14:30-hi\n"
        assert controller.draft == ""

    def test_ctrl_c_quits(self, temp_dir: Path):
        path = temp_dir / "j.jrnl"
        controller = SessionController(JournalStore(path), clock=lambda: FIXED_TIME)
        app = JournalApp(controller)

        run_keys(app, "x", "ctrl+c")

        assert controller.terminated
        assert app.error is None
        assert path.read_bytes() == b""

    def test_write_failure_ends_app(self, temp_dir: Path):
        path = temp_dir / "j.jrnl"
        store = JournalStore(path)
        controller = SessionController(store, clock=lambda: FIXED_TIME)
        app = JournalApp(controller)
        store.close()

        run_keys(app, "x", "enter")

        assert app.error is not None
        assert app.return_code == 1
