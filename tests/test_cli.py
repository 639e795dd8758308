"""Tests for the jrny command line.

**Feature: terminal-journal**
"""

import importlib
import re
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner
from hypothesis import given, settings
from hypothesis import strategies as st

from jrny.cli import cli

# The package re-exports the main() function under the submodule name
cli_main = importlib.import_module("jrny.cli.main")

EXISTING = "2023/01/01 10:00-first\nnot a journal line\n2023/01/02 11:00-second\n"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


def invoke(temp_dir: Path, *args: str):
    """Run the CLI with an isolated config and diagnostic log."""
    runner = CliRunner()
    return runner.invoke(
        cli,
        [
            "--config", str(temp_dir / "config.toml"),
            "--log-file", str(temp_dir / "jrny.log"),
            *args,
        ],
    )


class TestAppendMode:
    """
    **Feature: terminal-journal, Property 8: CLI Append**

    *For any* note, ``-a`` adds exactly one line and leaves earlier
    lines byte-identical.
    """

    @given(
        note=st.text(
            alphabet=st.characters(whitelist_categories=("Ll", "Lu", "Nd", "Zs", "Pd")),
            min_size=1,
            max_size=40,
        ).filter(lambda x: not x.startswith("-"))
    )
    @settings(max_examples=25, deadline=None)
    def test_append_adds_one_line(self, note: str):
        with tempfile.TemporaryDirectory() as tmpdir:
            temp_dir = Path(tmpdir)
            journal = temp_dir / "journal.jrnl"
            journal.write_text(EXISTING)

            result = invoke(temp_dir, str(journal), "-a", note)

            assert result.exit_code == 0, result.output
            data = journal.read_text()
            assert data.startswith(EXISTING)
            added = data[len(EXISTING):]
            assert added.count("\n") == 1
            assert re.fullmatch(r"\d{4}/\d{2}/\d{2} \d{2}:\d{2}-" + re.escape(note) + r"\n", added)

    def test_append_note(self, temp_dir: Path):
        journal = temp_dir / "journal.jrnl"
        journal.write_text(EXISTING)

        result = invoke(temp_dir, str(journal), "-a", "note")

        assert result.exit_code == 0
        assert journal.read_text().startswith(EXISTING)
        assert journal.read_text().endswith("-note\n")
        assert "Added entry" in result.stdout

    def test_append_creates_missing_journal(self, temp_dir: Path):
        journal = temp_dir / "dir" / "new.jrnl"

        result = invoke(temp_dir, str(journal), "-a", "hello")

        assert result.exit_code == 0
        assert re.fullmatch(r"\d{4}/\d{2}/\d{2} \d{2}:\d{2}-hello\n", journal.read_text())

    def test_empty_append_writes_nothing(self, temp_dir: Path):
        journal = temp_dir / "journal.jrnl"
        journal.write_text(EXISTING)

        result = invoke(temp_dir, str(journal), "-a", "")

        assert result.exit_code == 0
        assert journal.read_text() == EXISTING

    def test_multiline_append_is_rejected(self, temp_dir: Path):
        journal = temp_dir / "journal.jrnl"
        journal.write_text(EXISTING)

        result = invoke(temp_dir, str(journal), "-a", "two\nlines")

        assert result.exit_code == 1
        assert journal.read_text() == EXISTING


class TestListMode:
    """``-l`` prints the journal and starts no session."""

    def test_prints_raw_content(self, temp_dir: Path):
        journal = temp_dir / "journal.jrnl"
        journal.write_text(EXISTING)

        with patch.object(cli_main, "_run_session") as run_session:
            result = invoke(temp_dir, str(journal), "-l")

        assert result.exit_code == 0
        assert result.stdout == EXISTING + "\n"
        run_session.assert_not_called()

    def test_list_does_not_write(self, temp_dir: Path):
        journal = temp_dir / "journal.jrnl"
        journal.write_text(EXISTING)

        invoke(temp_dir, str(journal), "-l")

        assert journal.read_text() == EXISTING


class TestDefaultsAndErrors:
    """Default journal, configuration and fatal errors."""

    def test_default_journal_path(self, temp_dir: Path, monkeypatch):
        monkeypatch.chdir(temp_dir)

        result = invoke(temp_dir, "-a", "default")

        assert result.exit_code == 0
        assert (temp_dir / "journal.jrnl").read_text().endswith("-default\n")

    def test_journal_from_config(self, temp_dir: Path):
        journal = temp_dir / "configured.jrnl"
        (temp_dir / "config.toml").write_text(f'journal = "{journal.as_posix()}"\n')

        result = invoke(temp_dir, "-a", "configured")

        assert result.exit_code == 0
        assert journal.read_text().endswith("-configured\n")

    def test_invalid_config_exits_nonzero(self, temp_dir: Path):
        (temp_dir / "config.toml").write_text('view = "grid"\n')

        result = invoke(temp_dir, "-l")

        assert result.exit_code == 1

    def test_unopenable_journal_exits_nonzero(self, temp_dir: Path):
        directory = temp_dir / "a_directory"
        directory.mkdir()

        (directory / "blocker").write_text("")
        result = invoke(temp_dir, str(directory / "blocker" / "j.jrnl"), "-l")
        assert result.exit_code == 1

    def test_diagnostic_log_written(self, temp_dir: Path):
        journal = temp_dir / "journal.jrnl"

        invoke(temp_dir, str(journal), "-a", "logged")

        log = (temp_dir / "jrny.log").read_text()
        assert "Starting" in log
        assert "Appended entry" in log


class TestInteractiveMode:
    """Without flags the CLI starts a session."""

    def test_runs_session_with_chosen_view(self, temp_dir: Path):
        journal = temp_dir / "journal.jrnl"

        with patch.object(cli_main, "_run_session") as run_session:
            result = invoke(temp_dir, str(journal), "--view", "list")

        assert result.exit_code == 0
        run_session.assert_called_once()
        store, settings = run_session.call_args.args
        assert store.path == journal
        assert settings.view == "list"

    def test_session_start_failure_exits_nonzero(self, temp_dir: Path):
        journal = temp_dir / "journal.jrnl"

        with patch("jrny.tui.JournalApp.run", side_effect=RuntimeError("no terminal")):
            result = invoke(temp_dir, str(journal))

        assert result.exit_code == 1
