"""Main CLI entry point for jrny.

Runs an interactive journal session, or prints/appends without one
when ``-l`` or ``-a`` is given.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import NoReturn, Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from jrny.config import ConfigError, Settings, load_settings
from jrny.db import JournalIOError, JournalStore
from jrny.diagnostics import configure_logging
from jrny.models import JournalEntry

# Console for rich output
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _fail(title: str, message: str) -> NoReturn:
    """Report a fatal error and exit with status 1."""
    logger.error("%s: %s", title, message)
    err_console.print(Panel(
        f"[red]{title}:[/red]\n\n{escape(message)}",
        title="[bold red]Error[/bold red]",
        border_style="red",
    ))
    raise SystemExit(1)


def _open_journal(path: Path) -> JournalStore:
    try:
        return JournalStore(path)
    except JournalIOError as e:
        _fail("Failed to open journal", str(e))


def _append_once(store: JournalStore, text: str) -> None:
    """Append a single stamped entry outside of a session."""
    try:
        entry = JournalEntry.stamp(text, datetime.now())
    except ValidationError as e:
        _fail("Invalid entry", e.errors()[0]["msg"])

    try:
        store.append(entry)
    except JournalIOError as e:
        _fail("Failed to append entry", str(e))

    console.print(f"[green]✓ Added entry at {entry.timestamp}[/green]")


def _run_session(store: JournalStore, settings: Settings) -> None:
    """Run the interactive session until the user quits."""
    from jrny.session import SessionController, create_view
    from jrny.tui import JournalApp

    view = create_view(settings.view, settings.style)
    controller = SessionController(
        store,
        view=view,
        style=settings.style,
        quit_keys=settings.quit_keys,
    )
    app = JournalApp(controller)

    try:
        app.run()
    except Exception as e:
        _fail("Error running session", str(e))

    if app.error is not None:
        _fail("Journal write failed", str(app.error))
    if app.return_code:
        _fail("Error running session", f"exit status {app.return_code}")
    logger.info("Session ended with %d entries", len(store.entries))


@click.command(context_settings=CONTEXT_SETTINGS)
@click.argument(
    "journal_path",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-l", "--list", "print_mode",
    is_flag=True,
    help="Print the journal then exit.",
)
@click.option(
    "-a", "--append", "append_text",
    default=None,
    help="Append TEXT to the journal then exit.",
)
@click.option(
    "--view",
    type=click.Choice(["text", "list"]),
    default=None,
    help="Content view for the session (default from config: text).",
)
@click.option(
    "--config", "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (default: ~/.config/jrny/config.toml).",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Diagnostic log file (default: jrny.log).",
)
@click.version_option(package_name="jrny")
def cli(
    journal_path: Optional[Path],
    print_mode: bool,
    append_text: Optional[str],
    view: Optional[str],
    config_path: Optional[Path],
    log_file: Optional[Path],
) -> None:
    """jrny - a terminal journal of short timestamped entries.

    JOURNAL_PATH is the journal file, created with its directories if it
    does not exist (default: journal.jrnl).

    \b
    In a session:
      enter       Add the typed line to the journal
      up / down   Scroll through earlier entries
      ctrl+c      Quit

    \b
    Examples:
      jrny                      # Open journal.jrnl
      jrny ~/notes/work.jrnl    # Open another journal
      jrny -l                   # Print the journal
      jrny -a "shipped v2"      # Add one entry and exit
    """
    try:
        settings = load_settings(config_path)
    except ConfigError as e:
        _fail("Invalid configuration", str(e))

    overrides = {}
    if journal_path is not None:
        overrides["journal"] = journal_path
    if view is not None:
        overrides["view"] = view
    if log_file is not None:
        overrides["log_file"] = log_file
    settings = settings.model_copy(update=overrides)

    if not configure_logging(settings.log_file):
        err_console.print(f"[dim]Diagnostic log {settings.log_file} unavailable, continuing without it[/dim]")
    logger.info("Starting")

    store = _open_journal(settings.journal)
    with store:
        if print_mode:
            click.echo(store.raw_content)
            return

        if append_text is not None:
            if not append_text:
                console.print("[yellow]Nothing to append[/yellow]")
                return
            _append_once(store, append_text)
            return

        _run_session(store, settings)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
