"""mailterm command-line interface.

What:
  Provide a Typer application with the ``login``, ``list``, ``show``, and
  ``read`` commands, plus an interactive prompt when invoked without a command.

Why:
  The terminal is the whole user interface: operators log in once, page through
  subjects, and open messages by number. Keeping every command on top of
  :class:`~mailterm.reader.MailboxReader` guarantees they share one fetch and
  rendering path.

How:
  The callback resolves the configuration path and optional log file into a
  :class:`_CliState` stored on the Typer context. Commands load the account
  configuration, open a :class:`~mailterm.imap.MailboxSession`, and drive the
  reader. Errors are caught at the command boundary, reported on stderr, and
  mapped to exit code ``1``; inside the interactive pager they are reported and
  the loop continues.

Interfaces:
  ``app`` (Typer application), ``login``, ``list_subjects``, ``show``,
  ``read``, ``main``.

Invariants & Safety:
  - Credentials are passed to the session as an explicit configuration value;
    nothing is exported to the environment.
  - A message that fails to render never ends the pager session.
"""
from __future__ import annotations

import contextlib
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Tuple

import typer
from imapclient.exceptions import IMAPClientError

from .config import AccountConfig, ConfigError, ConfigNotFoundError, load_config, save_config
from .core import DecodeError
from .imap import MailboxError, MailboxSession
from .reader import MailboxReader
from .utils.logging import set_log_stream


app = typer.Typer(help="Read your mailbox from the terminal", add_completion=False)

LOGGER = logging.getLogger("mailterm.cli")

PAGER_HELP = """
Available commands:
  next (n)         - Show next page of emails
  back (b)         - Show previous page of emails
  exit (e)         - Return to main menu
  help (h)         - Show this help
  fetch <number>   - Fetch and display the email with the given number
  <number>         - Go to specific page
"""

SHELL_HELP = """Available commands:
  read  - Fetch and display email subjects
  login - Set mailbox credentials
  help  - Show this help message
  quit  - Exit the program"""

_CLEAR_SCREEN = "\033[2J\033[H"


@dataclass
class _CliState:
    """Options shared by every command of one invocation."""

    config_path: Optional[Path] = None


def _state(ctx: typer.Context) -> _CliState:
    if isinstance(ctx.obj, _CliState):
        return ctx.obj
    return _CliState()


@contextlib.contextmanager
def _open_reader(config: AccountConfig) -> Iterator[MailboxReader]:
    with MailboxSession(config) as session:
        yield MailboxReader(session, page_size=config.page_size)


def _load_account(state: _CliState) -> AccountConfig:
    """Load credentials or exit with a hint towards ``login``."""

    try:
        return load_config(state.config_path)
    except ConfigNotFoundError as exc:
        LOGGER.info("config_missing: %s", exc)
        typer.echo("No saved credentials found. Please use the 'login' command.", err=True)
        raise typer.Exit(code=1) from exc
    except ConfigError as exc:
        typer.echo(f"Configuration error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.callback(invoke_without_command=True)
def _main_callback(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None, "--config", help="Path to config.yaml (defaults to MAILTERM_CONFIG_PATH or ~/.config/mailterm)"
    ),
    log_file: Optional[Path] = typer.Option(
        None, "--log-file", help="Append JSON diagnostics to this file instead of stderr"
    ),
) -> None:
    """Resolve shared options and start the interactive prompt when no command is given."""

    ctx.obj = _CliState(config_path=config)
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        stream = ctx.with_resource(log_file.open("a", encoding="utf-8"))
        set_log_stream(stream)
        ctx.call_on_close(lambda: set_log_stream(None))
    if ctx.invoked_subcommand is None:
        _shell(ctx)


@app.command("login")
def login(
    ctx: typer.Context,
    host: str = typer.Option("imap.gmail.com", help="IMAP server hostname"),
    port: int = typer.Option(993, help="IMAP server port"),
    mailbox: str = typer.Option("INBOX", help="Mailbox to read"),
) -> None:
    """Prompt for credentials, verify them against the server, and save them."""

    state = _state(ctx)
    username = typer.prompt("Username")
    password = typer.prompt("App password", hide_input=True)
    try:
        config = AccountConfig(
            username=username, password=password, host=host, port=port, mailbox=mailbox
        )
    except ValueError as exc:
        typer.echo(f"Login failed: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    try:
        with MailboxSession(config):
            pass
    except (IMAPClientError, OSError) as exc:
        LOGGER.warning("login_failed host=%s error=%s", host, exc)
        typer.echo(f"Login failed: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    try:
        path = save_config(config, state.config_path)
    except OSError as exc:
        typer.echo(f"Could not save credentials: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    LOGGER.info("credentials_saved path=%s", path)
    typer.echo("Login successful!")


@app.command("list")
def list_subjects(
    ctx: typer.Context,
    page: int = typer.Option(1, "--page", "-p", min=1, help="Page to show (1-based)"),
) -> None:
    """Print one page of message subjects."""

    config = _load_account(_state(ctx))
    try:
        with _open_reader(config) as reader:
            _print_page(reader, page - 1)
    except (IMAPClientError, OSError, MailboxError) as exc:
        typer.echo(f"Error reading mailbox: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command("show")
def show(
    ctx: typer.Context,
    number: int = typer.Argument(..., help="Message number as shown by 'list'"),
) -> None:
    """Print the readable body of message NUMBER."""

    config = _load_account(_state(ctx))
    try:
        with _open_reader(config) as reader:
            typer.echo(reader.fetch_message(number))
    except (DecodeError, MailboxError, IMAPClientError, OSError) as exc:
        typer.echo(f"Error fetching email: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@app.command("read")
def read(ctx: typer.Context) -> None:
    """Page through subjects interactively and open messages by number."""

    config = _load_account(_state(ctx))
    try:
        with _open_reader(config) as reader:
            _pager(reader)
    except (IMAPClientError, OSError, MailboxError) as exc:
        typer.echo(f"Error reading mailbox: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _print_page(reader: MailboxReader, page: int) -> bool:
    """Echo ``page``; return ``False`` when it lies past the last message."""

    if not reader.index.page_to_uid_slice(page):
        typer.echo("No more emails found.")
        return False
    typer.echo(f"Page {page + 1}")
    for entry in reader.list_page(page):
        typer.echo(f"{entry.number} - {entry.subject}")
    return True


def _clear_screen() -> None:
    """Clear the terminal between pages; a no-op when stdout is not a TTY."""

    if sys.stdout.isatty():
        typer.echo(_CLEAR_SCREEN, nl=False)


def _split_command(line: str) -> Tuple[str, List[str]]:
    parts = line.strip().lower().split()
    if not parts:
        return "", []
    return parts[0], parts[1:]


def _prompt(text: str) -> Optional[str]:
    """Prompt for a line; ``None`` on end of input or interrupt."""

    try:
        return typer.prompt(text, default="", show_default=False)
    except typer.Abort:
        return None


def _fetch_and_show(reader: MailboxReader, args: List[str]) -> None:
    if not args:
        typer.echo("Usage: fetch <email number>")
        return
    try:
        number = int(args[0])
    except ValueError:
        typer.echo("Please provide a valid email number.")
        return
    try:
        typer.echo(reader.fetch_message(number))
    except (DecodeError, MailboxError) as exc:
        typer.echo(f"Error fetching email: {exc}", err=True)
    _prompt("Press Enter to continue...")


def _pager(reader: MailboxReader) -> None:
    """Run the page/fetch loop until ``exit`` or end of input."""

    page = 0
    redraw = True
    while True:
        if redraw:
            _clear_screen()
            if not _print_page(reader, page) and page > 0:
                page -= 1
        redraw = True
        line = _prompt("Enter command")
        if line is None:
            return
        command, args = _split_command(line)
        if command in {"exit", "e", "quit", "q"}:
            return
        if command in {"help", "h", ""}:
            typer.echo(PAGER_HELP)
            redraw = False
        elif command in {"next", "n"}:
            page += 1
        elif command in {"back", "b"}:
            if page > 0:
                page -= 1
        elif command in {"fetch", "f"}:
            _fetch_and_show(reader, args)
        elif command.isdigit() and int(command) > 0:
            page = int(command) - 1
        else:
            typer.echo("Unknown command. Type 'help' or 'h' for a list of commands.")
            redraw = False


def _shell(ctx: typer.Context) -> None:
    """Top-level prompt offering ``read``, ``login``, ``help``, and ``quit``."""

    _clear_screen()
    while True:
        line = _prompt(f".../{Path.cwd().name or 'unknown'}")
        if line is None:
            break
        command, _ = _split_command(line)
        if command in {"quit", "exit", "q"}:
            break
        if command == "":
            continue
        if command in {"help", "h"}:
            typer.echo(SHELL_HELP)
        elif command in {"read", "r"}:
            _run_nested(lambda: read(ctx))
        elif command == "login":
            _run_nested(lambda: login(ctx, host="imap.gmail.com", port=993, mailbox="INBOX"))
        else:
            typer.echo("Unknown command. Type 'help' for available commands.")
    typer.echo("Goodbye!")


def _run_nested(command: Callable[[], None]) -> None:
    """Run a command from the shell, swallowing its exit code."""

    try:
        command()
    except typer.Exit:
        pass


def main() -> None:
    """Execute the Typer application entry point."""

    app()


if __name__ == "__main__":  # pragma: no cover
    main()
