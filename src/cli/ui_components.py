"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- `ConsoleOutput` is the one place where records reach both the console and
  the log file, so the two never drift apart.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from adapters.log_file import append_log_entry
from core.router import COMMAND_HELP

logger = logging.getLogger(__name__)

HELP_HINT = "Try <liri --help> for information on using this app."


def build_console(*, stderr: bool = False) -> Console:
    """Plain console: no markup, highlighting or hard wrapping of API text."""

    return Console(stderr=stderr, highlight=False, markup=False, emoji=False, soft_wrap=True)


def print_lines(console: Console, lines: Sequence[str]) -> None:
    for line in lines:
        console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_problem(console: Console, message: str) -> None:
    """Problem message followed by the help hint."""

    print_lines(console, ["", "", message, "", HELP_HINT])


def build_commands_table() -> Table:
    table = Table(title="Commands", title_justify="left", show_header=False, box=None, padding=(0, 2))
    table.add_column("Command", style="cyan", no_wrap=True)
    table.add_column("Description", style="white")
    for usage, description in COMMAND_HELP:
        table.add_row(usage, description)
    return table


def print_usage(console: Console) -> None:
    intro = Text(
        "liri is a language interpretation and recognition interface used to gather\n"
        "information about movies, songs, and recent posts.",
    )
    console.print(Panel(intro, border_style="cyan", padding=(0, 2)))
    console.print(Text("Usage: $ liri [command] [name value]"))
    console.print()
    console.print(build_commands_table())


class ConsoleOutput:
    """`OutputSink` for a terminal session: records go to the console and the log."""

    def __init__(self, console: Console, log_path: Path) -> None:
        self._console = console
        self._log_path = log_path

    def record(self, lines: Sequence[str]) -> None:
        print_lines(self._console, lines)
        try:
            append_log_entry(path=self._log_path, lines=lines)
        except OSError as exc:
            logger.error("Could not append to %s: %s", self._log_path, exc)

    def notice(self, message: str) -> None:
        print_problem(self._console, message)

    def usage(self) -> None:
        print_usage(self._console)

    def version(self, version: str) -> None:
        print_lines(self._console, ["", f"  liri v{version}"])
