"""liri command line.

A single root command receives the raw tokens: the first one names the
command, the rest form its argument. Typer's own option parsing is relaxed
so help/version flags (`-h`, `--help`, `-v`, ...) reach the router like any
other token.
"""

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

import typer
from rich.logging import RichHandler

from adapters.omdb import OmdbClient
from adapters.spotify import SpotifyClient
from adapters.twitter import TwitterClient
from cli.ui_components import ConsoleOutput, build_console, print_problem
from core.config import AppSettings
from core.errors import InputError, MissingArgumentError
from core.services.commands import CommandContext, run_command

app = typer.Typer(add_completion=False, help="Movies, songs and recent posts from the terminal.")

_console = build_console()


def configure_logging(level: str) -> None:
    """Route the error channel (stdlib logging) to stderr through Rich."""

    handler = RichHandler(
        console=build_console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    root = logging.getLogger()
    root.handlers = [h for h in root.handlers if not isinstance(h, RichHandler)]
    root.addHandler(handler)
    root.setLevel(level.upper())


def build_context(settings: AppSettings) -> CommandContext:
    return CommandContext(
        settings=settings,
        movies=OmdbClient(settings),
        tracks=SpotifyClient(settings),
        timeline=TwitterClient(settings),
        output=ConsoleOutput(_console, settings.log_path),
    )


@app.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
        "help_option_names": [],
    }
)
def main(
    tokens: Optional[List[str]] = typer.Argument(
        None,
        metavar="COMMAND [NAME VALUE]...",
        help="Command followed by its name value words.",
    ),
) -> None:
    """Dispatch COMMAND and print (and log) the result."""

    settings = AppSettings()
    configure_logging(settings.log_level)
    ctx = build_context(settings)

    try:
        asyncio.run(run_command(list(tokens or []), ctx))
    except InputError as exc:
        print_problem(_console, str(exc))
    except MissingArgumentError as exc:
        print_problem(_console, str(exc))
        raise typer.Exit(code=1) from exc


def run() -> None:
    app()
