"""Command router.

Maps the raw token typed by the user onto a `HandlerKey`. Matching is exact
and case-sensitive; several spellings may share one handler (help flags).
No I/O happens here.
"""

from __future__ import annotations

from typing import Iterable

from core.domain.models import CommandResolution, HandlerKey
from core.errors import NoCommandError, UnrecognizedCommandError

COMMAND_MAP: dict[str, HandlerKey] = {
    "my-tweets": HandlerKey.LATEST_POSTS,
    "spotify-this-song": HandlerKey.SEARCH_TRACK,
    "movie-this": HandlerKey.SEARCH_MOVIE,
    "do-what-it-says": HandlerKey.REPLAY,
    "-help": HandlerKey.HELP,
    "--help": HandlerKey.HELP,
    "-h": HandlerKey.HELP,
    "--h": HandlerKey.HELP,
    "-v": HandlerKey.VERSION,
    "--version": HandlerKey.VERSION,
}

# (usage, description) rows for the help screen, in display order.
COMMAND_HELP: tuple[tuple[str, str], ...] = (
    ("-h, --h, -help, --help", "Display help information."),
    ("-v, --version", "Display the current liri version."),
    ("my-tweets", "Show the last twenty posts of the configured account."),
    ("spotify-this-song [name value]", "Show song information for the provided name value."),
    ("movie-this [name value]", "Show movie information for the provided name value."),
    ("do-what-it-says", "Run the command stored in random.txt."),
)


def join_argument(words: Iterable[str]) -> str:
    return " ".join(words)


def resolve(token: str | None, argument: str = "") -> CommandResolution:
    """Resolve `token` to its handler.

    Raises:
    - `NoCommandError` when no token was given.
    - `UnrecognizedCommandError` when the token is not in `COMMAND_MAP`.
    """

    if token is None or token == "":
        raise NoCommandError()
    handler = COMMAND_MAP.get(token)
    if handler is None:
        raise UnrecognizedCommandError(token)
    return CommandResolution(token=token, handler=handler, argument=argument)


def resolve_tokens(tokens: Iterable[str]) -> CommandResolution:
    """Resolve a full command line: first token is the command, the rest the argument."""

    items = list(tokens)
    if not items:
        raise NoCommandError()
    return resolve(items[0], join_argument(items[1:]))
