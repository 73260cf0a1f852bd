"""Command execution services.

Each handler receives its resolved argument and the client it needs through
`CommandContext` instead of reading shared state, which keeps invocations
independent and lets tests swap every collaborator. Printing and logging of
records go through `OutputSink`, implemented by the CLI layer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Protocol, Sequence

from adapters.stored_command import read_stored_command
from core.config import AppSettings, app_version
from core.domain.models import CommandResolution, FieldSpec, HandlerKey, RenderedLine
from core.errors import (
    MissingArgumentError,
    NoCommandError,
    ServiceError,
    StoredCommandError,
    UnrecognizedCommandError,
)
from core.formatter import render_record
from core.interfaces.clients import MovieClient, TimelineClient, TrackSearchClient
from core.router import resolve, resolve_tokens

logger = logging.getLogger(__name__)

POST_DISPLAY_LIMIT = 20
RULE = "-" * 97

POST_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec(label="  Post", path=("text",), wrap_indent=2),
    FieldSpec(label="  Created on", path=("created_at",)),
)

TRACK_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec(label="Artist", path=("tracks", "items", 0, "artists", 0, "name")),
    FieldSpec(label="Song Title", path=("tracks", "items", 0, "name")),
    FieldSpec(label="Preview URL", path=("tracks", "items", 0, "preview_url")),
    FieldSpec(label="Album Name", path=("tracks", "items", 0, "album", "name")),
)

MOVIE_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec(label="Movie Title", path=("Title",)),
    FieldSpec(label="Release Year", path=("Year",)),
    FieldSpec(label="IMDB Rating", path=("Ratings", 0, "Value")),
    FieldSpec(label="Rotten Tomatoes Rating", path=("Ratings", 1, "Value")),
    FieldSpec(label="Country of production", path=("Country",)),
    FieldSpec(label="Languages", path=("Language",)),
    FieldSpec(label="Plot", path=("Plot",), wrap_indent=1),
    FieldSpec(label="Actors", path=("Actors",)),
)


class OutputSink(Protocol):
    def record(self, lines: Sequence[str]) -> None:
        """Show a rendered record and append it to the log."""

        ...

    def notice(self, message: str) -> None:
        """Show a message on the console only."""

        ...

    def usage(self) -> None:
        ...

    def version(self, version: str) -> None:
        ...


@dataclass
class CommandContext:
    """Collaborators for one invocation."""

    settings: AppSettings
    movies: MovieClient
    tracks: TrackSearchClient
    timeline: TimelineClient
    output: OutputSink


def _text_lines(rendered: Iterable[RenderedLine]) -> list[str]:
    return [line.text for line in rendered]


def post_block(post: Any) -> list[str]:
    body, created = render_record(post, POST_FIELDS)
    return [RULE, body.text, "", created.text, "", RULE]


def track_block(payload: Any) -> list[str]:
    return ["", *_text_lines(render_record(payload, TRACK_FIELDS))]


def movie_block(record: Any) -> list[str]:
    return ["", *_text_lines(render_record(record, MOVIE_FIELDS))]


async def show_latest_posts(ctx: CommandContext) -> int:
    """Render up to `POST_DISPLAY_LIMIT` posts; returns how many were shown."""

    posts: list[Any] = []
    try:
        posts = await ctx.timeline.user_timeline(
            ctx.settings.timeline_account,
            ctx.settings.timeline_fetch_count,
        )
    except ServiceError as exc:
        logger.error("%s", exc)

    shown = posts[:POST_DISPLAY_LIMIT]
    for post in shown:
        ctx.output.record(post_block(post))
    return len(shown)


async def show_track(argument: str, ctx: CommandContext) -> str:
    """Search the top track for `argument` (or the default query); returns the query used."""

    query = argument or ctx.settings.default_track_query
    payload: Any = None
    try:
        payload = await ctx.tracks.search_track(query)
    except ServiceError as exc:
        logger.error("%s", exc)
    ctx.output.record(track_block(payload))
    return query


async def show_movie(argument: str, ctx: CommandContext, *, token: str = "movie-this") -> None:
    if not argument.strip():
        raise MissingArgumentError(token)
    uri = ctx.movies.build_uri(argument)

    record: Any = None
    try:
        record = await ctx.movies.get_json(uri)
    except ServiceError as exc:
        logger.error("%s", exc)
    ctx.output.record(movie_block(record))


async def replay_stored_command(ctx: CommandContext) -> CommandResolution | None:
    """Run the command stored in `settings.stored_command_path`.

    Returns the replayed resolution, or None when nothing could be replayed.
    """

    try:
        stored = read_stored_command(ctx.settings.stored_command_path)
    except StoredCommandError as exc:
        logger.error("%s", exc)
        return None

    try:
        resolution = resolve(stored.command, stored.argument)
    except UnrecognizedCommandError as exc:
        ctx.output.notice(f"{exc.token} is not a valid stored command!")
        return None
    except NoCommandError:
        ctx.output.notice("The stored command file does not contain a command!")
        return None

    if resolution.handler is HandlerKey.REPLAY:
        ctx.output.notice(f"{resolution.token} is not a valid stored command!")
        return None

    await dispatch(resolution, ctx)
    return resolution


async def dispatch(resolution: CommandResolution, ctx: CommandContext) -> None:
    handler = resolution.handler
    if handler is HandlerKey.LATEST_POSTS:
        await show_latest_posts(ctx)
    elif handler is HandlerKey.SEARCH_TRACK:
        await show_track(resolution.argument, ctx)
    elif handler is HandlerKey.SEARCH_MOVIE:
        await show_movie(resolution.argument, ctx, token=resolution.token)
    elif handler is HandlerKey.REPLAY:
        await replay_stored_command(ctx)
    elif handler is HandlerKey.HELP:
        ctx.output.usage()
    elif handler is HandlerKey.VERSION:
        ctx.output.version(app_version())


async def run_command(tokens: Sequence[str], ctx: CommandContext) -> CommandResolution:
    """Resolve a raw command line and run it. Input errors propagate to the caller."""

    resolution = resolve_tokens(tokens)
    await dispatch(resolution, ctx)
    return resolution
