# tests/conftest.py
from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Sequence

import pytest

from core.config import AppSettings
from core.services.commands import CommandContext


class FakeMovieClient:
    def __init__(self, record: Any = None, error: Optional[Exception] = None) -> None:
        self.record = record
        self.error = error
        self.uris: list[str] = []

    def build_uri(self, title: str) -> str:
        return f"https://omdb.test/?t={title}"

    async def get_json(self, uri: str) -> Any:
        self.uris.append(uri)
        if self.error is not None:
            raise self.error
        return self.record


class FakeTrackClient:
    def __init__(self, payload: Any = None, error: Optional[Exception] = None) -> None:
        self.payload = payload
        self.error = error
        self.queries: list[str] = []

    async def search_track(self, query: str) -> Any:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.payload


class FakeTimelineClient:
    def __init__(self, posts: Optional[list[Any]] = None, error: Optional[Exception] = None) -> None:
        self.posts = posts or []
        self.error = error
        self.calls: list[tuple[str, int]] = []

    async def user_timeline(self, account: str, count: int) -> list[Any]:
        self.calls.append((account, count))
        if self.error is not None:
            raise self.error
        return self.posts


class RecordingOutput:
    """OutputSink that keeps everything in memory."""

    def __init__(self) -> None:
        self.records: list[list[str]] = []
        self.notices: list[str] = []
        self.usage_calls = 0
        self.versions: list[str] = []

    def record(self, lines: Sequence[str]) -> None:
        self.records.append(list(lines))

    def notice(self, message: str) -> None:
        self.notices.append(message)

    def usage(self) -> None:
        self.usage_calls += 1

    def version(self, version: str) -> None:
        self.versions.append(version)


MOVIE_RECORD = {
    "Title": "Inception",
    "Year": "2010",
    "Ratings": [
        {"Source": "Internet Movie Database", "Value": "8.8/10"},
        {"Source": "Rotten Tomatoes", "Value": "87%"},
    ],
    "Country": "United States, United Kingdom",
    "Language": "English, Japanese, French",
    "Plot": "A thief who steals corporate secrets through the use of dream-sharing technology "
    "is given the inverse task of planting an idea into the mind of a C.E.O.",
    "Actors": "Leonardo DiCaprio, Joseph Gordon-Levitt, Elliot Page",
    "Response": "True",
}

TRACK_PAYLOAD = {
    "tracks": {
        "items": [
            {
                "name": "The Sign",
                "preview_url": "https://p.scdn.co/mp3-preview/abc",
                "artists": [{"name": "Ace of Base"}],
                "album": {"name": "The Sign (US Album) [Remastered]"},
            }
        ]
    }
}


@pytest.fixture
def settings(tmp_path: Path) -> AppSettings:
    """Settings isolated from any .env file, writing into tmp_path."""
    return AppSettings(
        _env_file=None,
        log_path=tmp_path / "log.txt",
        stored_command_path=tmp_path / "random.txt",
        omdb_api_key="test-key",
        spotify_client_id="spotify-id",
        spotify_client_secret="spotify-secret",
        twitter_consumer_key="consumer-key",
        twitter_consumer_secret="consumer-secret",
    )


@pytest.fixture
def output() -> RecordingOutput:
    return RecordingOutput()


def make_context(
    settings: AppSettings,
    output: RecordingOutput,
    *,
    movies: Optional[FakeMovieClient] = None,
    tracks: Optional[FakeTrackClient] = None,
    timeline: Optional[FakeTimelineClient] = None,
) -> CommandContext:
    """
    Helper to construct a CommandContext wired to fakes.
    """
    return CommandContext(
        settings=settings,
        movies=movies or FakeMovieClient(),
        tracks=tracks or FakeTrackClient(),
        timeline=timeline or FakeTimelineClient(),
        output=output,
    )
