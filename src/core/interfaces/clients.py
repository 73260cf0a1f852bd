"""Contracts for the external data APIs.

Why Protocol:
- Structural contract (duck typing) without rigid inheritance.
- Handlers receive a client explicitly, so tests pass in fakes and the real
  httpx adapters stay swappable.

All methods are async because they perform network I/O. Failures surface as
`core.errors.ServiceError` subclasses.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MovieClient(Protocol):
    def build_uri(self, title: str) -> str:
        """Lookup URI for `title`."""

        ...

    async def get_json(self, uri: str) -> Any:
        """GET `uri` and return the decoded JSON record."""

        ...


@runtime_checkable
class TrackSearchClient(Protocol):
    async def search_track(self, query: str) -> Any:
        """Top-result track search; returns the raw search payload."""

        ...


@runtime_checkable
class TimelineClient(Protocol):
    async def user_timeline(self, account: str, count: int) -> list[Any]:
        """Most recent posts of `account`, replies excluded."""

        ...
