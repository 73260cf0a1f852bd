"""Spotify track search (client-credentials flow).

Two calls per search: exchange the client id/secret for an access token,
then run a `type=track&limit=1` search. The raw search payload is returned
untouched; picking fields out of it is the formatter's job.
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.http_client import build_async_client, request_json
from core.config import AppSettings
from core.errors import CredentialsError, TransportError

SERVICE = "Spotify"


class SpotifyClient:
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    async def _access_token(self, client: httpx.AsyncClient) -> str:
        settings = self._settings
        if not settings.spotify_client_id or not settings.spotify_client_secret:
            raise CredentialsError(SERVICE, "LIRI_SPOTIFY_CLIENT_ID", "LIRI_SPOTIFY_CLIENT_SECRET")

        data = await request_json(
            client,
            "POST",
            settings.spotify_accounts_url,
            service=SERVICE,
            data={"grant_type": "client_credentials"},
            auth=(settings.spotify_client_id, settings.spotify_client_secret),
        )
        token = data.get("access_token") if isinstance(data, dict) else None
        if not isinstance(token, str) or not token:
            raise TransportError(SERVICE, "token response has no access_token")
        return token

    async def search_track(self, query: str) -> Any:
        async with build_async_client(self._settings, transport=self._transport) as client:
            token = await self._access_token(client)
            return await request_json(
                client,
                "GET",
                f"{self._settings.spotify_api_url.rstrip('/')}/search",
                service=SERVICE,
                params={"q": query, "type": "track", "limit": 1},
                headers={"Authorization": f"Bearer {token}"},
            )
