"""Twitter user timeline.

Uses app-only auth: a configured bearer token, or one exchanged from the
consumer key/secret via `oauth2/token`. Replies are excluded server side;
retweets are kept.
"""

from __future__ import annotations

from typing import Any

import httpx

from adapters.http_client import build_async_client, request_json
from core.config import AppSettings
from core.errors import CredentialsError, TransportError

SERVICE = "Twitter"


class TwitterClient:
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def _url(self, path: str) -> str:
        return f"{self._settings.twitter_api_url.rstrip('/')}/{path}"

    async def _bearer_token(self, client: httpx.AsyncClient) -> str:
        settings = self._settings
        if settings.twitter_bearer_token:
            return settings.twitter_bearer_token
        if not settings.twitter_consumer_key or not settings.twitter_consumer_secret:
            raise CredentialsError(
                SERVICE,
                "LIRI_TWITTER_BEARER_TOKEN",
                "LIRI_TWITTER_CONSUMER_KEY",
                "LIRI_TWITTER_CONSUMER_SECRET",
            )

        data = await request_json(
            client,
            "POST",
            self._url("oauth2/token"),
            service=SERVICE,
            data={"grant_type": "client_credentials"},
            auth=(settings.twitter_consumer_key, settings.twitter_consumer_secret),
        )
        token = data.get("access_token") if isinstance(data, dict) else None
        if not isinstance(token, str) or not token:
            raise TransportError(SERVICE, "token response has no access_token")
        return token

    async def user_timeline(self, account: str, count: int) -> list[Any]:
        async with build_async_client(self._settings, transport=self._transport) as client:
            token = await self._bearer_token(client)
            data = await request_json(
                client,
                "GET",
                self._url("1.1/statuses/user_timeline.json"),
                service=SERVICE,
                params={
                    "screen_name": account,
                    "count": count,
                    "exclude_replies": "true",
                    "include_rts": "true",
                },
                headers={"Authorization": f"Bearer {token}"},
            )
        if not isinstance(data, list):
            raise TransportError(SERVICE, "timeline response is not a list")
        return data
