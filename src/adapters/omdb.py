"""OMDB movie lookup.

The handler only needs "give me a URI, give me back a record": building the
URI and fetching it are kept apart so the handler can refuse an empty title
before any request is made.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from adapters.http_client import build_async_client, request_json
from core.config import AppSettings

logger = logging.getLogger(__name__)

SERVICE = "OMDB"


class OmdbClient:
    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def build_uri(self, title: str) -> str:
        params: dict[str, str] = {"t": title}
        if self._settings.omdb_api_key:
            params["apikey"] = self._settings.omdb_api_key
        return str(httpx.URL(self._settings.omdb_base_url, params=params))

    async def get_json(self, uri: str) -> Any:
        async with build_async_client(self._settings, transport=self._transport) as client:
            data = await request_json(client, "GET", uri, service=SERVICE)

        # OMDB answers 200 with {"Response": "False", "Error": ...} for unknown titles.
        if isinstance(data, dict) and data.get("Response") == "False":
            logger.warning("OMDB: %s", data.get("Error") or "no result")
        return data
