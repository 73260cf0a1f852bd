"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and the User-Agent for every API.
- Eases testing: a `transport` (e.g. `httpx.MockTransport`) can be injected.
- Turns httpx failures into `TransportError` in one place.
"""

from __future__ import annotations

from typing import Any

import httpx

from core.config import AppSettings
from core.errors import TransportError


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with sane defaults.

    Why a builder:
    - Centralizes timeouts/headers so all APIs behave the same.
    - Single seam for tests.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


def decode_json(response: httpx.Response, *, service: str) -> Any:
    """Return the JSON body of a successful response or raise `TransportError`."""

    if not response.is_success:
        raise TransportError(service, f"HTTP {response.status_code}")
    try:
        return response.json()
    except ValueError as exc:
        raise TransportError(service, "response body is not valid JSON") from exc


async def request_json(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    *,
    service: str,
    **kwargs: Any,
) -> Any:
    try:
        response = await client.request(method, url, **kwargs)
    except httpx.HTTPError as exc:
        raise TransportError(service, str(exc) or type(exc).__name__) from exc
    return decode_json(response, service=service)
