"""Wrapper de httpx.

Un único builder para que todos los requests compartan timeouts, headers por
defecto y event hooks. En tests se inyecta un `httpx.MockTransport`.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping

import httpx

DEFAULT_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

RequestHook = Callable[[httpx.Request], Awaitable[None]]
ResponseHook = Callable[[httpx.Response], Awaitable[None]]


def build_async_client(
    *,
    base_url: str,
    timeout_seconds: float,
    headers: Mapping[str, str] | None = None,
    request_hooks: list[RequestHook] | None = None,
    response_hooks: list[ResponseHook] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` ligado a un host.

    Los `headers` pasados reemplazan a los defaults con la misma clave
    (comparación case-insensitive de `httpx.Headers`).
    """

    merged = httpx.Headers(DEFAULT_HEADERS)
    if headers:
        merged.update(headers)
    return httpx.AsyncClient(
        base_url=base_url,
        timeout=httpx.Timeout(timeout_seconds),
        headers=merged,
        follow_redirects=True,
        event_hooks={
            "request": list(request_hooks or []),
            "response": list(response_hooks or []),
        },
        transport=transport,
    )
