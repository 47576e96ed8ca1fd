"""Configuración de pytest: transporte httpx simulado y fachada lista para usar."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from accountkit import AccountKit, Environment

TEST_API_KEY = "test-api-key"

ADDRESSES_PAYLOAD: dict[str, Any] = {
    "pkpAddress": "0xC1709E27b4AF7bF9df9E1c711CfCaA99a958Fe9B",
    "evm": [
        {"chainId": 84532, "address": "0x112dce5153F0Fc8EbFE6738A9d326AC3be89B419"},
        {"chainId": 8453, "address": "0x112dce5153F0Fc8EbFE6738A9d326AC3be89B419"},
    ],
    "solana": [],
}


class RecordingTransport:
    """Guarda cada request y responde con lo configurado (200 `{}` por defecto)."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responder: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(200, json={})

    def respond_with(
        self,
        status_code: int = 200,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        def responder(request: httpx.Request) -> httpx.Response:
            if json_body is None:
                return httpx.Response(status_code, headers=headers)
            return httpx.Response(status_code, json=json_body, headers=headers)

        self._responder = responder

    def fail_with(self, error_factory: Callable[[httpx.Request], Exception]) -> None:
        def responder(request: httpx.Request) -> httpx.Response:
            raise error_factory(request)

        self._responder = responder

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    def mock(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


def request_json(request: httpx.Request) -> Any:
    return json.loads(request.content) if request.content else None


def request_params(request: httpx.Request) -> dict[str, str]:
    return dict(request.url.params)


@pytest.fixture
def recorder() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def make_kit(recorder: RecordingTransport) -> Callable[..., AccountKit]:
    def factory(**options: Any) -> AccountKit:
        options.setdefault("environ", {})
        options.setdefault("http_transport", recorder.mock())
        environment = options.pop("environment", Environment.QA)
        api_key = options.pop("api_key", TEST_API_KEY)
        return AccountKit(api_key, environment, **options)

    return factory


@pytest.fixture
def kit(make_kit: Callable[..., AccountKit]) -> AccountKit:
    return make_kit()
