"""Transporte HTTP y normalización de respuestas.

`HttpTransport` es el único punto que habla con httpx:
- host, timeout y headers por defecto fijos desde la construcción;
- headers por llamada con precedencia sobre los defaults;
- clasificación de fallos: `NetworkError` (sin respuesta) o `HttpError`
  (status fuera de 2xx);
- trazas de debug mediante event hooks, con headers redactados.

Cada request abre su propio `httpx.AsyncClient`, así que no hay estado
mutable compartido entre llamadas concurrentes. No hay reintentos.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from typing import Any

import httpx

from accountkit.adapters.http_client import build_async_client
from accountkit.core.auth import ApiKeyAuth, AuthContext, HeaderRedactor, compose_auth
from accountkit.core.config import ClientConfiguration
from accountkit.core.domain.enums import enum_value
from accountkit.core.domain.models import ApiResponse, encode_body
from accountkit.core.errors import HttpError, NetworkError
from accountkit.core.observability import get_logger

logger = get_logger("http")


def parse_body(response: httpx.Response) -> Any:
    """JSON si se puede parsear; si no, texto; `None` si no hay cuerpo."""

    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def raise_for_status(response: httpx.Response) -> None:
    """Lanza `HttpError` si el status no es 2xx. El body remoto viaja tal cual."""

    if response.is_success:
        return
    request = response.request
    raise HttpError(
        f"{request.method} {request.url.path} returned HTTP {response.status_code}",
        status=response.status_code,
        headers=dict(response.headers),
        body=parse_body(response),
    )


def to_api_response(response: httpx.Response) -> ApiResponse[Any]:
    """Envuelve una respuesta httpx en `ApiResponse`, sin transformar `data`."""

    raise_for_status(response)
    return ApiResponse(
        data=parse_body(response),
        status=response.status_code,
        headers=dict(response.headers),
    )


def _clean_params(params: Mapping[str, Any] | None) -> dict[str, Any]:
    if not params:
        return {}
    return {key: enum_value(value) for key, value in params.items() if value is not None}


def _raw_headers(headers: httpx.Headers) -> dict[str, str]:
    # Conserva el casing original de los nombres para los logs.
    encoding = headers.encoding
    return {key.decode(encoding): value.decode(encoding) for key, value in headers.raw}


def _request_body(request: httpx.Request) -> Any:
    content = request.content
    if not content:
        return None
    try:
        return json.loads(content)
    except ValueError:
        return content.decode("utf-8", errors="replace")


class HttpTransport:
    """Ejecutor de requests ligado a un host, timeout y headers fijos."""

    def __init__(
        self,
        base_url: str,
        timeout_ms: int,
        default_headers: Mapping[str, str] | None = None,
        *,
        debug: bool = False,
        redactor: HeaderRedactor | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_ms = timeout_ms
        self._default_headers = dict(default_headers or {})
        self._debug = debug
        self._redactor = redactor or HeaderRedactor()
        self._transport = transport

    @classmethod
    def from_configuration(
        cls,
        config: ClientConfiguration,
        *,
        environ: Mapping[str, str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> HttpTransport:
        """Construye el transporte desde la configuración de la fachada.

        `environ` es la foto del entorno usada para redactar; por defecto una
        copia de `os.environ` tomada ahora.
        """

        snapshot = dict(os.environ) if environ is None else dict(environ)
        default_headers = {**compose_auth(ApiKeyAuth(config.api_key)).headers, **config.headers}
        return cls(
            config.resolved_base_url,
            config.timeout_ms,
            default_headers,
            debug=config.debug,
            redactor=HeaderRedactor.from_sources(snapshot, config.headers),
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout_ms(self) -> int:
        return self._timeout_ms

    @property
    def default_headers(self) -> dict[str, str]:
        return dict(self._default_headers)

    # =========================================================================
    # HTTP Methods
    # =========================================================================

    async def get(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        auth: AuthContext | None = None,
    ) -> ApiResponse[Any]:
        return await self.request("GET", path, params=params, headers=headers, auth=auth)

    async def post(
        self,
        path: str,
        body: Any = None,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        auth: AuthContext | None = None,
    ) -> ApiResponse[Any]:
        return await self.request("POST", path, body=body, params=params, headers=headers, auth=auth)

    async def put(
        self,
        path: str,
        body: Any = None,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        auth: AuthContext | None = None,
    ) -> ApiResponse[Any]:
        return await self.request("PUT", path, body=body, params=params, headers=headers, auth=auth)

    async def delete(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        auth: AuthContext | None = None,
    ) -> ApiResponse[Any]:
        return await self.request("DELETE", path, params=params, headers=headers, auth=auth)

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        auth: AuthContext | None = None,
    ) -> ApiResponse[Any]:
        """Ejecuta un request y devuelve el `ApiResponse` normalizado.

        Raises:
            NetworkError: DNS, conexión rechazada, timeout, etc.
            HttpError: respuesta con status fuera de 2xx.
        """

        material = compose_auth(auth)
        # Los params de auth van primero en la query; ante colisión gana la auth.
        call_params = {**material.params, **_clean_params(params), **material.params}
        call_headers = {**material.headers, **(headers or {})}
        json_body = encode_body(body) if body is not None else None

        async with self._build_client() as client:
            try:
                response = await client.request(
                    method,
                    path,
                    params=call_params or None,
                    headers=call_headers or None,
                    json=json_body,
                )
            except httpx.TransportError as exc:
                if self._debug:
                    logger.debug(
                        "API request failed %s %s: %s",
                        method,
                        path,
                        exc.__class__.__name__,
                        extra={"method": method, "path": path, "error": str(exc)},
                    )
                raise NetworkError(
                    f"{method} {path} failed: {exc.__class__.__name__}: {exc}",
                    method=method,
                    url=f"{self._base_url}{path}",
                ) from exc

        return to_api_response(response)

    # =========================================================================
    # Internals
    # =========================================================================

    def _build_client(self) -> httpx.AsyncClient:
        request_hooks = [self._log_request] if self._debug else []
        response_hooks = [self._log_response] if self._debug else []
        return build_async_client(
            base_url=self._base_url,
            timeout_seconds=self._timeout_ms / 1000,
            headers=self._default_headers,
            request_hooks=request_hooks,
            response_hooks=response_hooks,
            transport=self._transport,
        )

    async def _log_request(self, request: httpx.Request) -> None:
        logger.debug(
            "API request %s %s",
            request.method,
            request.url,
            extra={
                "method": request.method,
                "url": str(request.url),
                "headers": self._redactor.redact(_raw_headers(request.headers)),
                "body": _request_body(request),
            },
        )

    async def _log_response(self, response: httpx.Response) -> None:
        await response.aread()
        logger.debug(
            "API response %s %s -> %s",
            response.request.method,
            response.request.url,
            response.status_code,
            extra={
                "status": response.status_code,
                "headers": dict(response.headers),
                "body": parse_body(response),
            },
        )
