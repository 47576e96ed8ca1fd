"""Fachada `AccountKit`.

Un único punto de construcción: valida la configuración y crea los clientes
V1 y V2, cada uno con su propio `HttpTransport`.

Ejemplo:

    kit = AccountKit(api_key, Environment.QA, debug=True)
    result = await kit.v2.calculate_account_address(Platform.TWITTER, "44196397")
    print(result.status, result.data)
"""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from accountkit.adapters.accountkit import AccountKitV1Client, AccountKitV2Client
from accountkit.adapters.transport import HttpTransport
from accountkit.core.config import (
    AccountKitSettings,
    ClientConfiguration,
    build_configuration,
    load_settings,
)
from accountkit.core.domain.enums import Environment
from accountkit.core.observability import enable_debug_logging


class AccountKit:
    """Cliente de alto nivel con acceso versionado (`kit.v1`, `kit.v2`)."""

    def __init__(
        self,
        api_key: str,
        environment: Environment | str,
        *,
        base_url: str | None = None,
        timeout_ms: int | None = None,
        debug: bool = False,
        headers: Mapping[str, str] | None = None,
        environ: Mapping[str, str] | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            api_key: API key de Account Kit (header `X-API-KEY`).
            environment: `Environment.PROD` o `Environment.QA`.
            base_url: Override del host; gana sobre el entorno.
            timeout_ms: Timeout por request (por defecto 60000).
            debug: Emite trazas HTTP en el logger `accountkit`.
            headers: Headers extra para todas las peticiones.
            environ: Foto del entorno usada para redactar logs (por defecto `os.environ`).
            http_transport: Transporte httpx alternativo (tests).

        Raises:
            ConfigurationError: si la configuración no es válida.
        """

        self._config = build_configuration(
            api_key=api_key,
            environment=environment,
            base_url=base_url,
            timeout_ms=timeout_ms,
            debug=debug,
            headers=dict(headers) if headers is not None else None,
        )
        if self._config.debug:
            enable_debug_logging()

        self._v1 = AccountKitV1Client(
            HttpTransport.from_configuration(self._config, environ=environ, transport=http_transport)
        )
        self._v2 = AccountKitV2Client(
            HttpTransport.from_configuration(self._config, environ=environ, transport=http_transport)
        )

    @classmethod
    def from_settings(
        cls,
        settings: AccountKitSettings | None = None,
        **overrides: object,
    ) -> AccountKit:
        """Construye la fachada desde variables `ACCOUNTKIT_*` / `.env`.

        Raises:
            ConfigurationError: si las variables no son válidas o falta la API key.
        """

        if settings is None:
            settings = load_settings()
        config = settings.to_configuration()
        options: dict[str, object] = {
            "base_url": config.base_url,
            "timeout_ms": config.timeout_ms,
            "debug": config.debug,
            "headers": config.headers,
        }
        options.update(overrides)
        return cls(config.api_key, config.environment, **options)  # type: ignore[arg-type]

    @property
    def config(self) -> ClientConfiguration:
        return self._config

    @property
    def v1(self) -> AccountKitV1Client:
        return self._v1

    @property
    def v2(self) -> AccountKitV2Client:
        return self._v2
