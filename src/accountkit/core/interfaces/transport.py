"""Contrato del transporte HTTP.

Reglas de diseño:
- Los clientes V1/V2 dependen de este Protocol por composición; no heredan
  de una clase base.
- Cada verbo es asíncrono y devuelve `ApiResponse` o lanza un error
  clasificado (`NetworkError` / `HttpError`).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from accountkit.core.auth import AuthContext
from accountkit.core.domain.models import ApiResponse


@runtime_checkable
class ApiTransport(Protocol):
    """Ejecutor de requests ligado a un host, headers y timeout fijos."""

    async def get(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        auth: AuthContext | None = None,
    ) -> ApiResponse[Any]:
        ...

    async def post(
        self,
        path: str,
        body: Any = None,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        auth: AuthContext | None = None,
    ) -> ApiResponse[Any]:
        ...

    async def put(
        self,
        path: str,
        body: Any = None,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        auth: AuthContext | None = None,
    ) -> ApiResponse[Any]:
        ...

    async def delete(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        auth: AuthContext | None = None,
    ) -> ApiResponse[Any]:
        ...
