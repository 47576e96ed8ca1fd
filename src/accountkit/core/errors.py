"""Taxonomía de errores del SDK.

Tres familias distinguibles por el llamador:
- `ConfigurationError`: en construcción, antes de cualquier request.
- `NetworkError`: no hubo respuesta (DNS, conexión, timeout). `status` es `None`.
- `HttpError`: hubo respuesta con status fuera de 2xx. El body remoto viaja tal cual.
"""

from __future__ import annotations

from typing import Any


class AccountKitError(Exception):
    """Error base del SDK."""

    status: int | None = None

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Representación serializable (útil para salida JSON de la CLI)."""

        result: dict[str, Any] = {"error": self.message}
        if self.details:
            result["details"] = self.details
        return result


class ConfigurationError(AccountKitError, ValueError):
    """Parámetro de construcción inválido o ausente."""


class NetworkError(AccountKitError):
    """La petición no llegó al servicio o no hubo respuesta dentro del timeout."""

    def __init__(self, message: str, *, method: str | None = None, url: str | None = None) -> None:
        details: dict[str, Any] = {}
        if method:
            details["method"] = method
        if url:
            details["url"] = url
        super().__init__(message, details)
        self.method = method
        self.url = url


class HttpError(AccountKitError):
    """Respuesta recibida con status no exitoso."""

    def __init__(
        self,
        message: str,
        *,
        status: int,
        headers: dict[str, str] | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.status = status
        self.headers = headers or {}
        self.body = body

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["status"] = self.status
        if self.body is not None:
            result["body"] = self.body
        return result
