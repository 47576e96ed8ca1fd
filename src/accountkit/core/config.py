"""Configuración del SDK.

Dos contratos:
- `ClientConfiguration`: lo que recibe la fachada `AccountKit`. Inmutable una
  vez construida y compartida en solo lectura por los clientes V1 y V2.
- `AccountKitSettings`: lectura desde variables de entorno (`ACCOUNTKIT_*`)
  y `.env` vía pydantic-settings. Lo usan la CLI y `AccountKit.from_settings`.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator
from pydantic.config import ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

from accountkit.core.domain.enums import Environment
from accountkit.core.errors import ConfigurationError

PROD_BASE_URL = "https://api.collab.land"
QA_BASE_URL = "https://api-qa.collab.land"
DEFAULT_TIMEOUT_MS = 60_000

_BASE_URLS: dict[Environment, str] = {
    Environment.PROD: PROD_BASE_URL,
    Environment.QA: QA_BASE_URL,
}


def resolve_base_url(environment: Environment | str, base_url: str | None = None) -> str:
    """Resuelve el host: el override explícito gana; si no, se elige por entorno."""

    if base_url:
        return base_url
    try:
        return _BASE_URLS[Environment(environment)]
    except ValueError as exc:
        raise ConfigurationError(
            f"Unknown environment {environment!r}; expected one of: PROD, QA",
            details={"environment": str(environment)},
        ) from exc


class ClientConfiguration(BaseModel):
    """Configuración de una instancia de `AccountKit`."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    api_key: str = Field(
        ...,
        min_length=1,
        description="API key enviada como `X-API-KEY` en todas las peticiones.",
    )
    # `base_url` va antes que `environment`: el validador de entorno lo consulta.
    base_url: str | None = Field(
        default=None,
        description="Override del host; si existe se usa tal cual.",
    )
    environment: Environment | str = Field(
        ...,
        description="Entorno de destino (PROD | QA). Libre si hay `base_url`.",
    )
    timeout_ms: int = Field(
        default=DEFAULT_TIMEOUT_MS,
        gt=0,
        description="Timeout por request (milisegundos).",
    )
    debug: bool = Field(
        default=False,
        description="Emite eventos de trazas HTTP en el logger `accountkit`.",
    )
    headers: dict[str, str] = Field(
        default_factory=dict,
        description="Headers extra añadidos a los defaults de cada request.",
    )

    @field_validator("environment", mode="before")
    @classmethod
    def _known_environment(cls, value: Any, info: ValidationInfo) -> Any:
        """Un entorno desconocido solo es válido si el host viene dado por `base_url`."""

        try:
            return Environment(value)
        except ValueError:
            if info.data.get("base_url"):
                return str(value)
            raise ValueError(f"Unknown environment {value!r}; expected one of: PROD, QA") from None

    @property
    def resolved_base_url(self) -> str:
        return resolve_base_url(self.environment, self.base_url)

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000


def build_configuration(**values: Any) -> ClientConfiguration:
    """Construye `ClientConfiguration` traduciendo errores de validación.

    Raises:
        ConfigurationError: si falta la API key, el entorno no es PROD/QA, etc.
    """

    # `None` significa "usar el default del modelo".
    clean = {key: value for key, value in values.items() if value is not None}
    try:
        return ClientConfiguration(**clean)
    except ValidationError as exc:
        raise _configuration_error("Invalid AccountKit configuration", exc) from exc


def load_settings(**values: Any) -> AccountKitSettings:
    """Lee `AccountKitSettings` del entorno.

    Raises:
        ConfigurationError: si alguna variable `ACCOUNTKIT_*` no es válida
            (p. ej. `ACCOUNTKIT_TIMEOUT_MS=abc`).
    """

    try:
        return AccountKitSettings(**values)
    except ValidationError as exc:
        raise _configuration_error("Invalid ACCOUNTKIT_* settings", exc) from exc


def _configuration_error(prefix: str, exc: ValidationError) -> ConfigurationError:
    fields = sorted({".".join(str(part) for part in err["loc"]) for err in exc.errors()})
    return ConfigurationError(
        f"{prefix}: {', '.join(fields)}",
        details={"errors": exc.errors(include_url=False, include_context=False, include_input=False)},
    )


class AccountKitSettings(BaseSettings):
    """Configuración desde el entorno (`ACCOUNTKIT_API_KEY`, `ACCOUNTKIT_ENVIRONMENT`, ...)."""

    model_config = SettingsConfigDict(
        env_prefix="ACCOUNTKIT_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    api_key: str | None = Field(
        default=None,
        description="API key de Account Kit.",
    )
    environment: Environment | str = Field(
        default=Environment.QA,
        description="Entorno por defecto (QA); se valida al construir la configuración.",
    )
    base_url: str | None = Field(
        default=None,
        description="Override del host del API.",
    )
    timeout_ms: int = Field(
        default=DEFAULT_TIMEOUT_MS,
        gt=0,
        description="Timeout por request (milisegundos).",
    )
    debug: bool = Field(
        default=False,
        description="Activa las trazas HTTP.",
    )

    def to_configuration(self) -> ClientConfiguration:
        if not self.api_key:
            raise ConfigurationError("ACCOUNTKIT_API_KEY environment variable not set")
        return build_configuration(
            api_key=self.api_key,
            environment=self.environment,
            base_url=self.base_url,
            timeout_ms=self.timeout_ms,
            debug=self.debug,
        )
