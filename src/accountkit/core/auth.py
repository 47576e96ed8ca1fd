"""Composición de headers de autenticación.

Hay dos capas que conviven en cada request:
- La API key de la fachada (`X-API-KEY`), siempre presente.
- Un contexto por llamada: bot token (V1) o platform token (V2).

El composer es una tabla fija, sin lógica adicional:

| Contexto            | Headers            | Query      |
|---------------------|--------------------|------------|
| `ApiKeyAuth`        | `X-API-KEY`        |            |
| `BotTokenAuth`      | `X-TG-BOT-TOKEN`   |            |
| `PlatformTokenAuth` | `X-ACCESS-TOKEN`   | `platform` |

En V2 la plataforma viaja como query param y no como header; es parte del
contrato del API.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Union

from accountkit.core.domain.enums import Platform, enum_value

API_KEY_HEADER = "X-API-KEY"
BOT_TOKEN_HEADER = "X-TG-BOT-TOKEN"
ACCESS_TOKEN_HEADER = "X-ACCESS-TOKEN"
PLATFORM_PARAM = "platform"

REDACTED = "********"


@dataclass(frozen=True)
class ApiKeyAuth:
    api_key: str


@dataclass(frozen=True)
class BotTokenAuth:
    token: str


@dataclass(frozen=True)
class PlatformTokenAuth:
    platform: Platform | str
    token: str


AuthContext = Union[ApiKeyAuth, BotTokenAuth, PlatformTokenAuth]


@dataclass(frozen=True)
class AuthMaterial:
    """Headers y query params que aporta un contexto de auth."""

    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, str] = field(default_factory=dict)


def compose_auth(context: AuthContext | None) -> AuthMaterial:
    """Traduce un `AuthContext` a headers/params concretos."""

    if context is None:
        return AuthMaterial()
    if isinstance(context, ApiKeyAuth):
        return AuthMaterial(headers={API_KEY_HEADER: context.api_key})
    if isinstance(context, BotTokenAuth):
        return AuthMaterial(headers={BOT_TOKEN_HEADER: context.token})
    if isinstance(context, PlatformTokenAuth):
        return AuthMaterial(
            headers={ACCESS_TOKEN_HEADER: context.token},
            params={PLATFORM_PARAM: str(enum_value(context.platform))},
        )
    raise TypeError(f"Unsupported auth context: {type(context).__name__}")


class HeaderRedactor:
    """Enmascara headers cuyo valor coincide con un valor sensible conocido.

    Los valores sensibles son una foto tomada en construcción: los valores del
    entorno inyectado más los de los headers extra configurados.

    Limitaciones conocidas (heurística, no criptografía):
    - Un valor no secreto que coincida con alguna variable de entorno también
      se enmascara.
    - Un secreto pasado como literal (ni en el entorno ni en la config) no se
      enmascara nunca.

    Solo afecta a los logs; lo que viaja por la red no se toca.
    """

    def __init__(self, sensitive_values: Iterable[str] = ()) -> None:
        self._sensitive = frozenset(value for value in sensitive_values if isinstance(value, str))

    @classmethod
    def from_sources(
        cls,
        environ: Mapping[str, str] | None = None,
        extra_headers: Mapping[str, str] | None = None,
    ) -> HeaderRedactor:
        values: list[str] = []
        values.extend((environ or {}).values())
        values.extend((extra_headers or {}).values())
        return cls(values)

    def is_sensitive(self, value: str) -> bool:
        return value in self._sensitive

    def redact(self, headers: Mapping[str, str]) -> dict[str, str]:
        return {key: REDACTED if self.is_sensitive(value) else value for key, value in headers.items()}
