"""Enumeraciones compartidas por el SDK.

Todas heredan de `str` para que viajen tal cual en query params y bodies
JSON (`Platform.TWITTER` se serializa como `"twitter"`).
"""

from __future__ import annotations

from enum import Enum


class Environment(str, Enum):
    """Entorno de destino del API de Account Kit."""

    PROD = "PROD"
    QA = "QA"


class Platform(str, Enum):
    """Plataformas de identidad aceptadas por los endpoints V2."""

    TELEGRAM = "telegram"
    TWITTER = "twitter"
    GITHUB = "github"


class SolanaNetwork(str, Enum):
    """Redes Solana soportadas por el servicio remoto."""

    SOLANA_MAINNET = "SOL"
    SOLANA_DEVNET = "SOL_DEVNET"


def enum_value(value: object) -> object:
    """Devuelve el `.value` de un miembro de Enum; cualquier otro valor sin tocar.

    Los métodos del cliente aceptan tanto el Enum como el string crudo y no
    validan localmente: el servicio remoto es quien rechaza valores inválidos.
    """

    if isinstance(value, Enum):
        return value.value
    return value
