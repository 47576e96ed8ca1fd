"""accountkit - SDK asíncrono para el API de Account Kit (Collab.Land).

Capas:
- core: configuración, auth, errores y modelos (sin I/O)
- adapters: transporte httpx y clientes V1/V2
- cli: interfaz de línea de comandos (Typer + Rich)
"""

from accountkit.client import AccountKit
from accountkit.core.domain import (
    ApiResponse,
    Environment,
    MintWowTokenRequest,
    Platform,
    PlatformSubmitUserOperationsRequest,
    SolanaNetwork,
    UserOperationCall,
)
from accountkit.core.errors import AccountKitError, ConfigurationError, HttpError, NetworkError

__version__ = "0.2.0"
__all__ = [
    "AccountKit",
    "AccountKitError",
    "ApiResponse",
    "ConfigurationError",
    "Environment",
    "HttpError",
    "MintWowTokenRequest",
    "NetworkError",
    "Platform",
    "PlatformSubmitUserOperationsRequest",
    "SolanaNetwork",
    "UserOperationCall",
]
