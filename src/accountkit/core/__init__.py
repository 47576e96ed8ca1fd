"""Core: configuración, auth, errores y modelos. Sin I/O."""

from accountkit.core.auth import (
    ApiKeyAuth,
    AuthContext,
    BotTokenAuth,
    HeaderRedactor,
    PlatformTokenAuth,
    compose_auth,
)
from accountkit.core.config import (
    AccountKitSettings,
    ClientConfiguration,
    build_configuration,
    load_settings,
)
from accountkit.core.errors import AccountKitError, ConfigurationError, HttpError, NetworkError

__all__ = [
    "AccountKitError",
    "AccountKitSettings",
    "ApiKeyAuth",
    "AuthContext",
    "BotTokenAuth",
    "ClientConfiguration",
    "ConfigurationError",
    "HeaderRedactor",
    "HttpError",
    "NetworkError",
    "PlatformTokenAuth",
    "build_configuration",
    "compose_auth",
    "load_settings",
]
