"""Clientes versionados del API de Account Kit.

Cada versión es una tabla de métodos independiente sobre un `ApiTransport`.
"""

from accountkit.adapters.accountkit.v1 import AccountKitV1Client
from accountkit.adapters.accountkit.v2 import AccountKitV2Client

__all__ = ["AccountKitV1Client", "AccountKitV2Client"]
