"""Adaptadores de I/O (HTTP).

Implementan `accountkit.core.interfaces.ApiTransport` sobre httpx y exponen
los clientes V1/V2 del API.
"""

from accountkit.adapters.accountkit import AccountKitV1Client, AccountKitV2Client
from accountkit.adapters.transport import HttpTransport

__all__ = ["AccountKitV1Client", "AccountKitV2Client", "HttpTransport"]
