"""Interfaces/abstracciones del Core.

Los adaptadores concretos (httpx) implementan estos contratos.
"""

from accountkit.core.interfaces.transport import ApiTransport

__all__ = ["ApiTransport"]
