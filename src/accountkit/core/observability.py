"""Canal de observabilidad del SDK.

Todos los loggers viven bajo el namespace `accountkit` (p.ej.
`accountkit.http`). Una librería no configura handlers por su cuenta: solo
`enable_debug_logging()` lo hace, y la fachada la invoca cuando se construye
con `debug=True`.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

LOGGER_NAMESPACE = "accountkit"


def get_logger(name: str) -> logging.Logger:
    """Logger hijo del namespace `accountkit`."""

    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def enable_debug_logging(level: int = logging.DEBUG) -> logging.Logger:
    """Activa las trazas del SDK con un `RichHandler`. Idempotente."""

    logger = logging.getLogger(LOGGER_NAMESPACE)
    logger.setLevel(level)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(rich_tracebacks=True, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
    return logger
