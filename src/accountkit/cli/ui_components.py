"""Componentes de UI para la CLI (Rich)."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from accountkit.core.errors import AccountKitError, HttpError


def build_addresses_table(data: Mapping[str, Any], *, title: str = "Smart Accounts") -> Table:
    """Tabla con la dirección PKP y las direcciones por cadena (EVM/Solana)."""

    table = Table(title=title)
    table.add_column("Chain", style="cyan", no_wrap=True)
    table.add_column("Network / Chain ID", style="white")
    table.add_column("Address", style="magenta")

    pkp = data.get("pkpAddress")
    if pkp:
        table.add_row("PKP", "-", str(pkp))
    for entry in data.get("evm") or []:
        table.add_row("EVM", str(entry.get("chainId", "")), str(entry.get("address", "")))
    for entry in data.get("solana") or []:
        table.add_row("Solana", str(entry.get("network", "")), str(entry.get("address", "")))
    return table


def print_error(console: Console, error: AccountKitError) -> None:
    """Panel rojo con el error; para `HttpError` incluye status y body remoto."""

    body = Text(error.message)
    if isinstance(error, HttpError):
        body.append(f"\nStatus: {error.status}", style="bold")
        if error.body is not None:
            body.append(f"\nBody: {error.body}", style="dim")
    elif error.status is None and error.details:
        body.append(f"\nDetails: {error.details}", style="dim")
    console.print(Panel(body, title=Text(type(error).__name__, style="bold red"), border_style="red"))
