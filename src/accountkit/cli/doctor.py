"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from accountkit.adapters.http_client import build_async_client
from accountkit.core.auth import REDACTED
from accountkit.core.config import load_settings
from accountkit.core.domain.enums import enum_value
from accountkit.core.errors import ConfigurationError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(base_url: str, timeout_seconds: float) -> tuple[bool, str]:
    try:
        async with build_async_client(base_url=base_url, timeout_seconds=timeout_seconds) as client:
            response = await client.get("/")
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


@app.command()
def run() -> None:
    """Show the resolved configuration and check connectivity to the API host."""

    table = Table(title="AccountKit Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    try:
        settings = load_settings()
    except ConfigurationError as exc:
        table.add_row("Settings", "FAIL", exc.message)
        _console.print(table)
        raise typer.Exit(code=1)

    if settings.api_key:
        table.add_row("API key", "OK", REDACTED)
    else:
        table.add_row("API key", "MISSING", "Set ACCOUNTKIT_API_KEY")
    table.add_row("Environment", "OK", str(enum_value(settings.environment)))

    try:
        config = settings.to_configuration()
    except ConfigurationError as exc:
        table.add_row("Configuration", "FAIL", exc.message)
        _console.print(table)
        raise typer.Exit(code=1)

    base_url = config.resolved_base_url
    table.add_row("Base URL", "OK", base_url)
    table.add_row("Timeout", "OK", f"{config.timeout_ms} ms")

    ok_http, detail_http = asyncio.run(_check_http(base_url, config.timeout_seconds))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)
    if not ok_http:
        raise typer.Exit(code=1)
