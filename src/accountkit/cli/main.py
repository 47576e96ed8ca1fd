"""CLI `accountkit` (Typer).

Lee la configuración de `ACCOUNTKIT_*` / `.env` y delega en la fachada
`AccountKit`. Los errores del SDK se muestran en un panel y salen con código 1.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable
from typing import Any

import typer
from rich.console import Console

from accountkit.cli import doctor
from accountkit.cli.ui_components import build_addresses_table, print_error
from accountkit.client import AccountKit
from accountkit.core.domain.enums import Platform
from accountkit.core.domain.models import ApiResponse
from accountkit.core.errors import AccountKitError

app = typer.Typer(no_args_is_help=True, help="Account Kit API client.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def build_kit(debug: bool) -> AccountKit:
    """Factory de la fachada (sustituible en tests)."""

    if debug:
        return AccountKit.from_settings(debug=True)
    return AccountKit.from_settings()


def _execute(
    call: Callable[[AccountKit], Awaitable[ApiResponse[Any]]],
    *,
    debug: bool,
) -> ApiResponse[Any]:
    try:
        kit = build_kit(debug)
        return asyncio.run(call(kit))
    except AccountKitError as exc:
        print_error(_console, exc)
        raise typer.Exit(code=1) from exc


def _print_json(result: ApiResponse[Any]) -> None:
    _console.print_json(json.dumps({"status": result.status, "data": result.data}))


@app.command("calculate-address")
def calculate_address(
    platform: Platform = typer.Argument(..., help="Identity platform."),
    user_id: str = typer.Argument(..., help="Platform-specific user ID."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON response."),
    debug: bool = typer.Option(False, "--debug", help="Log HTTP traces."),
) -> None:
    """Calculate the counterfactual smart account address (V2)."""

    result = _execute(lambda kit: kit.v2.calculate_account_address(platform, user_id), debug=debug)
    if as_json or not isinstance(result.data, dict):
        _print_json(result)
        return
    _console.print(build_addresses_table(result.data, title=f"{platform.value} / {user_id}"))


@app.command("accounts")
def accounts(
    bot_token: str = typer.Option(..., "--bot-token", envvar="ACCOUNTKIT_BOT_TOKEN", help="Telegram bot token."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON response."),
    debug: bool = typer.Option(False, "--debug", help="Log HTTP traces."),
) -> None:
    """List the smart accounts of a Telegram bot (V1)."""

    result = _execute(lambda kit: kit.v1.telegram_bot_get_smart_accounts(bot_token), debug=debug)
    if as_json or not isinstance(result.data, dict):
        _print_json(result)
        return
    _console.print(build_addresses_table(result.data))


@app.command("account-details")
def account_details(
    platform: Platform = typer.Argument(..., help="Identity platform."),
    access_token: str = typer.Option(..., "--access-token", envvar="ACCOUNTKIT_ACCESS_TOKEN", help="Platform access token."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON response."),
    debug: bool = typer.Option(False, "--debug", help="Log HTTP traces."),
) -> None:
    """Show smart account details for a platform user (V2)."""

    result = _execute(lambda kit: kit.v2.get_smart_account_details(platform, access_token), debug=debug)
    if as_json or not isinstance(result.data, dict):
        _print_json(result)
        return
    _console.print(build_addresses_table(result.data))


@app.command("user-op-receipt")
def user_op_receipt(
    user_op_hash: str = typer.Argument(..., help="User operation hash."),
    chain_id: int = typer.Option(..., "--chain-id", help="EVM chain ID."),
    bot_token: str = typer.Option(..., "--bot-token", envvar="ACCOUNTKIT_BOT_TOKEN", help="Telegram bot token."),
    debug: bool = typer.Option(False, "--debug", help="Log HTTP traces."),
) -> None:
    """Fetch an EVM user operation receipt (V1)."""

    result = _execute(
        lambda kit: kit.v1.telegram_bot_get_evm_user_operation_receipt(bot_token, user_op_hash, chain_id),
        debug=debug,
    )
    _print_json(result)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
