"""Tests de la CLI con la fachada apuntando a un transporte simulado."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner

from accountkit import AccountKit
from accountkit.cli import main as cli_main
from tests.conftest import ADDRESSES_PAYLOAD, RecordingTransport

runner = CliRunner()

build_kit_from_env = cli_main.build_kit


@pytest.fixture(autouse=True)
def fake_kit(monkeypatch: pytest.MonkeyPatch, make_kit: Callable[..., AccountKit]) -> None:
    monkeypatch.setattr(cli_main, "build_kit", lambda debug: make_kit(debug=debug))


def test_calculate_address_table(recorder: RecordingTransport) -> None:
    recorder.respond_with(200, ADDRESSES_PAYLOAD)

    result = runner.invoke(cli_main.app, ["calculate-address", "twitter", "44196397"])

    assert result.exit_code == 0, result.output
    assert "0xC1709E27b4AF7bF9df9E1c711CfCaA99a958Fe9B" in result.output
    assert recorder.last.url.path == "/accountkit/v2/evm/calculateAccountAddress"


def test_calculate_address_json(recorder: RecordingTransport) -> None:
    recorder.respond_with(200, {"pkpAddress": "0xabc", "evm": []})

    result = runner.invoke(cli_main.app, ["calculate-address", "github", "583231", "--json"])

    assert result.exit_code == 0, result.output
    assert '"pkpAddress": "0xabc"' in result.output
    assert '"status": 200' in result.output


def test_accounts_uses_bot_token(recorder: RecordingTransport) -> None:
    recorder.respond_with(200, ADDRESSES_PAYLOAD)

    result = runner.invoke(cli_main.app, ["accounts", "--bot-token", "123:abc"])

    assert result.exit_code == 0, result.output
    assert recorder.last.headers["X-TG-BOT-TOKEN"] == "123:abc"


def test_account_details(recorder: RecordingTransport) -> None:
    recorder.respond_with(200, ADDRESSES_PAYLOAD)

    result = runner.invoke(cli_main.app, ["account-details", "telegram", "--access-token", "tok"])

    assert result.exit_code == 0, result.output
    assert dict(recorder.last.url.params) == {"platform": "telegram"}


def test_user_op_receipt(recorder: RecordingTransport) -> None:
    recorder.respond_with(200, {"userOpHash": "0xhash", "success": True})

    result = runner.invoke(
        cli_main.app,
        ["user-op-receipt", "0xhash", "--chain-id", "8453", "--bot-token", "123:abc"],
    )

    assert result.exit_code == 0, result.output
    assert '"userOpHash": "0xhash"' in result.output


def test_http_error_exits_with_code_1(recorder: RecordingTransport) -> None:
    recorder.respond_with(404, {"error": "User not found"})

    result = runner.invoke(cli_main.app, ["calculate-address", "twitter", "invalid-user"])

    assert result.exit_code == 1
    assert "HttpError" in result.output
    assert "404" in result.output
    assert "User not found" in result.output


def test_invalid_environment_variable_shows_error_panel(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli_main, "build_kit", build_kit_from_env)
    monkeypatch.setenv("ACCOUNTKIT_API_KEY", "env-key")
    monkeypatch.setenv("ACCOUNTKIT_ENVIRONMENT", "STAGING")
    monkeypatch.delenv("ACCOUNTKIT_BASE_URL", raising=False)

    result = runner.invoke(cli_main.app, ["calculate-address", "twitter", "44196397"])

    assert result.exit_code == 1
    assert "ConfigurationError" in result.output
    assert "Traceback" not in result.output


def test_malformed_timeout_variable_shows_error_panel(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli_main, "build_kit", build_kit_from_env)
    monkeypatch.setenv("ACCOUNTKIT_API_KEY", "env-key")
    monkeypatch.setenv("ACCOUNTKIT_TIMEOUT_MS", "abc")

    result = runner.invoke(cli_main.app, ["accounts", "--bot-token", "123:abc"])

    assert result.exit_code == 1
    assert "ConfigurationError" in result.output
    assert "timeout_ms" in result.output


def test_doctor_reports_invalid_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("ACCOUNTKIT_TIMEOUT_MS", "abc")

    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 1
    assert "Settings" in result.output
    assert "FAIL" in result.output
