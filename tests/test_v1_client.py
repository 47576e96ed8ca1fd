"""Golden requests del cliente V1 (Telegram bot token)."""

from __future__ import annotations

import pytest

from accountkit import AccountKit, HttpError, MintWowTokenRequest, SolanaNetwork, UserOperationCall
from tests.conftest import ADDRESSES_PAYLOAD, TEST_API_KEY, RecordingTransport, request_json, request_params

BOT_TOKEN = "123456:bot-token"


def _assert_v1_auth(recorder: RecordingTransport) -> None:
    headers = recorder.last.headers
    assert headers["X-API-KEY"] == TEST_API_KEY
    assert headers["X-TG-BOT-TOKEN"] == BOT_TOKEN
    assert "X-ACCESS-TOKEN" not in headers
    assert "platform" not in request_params(recorder.last)


@pytest.mark.asyncio
async def test_get_smart_accounts(kit: AccountKit, recorder: RecordingTransport) -> None:
    recorder.respond_with(200, ADDRESSES_PAYLOAD)

    result = await kit.v1.telegram_bot_get_smart_accounts(BOT_TOKEN)

    sent = recorder.last
    assert sent.method == "GET"
    assert sent.url.path == "/accountkit/v1/telegrambot/accounts"
    assert request_params(sent) == {}
    _assert_v1_auth(recorder)
    assert result.data == ADDRESSES_PAYLOAD
    assert result.status == 200


@pytest.mark.asyncio
async def test_submit_solana_transaction(kit: AccountKit, recorder: RecordingTransport) -> None:
    recorder.respond_with(200, {"signature": "5h2sig"})

    result = await kit.v1.telegram_bot_submit_solana_transaction(BOT_TOKEN, "AQID", SolanaNetwork.SOLANA_MAINNET)

    sent = recorder.last
    assert sent.method == "POST"
    assert sent.url.path == "/accountkit/v1/telegrambot/solana/submitTransaction"
    assert request_params(sent) == {"network": "SOL"}
    assert request_json(sent) == {"serializedTransactionBase64": "AQID"}
    _assert_v1_auth(recorder)
    assert result.data == {"signature": "5h2sig"}


@pytest.mark.asyncio
async def test_get_solana_transaction_response(kit: AccountKit, recorder: RecordingTransport) -> None:
    await kit.v1.telegram_bot_get_solana_transaction_response(BOT_TOKEN, "5h2sig", "SOL_DEVNET")

    sent = recorder.last
    assert sent.method == "GET"
    assert sent.url.path == "/accountkit/v1/telegrambot/solana/transactionResponse"
    assert request_params(sent) == {"network": "SOL_DEVNET", "txSignatureBase64": "5h2sig"}
    assert sent.content == b""
    _assert_v1_auth(recorder)


@pytest.mark.asyncio
async def test_submit_evm_user_operation(kit: AccountKit, recorder: RecordingTransport) -> None:
    recorder.respond_with(200, {"userOperationHash": "0xhash", "chainId": 84532})
    user_op = UserOperationCall(target="0x0000000000000000000000000000000000000001", calldata="0x")

    result = await kit.v1.telegram_bot_submit_evm_user_operation(BOT_TOKEN, user_op, 84532)

    sent = recorder.last
    assert sent.method == "POST"
    assert sent.url.path == "/accountkit/v1/telegrambot/evm/submitUserOperation"
    assert request_params(sent) == {"chainId": "84532"}
    assert request_json(sent) == {"target": "0x0000000000000000000000000000000000000001", "calldata": "0x"}
    _assert_v1_auth(recorder)
    assert result.data["userOperationHash"] == "0xhash"


@pytest.mark.asyncio
async def test_submit_evm_user_operation_from_mapping(kit: AccountKit, recorder: RecordingTransport) -> None:
    await kit.v1.telegram_bot_submit_evm_user_operation(BOT_TOKEN, {"target": "0x1", "calldata": "0xab"}, 8453)

    assert request_json(recorder.last) == {"target": "0x1", "calldata": "0xab"}


@pytest.mark.asyncio
async def test_get_evm_user_operation_receipt(kit: AccountKit, recorder: RecordingTransport) -> None:
    receipt = {
        "userOpHash": "0xhash",
        "entryPoint": "0x0000000071727De22E5E9d8BAf0edAc6f37da032",
        "sender": "0x112dce5153F0Fc8EbFE6738A9d326AC3be89B419",
        "nonce": "0x1",
        "paymaster": "0x0000000000000000000000000000000000000000",
        "actualGasCost": "0x10",
        "actualGasUsed": "0x20",
        "success": True,
        "logs": [],
        "receipt": {"transactionHash": "0xtx", "from": "0xbundler", "status": "0x1", "logs": []},
    }
    recorder.respond_with(200, receipt)

    result = await kit.v1.telegram_bot_get_evm_user_operation_receipt(BOT_TOKEN, "0xhash", 84532)

    sent = recorder.last
    assert sent.method == "GET"
    assert sent.url.path == "/accountkit/v1/telegrambot/evm/userOperationReceipt"
    assert request_params(sent) == {"chainId": "84532", "userOperationHash": "0xhash"}
    _assert_v1_auth(recorder)
    assert result.data == receipt


@pytest.mark.asyncio
async def test_execute_lit_action(kit: AccountKit, recorder: RecordingTransport) -> None:
    recorder.respond_with(200, {"success": True, "response": "signed", "logs": ""})

    result = await kit.v1.execute_lit_action(BOT_TOKEN, "QmActionHash", {"toSign": [1, 2, 3]}, 8453)

    sent = recorder.last
    assert sent.method == "POST"
    assert sent.url.path == "/accountkit/v1/telegrambot/executeActionUsingPKP"
    assert request_params(sent) == {"chainId": "8453"}
    assert request_json(sent) == {"actionIpfs": "QmActionHash", "actionJsParams": {"toSign": [1, 2, 3]}}
    _assert_v1_auth(recorder)
    assert result.data["response"] == "signed"


@pytest.mark.asyncio
async def test_mint_wow_token(kit: AccountKit, recorder: RecordingTransport) -> None:
    token = MintWowTokenRequest(name="Collab Token", symbol="CLB", token_uri="ipfs://meta")

    await kit.v1.mint_wow_token(BOT_TOKEN, token, 8453)

    sent = recorder.last
    assert sent.method == "POST"
    assert sent.url.path == "/accountkit/v1/telegrambot/wow/mint"
    assert request_params(sent) == {"chainId": "8453"}
    assert request_json(sent) == {"name": "Collab Token", "symbol": "CLB", "tokenURI": "ipfs://meta"}
    _assert_v1_auth(recorder)


@pytest.mark.asyncio
async def test_no_local_validation_of_arguments(kit: AccountKit, recorder: RecordingTransport) -> None:
    recorder.respond_with(400, {"error": "Invalid network"})

    with pytest.raises(HttpError) as exc_info:
        await kit.v1.telegram_bot_submit_solana_transaction(BOT_TOKEN, "not-base64!", "NOT_A_NETWORK")

    assert request_params(recorder.last) == {"network": "NOT_A_NETWORK"}
    assert exc_info.value.status == 400
