"""Cliente V1 del API de Account Kit (auth por Telegram bot token).

Cada método es una tripla fija (verbo, path, auth) y delega en el transporte.
V1 envía una user operation por llamada.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from accountkit.core.auth import BotTokenAuth
from accountkit.core.domain.enums import SolanaNetwork
from accountkit.core.domain.models import (
    ApiResponse,
    ExecuteLitActionResponse,
    GetSmartAccountAddressResponse,
    GetSolanaTransactionResponse,
    MintWowTokenRequest,
    MintWowTokenResponse,
    SubmitEvmUserOpResponse,
    SubmitSolanaTransactionResponse,
    UserOperationCall,
    UserOperationReceipt,
)
from accountkit.core.interfaces.transport import ApiTransport

V1_PREFIX = "/accountkit/v1/telegrambot"


class AccountKitV1Client:
    """Operaciones V1: smart accounts, Solana, EVM, Lit Actions y Wow.XYZ."""

    def __init__(self, transport: ApiTransport) -> None:
        self._transport = transport

    @property
    def transport(self) -> ApiTransport:
        return self._transport

    async def telegram_bot_get_smart_accounts(
        self,
        bot_token: str,
    ) -> ApiResponse[GetSmartAccountAddressResponse]:
        """Direcciones de smart account del usuario asociado al bot."""

        return await self._transport.get(
            f"{V1_PREFIX}/accounts",
            auth=BotTokenAuth(bot_token),
        )

    async def telegram_bot_submit_solana_transaction(
        self,
        bot_token: str,
        serialized_transaction_base64: str,
        network: SolanaNetwork | str,
    ) -> ApiResponse[SubmitSolanaTransactionResponse]:
        """Envía una transacción Solana serializada (base64). Devuelve la firma."""

        return await self._transport.post(
            f"{V1_PREFIX}/solana/submitTransaction",
            {"serializedTransactionBase64": serialized_transaction_base64},
            params={"network": network},
            auth=BotTokenAuth(bot_token),
        )

    async def telegram_bot_get_solana_transaction_response(
        self,
        bot_token: str,
        signature: str,
        network: SolanaNetwork | str,
    ) -> ApiResponse[GetSolanaTransactionResponse]:
        return await self._transport.get(
            f"{V1_PREFIX}/solana/transactionResponse",
            params={"network": network, "txSignatureBase64": signature},
            auth=BotTokenAuth(bot_token),
        )

    async def telegram_bot_submit_evm_user_operation(
        self,
        bot_token: str,
        user_op: UserOperationCall | Mapping[str, Any],
        chain_id: int,
    ) -> ApiResponse[SubmitEvmUserOpResponse]:
        """Envía una user operation. Devuelve `{userOperationHash, chainId}`."""

        return await self._transport.post(
            f"{V1_PREFIX}/evm/submitUserOperation",
            user_op,
            params={"chainId": chain_id},
            auth=BotTokenAuth(bot_token),
        )

    async def telegram_bot_get_evm_user_operation_receipt(
        self,
        bot_token: str,
        user_op_hash: str,
        chain_id: int,
    ) -> ApiResponse[UserOperationReceipt]:
        return await self._transport.get(
            f"{V1_PREFIX}/evm/userOperationReceipt",
            params={"chainId": chain_id, "userOperationHash": user_op_hash},
            auth=BotTokenAuth(bot_token),
        )

    async def execute_lit_action(
        self,
        bot_token: str,
        action_ipfs: str,
        action_js_params: Mapping[str, Any],
        chain_id: int,
    ) -> ApiResponse[ExecuteLitActionResponse]:
        """Ejecuta una Lit Action (por hash IPFS) usando el PKP del usuario."""

        return await self._transport.post(
            f"{V1_PREFIX}/executeActionUsingPKP",
            {"actionIpfs": action_ipfs, "actionJsParams": dict(action_js_params)},
            params={"chainId": chain_id},
            auth=BotTokenAuth(bot_token),
        )

    async def mint_wow_token(
        self,
        bot_token: str,
        token_data: MintWowTokenRequest | Mapping[str, Any],
        chain_id: int,
    ) -> ApiResponse[MintWowTokenResponse]:
        return await self._transport.post(
            f"{V1_PREFIX}/wow/mint",
            token_data,
            params={"chainId": chain_id},
            auth=BotTokenAuth(bot_token),
        )
