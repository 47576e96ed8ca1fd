"""Cliente V2 del API de Account Kit (auth por platform token).

Diferencias con V1 que forman parte del contrato del API:
- El token va en `X-ACCESS-TOKEN` y la plataforma como query param `platform`.
- Las user operations viajan en lote (`{"userOps": [...]}`).
- `calculate_account_address` no requiere token y no devuelve Solana.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from accountkit.core.auth import PlatformTokenAuth
from accountkit.core.domain.enums import Platform, SolanaNetwork, enum_value
from accountkit.core.domain.models import (
    ApiResponse,
    CalculateAccountAddressResponse,
    GetSmartAccountAddressResponse,
    PlatformSubmitUserOperationsRequest,
    SubmitEvmUserOpResponse,
    SubmitSolanaTransactionResponse,
    UserOperationCall,
)
from accountkit.core.interfaces.transport import ApiTransport

V2_PREFIX = "/accountkit/v2"


class AccountKitV2Client:
    """Operaciones V2 autenticadas con tokens de Twitter, GitHub o Telegram."""

    def __init__(self, transport: ApiTransport) -> None:
        self._transport = transport

    @property
    def transport(self) -> ApiTransport:
        return self._transport

    async def get_smart_account_details(
        self,
        platform: Platform | str,
        access_token: str,
    ) -> ApiResponse[GetSmartAccountAddressResponse]:
        return await self._transport.get(
            f"{V2_PREFIX}/platform/accounts",
            auth=PlatformTokenAuth(platform, access_token),
        )

    async def calculate_account_address(
        self,
        platform: Platform | str,
        user_id: str,
    ) -> ApiResponse[CalculateAccountAddressResponse]:
        """Dirección contrafactual para un usuario de plataforma (solo API key)."""

        return await self._transport.post(
            f"{V2_PREFIX}/evm/calculateAccountAddress",
            {"platform": enum_value(platform), "userId": user_id},
        )

    async def submit_evm_user_operation(
        self,
        platform: Platform | str,
        access_token: str,
        user_ops: (
            PlatformSubmitUserOperationsRequest
            | Mapping[str, Any]
            | Sequence[UserOperationCall | Mapping[str, Any]]
        ),
        chain_id: int,
    ) -> ApiResponse[SubmitEvmUserOpResponse]:
        """Envía un lote de user operations para la smart account del usuario.

        `user_ops` puede ser el request completo (modelo o mapping con
        `userOps`) o directamente la lista de operaciones.
        """

        body: Any
        if isinstance(user_ops, (PlatformSubmitUserOperationsRequest, Mapping)):
            body = user_ops
        else:
            body = {"userOps": list(user_ops)}
        return await self._transport.post(
            f"{V2_PREFIX}/platform/evm/submitUserOperation",
            body,
            params={"chainId": chain_id},
            auth=PlatformTokenAuth(platform, access_token),
        )

    async def submit_solana_transaction(
        self,
        platform: Platform | str,
        access_token: str,
        network: SolanaNetwork | str,
        serialized_transaction_base64: str,
    ) -> ApiResponse[SubmitSolanaTransactionResponse]:
        return await self._transport.post(
            f"{V2_PREFIX}/platform/solana/submitTransaction",
            {"serializedTransactionBase64": serialized_transaction_base64},
            params={"network": network},
            auth=PlatformTokenAuth(platform, access_token),
        )
