"""Modelos del dominio (Pydantic v2 + TypedDict).

Reglas:
- Los cuerpos de *request* son modelos Pydantic: validan la forma al
  construirlos y se serializan con los nombres camelCase del API.
- Las *responses* son `TypedDict`: el tipado es solo declarativo. El SDK
  devuelve el JSON tal cual lo envía el servicio, sin validarlo en runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, TypedDict, TypeVar

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

T = TypeVar("T")


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Envoltorio uniforme de toda respuesta exitosa."""

    data: T
    status: int
    headers: dict[str, str] = field(default_factory=dict)


# =============================================================================
# Requests
# =============================================================================


class _RequestModel(BaseModel):
    # Campos desconocidos se reenvían al servicio sin tocar.
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Serializa el modelo al JSON que espera el API."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class UserOperationCall(_RequestModel):
    """Llamada EVM que el servicio empaqueta como user operation (ERC-4337)."""

    target: str = Field(
        ...,
        description="Contrato destino de la llamada.",
    )
    calldata: str = Field(
        ...,
        description="Calldata codificada en hex (`0x...`).",
    )
    value: str | None = Field(
        default=None,
        description="Valor nativo a enviar (wei, como string).",
    )


class PlatformSubmitUserOperationsRequest(_RequestModel):
    """Body de V2: las user operations viajan en lote."""

    user_ops: list[UserOperationCall] = Field(
        default_factory=list,
        alias="userOps",
        description="Operaciones a ejecutar, en orden.",
    )


class MintWowTokenRequest(_RequestModel):
    """Datos del token a mintear en Wow.XYZ."""

    name: str = Field(..., description="Nombre del token.")
    symbol: str = Field(..., description="Ticker del token.")
    token_uri: str | None = Field(
        default=None,
        alias="tokenURI",
        description="URI de metadata (IPFS o HTTP).",
    )


def encode_body(body: Any) -> Any:
    """Convierte un body (modelo, mapping o lista) en un objeto serializable a JSON."""

    if isinstance(body, _RequestModel):
        return body.to_payload()
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(body, Mapping):
        return {key: encode_body(value) for key, value in body.items()}
    if isinstance(body, (list, tuple)):
        return [encode_body(item) for item in body]
    return body


# =============================================================================
# Responses (solo tipado estático)
# =============================================================================


class EvmAccountAddress(TypedDict):
    chainId: int
    address: str


class SolanaAccountAddress(TypedDict):
    network: str
    address: str


class SmartAccountAddresses(TypedDict):
    pkpAddress: str
    evm: list[EvmAccountAddress]
    solana: list[SolanaAccountAddress]


class CalculateAccountAddressResponse(TypedDict):
    """Direcciones contrafactuales: el endpoint V2 no calcula Solana."""

    pkpAddress: str
    evm: list[EvmAccountAddress]


class SubmitSolanaTransactionResponse(TypedDict):
    signature: str


class SolanaTransactionResult(TypedDict, total=False):
    slot: int
    blockTime: int | None
    meta: dict[str, Any] | None
    transaction: dict[str, Any]
    version: int | str | None


class SubmitEvmUserOpResponse(TypedDict):
    userOperationHash: str
    chainId: int


class Log(TypedDict, total=False):
    address: str
    topics: list[str]
    data: str
    blockNumber: str
    blockHash: str
    transactionHash: str
    transactionIndex: str
    logIndex: str
    removed: bool


# `from` es palabra reservada: sintaxis funcional.
TransactionReceipt = TypedDict(
    "TransactionReceipt",
    {
        "transactionHash": str,
        "transactionIndex": str,
        "blockHash": str,
        "blockNumber": str,
        "from": str,
        "to": str | None,
        "cumulativeGasUsed": str,
        "gasUsed": str,
        "effectiveGasPrice": str,
        "contractAddress": str | None,
        "logs": list[Log],
        "logsBloom": str,
        "status": str,
        "type": str,
    },
    total=False,
)


class UserOperationReceipt(TypedDict, total=False):
    userOpHash: str
    entryPoint: str
    sender: str
    nonce: str
    paymaster: str | None
    actualGasCost: str
    actualGasUsed: str
    success: bool
    reason: str | None
    logs: list[Log]
    receipt: TransactionReceipt


class LitActionResult(TypedDict, total=False):
    success: bool
    response: Any
    logs: str
    signatures: dict[str, Any]


class WowMintResult(TypedDict, total=False):
    userOperationHash: str
    chainId: int
    tokenAddress: str


# Alias con los nombres de los endpoints.
GetSmartAccountAddressResponse = SmartAccountAddresses
GetSolanaTransactionResponse = SolanaTransactionResult
ExecuteLitActionResponse = LitActionResult
MintWowTokenResponse = WowMintResult
