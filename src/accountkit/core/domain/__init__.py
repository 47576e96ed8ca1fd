"""Modelos y enumeraciones del dominio.

El dominio no conoce HTTP ni la CLI: solo las formas de datos que se
intercambian con el API de Account Kit.
"""

from accountkit.core.domain.enums import Environment, Platform, SolanaNetwork
from accountkit.core.domain.models import (
    ApiResponse,
    CalculateAccountAddressResponse,
    EvmAccountAddress,
    ExecuteLitActionResponse,
    GetSmartAccountAddressResponse,
    GetSolanaTransactionResponse,
    LitActionResult,
    Log,
    MintWowTokenRequest,
    MintWowTokenResponse,
    PlatformSubmitUserOperationsRequest,
    SmartAccountAddresses,
    SolanaAccountAddress,
    SolanaTransactionResult,
    SubmitEvmUserOpResponse,
    SubmitSolanaTransactionResponse,
    TransactionReceipt,
    UserOperationCall,
    UserOperationReceipt,
    WowMintResult,
)

__all__ = [
    "ApiResponse",
    "CalculateAccountAddressResponse",
    "Environment",
    "EvmAccountAddress",
    "ExecuteLitActionResponse",
    "GetSmartAccountAddressResponse",
    "GetSolanaTransactionResponse",
    "LitActionResult",
    "Log",
    "MintWowTokenRequest",
    "MintWowTokenResponse",
    "Platform",
    "PlatformSubmitUserOperationsRequest",
    "SmartAccountAddresses",
    "SolanaAccountAddress",
    "SolanaNetwork",
    "SolanaTransactionResult",
    "SubmitEvmUserOpResponse",
    "SubmitSolanaTransactionResponse",
    "TransactionReceipt",
    "UserOperationCall",
    "UserOperationReceipt",
    "WowMintResult",
]
