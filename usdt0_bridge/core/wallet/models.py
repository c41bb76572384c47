"""
Wallet account configuration and results exchanged with the bridge core.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class AccountKind(str, Enum):
    """Closed set of wallet account kinds the bridge protocol understands."""
    STANDARD = "standard"                          # EOA, can sign
    ABSTRACTED = "abstracted"                      # ERC-4337 smart account, can sign
    READ_ONLY_STANDARD = "read_only_standard"      # EOA, quotes only
    READ_ONLY_ABSTRACTED = "read_only_abstracted"  # ERC-4337, quotes only

    @property
    def is_read_only(self) -> bool:
        return self in (AccountKind.READ_ONLY_STANDARD, AccountKind.READ_ONLY_ABSTRACTED)

    @property
    def is_abstracted(self) -> bool:
        return self in (AccountKind.ABSTRACTED, AccountKind.READ_ONLY_ABSTRACTED)


@dataclass
class EvmWalletConfig:
    """Connection settings of an EVM wallet account."""
    # RPC URL, EIP-1193 provider object, or ChainProvider
    provider: Any = None


@dataclass
class Erc4337WalletConfig(EvmWalletConfig):
    """Connection and bundler settings of an ERC-4337 wallet account."""
    chain_id: Optional[int] = None
    paymaster_token: Optional[str] = None


@dataclass
class Erc4337TransactionConfig:
    """Per-operation overrides for ERC-4337 accounts."""
    paymaster_token: Optional[str] = None


@dataclass
class TransactionQuote:
    """Simulated cost of a transaction or user operation."""
    fee: int


@dataclass
class TransactionSendResult:
    """Result of a submitted transaction or user operation."""
    hash: str
    fee: int
