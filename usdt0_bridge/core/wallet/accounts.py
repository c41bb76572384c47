"""
Wallet account interfaces consumed by bridge protocols.

Key management, signing and submission live in the wallet implementations;
the bridge core only needs an address, a fee simulation and a way to submit.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar, List, Optional

from ..bridge.models import BridgeTransaction
from .models import (
    AccountKind,
    Erc4337TransactionConfig,
    Erc4337WalletConfig,
    EvmWalletConfig,
    TransactionQuote,
    TransactionSendResult,
)


class WalletAccountReadOnlyEvm(ABC):
    """Read-only EOA: can report its address and simulate transactions."""

    kind: ClassVar[AccountKind] = AccountKind.READ_ONLY_STANDARD

    def __init__(self, config: Optional[EvmWalletConfig] = None) -> None:
        self.config = config or EvmWalletConfig()

    @abstractmethod
    async def get_address(self) -> str:
        pass

    @abstractmethod
    async def quote_send_transaction(self, tx: BridgeTransaction) -> TransactionQuote:
        pass


class WalletAccountEvm(WalletAccountReadOnlyEvm):
    """EOA that can sign and submit transactions."""

    kind: ClassVar[AccountKind] = AccountKind.STANDARD

    @abstractmethod
    async def send_transaction(self, tx: BridgeTransaction) -> TransactionSendResult:
        pass


class WalletAccountReadOnlyEvmErc4337(ABC):
    """Read-only ERC-4337 smart account: simulates bundled user operations."""

    kind: ClassVar[AccountKind] = AccountKind.READ_ONLY_ABSTRACTED

    def __init__(self, config: Optional[Erc4337WalletConfig] = None) -> None:
        self.config = config or Erc4337WalletConfig()

    @abstractmethod
    async def get_address(self) -> str:
        pass

    @abstractmethod
    async def quote_send_transaction(
        self,
        txs: List[BridgeTransaction],
        config: Optional[Erc4337TransactionConfig] = None,
    ) -> TransactionQuote:
        pass


class WalletAccountEvmErc4337(WalletAccountReadOnlyEvmErc4337):
    """ERC-4337 smart account that submits bundled user operations."""

    kind: ClassVar[AccountKind] = AccountKind.ABSTRACTED

    @abstractmethod
    async def send_transaction(
        self,
        txs: List[BridgeTransaction],
        config: Optional[Erc4337TransactionConfig] = None,
    ) -> TransactionSendResult:
        pass


def account_kind(account: object) -> Optional[AccountKind]:
    """Return the kind of a wallet account, or None if it is not one we know."""
    kind = getattr(account, "kind", None)
    return kind if isinstance(kind, AccountKind) else None


__all__ = [
    "WalletAccountReadOnlyEvm",
    "WalletAccountEvm",
    "WalletAccountReadOnlyEvmErc4337",
    "WalletAccountEvmErc4337",
    "account_kind",
]
