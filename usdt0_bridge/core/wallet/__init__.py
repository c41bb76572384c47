"""
Wallet account interfaces

Usage:
    from usdt0_bridge.core.wallet import WalletAccountEvm, AccountKind

    class MyAccount(WalletAccountEvm):
        ...
"""

from .models import (
    AccountKind,
    EvmWalletConfig,
    Erc4337WalletConfig,
    Erc4337TransactionConfig,
    TransactionQuote,
    TransactionSendResult,
)

from .accounts import (
    WalletAccountReadOnlyEvm,
    WalletAccountEvm,
    WalletAccountReadOnlyEvmErc4337,
    WalletAccountEvmErc4337,
    account_kind,
)

__all__ = [
    # Models
    "AccountKind",
    "EvmWalletConfig",
    "Erc4337WalletConfig",
    "Erc4337TransactionConfig",
    "TransactionQuote",
    "TransactionSendResult",
    # Accounts
    "WalletAccountReadOnlyEvm",
    "WalletAccountEvm",
    "WalletAccountReadOnlyEvmErc4337",
    "WalletAccountEvmErc4337",
    "account_kind",
]
