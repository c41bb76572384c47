"""
USDT0 bridge protocol for EVM wallets.

Usage:
    from usdt0_bridge import Usdt0ProtocolEvm, BridgeProtocolConfig

    protocol = Usdt0ProtocolEvm(account, BridgeProtocolConfig(bridge_max_fee=10**15))
    result = await protocol.bridge({
        "target_chain": "arbitrum",
        "recipient": "0x...",
        "token": "0x...",
        "amount": 1_000_000,
    })
"""

from .core.bridge import (
    BridgeCallConfig,
    BridgeError,
    BridgeOptions,
    BridgeProtocolConfig,
    BridgeQuote,
    BridgeResult,
    BridgeTimeoutError,
    BridgeTransaction,
    FeeExceededError,
    InvalidRecipientError,
    InvalidTargetError,
    NoProviderError,
    UnsupportedAccountTypeError,
    UnsupportedChainError,
    UnsupportedOperationError,
    UnsupportedTokenError,
)
from .core.bridge.chain_registry import supported_chains
from .core.bridge.manager import Usdt0ProtocolEvm
from .core.bridge.protocol import BridgeProtocol

__version__ = "0.1.0"

__all__ = [
    "Usdt0ProtocolEvm",
    "BridgeProtocol",
    "BridgeOptions",
    "BridgeProtocolConfig",
    "BridgeCallConfig",
    "BridgeQuote",
    "BridgeResult",
    "BridgeTransaction",
    "BridgeError",
    "BridgeTimeoutError",
    "FeeExceededError",
    "InvalidRecipientError",
    "InvalidTargetError",
    "NoProviderError",
    "UnsupportedAccountTypeError",
    "UnsupportedChainError",
    "UnsupportedOperationError",
    "UnsupportedTokenError",
    "supported_chains",
]
