"""USDT0 bridge protocol components."""

from typing import TYPE_CHECKING

from .errors import (
    BridgeError,
    BridgeTimeoutError,
    ErrorCategory,
    FeeExceededError,
    InvalidRecipientError,
    InvalidTargetError,
    NoProviderError,
    UnsupportedAccountTypeError,
    UnsupportedChainError,
    UnsupportedOperationError,
    UnsupportedTokenError,
)
from .models import (
    BridgeCallConfig,
    BridgeOptions,
    BridgeProtocolConfig,
    BridgeQuote,
    BridgeResult,
    BridgeTransaction,
)

if TYPE_CHECKING:  # pragma: no cover
    from .manager import Usdt0ProtocolEvm

__all__ = [
    "BridgeCallConfig",
    "BridgeOptions",
    "BridgeProtocolConfig",
    "BridgeQuote",
    "BridgeResult",
    "BridgeTransaction",
    "BridgeError",
    "BridgeTimeoutError",
    "ErrorCategory",
    "FeeExceededError",
    "InvalidRecipientError",
    "InvalidTargetError",
    "NoProviderError",
    "UnsupportedAccountTypeError",
    "UnsupportedChainError",
    "UnsupportedOperationError",
    "UnsupportedTokenError",
    "Usdt0ProtocolEvm",
]


def __getattr__(name: str):  # pragma: no cover - simple thunk
    if name == "Usdt0ProtocolEvm":
        from .manager import Usdt0ProtocolEvm as _Usdt0ProtocolEvm

        return _Usdt0ProtocolEvm
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
