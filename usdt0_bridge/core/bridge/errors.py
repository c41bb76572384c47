"""
Bridge error classification.

Every failure raised by the bridge core is a precondition or validation
failure: none of them is retried, and no transaction is submitted once one
has been raised.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(str, Enum):
    """Categories of bridge errors."""

    CHAIN = "chain"               # Unknown or invalid chain
    TOKEN = "token"               # Token has no bridge contract
    RECIPIENT = "recipient"       # Recipient cannot be encoded
    OPERATION = "operation"       # Operation not available on this chain
    ACCOUNT = "account"           # Wrong kind of wallet account
    PROVIDER = "provider"         # No network connection
    FEE = "fee"                   # Fee ceiling exceeded
    TIMEOUT = "timeout"           # Deadline expired


class BridgeError(Exception):
    """Base class for bridge errors."""

    category: ErrorCategory = ErrorCategory.OPERATION

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = details


class UnsupportedChainError(BridgeError):
    """Target or source chain is not in the registry."""

    category = ErrorCategory.CHAIN

    def __init__(
        self,
        message: str,
        *,
        chain: Optional[str] = None,
        chain_id: Optional[int] = None,
    ):
        super().__init__(message, chain=chain, chain_id=chain_id)
        self.chain = chain
        self.chain_id = chain_id

    @classmethod
    def for_target(cls, chain: str) -> "UnsupportedChainError":
        return cls(f"Target chain '{chain}' not supported.", chain=chain)

    @classmethod
    def for_source(cls, chain_id: int) -> "UnsupportedChainError":
        return cls(f"Source chain with id '{chain_id}' not supported.", chain_id=chain_id)


class InvalidTargetError(BridgeError):
    """Target chain equals the source chain."""

    category = ErrorCategory.CHAIN

    def __init__(self, chain: str):
        super().__init__(
            f"Target chain '{chain}' is the chain the wallet is connected to.",
            chain=chain,
        )
        self.chain = chain


class UnsupportedTokenError(BridgeError):
    """No bridge contract on the source chain is bound to the token."""

    category = ErrorCategory.TOKEN

    def __init__(self, token: str, chain: str):
        super().__init__(f"Token '{token}' not supported on chain '{chain}'.", token=token, chain=chain)
        self.token = token
        self.chain = chain


class UnsupportedOperationError(BridgeError):
    """Fee conversion requested on a chain without a helper contract."""

    category = ErrorCategory.OPERATION

    def __init__(self, chain_id: int):
        super().__init__(
            f"Erc-4337 account abstraction not supported on chain with id {chain_id}.",
            chain_id=chain_id,
        )
        self.chain_id = chain_id


class UnsupportedAccountTypeError(BridgeError):
    """Account is read-only or of a kind the protocol does not know."""

    category = ErrorCategory.ACCOUNT


class NoProviderError(BridgeError):
    """The wallet account is not connected to a provider."""

    category = ErrorCategory.PROVIDER


class FeeExceededError(BridgeError):
    """Total fee meets or exceeds the configured ceiling."""

    category = ErrorCategory.FEE

    def __init__(self, fee: int, bridge_fee: int, bridge_max_fee: int):
        super().__init__(
            "Exceeded maximum fee cost for bridge operation.",
            fee=fee,
            bridge_fee=bridge_fee,
            bridge_max_fee=bridge_max_fee,
        )
        self.fee = fee
        self.bridge_fee = bridge_fee
        self.bridge_max_fee = bridge_max_fee


class InvalidRecipientError(BridgeError):
    """Recipient cannot be decoded for the target chain family."""

    category = ErrorCategory.RECIPIENT

    def __init__(self, recipient: str, family: str, reason: str = ""):
        message = f"Invalid recipient '{recipient}' for {family} chains"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(f"{message}.", recipient=recipient, family=family)
        self.recipient = recipient
        self.family = family


class BridgeTimeoutError(BridgeError):
    """The operation deadline expired while waiting on the network."""

    category = ErrorCategory.TIMEOUT

    def __init__(self, operation: str, timeout_s: Optional[float] = None):
        if timeout_s is not None:
            message = f"Timed out after {timeout_s}s while waiting for {operation}."
        else:
            message = f"Timed out while waiting for {operation}."
        super().__init__(message, operation=operation, timeout_s=timeout_s)
        self.operation = operation
        self.timeout_s = timeout_s


__all__ = [
    "ErrorCategory",
    "BridgeError",
    "UnsupportedChainError",
    "InvalidTargetError",
    "UnsupportedTokenError",
    "UnsupportedOperationError",
    "UnsupportedAccountTypeError",
    "NoProviderError",
    "FeeExceededError",
    "InvalidRecipientError",
    "BridgeTimeoutError",
]
