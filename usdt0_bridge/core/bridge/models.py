"""Typed models used by the bridge subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from .constants import EMPTY_BYTES, EMPTY_EXTRA_OPTIONS


def _to_amount(value: Union[int, str]) -> int:
    if isinstance(value, bool):
        raise ValueError("Amount must be an integer")
    if isinstance(value, str):
        text = value.strip()
        amount = int(text, 16) if text.lower().startswith("0x") else int(text)
    elif isinstance(value, int):
        amount = value
    else:
        raise ValueError(f"Amount must be an integer, got {type(value).__name__}")
    if amount < 0:
        raise ValueError("Amount must be non-negative")
    return amount


@dataclass
class BridgeOptions:
    """Caller input for a bridge or quote operation."""

    target_chain: str
    recipient: str
    token: str
    amount: int

    def __post_init__(self) -> None:
        self.amount = _to_amount(self.amount)

    @classmethod
    def coerce(cls, value: Union["BridgeOptions", Mapping[str, Any]]) -> "BridgeOptions":
        """Accept either an instance or a mapping with snake_case or camelCase keys."""
        if isinstance(value, cls):
            return value

        def pick(*keys: str) -> Any:
            for key in keys:
                if key in value:
                    return value[key]
            raise ValueError(f"Missing bridge option '{keys[0]}'")

        return cls(
            target_chain=pick("target_chain", "targetChain"),
            recipient=pick("recipient"),
            token=pick("token"),
            amount=pick("amount"),
        )


@dataclass(frozen=True)
class SendParam:
    """OFT ``SendParam`` struct."""

    dst_eid: int
    to: bytes
    amount_ld: int
    min_amount_ld: int
    extra_options: bytes = EMPTY_EXTRA_OPTIONS
    compose_msg: bytes = EMPTY_BYTES
    oft_cmd: bytes = EMPTY_BYTES

    def as_tuple(self) -> Tuple[int, bytes, int, int, bytes, bytes, bytes]:
        return (
            self.dst_eid,
            self.to,
            self.amount_ld,
            self.min_amount_ld,
            self.extra_options,
            self.compose_msg,
            self.oft_cmd,
        )


@dataclass(frozen=True)
class MessagingFee:
    """OFT ``MessagingFee`` struct."""

    native_fee: int
    lz_token_fee: int = 0

    def as_tuple(self) -> Tuple[int, int]:
        return (self.native_fee, self.lz_token_fee)


@dataclass
class BridgeTransaction:
    """A call ready to hand to the wallet layer."""

    to: str
    data: str                                   # Encoded calldata (hex)
    value: int = 0                              # Native currency to attach
    from_address: Optional[str] = None          # Standard accounts only

    def to_dict(self) -> Dict[str, Any]:
        tx: Dict[str, Any] = {
            "to": self.to,
            "value": self.value,
            "data": self.data,
        }
        if self.from_address:
            tx["from"] = self.from_address
        return tx


@dataclass
class BridgeTransactions:
    """Approval and send calls plus the protocol fee they were built for."""

    approve_tx: BridgeTransaction
    send_tx: BridgeTransaction
    bridge_fee: int
    messaging_fee: MessagingFee

    @property
    def calls(self) -> Tuple[BridgeTransaction, BridgeTransaction]:
        return (self.approve_tx, self.send_tx)


@dataclass
class BridgeQuote:
    """Costs of a bridge operation."""

    fee: int
    bridge_fee: int

    @property
    def total(self) -> int:
        return self.fee + self.bridge_fee


@dataclass
class BridgeResult:
    """Outcome of a submitted bridge operation."""

    hash: str
    fee: int
    bridge_fee: int
    approve_hash: Optional[str] = None          # Standard accounts only

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "hash": self.hash,
            "fee": self.fee,
            "bridgeFee": self.bridge_fee,
        }
        if self.approve_hash is not None:
            result["approveHash"] = self.approve_hash
        return result


@dataclass
class BridgeProtocolConfig:
    """Configuration stored on a bridge protocol instance."""

    bridge_max_fee: Optional[int] = None
    timeout_s: Optional[float] = None


@dataclass
class BridgeCallConfig:
    """Per-call overrides for ``bridge`` and ``quote_bridge``."""

    bridge_max_fee: Optional[int] = None
    paymaster_token: Optional[str] = None       # ERC-4337 accounts only
    timeout_s: Optional[float] = None
