"""
Contract ABI fragments and calldata helpers for the OFT bridge.

Static words are simple enough to hand-encode, but ``SendParam`` carries
dynamic ``bytes`` members, so the full head/tail layout is delegated to eth-abi.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Tuple

from eth_abi import decode as abi_decode
from eth_abi import encode as abi_encode
from eth_utils import keccak


SEND_PARAM_TYPE = "(uint32,bytes32,uint256,uint256,bytes,bytes,bytes)"
MESSAGING_FEE_TYPE = "(uint256,uint256)"


def _strip_0x(value: str) -> str:
    return value[2:] if value.startswith(("0x", "0X")) else value


def selector_from_signature(signature: str) -> str:
    selector = keccak(text=signature)[:4].hex()
    return f"0x{selector}"


@dataclass(frozen=True)
class ContractFunction:
    """A single ABI function: canonical input types plus decoded output types."""

    name: str
    inputs: Tuple[str, ...] = ()
    outputs: Tuple[str, ...] = ()

    @property
    def signature(self) -> str:
        return f"{self.name}({','.join(self.inputs)})"

    @property
    def selector(self) -> str:
        return selector_from_signature(self.signature)

    def encode_call(self, *args: Any) -> str:
        if len(args) != len(self.inputs):
            raise ValueError(
                f"{self.signature} expects {len(self.inputs)} arguments, got {len(args)}"
            )
        encoded = abi_encode(list(self.inputs), list(args)) if self.inputs else b""
        return self.selector + encoded.hex()

    def decode_call(self, data: str) -> Tuple[Any, ...]:
        """Decode calldata previously produced by :meth:`encode_call`."""
        if not data.lower().startswith(self.selector):
            raise ValueError(f"Calldata does not target {self.signature}")
        raw = bytes.fromhex(_strip_0x(data)[8:])
        return tuple(abi_decode(list(self.inputs), raw))

    def decode_output(self, data: str) -> Tuple[Any, ...]:
        raw = bytes.fromhex(_strip_0x(data or ""))
        if self.outputs and not raw:
            raise ValueError(f"Empty return data for {self.signature}")
        return tuple(abi_decode(list(self.outputs), raw))


ERC20_APPROVE = ContractFunction("approve", ("address", "uint256"), ("bool",))

OFT_TOKEN = ContractFunction("token", (), ("address",))
OFT_QUOTE_SEND = ContractFunction(
    "quoteSend",
    (SEND_PARAM_TYPE, "bool"),
    (MESSAGING_FEE_TYPE,),
)
OFT_SEND = ContractFunction(
    "send",
    (SEND_PARAM_TYPE, MESSAGING_FEE_TYPE, "address"),
    (f"((bytes32,uint64,{MESSAGING_FEE_TYPE}),(uint256,uint256))",),
)

TRANSACTION_VALUE_HELPER_QUOTE_SEND = ContractFunction(
    "quoteSend",
    (SEND_PARAM_TYPE, MESSAGING_FEE_TYPE),
    ("uint256",),
)
TRANSACTION_VALUE_HELPER_SEND = ContractFunction(
    "send",
    ("address", SEND_PARAM_TYPE, MESSAGING_FEE_TYPE),
    (f"((bytes32,uint64,{MESSAGING_FEE_TYPE}),(uint256,uint256))",),
)


def function_by_selector(
    selector: str,
    functions: Sequence[ContractFunction],
) -> ContractFunction:
    """Find the function a calldata selector belongs to."""
    wanted = selector.lower()[:10]
    for fn in functions:
        if fn.selector == wanted:
            return fn
    raise KeyError(f"Unknown selector {selector}")


__all__ = [
    "SEND_PARAM_TYPE",
    "MESSAGING_FEE_TYPE",
    "selector_from_signature",
    "ContractFunction",
    "ERC20_APPROVE",
    "OFT_TOKEN",
    "OFT_QUOTE_SEND",
    "OFT_SEND",
    "TRANSACTION_VALUE_HELPER_QUOTE_SEND",
    "TRANSACTION_VALUE_HELPER_SEND",
    "function_by_selector",
]
