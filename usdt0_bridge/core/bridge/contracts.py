"""
Minimal handles for the contracts the bridge talks to.

Reads go through a ``ChainProvider`` under the caller's ``Deadline``; writes
are only encoded here and submitted by the wallet layer.
"""

from __future__ import annotations

from typing import Any, Optional

from eth_utils import to_checksum_address

from ...providers.base import ChainProvider
from ..deadline import Deadline
from .abi import (
    ERC20_APPROVE,
    OFT_QUOTE_SEND,
    OFT_SEND,
    OFT_TOKEN,
    TRANSACTION_VALUE_HELPER_QUOTE_SEND,
    TRANSACTION_VALUE_HELPER_SEND,
    ContractFunction,
)
from .models import MessagingFee, SendParam


class _Contract:
    def __init__(self, address: str, provider: Optional[ChainProvider] = None) -> None:
        self.address = to_checksum_address(address)
        self._provider = provider

    async def _read(
        self,
        fn: ContractFunction,
        *args: Any,
        deadline: Optional[Deadline] = None,
    ) -> Any:
        if self._provider is None:
            raise RuntimeError(f"No provider attached to contract {self.address}")
        deadline = deadline or Deadline.unbounded()
        raw = await deadline.run(
            self._provider.call(self.address, fn.encode_call(*args)),
            operation=f"{fn.name}() on {self.address}",
        )
        return fn.decode_output(raw)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.address})"


class Erc20Contract(_Contract):
    def encode_approve(self, spender: str, amount: int) -> str:
        return ERC20_APPROVE.encode_call(to_checksum_address(spender), amount)


class OftContract(_Contract):
    """USDT0 / XAUt0 OFT adapter or legacy mesh contract."""

    async def token(self, *, deadline: Optional[Deadline] = None) -> str:
        (token,) = await self._read(OFT_TOKEN, deadline=deadline)
        return token

    async def quote_send(
        self,
        send_param: SendParam,
        pay_in_lz_token: bool = False,
        *,
        deadline: Optional[Deadline] = None,
    ) -> MessagingFee:
        ((native_fee, lz_token_fee),) = await self._read(
            OFT_QUOTE_SEND,
            send_param.as_tuple(),
            pay_in_lz_token,
            deadline=deadline,
        )
        return MessagingFee(native_fee=native_fee, lz_token_fee=lz_token_fee)

    def encode_send(self, send_param: SendParam, fee: MessagingFee, refund_address: str) -> str:
        return OFT_SEND.encode_call(
            send_param.as_tuple(),
            fee.as_tuple(),
            to_checksum_address(refund_address),
        )


class TransactionValueHelperContract(_Contract):
    """Helper that charges OFT fees in tokens for ERC-4337 accounts."""

    async def quote_send(
        self,
        send_param: SendParam,
        fee: MessagingFee,
        *,
        deadline: Optional[Deadline] = None,
    ) -> int:
        (total_amount,) = await self._read(
            TRANSACTION_VALUE_HELPER_QUOTE_SEND,
            send_param.as_tuple(),
            fee.as_tuple(),
            deadline=deadline,
        )
        return total_amount

    def encode_send(self, oft_address: str, send_param: SendParam, fee: MessagingFee) -> str:
        return TRANSACTION_VALUE_HELPER_SEND.encode_call(
            to_checksum_address(oft_address),
            send_param.as_tuple(),
            fee.as_tuple(),
        )
