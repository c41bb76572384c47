"""
Protocol fee quoting.

Standard accounts pay the LayerZero fee in native currency, so the bridge
contract's ``quoteSend`` is enough. ERC-4337 accounts pay it in tokens through
the transaction value helper, which converts the native quote into a token
amount.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ...providers.base import ChainProvider
from ..deadline import Deadline
from .chain_registry import ChainEntry
from .contracts import OftContract, TransactionValueHelperContract
from .errors import UnsupportedOperationError
from .models import MessagingFee, SendParam


@dataclass(frozen=True)
class TokenFeeQuote:
    """Native messaging fee plus its token-denominated equivalent."""

    messaging_fee: MessagingFee
    bridge_fee: int
    helper: TransactionValueHelperContract


class FeeQuoter:
    def __init__(self, provider: ChainProvider) -> None:
        self._provider = provider

    async def quote_native_fee(
        self,
        contract: OftContract,
        send_param: SendParam,
        *,
        deadline: Optional[Deadline] = None,
    ) -> MessagingFee:
        return await contract.quote_send(send_param, False, deadline=deadline)

    def get_transaction_value_helper(self, source: ChainEntry) -> TransactionValueHelperContract:
        if not source.transaction_value_helper:
            raise UnsupportedOperationError(source.chain_id)
        return TransactionValueHelperContract(source.transaction_value_helper, self._provider)

    async def quote_token_fee(
        self,
        source: ChainEntry,
        contract: OftContract,
        send_param: SendParam,
        *,
        deadline: Optional[Deadline] = None,
    ) -> TokenFeeQuote:
        """
        Quote the bridge fee in tokens for an ERC-4337 account.

        Raises:
            UnsupportedOperationError: the source chain has no value helper.
        """
        helper = self.get_transaction_value_helper(source)
        messaging_fee = await contract.quote_send(send_param, False, deadline=deadline)
        bridge_fee = await helper.quote_send(send_param, messaging_fee, deadline=deadline)
        return TokenFeeQuote(messaging_fee=messaging_fee, bridge_fee=bridge_fee, helper=helper)
