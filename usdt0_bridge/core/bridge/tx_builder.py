"""
Transaction builder for USDT0 bridge calls.
"""

from typing import Optional

from .constants import ERC4337_FEE_BUFFER
from .contracts import Erc20Contract, OftContract, TransactionValueHelperContract
from .models import BridgeTransaction, BridgeTransactions, MessagingFee, SendParam


def buffered_approval_amount(amount: int, bridge_fee: int) -> int:
    """amount + ceil(bridge_fee * 1.1), in integer arithmetic."""
    numerator, denominator = ERC4337_FEE_BUFFER
    return amount + -(-bridge_fee * numerator // denominator)


class BridgeTransactionBuilder:
    """
    Builds the approve + send call pair for each account kind.

    Handles:
    - Standard accounts: approve the OFT, send through the OFT paying in native
    - ERC-4337 accounts: approve the value helper, send through the helper
      paying the fee in tokens
    """

    @staticmethod
    def build_erc20_approve(
        token_address: str,
        spender_address: str,
        amount: int,
        owner_address: Optional[str] = None,
    ) -> BridgeTransaction:
        """
        Build an ERC20 approval transaction.

        Args:
            token_address: The ERC20 token contract
            spender_address: The address being approved to spend
            amount: The exact amount to approve
            owner_address: The token owner, for standard accounts

        Returns:
            BridgeTransaction ready for the wallet
        """
        token = Erc20Contract(token_address)
        return BridgeTransaction(
            to=token.address,
            value=0,
            data=token.encode_approve(spender_address, amount),
            from_address=owner_address,
        )

    @staticmethod
    def build_standard(
        token_address: str,
        contract: OftContract,
        send_param: SendParam,
        messaging_fee: MessagingFee,
        owner_address: str,
    ) -> BridgeTransactions:
        """
        Build approve + OFT send for an externally-owned account.

        The approval is for exactly ``amount_ld``; the send attaches the native
        fee as value and refunds any excess to the owner.
        """
        fee = MessagingFee(native_fee=messaging_fee.native_fee, lz_token_fee=0)

        approve_tx = BridgeTransactionBuilder.build_erc20_approve(
            token_address=token_address,
            spender_address=contract.address,
            amount=send_param.amount_ld,
            owner_address=owner_address,
        )
        send_tx = BridgeTransaction(
            to=contract.address,
            value=fee.native_fee,
            data=contract.encode_send(send_param, fee, owner_address),
            from_address=owner_address,
        )

        return BridgeTransactions(
            approve_tx=approve_tx,
            send_tx=send_tx,
            bridge_fee=fee.native_fee,
            messaging_fee=fee,
        )

    @staticmethod
    def build_bundled(
        token_address: str,
        contract: OftContract,
        helper: TransactionValueHelperContract,
        send_param: SendParam,
        messaging_fee: MessagingFee,
        bridge_fee: int,
    ) -> BridgeTransactions:
        """
        Build approve + helper send for an ERC-4337 account.

        The helper pulls ``amount_ld`` plus the token-denominated fee, so the
        approval carries a 10% buffer over the quoted fee.
        """
        fee = MessagingFee(native_fee=messaging_fee.native_fee, lz_token_fee=0)

        approve_tx = BridgeTransactionBuilder.build_erc20_approve(
            token_address=token_address,
            spender_address=helper.address,
            amount=buffered_approval_amount(send_param.amount_ld, bridge_fee),
        )
        send_tx = BridgeTransaction(
            to=helper.address,
            value=0,
            data=helper.encode_send(contract.address, send_param, fee),
        )

        return BridgeTransactions(
            approve_tx=approve_tx,
            send_tx=send_tx,
            bridge_fee=bridge_fee,
            messaging_fee=fee,
        )
