"""OFT ``SendParam`` construction."""

from __future__ import annotations

from .chain_registry import get_chain
from .constants import EMPTY_BYTES, EMPTY_EXTRA_OPTIONS, FEE_TOLERANCE
from .models import SendParam
from .recipient import encode_recipient


def min_amount_after_tolerance(amount: int) -> int:
    """Smallest amount the destination may deliver: floor(amount * 999 / 1000)."""
    numerator, denominator = FEE_TOLERANCE
    return amount * numerator // denominator


def build_send_param(target_chain: str, recipient: str, amount: int) -> SendParam:
    """
    Build the ``SendParam`` for sending ``amount`` to ``recipient`` on ``target_chain``.

    Raises:
        UnsupportedChainError: the target chain is not registered.
        InvalidRecipientError: the recipient cannot be encoded for the target chain.
    """
    target = get_chain(target_chain)
    return SendParam(
        dst_eid=target.eid,
        to=encode_recipient(recipient, target.family),
        amount_ld=amount,
        min_amount_ld=min_amount_after_tolerance(amount),
        extra_options=EMPTY_EXTRA_OPTIONS,
        compose_msg=EMPTY_BYTES,
        oft_cmd=EMPTY_BYTES,
    )
