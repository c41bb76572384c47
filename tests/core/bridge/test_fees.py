"""
Tests for LayerZero fee quoting.
"""

import pytest

from usdt0_bridge.core.bridge.abi import OFT_QUOTE_SEND, TRANSACTION_VALUE_HELPER_QUOTE_SEND
from usdt0_bridge.core.bridge.chain_registry import get_chain
from usdt0_bridge.core.bridge.contracts import OftContract
from usdt0_bridge.core.bridge.errors import UnsupportedOperationError
from usdt0_bridge.core.bridge.fees import FeeQuoter
from usdt0_bridge.core.bridge.models import MessagingFee
from usdt0_bridge.core.bridge.send_param import build_send_param

OWNER = "0xa460AEbce0d3A4BecAd8ccf9D6D4861296c503Bd"
ARBITRUM_HELPER = "0xa90f03c856D01F698E7071B393387cd75a8a319A"


@pytest.mark.asyncio
async def test_quote_native_fee(make_provider):
    provider = make_provider(1, native_fee=10_000, lz_token_fee=3)
    contract = OftContract("0x6C96dE32CEa08842dcc4058c14d3aaAD7Fa41dee", provider)
    send_param = build_send_param("arbitrum", OWNER, 100)

    fee = await FeeQuoter(provider).quote_native_fee(contract, send_param)

    assert fee == MessagingFee(native_fee=10_000, lz_token_fee=3)
    ((to, (param, pay_in_lz_token)),) = provider.reads_of(OFT_QUOTE_SEND)
    assert to == contract.address
    assert param[0] == 30110
    assert param[2:4] == (100, 99)
    assert pay_in_lz_token is False


@pytest.mark.asyncio
async def test_quote_token_fee(make_provider):
    provider = make_provider(42161, native_fee=5_000, token_fee=10_000)
    contract = OftContract("0x14E4A1B13bf7F943c8ff7C51fb60FA964A298D92", provider)
    send_param = build_send_param("ethereum", OWNER, 100)

    quote = await FeeQuoter(provider).quote_token_fee(get_chain("arbitrum"), contract, send_param)

    assert quote.messaging_fee.native_fee == 5_000
    assert quote.bridge_fee == 10_000
    assert quote.helper.address == ARBITRUM_HELPER

    ((to, (_, fee)),) = provider.reads_of(TRANSACTION_VALUE_HELPER_QUOTE_SEND)
    assert to == ARBITRUM_HELPER
    assert fee == (5_000, 0)


@pytest.mark.asyncio
async def test_quote_token_fee_without_helper(make_provider):
    provider = make_provider(1)
    contract = OftContract("0x6C96dE32CEa08842dcc4058c14d3aaAD7Fa41dee", provider)
    send_param = build_send_param("arbitrum", OWNER, 100)

    with pytest.raises(UnsupportedOperationError) as exc:
        await FeeQuoter(provider).quote_token_fee(get_chain("ethereum"), contract, send_param)

    assert "chain with id 1" in str(exc.value)
    assert provider.calls == []
