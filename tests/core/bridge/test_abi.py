"""
Tests for ABI fragments and calldata helpers.
"""

import pytest

from usdt0_bridge.core.bridge.abi import (
    ERC20_APPROVE,
    OFT_QUOTE_SEND,
    OFT_SEND,
    OFT_TOKEN,
    TRANSACTION_VALUE_HELPER_QUOTE_SEND,
    TRANSACTION_VALUE_HELPER_SEND,
    function_by_selector,
    selector_from_signature,
)


@pytest.mark.parametrize(
    "fn,selector",
    [
        (ERC20_APPROVE, "0x095ea7b3"),
        (OFT_TOKEN, "0xfc0c546a"),
        (OFT_SEND, "0xc7c7f5b3"),
        (TRANSACTION_VALUE_HELPER_SEND, "0x11bbdd14"),
    ],
)
def test_known_selectors(fn, selector):
    assert fn.selector == selector


def test_selector_from_signature():
    assert selector_from_signature("transfer(address,uint256)") == "0xa9059cbb"


def test_quote_send_variants_have_distinct_selectors():
    assert OFT_QUOTE_SEND.selector != TRANSACTION_VALUE_HELPER_QUOTE_SEND.selector


def test_approve_calldata():
    data = ERC20_APPROVE.encode_call("0x6C96dE32CEa08842dcc4058c14d3aaAD7Fa41dee", 100)

    assert data == (
        "0x095ea7b3"
        "0000000000000000000000006c96de32cea08842dcc4058c14d3aaad7fa41dee"
        "0000000000000000000000000000000000000000000000000000000000000064"
    )


def test_decode_call_returns_arguments():
    data = ERC20_APPROVE.encode_call("0x6C96dE32CEa08842dcc4058c14d3aaAD7Fa41dee", 11_100)
    spender, amount = ERC20_APPROVE.decode_call(data)

    assert spender.lower() == "0x6c96de32cea08842dcc4058c14d3aaad7fa41dee"
    assert amount == 11_100


def test_decode_call_rejects_other_selector():
    with pytest.raises(ValueError):
        OFT_TOKEN.decode_call(ERC20_APPROVE.encode_call("0x6C96dE32CEa08842dcc4058c14d3aaAD7Fa41dee", 1))


def test_encode_call_checks_arity():
    with pytest.raises(ValueError):
        ERC20_APPROVE.encode_call("0x6C96dE32CEa08842dcc4058c14d3aaAD7Fa41dee")


def test_decode_output_rejects_empty_result():
    with pytest.raises(ValueError):
        OFT_TOKEN.decode_output("0x")


def test_function_by_selector():
    data = OFT_TOKEN.encode_call()
    assert data == "0xfc0c546a"
    assert function_by_selector(data, [ERC20_APPROVE, OFT_TOKEN]) == OFT_TOKEN

    with pytest.raises(KeyError):
        function_by_selector("0xdeadbeef", [ERC20_APPROVE, OFT_TOKEN])
