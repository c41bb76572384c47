"""Shared fakes for bridge tests: an in-memory chain and wallet accounts."""

import asyncio
from typing import Any, Dict, List, Optional, Tuple
from unittest.mock import AsyncMock

import pytest
from eth_abi import encode as abi_encode
from eth_utils import to_checksum_address

from usdt0_bridge.core.bridge.abi import (
    OFT_QUOTE_SEND,
    OFT_TOKEN,
    TRANSACTION_VALUE_HELPER_QUOTE_SEND,
    ContractFunction,
    function_by_selector,
)
from usdt0_bridge.core.wallet import (
    Erc4337WalletConfig,
    EvmWalletConfig,
    TransactionQuote,
    TransactionSendResult,
    WalletAccountEvm,
    WalletAccountEvmErc4337,
    WalletAccountReadOnlyEvm,
    WalletAccountReadOnlyEvmErc4337,
)
from usdt0_bridge.providers.base import ChainProvider

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

OWNER = "0xa460AEbce0d3A4BecAd8ccf9D6D4861296c503Bd"
USDT0 = "0xFd086bC7CD5C481DCC9C85ebE478A1C0b69FCbb9"
XAUT0 = "0x40461291347e1eCbb09499F3371D3f17f10d7159"

ETHEREUM_OFT = "0x6C96dE32CEa08842dcc4058c14d3aaAD7Fa41dee"
ETHEREUM_LEGACY_MESH = "0x811ed79dB9D34E83BDB73DF6c3e07961Cfb0D5c0"
ARBITRUM_OFT = "0x14E4A1B13bf7F943c8ff7C51fb60FA964A298D92"
ARBITRUM_LEGACY_MESH = "0x238A52455a1EF6C987CaC94b28B4081aFE50ba06"
ARBITRUM_XAUT_OFT = "0xf40542a7B66AD7C68C459EE3679635D2fDB6dF39"
ARBITRUM_HELPER = "0xa90f03c856D01F698E7071B393387cd75a8a319A"

_READS = (OFT_TOKEN, OFT_QUOTE_SEND, TRANSACTION_VALUE_HELPER_QUOTE_SEND)


class FakeChainProvider(ChainProvider):
    """Answers eth_call by selector with eth-abi encoded results."""

    name = "fake"

    def __init__(
        self,
        chain_id: int,
        tokens: Optional[Dict[str, str]] = None,
        native_fee: int = 10_000,
        lz_token_fee: int = 0,
        token_fee: int = 10_000,
        delay_s: float = 0,
    ):
        self.chain_id = chain_id
        self.tokens = {
            to_checksum_address(contract): to_checksum_address(token)
            for contract, token in (tokens or {}).items()
        }
        self.native_fee = native_fee
        self.lz_token_fee = lz_token_fee
        self.token_fee = token_fee
        self.delay_s = delay_s
        self.chain_id_calls = 0
        self.calls: List[Tuple[str, ContractFunction, Tuple[Any, ...]]] = []

    async def ready(self) -> bool:
        return True

    async def health_check(self) -> Dict[str, Any]:
        return {"status": "healthy", "chainId": self.chain_id}

    async def get_chain_id(self) -> int:
        self.chain_id_calls += 1
        if self.delay_s:
            await asyncio.sleep(self.delay_s)
        return self.chain_id

    async def call(self, to: str, data: str) -> str:
        fn = function_by_selector(data, _READS)
        args = fn.decode_call(data)
        self.calls.append((to_checksum_address(to), fn, args))

        if fn == OFT_TOKEN:
            values: List[Any] = [self.tokens.get(to_checksum_address(to), ZERO_ADDRESS)]
        elif fn == OFT_QUOTE_SEND:
            values = [(self.native_fee, self.lz_token_fee)]
        else:
            values = [self.token_fee]

        return "0x" + abi_encode(list(fn.outputs), values).hex()

    def reads_of(self, fn: ContractFunction) -> List[Tuple[str, Tuple[Any, ...]]]:
        return [(to, args) for to, called, args in self.calls if called == fn]


class StandardAccount(WalletAccountEvm):
    def __init__(self, provider: Any = None, *, address: str = OWNER, quote_fee: int = 12_345):
        super().__init__(EvmWalletConfig(provider=provider))
        self.address = address
        self.quote = AsyncMock(return_value=TransactionQuote(fee=quote_fee))
        self.send = AsyncMock(
            side_effect=[
                TransactionSendResult(hash="0xapprove", fee=quote_fee),
                TransactionSendResult(hash="0xsend", fee=quote_fee),
            ]
        )

    async def get_address(self) -> str:
        return self.address

    async def quote_send_transaction(self, tx):
        return await self.quote(tx)

    async def send_transaction(self, tx):
        return await self.send(tx)


class ReadOnlyStandardAccount(WalletAccountReadOnlyEvm):
    def __init__(self, provider: Any = None, *, address: str = OWNER, quote_fee: int = 12_345):
        super().__init__(EvmWalletConfig(provider=provider))
        self.address = address
        self.quote = AsyncMock(return_value=TransactionQuote(fee=quote_fee))

    async def get_address(self) -> str:
        return self.address

    async def quote_send_transaction(self, tx):
        return await self.quote(tx)


class AbstractedAccount(WalletAccountEvmErc4337):
    def __init__(self, provider: Any = None, *, address: str = OWNER, quote_fee: int = 12_345):
        super().__init__(Erc4337WalletConfig(provider=provider))
        self.address = address
        self.quote = AsyncMock(return_value=TransactionQuote(fee=quote_fee))
        self.send = AsyncMock(return_value=TransactionSendResult(hash="0xuserop", fee=quote_fee))

    async def get_address(self) -> str:
        return self.address

    async def quote_send_transaction(self, txs, config=None):
        return await self.quote(txs, config)

    async def send_transaction(self, txs, config=None):
        return await self.send(txs, config)


class ReadOnlyAbstractedAccount(WalletAccountReadOnlyEvmErc4337):
    def __init__(self, provider: Any = None, *, address: str = OWNER, quote_fee: int = 12_345):
        super().__init__(Erc4337WalletConfig(provider=provider))
        self.address = address
        self.quote = AsyncMock(return_value=TransactionQuote(fee=quote_fee))

    async def get_address(self) -> str:
        return self.address

    async def quote_send_transaction(self, txs, config=None):
        return await self.quote(txs, config)


@pytest.fixture
def make_provider():
    """Factory for a fake chain with USDT0 bound to the OFT contracts."""

    def _make(chain_id: int = 42_161, tokens: Optional[Dict[str, str]] = None, **kwargs):
        if tokens is None:
            tokens = {
                ETHEREUM_OFT: USDT0,
                ARBITRUM_OFT: USDT0,
                ARBITRUM_LEGACY_MESH: USDT0,
                ARBITRUM_XAUT_OFT: XAUT0,
            }
        return FakeChainProvider(chain_id, tokens, **kwargs)

    return _make


@pytest.fixture
def accounts():
    """The four wallet account kinds, keyed by name."""
    return {
        "standard": StandardAccount,
        "read_only_standard": ReadOnlyStandardAccount,
        "abstracted": AbstractedAccount,
        "read_only_abstracted": ReadOnlyAbstractedAccount,
    }
