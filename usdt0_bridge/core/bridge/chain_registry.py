"""Static registry of the chains reachable through the USDT0 OFT mesh.

Each chain maps to the bridge contracts deployed on it, its LayerZero endpoint
id and its native chain id. The table is built once at import time and exposed
through read-only mappings.

Usage:
    entry = get_chain("arbitrum")
    entry.eid                                # 30110
    name, entry = resolve_by_chain_id(1)     # ("ethereum", ChainEntry(...))
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from .errors import UnsupportedChainError


class ChainFamily(str, Enum):
    """Address family of a chain, which drives recipient encoding."""

    EVM = "evm"
    TON = "ton"
    TRON = "tron"


class BridgeContractKind(str, Enum):
    """Kinds of bridge contract, in probe priority order."""

    OFT = "oft"                   # USDT0 OFT adapter
    LEGACY_MESH = "legacy_mesh"   # Legacy mesh (USDT0 <-> TON/TRON)
    XAUT_OFT = "xaut_oft"         # XAUt0 OFT adapter


PROBE_ORDER: Tuple[BridgeContractKind, ...] = (
    BridgeContractKind.OFT,
    BridgeContractKind.LEGACY_MESH,
    BridgeContractKind.XAUT_OFT,
)


@dataclass(frozen=True)
class ChainEntry:
    """Static configuration for one chain."""

    name: str
    eid: int
    chain_id: int
    family: ChainFamily = ChainFamily.EVM
    contracts: Mapping[BridgeContractKind, str] = field(default_factory=dict)
    transaction_value_helper: Optional[str] = None

    def contract_address(self, kind: BridgeContractKind) -> Optional[str]:
        return self.contracts.get(kind)

    @property
    def is_evm(self) -> bool:
        return self.family == ChainFamily.EVM

    @property
    def supports_erc4337(self) -> bool:
        return self.transaction_value_helper is not None


def _entry(
    name: str,
    *,
    eid: int,
    chain_id: int,
    family: ChainFamily = ChainFamily.EVM,
    oft: Optional[str] = None,
    legacy_mesh: Optional[str] = None,
    xaut_oft: Optional[str] = None,
    transaction_value_helper: Optional[str] = None,
) -> ChainEntry:
    contracts: Dict[BridgeContractKind, str] = {}
    for kind, address in (
        (BridgeContractKind.OFT, oft),
        (BridgeContractKind.LEGACY_MESH, legacy_mesh),
        (BridgeContractKind.XAUT_OFT, xaut_oft),
    ):
        if address:
            contracts[kind] = address
    return ChainEntry(
        name=name,
        eid=eid,
        chain_id=chain_id,
        family=family,
        contracts=MappingProxyType(contracts),
        transaction_value_helper=transaction_value_helper,
    )


_CHAINS: Dict[str, ChainEntry] = {
    entry.name: entry
    for entry in (
        _entry(
            "ethereum",
            oft="0x6C96dE32CEa08842dcc4058c14d3aaAD7Fa41dee",
            legacy_mesh="0x811ed79dB9D34E83BDB73DF6c3e07961Cfb0D5c0",
            xaut_oft="0xb9c2321BB7D0Db468f570D10A424d1Cc8EFd696C",
            eid=30_101,
            chain_id=1,
        ),
        _entry(
            "arbitrum",
            oft="0x14E4A1B13bf7F943c8ff7C51fb60FA964A298D92",
            legacy_mesh="0x238A52455a1EF6C987CaC94b28B4081aFE50ba06",
            xaut_oft="0xf40542a7B66AD7C68C459EE3679635D2fDB6dF39",
            transaction_value_helper="0xa90f03c856D01F698E7071B393387cd75a8a319A",
            eid=30_110,
            chain_id=42_161,
        ),
        _entry(
            "polygon",
            xaut_oft="0x5421Cf4288d8007D3c43AC4246eaFCe5b049e352",
            eid=30_109,
            chain_id=137,
        ),
        _entry(
            "berachain",
            oft="0x779Ded0c9e1022225f8E0630b35a9b54bE713736",
            eid=30_362,
            chain_id=80_094,
        ),
        _entry(
            "ink",
            oft="0x0200C29006150606B650577BBE7B6248F58470c1",
            eid=30_339,
            chain_id=57_073,
        ),
        _entry("ton", family=ChainFamily.TON, eid=30_343, chain_id=30_343),
        _entry("tron", family=ChainFamily.TRON, eid=30_420, chain_id=728_126_428),
    )
}

CHAINS: Mapping[str, ChainEntry] = MappingProxyType(_CHAINS)

_CHAIN_ID_TO_NAME: Mapping[int, str] = MappingProxyType(
    {entry.chain_id: name for name, entry in _CHAINS.items()}
)


def _normalize(name: str) -> str:
    return name.strip().lower() if isinstance(name, str) else ""


def lookup_chain(name: str) -> Optional[ChainEntry]:
    """Look up a chain by name. Returns None if not found."""
    return CHAINS.get(_normalize(name))


def get_chain(name: str) -> ChainEntry:
    """Look up a target chain by name, raising if it is not registered."""
    entry = lookup_chain(name)
    if entry is None:
        raise UnsupportedChainError.for_target(name)
    return entry


def resolve_by_chain_id(chain_id: int) -> Optional[Tuple[str, ChainEntry]]:
    """Find the chain registered under a native chain id."""
    name = _CHAIN_ID_TO_NAME.get(chain_id)
    if name is None:
        return None
    return name, CHAINS[name]


def get_source_chain(chain_id: int) -> Tuple[str, ChainEntry]:
    """Resolve the chain a wallet is connected to, raising if it is not registered."""
    resolved = resolve_by_chain_id(chain_id)
    if resolved is None:
        raise UnsupportedChainError.for_source(chain_id)
    return resolved


def supported_chains() -> List[str]:
    """Names of all registered chains, in registry order."""
    return list(CHAINS.keys())


__all__ = [
    "ChainFamily",
    "BridgeContractKind",
    "PROBE_ORDER",
    "ChainEntry",
    "CHAINS",
    "lookup_chain",
    "get_chain",
    "resolve_by_chain_id",
    "get_source_chain",
    "supported_chains",
]
