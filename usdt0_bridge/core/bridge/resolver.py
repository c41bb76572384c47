"""Discovery of the bridge contract that carries a token off the source chain."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from eth_utils import is_hex_address

from ...providers.base import ChainProvider
from ..deadline import Deadline
from .chain_registry import (
    PROBE_ORDER,
    BridgeContractKind,
    ChainEntry,
    get_chain,
    get_source_chain,
)
from .contracts import OftContract
from .errors import InvalidTargetError, UnsupportedChainError, UnsupportedTokenError


@dataclass(frozen=True)
class ResolvedBridgeContract:
    """Bridge contract bound to a token on the source chain."""

    kind: BridgeContractKind
    contract: OftContract
    source_name: str
    source: ChainEntry
    target: ChainEntry

    @property
    def address(self) -> str:
        return self.contract.address


class BridgeContractResolver:
    """Resolves source chain and bridge contract for a token.

    The connected chain id is read once and memoized: the provider a wallet is
    connected to does not change during the resolver's lifetime.
    """

    def __init__(
        self,
        provider: ChainProvider,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._provider = provider
        self._logger = logger or logging.getLogger(__name__)
        self._chain_id: Optional[int] = None

    @property
    def chain_id(self) -> Optional[int]:
        """Memoized chain id, ``None`` until the first resolution."""
        return self._chain_id

    async def get_chain_id(self, *, deadline: Optional[Deadline] = None) -> int:
        if self._chain_id is None:
            deadline = deadline or Deadline.unbounded()
            chain_id = await deadline.run(self._provider.get_chain_id(), operation="eth_chainId")
            self._chain_id = int(chain_id)
            self._logger.debug("Connected chain id resolved: %s", self._chain_id)
        return self._chain_id

    async def get_source_chain(self, *, deadline: Optional[Deadline] = None) -> Tuple[str, ChainEntry]:
        chain_id = await self.get_chain_id(deadline=deadline)
        name, entry = get_source_chain(chain_id)
        if not entry.is_evm:
            raise UnsupportedChainError.for_source(chain_id)
        return name, entry

    async def resolve(
        self,
        token: str,
        target_chain: str,
        *,
        deadline: Optional[Deadline] = None,
    ) -> ResolvedBridgeContract:
        """
        Find the bridge contract on the connected chain bound to ``token``.

        Candidates are probed in the order OFT, legacy mesh, XAUt0 OFT; the OFT
        kind is skipped for non-EVM targets, which only the mesh reaches.

        Raises:
            UnsupportedChainError: unknown target or connected chain.
            InvalidTargetError: target is the connected chain.
            UnsupportedTokenError: no candidate is bound to ``token``.
        """
        target = get_chain(target_chain)
        deadline = deadline or Deadline.unbounded()

        source_name, source = await self.get_source_chain(deadline=deadline)
        if source_name == target.name:
            raise InvalidTargetError(target.name)

        if not isinstance(token, str) or not is_hex_address(token):
            raise UnsupportedTokenError(str(token), source_name)

        for kind in PROBE_ORDER:
            if kind == BridgeContractKind.OFT and not target.is_evm:
                continue

            address = source.contract_address(kind)
            if not address:
                continue

            contract = OftContract(address, self._provider)
            contract_token = await contract.token(deadline=deadline)
            if contract_token.lower() == token.lower():
                self._logger.debug(
                    "Token %s bridges from %s via %s contract %s",
                    token,
                    source_name,
                    kind.value,
                    contract.address,
                )
                return ResolvedBridgeContract(
                    kind=kind,
                    contract=contract,
                    source_name=source_name,
                    source=source,
                    target=target,
                )

        raise UnsupportedTokenError(token, source_name)
