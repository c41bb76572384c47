"""Base class for bridge protocols bound to a wallet account."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Union

from .models import (
    BridgeCallConfig,
    BridgeOptions,
    BridgeProtocolConfig,
    BridgeQuote,
    BridgeResult,
)

OptionsInput = Union[BridgeOptions, Mapping[str, Any]]


class BridgeProtocol(ABC):
    """Holds the wallet account and protocol configuration."""

    def __init__(self, account: Any, config: Optional[BridgeProtocolConfig] = None) -> None:
        self._account = account
        self._config = config or BridgeProtocolConfig()

    @property
    def account(self) -> Any:
        return self._account

    @property
    def config(self) -> BridgeProtocolConfig:
        return self._config

    @abstractmethod
    async def bridge(
        self,
        options: OptionsInput,
        config: Optional[BridgeCallConfig] = None,
    ) -> BridgeResult:
        """Bridge a token to a different blockchain."""
        pass

    @abstractmethod
    async def quote_bridge(
        self,
        options: OptionsInput,
        config: Optional[BridgeCallConfig] = None,
    ) -> BridgeQuote:
        """Quote the costs of a bridge operation."""
        pass
