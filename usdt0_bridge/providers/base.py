from abc import ABC, abstractmethod
from typing import Any, Dict


class Provider(ABC):
    """Base provider interface"""

    name: str
    timeout_s: float = 10

    @abstractmethod
    async def ready(self) -> bool:
        """Check if provider is ready to serve requests"""
        pass

    @abstractmethod
    async def health_check(self) -> Dict[str, Any]:
        """Return provider health status"""
        pass


class ChainProvider(Provider):
    """Read-only connection to an EVM chain"""

    @abstractmethod
    async def get_chain_id(self) -> int:
        """Get the chain id of the connected network"""
        pass

    @abstractmethod
    async def call(self, to: str, data: str) -> str:
        """Execute an eth_call against the latest block and return the hex result"""
        pass
