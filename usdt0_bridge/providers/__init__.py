"""Chain providers used by the bridge core."""

from .base import ChainProvider, Provider
from .rpc import InjectedProvider, JsonRpcProvider, RpcError, wrap_provider

__all__ = [
    "Provider",
    "ChainProvider",
    "JsonRpcProvider",
    "InjectedProvider",
    "RpcError",
    "wrap_provider",
]
