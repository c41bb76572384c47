"""
JSON-RPC chain providers.

Wallet accounts carry their connection as either an RPC endpoint URL or a
browser-injected (EIP-1193) provider object; both are wrapped once into a
``ChainProvider``.
"""

from __future__ import annotations

import inspect
import itertools
from typing import Any, Dict, List, Optional

import httpx

from ..config import settings
from .base import ChainProvider


class RpcError(Exception):
    """JSON-RPC request returned an error object."""

    def __init__(self, error: Any, method: Optional[str] = None):
        if isinstance(error, dict):
            message = error.get("message") or str(error)
            self.code = error.get("code")
            self.data = error.get("data")
        else:
            message = str(error)
            self.code = None
            self.data = None
        prefix = f"RPC error in {method}" if method else "RPC error"
        super().__init__(f"{prefix}: {message}")
        self.method = method


def _parse_quantity(value: Any) -> int:
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return int(value, 16) if value.startswith(("0x", "0X")) else int(value)
    raise RpcError(f"Invalid quantity {value!r}")


class JsonRpcProvider(ChainProvider):
    name = "json-rpc"

    def __init__(
        self,
        rpc_url: str,
        *,
        timeout_s: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.rpc_url = rpc_url
        self.timeout_s = timeout_s or settings.rpc_timeout_seconds
        self._client = client
        self._ids = itertools.count(1)

    async def ready(self) -> bool:
        return bool(self.rpc_url)

    async def health_check(self) -> Dict[str, Any]:
        if not await self.ready():
            return {"status": "disabled", "reason": "RPC URL not configured"}

        try:
            chain_id = await self.get_chain_id()
            return {"status": "healthy", "chainId": chain_id}
        except Exception as exc:
            return {"status": "error", "reason": str(exc)}

    async def get_chain_id(self) -> int:
        return _parse_quantity(await self._rpc_call("eth_chainId", []))

    async def call(self, to: str, data: str) -> str:
        result = await self._rpc_call("eth_call", [{"to": to, "data": data}, "latest"])
        if not isinstance(result, str):
            raise RpcError(f"Invalid eth_call result {result!r}", "eth_call")
        return result

    async def _rpc_call(self, method: str, params: List[Any]) -> Any:
        if not self._client or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=self.timeout_s)

        response = await self._client.post(
            self.rpc_url,
            json={"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params},
        )
        response.raise_for_status()
        payload = response.json()
        if "error" in payload:
            raise RpcError(payload["error"], method)
        return payload.get("result")

    async def close(self) -> None:
        """Close HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()


class InjectedProvider(ChainProvider):
    """Adapter for an EIP-1193 object exposing ``request({"method", "params"})``."""

    name = "injected"

    def __init__(self, injected: Any) -> None:
        if not callable(getattr(injected, "request", None)):
            raise TypeError("Injected provider must expose a request(payload) method")
        self._injected = injected

    async def ready(self) -> bool:
        return True

    async def health_check(self) -> Dict[str, Any]:
        try:
            chain_id = await self.get_chain_id()
            return {"status": "healthy", "chainId": chain_id}
        except Exception as exc:
            return {"status": "error", "reason": str(exc)}

    async def get_chain_id(self) -> int:
        return _parse_quantity(await self._request("eth_chainId", []))

    async def call(self, to: str, data: str) -> str:
        result = await self._request("eth_call", [{"to": to, "data": data}, "latest"])
        if not isinstance(result, str):
            raise RpcError(f"Invalid eth_call result {result!r}", "eth_call")
        return result

    async def _request(self, method: str, params: List[Any]) -> Any:
        result = self._injected.request({"method": method, "params": params})
        if inspect.isawaitable(result):
            result = await result
        return result


def wrap_provider(provider: Any) -> Optional[ChainProvider]:
    """Wrap a wallet's ``provider`` setting into a ``ChainProvider``.

    Strings are treated as JSON-RPC endpoint URLs; objects with a ``request``
    method are treated as EIP-1193 providers.
    """
    if provider is None or provider == "":
        return None
    if isinstance(provider, ChainProvider):
        return provider
    if isinstance(provider, str):
        return JsonRpcProvider(provider)
    return InjectedProvider(provider)


__all__ = [
    "RpcError",
    "JsonRpcProvider",
    "InjectedProvider",
    "wrap_provider",
]
