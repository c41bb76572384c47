"""
Deadline propagation for network calls.

A single ``Deadline`` is created when a bridge operation starts and every
read-only network call of that operation awaits through it, so the whole
operation is bounded rather than each call individually.
"""

from __future__ import annotations

import asyncio
import time
from typing import Awaitable, Optional, TypeVar

from .bridge.errors import BridgeTimeoutError

T = TypeVar("T")


class Deadline:
    """Absolute point in (monotonic) time after which awaits are abandoned."""

    def __init__(self, timeout_s: Optional[float] = None) -> None:
        self.timeout_s = timeout_s
        self._expires_at: Optional[float] = (
            time.monotonic() + timeout_s if timeout_s is not None else None
        )

    @classmethod
    def unbounded(cls) -> "Deadline":
        return cls(None)

    @property
    def is_bounded(self) -> bool:
        return self._expires_at is not None

    def remaining(self) -> Optional[float]:
        """Seconds left, ``None`` when unbounded. Never negative."""
        if self._expires_at is None:
            return None
        return max(0.0, self._expires_at - time.monotonic())

    def expired(self) -> bool:
        remaining = self.remaining()
        return remaining is not None and remaining <= 0

    async def run(self, awaitable: Awaitable[T], *, operation: str) -> T:
        remaining = self.remaining()
        if remaining is None:
            return await awaitable

        if remaining <= 0:
            # Don't leave an un-awaited coroutine behind
            if asyncio.iscoroutine(awaitable):
                awaitable.close()
            raise BridgeTimeoutError(operation, self.timeout_s)

        try:
            return await asyncio.wait_for(awaitable, timeout=remaining)
        except asyncio.TimeoutError:
            raise BridgeTimeoutError(operation, self.timeout_s) from None
