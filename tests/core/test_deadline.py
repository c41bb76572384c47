"""
Tests for operation deadlines.
"""

import asyncio

import pytest

from usdt0_bridge.core.bridge.errors import BridgeTimeoutError, ErrorCategory
from usdt0_bridge.core.deadline import Deadline


async def _slow(value, delay_s):
    await asyncio.sleep(delay_s)
    return value


@pytest.mark.asyncio
async def test_unbounded_deadline_just_awaits():
    deadline = Deadline.unbounded()

    assert not deadline.is_bounded
    assert deadline.remaining() is None
    assert not deadline.expired()
    assert await deadline.run(_slow("ok", 0), operation="noop") == "ok"


@pytest.mark.asyncio
async def test_bounded_deadline_returns_in_time():
    deadline = Deadline(5)

    assert deadline.is_bounded
    assert 0 < deadline.remaining() <= 5
    assert await deadline.run(_slow(42, 0), operation="fast read") == 42


@pytest.mark.asyncio
async def test_expiry_raises_bridge_timeout():
    deadline = Deadline(0.01)

    with pytest.raises(BridgeTimeoutError) as exc:
        await deadline.run(_slow("late", 0.5), operation="eth_call")

    assert exc.value.operation == "eth_call"
    assert exc.value.category == ErrorCategory.TIMEOUT


@pytest.mark.asyncio
async def test_deadline_is_shared_across_calls():
    deadline = Deadline(0.05)
    await asyncio.sleep(0.06)

    assert deadline.expired()
    with pytest.raises(BridgeTimeoutError):
        await deadline.run(_slow("late", 0), operation="second read")
