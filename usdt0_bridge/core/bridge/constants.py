"""Constants for USDT0 bridge transactions."""

from typing import Tuple

# minAmountLD = amount * 999 / 1000 (0.1% slippage budget)
FEE_TOLERANCE: Tuple[int, int] = (999, 1_000)

# ERC-4337 approvals cover amount + bridge fee * 1.1
ERC4337_FEE_BUFFER: Tuple[int, int] = (1_100, 1_000)

# Type-3 LayerZero options with no executor options
EMPTY_EXTRA_OPTIONS: bytes = bytes.fromhex("0003")

EMPTY_BYTES: bytes = b""
