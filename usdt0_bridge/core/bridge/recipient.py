"""
Recipient encoding for OFT ``SendParam.to``.

LayerZero addresses every destination account as ``bytes32``; how a
human-readable address maps to those 32 bytes depends on the chain family.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import re

from eth_utils import decode_hex, is_hex_address

from .chain_registry import ChainFamily
from .errors import InvalidRecipientError

BYTES32_LENGTH = 32

_BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_BASE58_INDEX = {char: index for index, char in enumerate(_BASE58_ALPHABET)}

# TON user-friendly address: tag(1) + workchain(1) + hash(32) + crc16(2)
_TON_FRIENDLY_LENGTH = 36
_TON_BOUNCEABLE_TAG = 0x11
_TON_NON_BOUNCEABLE_TAG = 0x51
_TON_TESTNET_FLAG = 0x80
_TON_RAW_PATTERN = re.compile(r"^(-?\d+):([0-9a-fA-F]{64})$")

# TRON: 0x41 prefix + 20-byte account id
_TRON_ADDRESS_PREFIX = 0x41
_TRON_ADDRESS_LENGTH = 21
_TRON_HEX_PATTERN = re.compile(r"^(0x)?41[0-9a-fA-F]{40}$")


def base58_decode(value: str) -> bytes:
    if not value:
        return b""
    num = 0
    for char in value:
        if char not in _BASE58_INDEX:
            raise ValueError("Invalid base58 character")
        num = num * 58 + _BASE58_INDEX[char]
    combined = num.to_bytes((num.bit_length() + 7) // 8, "big") if num else b""
    pad = len(value) - len(value.lstrip("1"))
    return b"\x00" * pad + combined


def base58_encode(data: bytes) -> str:
    if not data:
        return ""
    num = int.from_bytes(data, "big")
    encoded = ""
    while num > 0:
        num, rem = divmod(num, 58)
        encoded = _BASE58_ALPHABET[rem] + encoded
    pad = 0
    for byte in data:
        if byte == 0:
            pad += 1
        else:
            break
    return "1" * pad + encoded


def _double_sha256(data: bytes) -> bytes:
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()


def base58check_decode(value: str) -> bytes:
    """Decode base58check, verifying the 4-byte double-SHA256 checksum."""
    raw = base58_decode(value)
    if len(raw) < 5:
        raise ValueError("Base58check payload too short")
    payload, checksum = raw[:-4], raw[-4:]
    if _double_sha256(payload)[:4] != checksum:
        raise ValueError("Invalid base58check checksum")
    return payload


def base58check_encode(payload: bytes) -> str:
    return base58_encode(payload + _double_sha256(payload)[:4])


def left_pad_bytes32(raw: bytes) -> bytes:
    if len(raw) > BYTES32_LENGTH:
        raise ValueError(f"Value of {len(raw)} bytes does not fit in bytes32")
    return raw.rjust(BYTES32_LENGTH, b"\x00")


def encode_evm_recipient(recipient: str) -> bytes:
    if not isinstance(recipient, str) or not is_hex_address(recipient):
        raise InvalidRecipientError(str(recipient), ChainFamily.EVM.value, "expected a 20-byte hex address")
    return left_pad_bytes32(decode_hex(recipient))


def _decode_ton_friendly(recipient: str) -> bytes:
    candidate = recipient + "=" * (-len(recipient) % 4)
    altchars = b"-_" if ("-" in recipient or "_" in recipient) else None
    try:
        raw = base64.b64decode(candidate, altchars=altchars, validate=True)
    except (ValueError, binascii.Error) as exc:
        raise ValueError("not valid base64") from exc

    if len(raw) != _TON_FRIENDLY_LENGTH:
        raise ValueError("wrong length for a user-friendly address")

    tag = raw[0] & ~_TON_TESTNET_FLAG
    if tag not in (_TON_BOUNCEABLE_TAG, _TON_NON_BOUNCEABLE_TAG):
        raise ValueError(f"unknown address tag 0x{raw[0]:02x}")

    if binascii.crc_hqx(raw[:34], 0) != int.from_bytes(raw[34:], "big"):
        raise ValueError("checksum mismatch")

    return raw[2:34]


def encode_ton_recipient(recipient: str) -> bytes:
    """Account hash of a TON address, in raw or user-friendly form."""
    if not isinstance(recipient, str) or not recipient.strip():
        raise InvalidRecipientError(str(recipient), ChainFamily.TON.value, "empty address")

    text = recipient.strip()
    match = _TON_RAW_PATTERN.match(text)
    if match:
        return bytes.fromhex(match.group(2))

    try:
        return _decode_ton_friendly(text)
    except ValueError as exc:
        raise InvalidRecipientError(recipient, ChainFamily.TON.value, str(exc)) from exc


def encode_tron_recipient(recipient: str) -> bytes:
    """21-byte TRON address (0x41 prefix) left padded to bytes32."""
    if not isinstance(recipient, str) or not recipient.strip():
        raise InvalidRecipientError(str(recipient), ChainFamily.TRON.value, "empty address")

    text = recipient.strip()
    if _TRON_HEX_PATTERN.match(text):
        raw = bytes.fromhex(text[2:] if text.startswith("0x") else text)
    else:
        try:
            raw = base58check_decode(text)
        except ValueError as exc:
            raise InvalidRecipientError(recipient, ChainFamily.TRON.value, str(exc)) from exc

    if len(raw) != _TRON_ADDRESS_LENGTH or raw[0] != _TRON_ADDRESS_PREFIX:
        raise InvalidRecipientError(recipient, ChainFamily.TRON.value, "not a TRON account address")

    return left_pad_bytes32(raw)


def encode_recipient(recipient: str, family: ChainFamily) -> bytes:
    """Encode ``recipient`` as the 32-byte ``to`` field for a chain family."""
    if family == ChainFamily.TON:
        return encode_ton_recipient(recipient)
    if family == ChainFamily.TRON:
        return encode_tron_recipient(recipient)
    return encode_evm_recipient(recipient)


__all__ = [
    "base58_decode",
    "base58_encode",
    "base58check_decode",
    "base58check_encode",
    "left_pad_bytes32",
    "encode_evm_recipient",
    "encode_ton_recipient",
    "encode_tron_recipient",
    "encode_recipient",
]
