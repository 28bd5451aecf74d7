"""Hex helpers that understand the optional 0x prefix."""

from __future__ import annotations

import string

from chain_identify.errors import EncodingError

HEX_PREFIX = "0x"
_HEX_DIGITS = frozenset(string.hexdigits)


def strip_prefix(s: str) -> tuple[str, bool]:
    """Split off a leading 0x. Returns (body, had_prefix)."""
    if s.startswith(HEX_PREFIX):
        return s[len(HEX_PREFIX):], True
    return s, False


def is_hex(s: str) -> bool:
    """True for non-empty, even-length hex with or without 0x."""
    body, _ = strip_prefix(s)
    return bool(body) and len(body) % 2 == 0 and all(c in _HEX_DIGITS for c in body)


def decode(s: str) -> bytes:
    """
    Decode hex (0x optional) to bytes.

    Raises:
        EncodingError: on odd length, empty body or non-hex characters
    """
    body, _ = strip_prefix(s)
    if not body:
        raise EncodingError("Empty hex string")
    if len(body) % 2:
        raise EncodingError(f"Odd-length hex string ({len(body)} digits)")
    if not all(c in _HEX_DIGITS for c in body):
        raise EncodingError("Non-hex character in hex string")
    return bytes.fromhex(body)


def encode(data: bytes, prefix: bool = True) -> str:
    """Lowercase hex, 0x-prefixed unless `prefix` is False."""
    return (HEX_PREFIX if prefix else "") + data.hex()
