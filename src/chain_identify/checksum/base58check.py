"""
Base58Check: Base58 over  version || payload || checksum.

checksum = SHA256(SHA256(version || payload))[:4]
"""

from __future__ import annotations

from chain_identify.crypto.hashes import double_sha256
from chain_identify.encoding import base58
from chain_identify.errors import ChecksumError, EncodingError

CHECKSUM_LENGTH = 4


def checksum(body: bytes) -> bytes:
    return double_sha256(body)[:CHECKSUM_LENGTH]


def encode(version: int, payload: bytes) -> str:
    """Encode `payload` under a one-byte version."""
    if not 0 <= version <= 0xFF:
        raise EncodingError(f"Base58Check version must be one byte, got {version}")
    body = bytes([version]) + payload
    return base58.encode(body + checksum(body))


def decode(text: str) -> tuple[int, bytes]:
    """
    Decode and verify a Base58Check string.

    Returns:
        (version, payload)

    Raises:
        EncodingError: not Base58, or too short to hold version and checksum
        ChecksumError: checksum does not match
    """
    raw = base58.decode(text)
    if len(raw) < CHECKSUM_LENGTH + 1:
        raise EncodingError(f"Base58Check data too short: {len(raw)} bytes")
    body, check = raw[:-CHECKSUM_LENGTH], raw[-CHECKSUM_LENGTH:]
    if checksum(body) != check:
        raise ChecksumError("Base58Check checksum mismatch")
    return body[0], body[1:]


def verify(text: str) -> bool:
    try:
        decode(text)
    except ValueError:
        return False
    return True
