"""
EIP-55 mixed-case checksum for 20-byte hex addresses.

Each hex letter is uppercased when the matching nibble of
Keccak-256(lowercase hex, no 0x) is 8 or more. All-lowercase and all-uppercase
addresses carry no checksum and are accepted as-is.

References:
    [EIP-55] https://eips.ethereum.org/EIPS/eip-55
"""

from __future__ import annotations

from enum import Enum

from chain_identify.crypto.hashes import keccak256
from chain_identify.encoding import hexcodec
from chain_identify.errors import ChecksumError, EncodingError

ADDRESS_LENGTH = 20


class ChecksumState(str, Enum):
    VERIFIED = "verified"
    ABSENT = "absent"


def to_checksum_address(address: str | bytes) -> str:
    """
    Return the EIP-55 form (with 0x) of a 20-byte address.

    Args:
        address: raw bytes, or hex with or without 0x in any case.
    """
    if isinstance(address, (bytes, bytearray)):
        body = bytes(address).hex()
    else:
        body = hexcodec.strip_prefix(address)[0].lower()
    if len(body) != ADDRESS_LENGTH * 2:
        raise EncodingError(f"Expected {ADDRESS_LENGTH}-byte address, got {len(body) // 2} bytes")
    digest = keccak256(body.encode("ascii")).hex()
    return hexcodec.HEX_PREFIX + "".join(
        char.upper() if char.isalpha() and int(digest[i], 16) >= 8 else char
        for i, char in enumerate(body)
    )


def validate(text: str) -> tuple[ChecksumState, str]:
    """
    Check the EIP-55 casing of an address.

    Returns:
        (state, canonical checksummed address)

    Raises:
        EncodingError: not 20 bytes of hex
        ChecksumError: mixed case that differs from the checksummed form
    """
    body, _ = hexcodec.strip_prefix(text)
    hexcodec.decode(body)
    canonical = to_checksum_address(body)
    if body.lower() == body or body.upper() == body:
        return ChecksumState.ABSENT, canonical
    if canonical[2:] != body:
        raise ChecksumError("EIP-55 checksum mismatch")
    return ChecksumState.VERIFIED, canonical
