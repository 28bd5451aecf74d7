"""
SS58 checksum and full address encode/decode.

checksum = Blake2b-512("SS58PRE" || prefix bytes || payload)[:n]
with n taken from the payload length (see chain_identify.encoding.ss58).

References:
    [SS58] https://docs.substrate.io/reference/address-formats/
"""

from __future__ import annotations

from chain_identify.crypto.hashes import blake2b_512
from chain_identify.encoding import base58
from chain_identify.encoding import ss58 as framing
from chain_identify.errors import ChecksumError

CONTEXT = b"SS58PRE"


def checksum(body: bytes, length: int) -> bytes:
    """Checksum over prefix bytes + payload."""
    return blake2b_512(CONTEXT + body)[:length]


def encode(prefix: int, payload: bytes) -> str:
    body = framing.encode_prefix(prefix) + payload
    return base58.encode(body + checksum(body, framing.checksum_length(len(payload))))


def decode(text: str) -> tuple[int, bytes]:
    """
    Decode and verify an SS58 address.

    Returns:
        (network prefix, payload)

    Raises:
        EncodingError: not Base58, bad prefix or unsupported length
        ChecksumError: checksum does not match
    """
    prefix, prefix_bytes, payload, check = framing.split(base58.decode(text))
    if checksum(prefix_bytes + payload, len(check)) != check:
        raise ChecksumError("SS58 checksum mismatch")
    return prefix, payload
