"""
SS58 framing: prefix bytes, payload and checksum layout.

Prefix encoding:
  - 0..63      one byte, the value itself
  - 64..16383  two bytes, 0x40 | (prefix >> 8) followed by prefix & 0xFF

The checksum itself (Blake2b over "SS58PRE" + body) lives in
chain_identify.checksum.ss58; this module only knows the byte layout.
"""

from __future__ import annotations

from chain_identify.errors import EncodingError

MAX_PREFIX = 0x3FFF

# payload length -> checksum length
CHECKSUM_LENGTHS = {1: 1, 2: 1, 4: 1, 8: 1, 32: 2, 33: 2}
_BY_TAIL = {payload + check: (payload, check) for payload, check in CHECKSUM_LENGTHS.items()}


def encode_prefix(prefix: int) -> bytes:
    """Serialize an SS58 network prefix to one or two bytes."""
    if not 0 <= prefix <= MAX_PREFIX:
        raise EncodingError(f"SS58 prefix out of range: {prefix}")
    if prefix < 64:
        return bytes([prefix])
    return bytes([0x40 | (prefix >> 8), prefix & 0xFF])


def decode_prefix(data: bytes) -> tuple[int, int]:
    """
    Read the network prefix at the start of a decoded SS58 body.

    Returns:
        (prefix, number of bytes it occupied)

    Raises:
        EncodingError: empty input, reserved first byte, truncated or
            non-canonical two-byte prefix
    """
    if not data:
        raise EncodingError("Empty SS58 body")
    first = data[0]
    if first < 64:
        return first, 1
    if first >= 128:
        raise EncodingError(f"Reserved SS58 prefix byte 0x{first:02x}")
    if len(data) < 2:
        raise EncodingError("Truncated two-byte SS58 prefix")
    prefix = ((first & 0x3F) << 8) | data[1]
    if prefix < 64:
        raise EncodingError(f"Non-canonical two-byte encoding of SS58 prefix {prefix}")
    return prefix, 2


def split(data: bytes) -> tuple[int, bytes, bytes, bytes]:
    """
    Split decoded SS58 bytes into (prefix, prefix_bytes, payload, checksum).

    Raises:
        EncodingError: bad prefix or a tail length with no payload/checksum pairing
    """
    prefix, prefix_len = decode_prefix(data)
    tail = data[prefix_len:]
    try:
        payload_len, _ = _BY_TAIL[len(tail)]
    except KeyError:
        raise EncodingError(f"Unsupported SS58 body length {len(tail)}") from None
    return prefix, data[:prefix_len], tail[:payload_len], tail[payload_len:]


def checksum_length(payload_length: int) -> int:
    try:
        return CHECKSUM_LENGTHS[payload_length]
    except KeyError:
        raise EncodingError(f"Unsupported SS58 payload length {payload_length}") from None
