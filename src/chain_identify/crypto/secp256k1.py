"""
secp256k1 public key serialization.

Provides:
- decompress: 33-byte SEC1 compressed key -> 65-byte uncompressed key
- compress: 65-byte uncompressed key -> 33-byte compressed key
- validate_uncompressed: on-curve check for 65-byte keys

Decompression solves y^2 = x^3 + 7 over F_p. Since p = 3 (mod 4) the square
root is (x^3 + 7)^((p+1)/4) mod p; the tag byte (02 even, 03 odd) picks which
of the two roots is meant.

References:
    [SEC1] Standards for Efficient Cryptography 1, v2.0, §2.3.3 / §2.3.4.
"""

from __future__ import annotations

import ecdsa

from chain_identify.errors import PointError

# ==============================================================================
# Curve constants
# ==============================================================================

_CURVE = ecdsa.SECP256k1.curve

# Field prime
SECP256K1_P = _CURVE.p()

TAG_EVEN = 0x02
TAG_ODD = 0x03
TAG_UNCOMPRESSED = 0x04

COMPRESSED_LENGTH = 33
UNCOMPRESSED_LENGTH = 65


# ==============================================================================
# Point serialization
# ==============================================================================


def decompress(data: bytes) -> bytes:
    """
    Expand a compressed secp256k1 public key.

    Args:
        data: 33 bytes, tag 02/03 followed by the big-endian X coordinate.

    Returns:
        65 bytes: 04 || X || Y.

    Raises:
        PointError: wrong length, bad tag, X outside the field, or X with no
            matching curve point.
    """
    if len(data) != COMPRESSED_LENGTH:
        raise PointError(f"Expected {COMPRESSED_LENGTH} bytes, got {len(data)}")
    tag = data[0]
    if tag not in (TAG_EVEN, TAG_ODD):
        raise PointError(f"Invalid prefix byte: 0x{tag:02x}")

    x = int.from_bytes(data[1:], "big")
    if x >= SECP256K1_P:
        raise PointError("X coordinate is not a field element")

    y_sq = (pow(x, 3, SECP256K1_P) + 7) % SECP256K1_P
    y = pow(y_sq, (SECP256K1_P + 1) // 4, SECP256K1_P)

    # y_sq has no square root: x is off the curve
    if (y * y) % SECP256K1_P != y_sq:
        raise PointError(f"X coordinate 0x{x:064x} does not correspond to a curve point")

    if (y % 2 == 0) != (tag == TAG_EVEN):
        y = SECP256K1_P - y

    return bytes([TAG_UNCOMPRESSED]) + data[1:] + y.to_bytes(32, "big")


def validate_uncompressed(data: bytes) -> bytes:
    """
    Check that a 65-byte 04-tagged key is a point on secp256k1.

    Returns the key unchanged.

    Raises:
        PointError: wrong length or tag, coordinates outside the field, or
            off-curve point.
    """
    if len(data) != UNCOMPRESSED_LENGTH:
        raise PointError(f"Expected {UNCOMPRESSED_LENGTH} bytes, got {len(data)}")
    if data[0] != TAG_UNCOMPRESSED:
        raise PointError(f"Invalid prefix byte: 0x{data[0]:02x}")

    x = int.from_bytes(data[1:33], "big")
    y = int.from_bytes(data[33:], "big")
    if x >= SECP256K1_P or y >= SECP256K1_P:
        raise PointError("Coordinate is not a field element")
    if not _CURVE.contains_point(x, y):
        raise PointError("Point is not on the secp256k1 curve")
    return data


def compress(data: bytes) -> bytes:
    """Compress a validated 65-byte key to 02/03 || X."""
    validate_uncompressed(data)
    y = int.from_bytes(data[33:], "big")
    tag = TAG_EVEN if y % 2 == 0 else TAG_ODD
    return bytes([tag]) + data[1:33]


def to_uncompressed(data: bytes) -> bytes:
    """Return the 65-byte form of a compressed or uncompressed key."""
    if len(data) == COMPRESSED_LENGTH:
        return decompress(data)
    return validate_uncompressed(data)
