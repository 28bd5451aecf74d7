"""Public key shape detection from raw bytes."""

from __future__ import annotations

from enum import Enum

from chain_identify.crypto.secp256k1 import (
    COMPRESSED_LENGTH,
    TAG_EVEN,
    TAG_ODD,
    TAG_UNCOMPRESSED,
    UNCOMPRESSED_LENGTH,
)

ED25519_LENGTH = 32


class KeyShape(str, Enum):
    SECP256K1_UNCOMPRESSED = "secp256k1-uncompressed"
    SECP256K1_COMPRESSED = "secp256k1-compressed"
    # Ed25519 and sr25519 keys are both 32 raw bytes and cannot be told apart
    ED25519 = "ed25519"

    @property
    def is_secp256k1(self) -> bool:
        return self is not KeyShape.ED25519


def detect_shape(data: bytes) -> KeyShape | None:
    """
    Classify bytes by length and tag. Returns None for anything else.

    This is a structural check only; secp256k1 points are validated by
    chain_identify.crypto.secp256k1.
    """
    if len(data) == UNCOMPRESSED_LENGTH and data[0] == TAG_UNCOMPRESSED:
        return KeyShape.SECP256K1_UNCOMPRESSED
    if len(data) == COMPRESSED_LENGTH and data[0] in (TAG_EVEN, TAG_ODD):
        return KeyShape.SECP256K1_COMPRESSED
    if len(data) == ED25519_LENGTH:
        return KeyShape.ED25519
    return None
