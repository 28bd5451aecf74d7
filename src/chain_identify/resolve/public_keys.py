"""
Public key candidate resolution.

Used only when the input is not an address. The input is read as hex first,
then as Base58; the first reading with a recognizable key shape wins. Every
chain with a pipeline for that key type gets a candidate carrying the derived
address.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chain_identify.config import ScoringConfig
from chain_identify.crypto import secp256k1
from chain_identify.crypto.keys import KeyShape, detect_shape
from chain_identify.encoding import base58, hexcodec
from chain_identify.errors import DerivationNotImplemented, InvalidInput, PointError
from chain_identify.models import Candidate
from chain_identify.registry.models import KeyType
from chain_identify.registry.registry import Registry
from chain_identify.resolve.addresses import Resolution
from chain_identify.resolve.derivation import derive_address
from chain_identify.signature import InputSignature

logger = logging.getLogger("chain_identify.resolve.public_keys")


@dataclass(frozen=True)
class PublicKey:
    raw: bytes
    shape: KeyShape
    source: str

    @property
    def key_type(self) -> KeyType:
        return KeyType.SECP256K1 if self.shape.is_secp256k1 else KeyType.ED25519

    def normalized(self, had_0x: bool) -> str:
        if self.source == "hex":
            return hexcodec.encode(self.raw, prefix=had_0x)
        return base58.encode(self.raw)


def detect_public_key(signature: InputSignature) -> PublicKey | None:
    """
    Find a public key in the input, or None.

    secp256k1 points are checked here: a key-shaped input that is not on the
    curve is rejected outright.

    Raises:
        InvalidInput: secp256k1-shaped bytes that are not a curve point
    """
    readings = (("hex", signature.hex_bytes), ("base58", signature.base58_bytes))
    for source, raw in readings:
        if raw is None:
            continue
        shape = detect_shape(raw)
        if shape is None:
            continue
        if shape.is_secp256k1:
            try:
                secp256k1.to_uncompressed(raw)
            except PointError as e:
                raise InvalidInput(f"Invalid secp256k1 public key: {e}") from None
        logger.debug(f"Detected {shape.value} public key from {source}")
        return PublicKey(raw, shape, source)
    return None


def resolve_public_key(
    signature: InputSignature,
    registry: Registry,
    config: ScoringConfig,
) -> list[Resolution]:
    """
    Derive an address for every chain that accepts the detected key type.

    Returns an empty list when the input is not a public key.

    Raises:
        InvalidInput: off-curve secp256k1 key
        DerivationNotImplemented: a key was found but no chain can derive from it
    """
    key = detect_public_key(signature)
    if key is None:
        return []

    rows = registry.derivations_for(key.key_type)
    if not rows:
        raise DerivationNotImplemented(key.key_type.value)

    normalized = key.normalized(signature.has_0x)
    resolutions = []
    for chain, fmt, spec in rows:
        derived = derive_address(key.raw, key.shape, fmt, spec)
        resolutions.append(
            Resolution(
                candidate=Candidate(
                    chain=chain.id,
                    confidence=config.derived,
                    reasoning=f"{key.shape.value} public key; derived {chain.name} {fmt.label} address",
                    derived_address=derived,
                ),
                normalized=normalized,
            )
        )
    logger.debug(f"Derived {len(resolutions)} address(es) from {key.shape.value} key")
    return resolutions
