"""Bech32/Bech32m address validation on top of the raw codec."""

from __future__ import annotations

from typing import NamedTuple

from chain_identify.encoding import bech32 as codec
from chain_identify.encoding.bech32 import Variant
from chain_identify.errors import EncodingError


class Bech32Data(NamedTuple):
    hrp: str
    variant: Variant
    data: list[int]

    @property
    def canonical(self) -> str:
        return codec.encode(self.hrp, self.data, self.variant)


def validate(text: str, max_length: int | None = codec.MAX_LENGTH) -> Bech32Data:
    """
    Verify the checksum of a Bech32 or Bech32m string.

    Raises:
        EncodingError: malformed string
        ChecksumError: checksum matches neither variant
    """
    hrp, data, variant = codec.decode(text, max_length)
    return Bech32Data(hrp, variant, data)


def decode_witness(text: str) -> tuple[str, int, bytes]:
    """
    Decode a SegWit address into (hrp, witness version, program).

    Version 0 must use Bech32 and versions 1..16 Bech32m (BIP-350).

    Raises:
        EncodingError: bad witness version, program length or variant
        ChecksumError: checksum mismatch
    """
    decoded = validate(text)
    if not decoded.data:
        raise EncodingError("Empty witness data")
    version = decoded.data[0]
    if version > 16:
        raise EncodingError(f"Invalid witness version {version}")
    program = bytes(codec.convert_bits(decoded.data[1:], 5, 8, pad=False))
    if not 2 <= len(program) <= 40:
        raise EncodingError(f"Invalid witness program length {len(program)}")
    if version == 0 and len(program) not in (20, 32):
        raise EncodingError(f"Invalid v0 witness program length {len(program)}")
    expected = Variant.BECH32 if version == 0 else Variant.BECH32M
    if decoded.variant is not expected:
        raise EncodingError(
            f"Witness version {version} requires {expected.value}, got {decoded.variant.value}"
        )
    return decoded.hrp, version, program


def encode_witness(hrp: str, version: int, program: bytes) -> str:
    variant = Variant.BECH32 if version == 0 else Variant.BECH32M
    return codec.encode(hrp, [version] + codec.convert_bits(program, 8, 5), variant)


def decode_bytes(text: str, max_length: int | None = codec.MAX_LENGTH) -> tuple[str, bytes, Variant]:
    """Decode a plain (non-witness) Bech32 string to (hrp, payload bytes, variant)."""
    decoded = validate(text, max_length)
    return decoded.hrp, bytes(codec.convert_bits(decoded.data, 5, 8, pad=False)), decoded.variant


def encode_bytes(hrp: str, payload: bytes, variant: Variant = Variant.BECH32) -> str:
    return codec.encode(hrp, codec.convert_bits(payload, 8, 5), variant)
