"""
Bech32 / Bech32m codec (BIP-173, BIP-350).

A Bech32 string is  hrp + "1" + data + checksum  where data and the 6-group
checksum are 5-bit values drawn from CHARSET. The checksum covers the HRP, so
the same payload under a different HRP does not verify.
"""

from __future__ import annotations

from enum import Enum

from chain_identify.errors import ChecksumError, EncodingError

CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_CHARSET_MAP = {char: i for i, char in enumerate(CHARSET)}

SEPARATOR = "1"
CHECKSUM_LENGTH = 6
MAX_LENGTH = 90

_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)


class Variant(str, Enum):
    """Checksum constant in use."""

    BECH32 = "bech32"
    BECH32M = "bech32m"


_CONSTANTS = {Variant.BECH32: 1, Variant.BECH32M: 0x2BC830A3}


def polymod(values: list[int]) -> int:
    chk = 1
    for value in values:
        top = chk >> 25
        chk = ((chk & 0x1FFFFFF) << 5) ^ value
        for i in range(5):
            if (top >> i) & 1:
                chk ^= _GENERATOR[i]
    return chk


def hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def create_checksum(hrp: str, data: list[int], variant: Variant = Variant.BECH32) -> list[int]:
    """Six 5-bit checksum groups for `data` under `hrp`."""
    values = hrp_expand(hrp) + list(data)
    mod = polymod(values + [0] * CHECKSUM_LENGTH) ^ _CONSTANTS[variant]
    return [(mod >> 5 * (5 - i)) & 31 for i in range(CHECKSUM_LENGTH)]


def verify_checksum(hrp: str, data: list[int]) -> Variant | None:
    """Return the variant whose constant `data` (checksum included) satisfies."""
    residue = polymod(hrp_expand(hrp) + list(data))
    for variant, constant in _CONSTANTS.items():
        if residue == constant:
            return variant
    return None


def split(bech: str, max_length: int | None = MAX_LENGTH) -> tuple[str, list[int]]:
    """
    Split a Bech32 string into its lowercase HRP and 5-bit data groups.

    The checksum groups are kept at the end of the data and not verified.

    Raises:
        EncodingError: mixed case, missing separator, bad HRP or data characters
    """
    if max_length is not None and len(bech) > max_length:
        raise EncodingError(f"Bech32 string too long: {len(bech)} > {max_length}")
    if bech.lower() != bech and bech.upper() != bech:
        raise EncodingError("Bech32 string mixes upper and lower case")
    bech = bech.lower()

    pos = bech.rfind(SEPARATOR)
    if pos < 1:
        raise EncodingError("Missing Bech32 separator or empty HRP")
    if pos + 1 + CHECKSUM_LENGTH > len(bech):
        raise EncodingError("Bech32 data part shorter than the checksum")

    hrp = bech[:pos]
    if any(ord(c) < 33 or ord(c) > 126 for c in hrp):
        raise EncodingError("Invalid character in Bech32 HRP")

    data = []
    for char in bech[pos + 1:]:
        try:
            data.append(_CHARSET_MAP[char])
        except KeyError:
            raise EncodingError(f"Invalid Bech32 data character {char!r}") from None
    return hrp, data


def decode(bech: str, max_length: int | None = MAX_LENGTH) -> tuple[str, list[int], Variant]:
    """
    Decode and verify a Bech32/Bech32m string.

    Returns:
        (hrp, data, variant) with the checksum groups removed from data

    Raises:
        EncodingError: malformed string
        ChecksumError: checksum matches neither variant
    """
    hrp, data = split(bech, max_length)
    variant = verify_checksum(hrp, data)
    if variant is None:
        raise ChecksumError(f"Bech32 checksum mismatch for HRP '{hrp}'")
    return hrp, data[:-CHECKSUM_LENGTH], variant


def encode(hrp: str, data: list[int], variant: Variant = Variant.BECH32) -> str:
    """Encode 5-bit groups under `hrp`. Output is lowercase."""
    hrp = hrp.lower()
    if any(not 0 <= d < 32 for d in data):
        raise EncodingError("Bech32 data values must be 5-bit")
    combined = list(data) + create_checksum(hrp, data, variant)
    return hrp + SEPARATOR + "".join(CHARSET[d] for d in combined)


def convert_bits(data, from_bits: int, to_bits: int, pad: bool = True) -> list[int]:
    """
    Regroup a sequence of `from_bits`-wide values into `to_bits`-wide values.

    With pad=False the trailing bits must be fewer than `from_bits` and all
    zero, otherwise the conversion is rejected.

    Raises:
        EncodingError: out-of-range widths or values, or invalid padding
    """
    if not (1 <= from_bits <= 8 and 1 <= to_bits <= 8):
        raise EncodingError(f"Unsupported bit widths {from_bits} -> {to_bits}")

    acc = 0
    bits = 0
    ret = []
    maxv = (1 << to_bits) - 1
    max_acc = (1 << (from_bits + to_bits - 1)) - 1
    for value in data:
        if value < 0 or value >> from_bits:
            raise EncodingError(f"Value {value} does not fit in {from_bits} bits")
        acc = ((acc << from_bits) | value) & max_acc
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            ret.append((acc >> bits) & maxv)

    if pad:
        if bits:
            ret.append((acc << (to_bits - bits)) & maxv)
    elif bits >= from_bits:
        raise EncodingError("Excess padding in bit conversion")
    elif (acc << (to_bits - bits)) & maxv:
        raise EncodingError("Non-zero padding in bit conversion")
    return ret
