"""
Base58 codec (Bitcoin alphabet).

The alphabet drops 0, O, I and l. Leading zero bytes are carried as leading
'1' characters, so the decoded length is exact.
"""

from __future__ import annotations

from chain_identify.errors import EncodingError

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_ALPHABET_MAP = {char: i for i, char in enumerate(ALPHABET)}


def is_base58(s: str) -> bool:
    """True if `s` is non-empty and uses only Base58 characters."""
    return bool(s) and all(char in _ALPHABET_MAP for char in s)


def decode(s: str) -> bytes:
    """
    Decode a Base58 string to bytes.

    Raises:
        EncodingError: on an empty string or a character outside the alphabet
    """
    if not s:
        raise EncodingError("Empty Base58 string")

    n = 0
    for char in s:
        try:
            n = n * 58 + _ALPHABET_MAP[char]
        except KeyError:
            raise EncodingError(f"Invalid Base58 character {char!r}") from None

    if n == 0:
        result = b""
    else:
        byte_length = (n.bit_length() + 7) // 8
        result = n.to_bytes(byte_length, "big")

    # Each leading '1' is a 0x00 byte
    pad_size = len(s) - len(s.lstrip(ALPHABET[0]))
    return b"\x00" * pad_size + result


def encode(data: bytes) -> str:
    """Encode bytes to a Base58 string."""
    n = int.from_bytes(data, "big")
    result = []
    while n > 0:
        n, remainder = divmod(n, 58)
        result.append(ALPHABET[remainder])
    result.reverse()

    pad_size = len(data) - len(data.lstrip(b"\x00"))
    return ALPHABET[0] * pad_size + "".join(result)
