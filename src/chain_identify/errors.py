"""
Exception hierarchy for chain identification.

Two kinds leave `identify()`:
  - InvalidInput: nothing matched, or a checksum/structure/curve check failed
  - DerivationNotImplemented: a public key was recognized but no chain in the
    registry knows how to derive an address from it

The primitive layers (encoding, crypto, checksum) raise ValueError subclasses
which the resolvers translate into InvalidInput.
"""

from __future__ import annotations


class IdentificationError(Exception):
    """Base class for errors raised by identify()."""

    pass


class InvalidInput(IdentificationError):
    """Raised when the input matches no known encoding or chain."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)


class DerivationNotImplemented(IdentificationError):
    """Raised for a recognized public key class with no derivation pipeline."""

    def __init__(self, key_type: str):
        self.key_type = key_type
        super().__init__(f"No address derivation pipeline registered for {key_type} keys")


class EncodingError(ValueError):
    """Malformed text or bytes for an encoding (bad character, length, padding)."""

    pass


class ChecksumError(ValueError):
    """Well-formed encoding whose checksum does not verify."""

    pass


class PointError(ValueError):
    """Bytes that do not describe a valid elliptic-curve point."""

    pass
