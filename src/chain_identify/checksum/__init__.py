"""
chain_identify.checksum — per-family validators.

Each module decodes text, verifies its checksum and raises EncodingError or
ChecksumError on failure.
"""

from chain_identify.checksum import base58check, bech32, eip55, ss58

__all__ = ["base58check", "bech32", "eip55", "ss58"]
