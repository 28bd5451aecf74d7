"""
chain_identify.encoding — text/byte codecs with no chain knowledge.

Provides:
- Base58 (Bitcoin alphabet)
- Bech32 / Bech32m with bit-group conversion
- SS58 prefix framing
- hex with optional 0x
"""

from chain_identify.encoding import base58, bech32, hexcodec, ss58

__all__ = ["base58", "bech32", "hexcodec", "ss58"]
