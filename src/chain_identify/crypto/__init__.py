"""
chain_identify.crypto — hash functions and secp256k1 key handling.
"""

from chain_identify.crypto import hashes, secp256k1
from chain_identify.crypto.keys import KeyShape, detect_shape

__all__ = ["hashes", "secp256k1", "KeyShape", "detect_shape"]
