"""
chain_identify.resolve — turn an InputSignature into candidates.
"""

from chain_identify.resolve.addresses import Resolution, resolve_addresses
from chain_identify.resolve.public_keys import detect_public_key, resolve_public_key

__all__ = ["Resolution", "resolve_addresses", "detect_public_key", "resolve_public_key"]
