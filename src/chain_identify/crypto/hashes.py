"""
Hash functions used by address formats and derivation pipelines.

SHA-2, SHA-3 and Blake2b come from hashlib. Keccak-256 (the pre-standard
padding Ethereum uses, not SHA3-256) and RIPEMD-160 come from pycryptodome,
since OpenSSL builds are free to drop ripemd160 from hashlib.
"""

from __future__ import annotations

import hashlib

from Crypto.Hash import RIPEMD160, keccak


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def double_sha256(data: bytes) -> bytes:
    return sha256(sha256(data))


def sha3_256(data: bytes) -> bytes:
    return hashlib.sha3_256(data).digest()


def keccak256(data: bytes) -> bytes:
    """Keccak-256 as used by Ethereum (EIP-55 and address derivation)."""
    return keccak.new(digest_bits=256, data=data).digest()


def ripemd160(data: bytes) -> bytes:
    return RIPEMD160.new(data).digest()


def hash160(data: bytes) -> bytes:
    """RIPEMD160(SHA256(data)), the Bitcoin public-key hash."""
    return ripemd160(sha256(data))


def blake2b_512(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=64).digest()


def blake2b_256(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=32).digest()


def blake2b_224(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=28).digest()
