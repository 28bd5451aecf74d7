"""
chain-identify: classify blockchain addresses and public keys.

Given an arbitrary string, work out which networks it could belong to,
validate it under each network's rules, return its canonical form, and for
public keys derive the matching address on every chain that has a known
derivation.

Quick start::

    from chain_identify import identify

    result = identify("0xd8dA6BF26964aF9D7eEd9e03E53415D37aA96045")
    result.normalized   # EIP-55 form
    result.chains()     # ["ethereum", "polygon", "bsc", ...]
"""

from chain_identify.config import DEFAULT_SCORING, ScoringConfig
from chain_identify.errors import (
    ChecksumError,
    DerivationNotImplemented,
    EncodingError,
    IdentificationError,
    InvalidInput,
    PointError,
)
from chain_identify.identify import identify, is_identifiable
from chain_identify.models import Candidate, IdentificationResult
from chain_identify.registry import Registry, default_registry

__version__ = "0.1.0"

__all__ = [
    "identify",
    "is_identifiable",
    "Candidate",
    "IdentificationResult",
    "ScoringConfig",
    "DEFAULT_SCORING",
    "Registry",
    "default_registry",
    "IdentificationError",
    "InvalidInput",
    "DerivationNotImplemented",
    "EncodingError",
    "ChecksumError",
    "PointError",
]
