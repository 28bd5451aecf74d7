"""
chain_identify.registry — chain metadata.

Provides:
- Row types: ChainDescriptor, AddressFormat, DerivationSpec
- Closed variant sets: Encoding, KeyType, KeyForm, HashStep
- Registry and the lazily built default_registry()
"""

from chain_identify.registry.chains import CHAINS
from chain_identify.registry.models import (
    AddressFormat,
    ChainDescriptor,
    DerivationSpec,
    Encoding,
    HashStep,
    KeyForm,
    KeyType,
)
from chain_identify.registry.registry import Registry, default_registry

__all__ = [
    "CHAINS",
    "AddressFormat",
    "ChainDescriptor",
    "DerivationSpec",
    "Encoding",
    "HashStep",
    "KeyForm",
    "KeyType",
    "Registry",
    "default_registry",
]
