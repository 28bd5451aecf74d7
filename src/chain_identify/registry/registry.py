"""
Read-only chain registry.

The registry is built once from a sequence of ChainDescriptor rows and never
changes afterwards; it only holds tuples and MappingProxyType views, so it can
be shared between threads without locking.
"""

from __future__ import annotations

import functools
from collections import Counter
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable

from chain_identify.registry.chains import CHAINS
from chain_identify.registry.models import (
    AddressFormat,
    ChainDescriptor,
    DerivationSpec,
    Encoding,
    KeyType,
)

if TYPE_CHECKING:
    from chain_identify.signature import InputSignature


class Registry:
    """Chain metadata lookup."""

    def __init__(self, chains: Iterable[ChainDescriptor]):
        chains = tuple(chains)
        duplicates = [cid for cid, n in Counter(c.id for c in chains).items() if n > 1]
        if duplicates:
            raise ValueError(f"Duplicate chain ids in registry: {', '.join(sorted(duplicates))}")

        self._chains = chains
        self._by_id = MappingProxyType({c.id: c for c in chains})
        self._order = MappingProxyType({c.id: i for i, c in enumerate(chains)})
        # number of chains declaring each shape
        self._shape_counts = MappingProxyType(
            Counter(shape for c in chains for shape in {f.shape() for f in c.formats})
        )

    def __len__(self) -> int:
        return len(self._chains)

    def __contains__(self, chain_id: object) -> bool:
        return chain_id in self._by_id

    @property
    def chains(self) -> tuple[ChainDescriptor, ...]:
        return self._chains

    def get(self, chain_id: str) -> ChainDescriptor:
        try:
            return self._by_id[chain_id]
        except KeyError:
            raise KeyError(f"Unknown chain '{chain_id}'") from None

    def order(self, chain_id: str) -> int:
        """Declaration index, used as the ranking tie-break."""
        return self._order[chain_id]

    def formats_for(self, encoding: Encoding) -> list[tuple[ChainDescriptor, AddressFormat]]:
        return [(c, f) for c in self._chains for f in c.formats if f.encoding is encoding]

    def is_shared(self, fmt: AddressFormat) -> bool:
        """True when more than one chain declares this exact shape."""
        return self._shape_counts.get(fmt.shape(), 0) > 1

    def compatible(self, signature: InputSignature) -> list[tuple[ChainDescriptor, AddressFormat]]:
        """
        Rows whose structural constraints the input satisfies.

        Checks the encoding family, the family's discriminator and, where the
        signature already knows it, the payload length. Checksums are left to
        the resolver.
        """
        return [
            (chain, fmt)
            for chain in self._chains
            for fmt in chain.formats
            if signature.supports(fmt.encoding) and _fits(signature, fmt)
        ]

    def derivations_for(self, key_type: KeyType) -> list[tuple[ChainDescriptor, AddressFormat, DerivationSpec]]:
        """First derivation accepting `key_type` for each chain, in declaration order."""
        rows = []
        for chain in self._chains:
            for fmt in chain.formats:
                spec = next((d for d in fmt.derivations if d.key_type is key_type), None)
                if spec is not None:
                    rows.append((chain, fmt, spec))
                    break
        return rows


# ------------------------------------------------------------------------------
# Internal helpers
# ------------------------------------------------------------------------------


def _fits(signature: InputSignature, fmt: AddressFormat) -> bool:
    encoding = fmt.encoding
    if encoding is Encoding.HEX:
        if fmt.text_prefix == "0x" and not signature.has_0x:
            return False
        return fmt.accepts_length(len(signature.hex_bytes))
    if encoding is Encoding.BASE58CHECK:
        raw = signature.base58_bytes
        return raw[0] == fmt.version and fmt.accepts_length(len(raw) - 5)
    if encoding is Encoding.BECH32:
        return signature.hrp == fmt.hrp
    if encoding is Encoding.SS58:
        return signature.ss58_prefix == fmt.ss58_prefix and fmt.accepts_length(signature.ss58_payload_length)
    if encoding is Encoding.BASE58:
        return fmt.accepts_length(len(signature.base58_bytes))
    raise ValueError(f"Unhandled encoding {encoding!r}")


@functools.lru_cache(maxsize=None)
def default_registry() -> Registry:
    """The built-in registry, constructed on first use."""
    return Registry(CHAINS)
