"""
Confidence scoring configuration.

The tier values may be tuned, but their ordering is fixed:

    checksum_unambiguous > checksum_shared > unchecksummed > length_only

Non-primary chains that share an address shape with other chains score
`sibling_penalty` below the primary chain of that shape. Testnet formats
score `testnet_penalty` below the matching mainnet tier, which keeps a
verified testnet address above the unchecksummed tier.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringConfig:
    """Confidence assigned to each evidence tier."""

    checksum_unambiguous: float = 0.95
    checksum_shared: float = 0.90
    unchecksummed: float = 0.70
    length_only: float = 0.50
    derived: float = 0.80
    sibling_penalty: float = 0.05
    testnet_penalty: float = 0.15

    def __post_init__(self):
        for name in (
            "checksum_unambiguous",
            "checksum_shared",
            "unchecksummed",
            "length_only",
            "derived",
            "sibling_penalty",
            "testnet_penalty",
        ):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {value}")

        if not (self.checksum_unambiguous > self.checksum_shared > self.unchecksummed > self.length_only):
            raise ValueError(
                "Confidence tiers must be strictly ordered: "
                "checksum_unambiguous > checksum_shared > unchecksummed > length_only"
            )
        # a penalized sibling must still outrank the next tier down
        if self.checksum_shared - self.sibling_penalty <= self.unchecksummed:
            raise ValueError("sibling_penalty pushes checksummed siblings below the unchecksummed tier")
        if self.unchecksummed - self.sibling_penalty <= self.length_only:
            raise ValueError("sibling_penalty pushes unchecksummed siblings below the length-only tier")
        if self.checksum_unambiguous - self.testnet_penalty <= self.unchecksummed:
            raise ValueError("testnet_penalty pushes verified testnet addresses below the unchecksummed tier")
        if self.testnet_penalty <= 0.0:
            raise ValueError("testnet_penalty must rank testnet addresses below mainnet")


DEFAULT_SCORING = ScoringConfig()
