"""
Result models returned by identify().
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Candidate(BaseModel):
    """One plausible interpretation of the input."""

    chain: str
    confidence: float = Field(ge=0.0, le=1.0)
    reasoning: str
    derived_address: str | None = None


class IdentificationResult(BaseModel):
    """
    Outcome of a successful identification.

    `candidates` is ordered by confidence, highest first; equal scores keep
    registry declaration order. `normalized` is the input in the canonical
    form of the first candidate.
    """

    normalized: str
    candidates: list[Candidate] = Field(min_length=1)

    @property
    def top(self) -> Candidate:
        return self.candidates[0]

    def chains(self) -> list[str]:
        return [c.chain for c in self.candidates]

    def to_summary(self) -> dict:
        """Compact dict for logs and display."""
        return {
            "normalized": self.normalized,
            "top": self.top.chain,
            "candidates": {c.chain: round(c.confidence, 4) for c in self.candidates},
        }
