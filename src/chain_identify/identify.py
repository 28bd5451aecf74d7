"""
Top-level identification.

identify() characterizes the input, resolves it as an address and, only if
that yields nothing, as a public key. Candidates come back ordered by
confidence with registry declaration order breaking ties.
"""

from __future__ import annotations

import logging

from chain_identify.config import DEFAULT_SCORING, ScoringConfig
from chain_identify.errors import IdentificationError, InvalidInput
from chain_identify.models import IdentificationResult
from chain_identify.registry.registry import Registry, default_registry
from chain_identify.resolve.addresses import resolve_addresses
from chain_identify.resolve.public_keys import resolve_public_key
from chain_identify.signature import characterize

logger = logging.getLogger("chain_identify.identify")


def identify(
    text: str,
    *,
    registry: Registry | None = None,
    config: ScoringConfig | None = None,
) -> IdentificationResult:
    """
    Identify the chains an address or public key belongs to.

    Args:
        text: address or public key; surrounding whitespace is ignored.
        registry: chain table to match against (default_registry() if None).
        config: confidence tiers (DEFAULT_SCORING if None).

    Returns:
        IdentificationResult with every matching chain.

    Raises:
        InvalidInput: not a string, or no encoding/chain interpretation succeeds
        DerivationNotImplemented: a public key no registered chain derives from
    """
    if not isinstance(text, str):
        raise InvalidInput(f"Expected a string, got {type(text).__name__}")
    if registry is None:
        registry = default_registry()
    if config is None:
        config = DEFAULT_SCORING

    signature = characterize(text)
    if not signature.text:
        raise InvalidInput("Empty input")
    if not signature.encodings:
        raise InvalidInput("Input matches no known address or key encoding")

    resolutions, failures = resolve_addresses(signature, registry, config)
    if not resolutions:
        resolutions = resolve_public_key(signature, registry, config)
    if not resolutions:
        reason = "; ".join(failures) if failures else "No known chain matches the input"
        logger.debug(f"No candidates for {signature.leading!r}...: {reason}")
        raise InvalidInput(reason)

    resolutions.sort(key=lambda r: (-r.candidate.confidence, registry.order(r.candidate.chain)))
    result = IdentificationResult(
        normalized=resolutions[0].normalized,
        candidates=[r.candidate for r in resolutions],
    )
    logger.debug(f"Identified {signature.leading!r}...: {result.to_summary()['candidates']}")
    return result


def is_identifiable(text: str) -> bool:
    """Return True if identify() would succeed for `text`."""
    try:
        identify(text)
        return True
    except IdentificationError:
        return False
