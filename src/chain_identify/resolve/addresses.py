"""
Address candidate resolution.

Every encoding family the input is compatible with is decoded once and
checked by its validator. The decoded form is then matched against the
registry rows for that family, producing at most one candidate per chain.
Decode failures are not fatal here; they are collected as reasons so the
caller can explain why nothing matched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from chain_identify.checksum import base58check, eip55, ss58
from chain_identify.checksum import bech32 as bech32_check
from chain_identify.config import ScoringConfig
from chain_identify.encoding import base58, hexcodec
from chain_identify.encoding.bech32 import Variant
from chain_identify.models import Candidate
from chain_identify.registry.models import AddressFormat, ChainDescriptor, Encoding
from chain_identify.registry.registry import Registry
from chain_identify.signature import InputSignature

logger = logging.getLogger("chain_identify.resolve.addresses")


@dataclass(frozen=True)
class DecodedAddress:
    """An address that passed its family validator."""

    encoding: Encoding
    canonical: str
    payload: bytes
    checksummed: bool
    evidence: str
    version: int | None = None
    hrp: str | None = None
    witness_version: int | None = None
    variant: Variant | None = None
    ss58_prefix: int | None = None


@dataclass(frozen=True)
class Resolution:
    """A candidate together with the input's canonical form for that chain."""

    candidate: Candidate
    normalized: str


# ==============================================================================
# Family decoders
# ==============================================================================


def decode_hex(text: str) -> DecodedAddress:
    payload = hexcodec.decode(text)
    if len(payload) != eip55.ADDRESS_LENGTH:
        return DecodedAddress(Encoding.HEX, hexcodec.encode(payload), payload, False, "hex payload")
    state, canonical = eip55.validate(text)
    if state is eip55.ChecksumState.VERIFIED:
        return DecodedAddress(Encoding.HEX, canonical, payload, True, "EIP-55 checksum verified")
    return DecodedAddress(Encoding.HEX, canonical, payload, False, "single-case hex, no EIP-55 checksum")


def decode_base58check(text: str) -> DecodedAddress:
    version, payload = base58check.decode(text)
    return DecodedAddress(
        Encoding.BASE58CHECK,
        base58check.encode(version, payload),
        payload,
        True,
        f"Base58Check checksum verified, version 0x{version:02x}",
        version=version,
    )


def decode_bech32(text: str) -> DecodedAddress:
    hrp, payload, variant = bech32_check.decode_bytes(text, max_length=None)
    return DecodedAddress(
        Encoding.BECH32,
        bech32_check.encode_bytes(hrp, payload, variant),
        payload,
        True,
        f"{variant.value} checksum verified, HRP '{hrp}'",
        hrp=hrp,
        variant=variant,
    )


def decode_segwit(text: str) -> DecodedAddress:
    hrp, version, program = bech32_check.decode_witness(text)
    variant = Variant.BECH32 if version == 0 else Variant.BECH32M
    return DecodedAddress(
        Encoding.BECH32,
        bech32_check.encode_witness(hrp, version, program),
        program,
        True,
        f"{variant.value} checksum verified, HRP '{hrp}', witness v{version}",
        hrp=hrp,
        witness_version=version,
        variant=variant,
    )


def decode_ss58(text: str) -> DecodedAddress:
    prefix, payload = ss58.decode(text)
    return DecodedAddress(
        Encoding.SS58,
        ss58.encode(prefix, payload),
        payload,
        True,
        f"SS58 checksum verified, network prefix {prefix}",
        ss58_prefix=prefix,
    )


def decode_base58(text: str) -> DecodedAddress:
    payload = base58.decode(text)
    return DecodedAddress(
        Encoding.BASE58,
        base58.encode(payload),
        payload,
        False,
        f"plain Base58, {len(payload)} bytes",
    )


def _decoder_for(fmt: AddressFormat):
    encoding = fmt.encoding
    if encoding is Encoding.HEX:
        return decode_hex
    if encoding is Encoding.BASE58CHECK:
        return decode_base58check
    if encoding is Encoding.BECH32:
        return decode_segwit if fmt.witness else decode_bech32
    if encoding is Encoding.SS58:
        return decode_ss58
    if encoding is Encoding.BASE58:
        return decode_base58
    raise ValueError(f"Unhandled encoding {encoding!r}")


# ==============================================================================
# Matching and scoring
# ==============================================================================


def check_format(decoded: DecodedAddress, fmt: AddressFormat, text: str) -> str | None:
    """Return why `decoded` does not satisfy `fmt`, or None when it does."""
    if not fmt.accepts_length(len(decoded.payload)):
        return f"payload is {len(decoded.payload)} bytes, expected {fmt.payload_lengths}"
    if fmt.max_length is not None and len(text) > fmt.max_length:
        return f"{len(text)} characters exceeds the {fmt.max_length}-character limit"
    if fmt.encoding is Encoding.BECH32 and not fmt.witness and decoded.variant is not Variant.BECH32:
        return f"'{fmt.hrp}' addresses use bech32, got {decoded.variant.value}"
    return None


def score(
    decoded: DecodedAddress,
    chain: ChainDescriptor,
    fmt: AddressFormat,
    registry: Registry,
    config: ScoringConfig,
) -> float:
    """Confidence tier for a validated match."""
    shared = registry.is_shared(fmt)
    if fmt.length_only:
        confidence = config.length_only
    elif not decoded.checksummed:
        confidence = config.unchecksummed
    elif shared:
        confidence = config.checksum_shared
    else:
        confidence = config.checksum_unambiguous

    if shared and not chain.primary:
        confidence -= config.sibling_penalty
    if fmt.testnet:
        confidence -= config.testnet_penalty
    return max(confidence, 0.0)


def resolve_addresses(
    signature: InputSignature,
    registry: Registry,
    config: ScoringConfig,
) -> tuple[list[Resolution], list[str]]:
    """
    Match the input against every structurally compatible registry row.

    Length-only matches (plain Base58) are dropped once any other chain
    verified a checksum on the same input.

    Returns:
        (resolutions in registry order, failure reasons)
    """
    text = signature.text
    decoded_cache: dict = {}
    best: dict[str, Resolution] = {}
    verified: set[str] = set()
    guessed: dict[str, AddressFormat] = {}
    failures: list[str] = []

    for chain, fmt in registry.compatible(signature):
        decoder = _decoder_for(fmt)
        if decoder not in decoded_cache:
            try:
                decoded_cache[decoder] = decoder(text)
            except ValueError as e:
                decoded_cache[decoder] = None
                failures.append(f"{fmt.encoding.value}: {e}")
                logger.debug(f"{fmt.encoding.value} decode failed: {e}")
        decoded = decoded_cache[decoder]
        if decoded is None:
            continue

        mismatch = check_format(decoded, fmt, text)
        if mismatch:
            failures.append(f"{chain.id} {fmt.label}: {mismatch}")
            continue

        confidence = score(decoded, chain, fmt, registry, config)
        existing = best.get(chain.id)
        if existing is not None and existing.candidate.confidence >= confidence:
            continue

        shared_note = "; shape shared with other chains" if registry.is_shared(fmt) else ""
        best[chain.id] = Resolution(
            candidate=Candidate(
                chain=chain.id,
                confidence=confidence,
                reasoning=f"{chain.name} {fmt.label} address: {decoded.evidence}{shared_note}",
            ),
            normalized=decoded.canonical,
        )
        verified.discard(chain.id)
        guessed.pop(chain.id, None)
        if fmt.length_only:
            guessed[chain.id] = fmt
        elif decoded.checksummed:
            verified.add(chain.id)

    # a verified checksum outweighs a bare length match from another family
    if verified:
        for chain_id, fmt in guessed.items():
            logger.debug(f"Dropping length-only {chain_id} {fmt.label} match")
            del best[chain_id]

    logger.debug(f"Address resolution: {len(best)} candidate(s), {len(failures)} failure(s)")
    return list(best.values()), failures
