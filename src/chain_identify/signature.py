"""
Input characterization.

characterize() looks at a string once and records every encoding family it
could belong to, together with the facts later stages need (decoded bytes,
HRP, SS58 prefix). It is deliberately permissive: a family is dropped only
when the text cannot possibly be in it. Checksums are not verified here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from chain_identify.encoding import base58, bech32, hexcodec, ss58
from chain_identify.errors import EncodingError
from chain_identify.registry.models import Encoding

logger = logging.getLogger("chain_identify.signature")

LEADING_CHARS = 4
_BASE58CHECK_MIN_BYTES = 5


class CasePattern(str, Enum):
    LOWER = "lower"
    UPPER = "upper"
    MIXED = "mixed"
    NONE = "none"


@dataclass(frozen=True)
class InputSignature:
    """What a single input string could be."""

    text: str
    encodings: frozenset[Encoding]
    case: CasePattern
    has_0x: bool = False
    hex_bytes: bytes | None = None
    base58_bytes: bytes | None = None
    hrp: str | None = None
    ss58_prefix: int | None = None
    ss58_payload_length: int | None = None

    @property
    def leading(self) -> str:
        return self.text[:LEADING_CHARS]

    @property
    def decoded_length(self) -> int | None:
        if self.hex_bytes is not None:
            return len(self.hex_bytes)
        if self.base58_bytes is not None:
            return len(self.base58_bytes)
        return None

    def supports(self, encoding: Encoding) -> bool:
        return encoding in self.encodings


def case_pattern(text: str) -> CasePattern:
    has_lower = any(c.islower() for c in text)
    has_upper = any(c.isupper() for c in text)
    if has_lower and has_upper:
        return CasePattern.MIXED
    if has_lower:
        return CasePattern.LOWER
    if has_upper:
        return CasePattern.UPPER
    return CasePattern.NONE


def characterize(text: str) -> InputSignature:
    """
    Build the InputSignature of `text` after stripping surrounding whitespace.

    An empty signature (no encodings) is returned for text that fits nothing.
    """
    text = text.strip()
    encodings: set[Encoding] = set()
    body, has_0x = hexcodec.strip_prefix(text)
    facts: dict = {"has_0x": has_0x}

    if hexcodec.is_hex(text):
        encodings.add(Encoding.HEX)
        facts["hex_bytes"] = hexcodec.decode(text)

    try:
        hrp, _ = bech32.split(text, max_length=None)
    except EncodingError:
        pass
    else:
        encodings.add(Encoding.BECH32)
        facts["hrp"] = hrp

    if text and base58.is_base58(text):
        raw = base58.decode(text)
        facts["base58_bytes"] = raw
        encodings.add(Encoding.BASE58)
        if len(raw) >= _BASE58CHECK_MIN_BYTES:
            encodings.add(Encoding.BASE58CHECK)
        try:
            prefix, _, payload, _ = ss58.split(raw)
        except EncodingError:
            pass
        else:
            encodings.add(Encoding.SS58)
            facts["ss58_prefix"] = prefix
            facts["ss58_payload_length"] = len(payload)

    signature = InputSignature(
        text=text,
        encodings=frozenset(encodings),
        case=case_pattern(body if has_0x else text),
        **facts,
    )
    logger.debug(
        f"Characterized {signature.leading!r}...: "
        f"{sorted(e.value for e in signature.encodings)}, case={signature.case.value}"
    )
    return signature
