"""
Public key -> address derivation.

A DerivationSpec is interpreted in three steps: serialize the key
(prepare_key), hash it (run_pipeline), cut and prefix the digest. The
resulting payload is encoded with the target format's own encoding
(encode_address).
"""

from __future__ import annotations

from chain_identify.checksum import base58check, eip55, ss58
from chain_identify.checksum import bech32 as bech32_check
from chain_identify.crypto import hashes, secp256k1
from chain_identify.crypto.keys import KeyShape
from chain_identify.encoding import base58, hexcodec
from chain_identify.registry.models import (
    AddressFormat,
    DerivationSpec,
    Encoding,
    HashStep,
    KeyForm,
)

# witness v0 key hash
_SEGWIT_VERSION = 0


def prepare_key(key: bytes, shape: KeyShape, form: KeyForm) -> bytes:
    """
    Serialize `key` the way a pipeline expects it.

    Raises:
        PointError: secp256k1 forms requested for an invalid point
        ValueError: a secp256k1 form requested for a non-secp256k1 key
    """
    if form is KeyForm.AS_GIVEN or form is KeyForm.RAW:
        return key
    if not shape.is_secp256k1:
        raise ValueError(f"{form.value} serialization needs a secp256k1 key, got {shape.value}")
    if form is KeyForm.COMPRESSED:
        if shape is KeyShape.SECP256K1_COMPRESSED:
            return key
        return secp256k1.compress(key)
    if form is KeyForm.UNCOMPRESSED_XY:
        return secp256k1.to_uncompressed(key)[1:]
    raise ValueError(f"Unhandled key form {form!r}")


def hash_step(step: HashStep, data: bytes) -> bytes:
    if step is HashStep.SHA256:
        return hashes.sha256(data)
    if step is HashStep.KECCAK256:
        return hashes.keccak256(data)
    if step is HashStep.RIPEMD160:
        return hashes.ripemd160(data)
    if step is HashStep.BLAKE2B_256:
        return hashes.blake2b_256(data)
    if step is HashStep.BLAKE2B_224:
        return hashes.blake2b_224(data)
    raise ValueError(f"Unhandled hash step {step!r}")


def run_pipeline(data: bytes, steps: tuple[HashStep, ...]) -> bytes:
    for step in steps:
        data = hash_step(step, data)
    return data


def derive_payload(key: bytes, shape: KeyShape, spec: DerivationSpec) -> bytes:
    digest = run_pipeline(prepare_key(key, shape, spec.key_form), spec.pipeline)
    if spec.take_first is not None:
        digest = digest[: spec.take_first]
    elif spec.take_last is not None:
        digest = digest[-spec.take_last:]
    return spec.header + digest


def encode_address(fmt: AddressFormat, payload: bytes) -> str:
    """Encode a derived payload in the format's own text form."""
    encoding = fmt.encoding
    if encoding is Encoding.HEX:
        if len(payload) == eip55.ADDRESS_LENGTH:
            return eip55.to_checksum_address(payload)
        return hexcodec.encode(payload)
    if encoding is Encoding.BASE58CHECK:
        return base58check.encode(fmt.version, payload)
    if encoding is Encoding.BECH32:
        if fmt.witness:
            return bech32_check.encode_witness(fmt.hrp, _SEGWIT_VERSION, payload)
        return bech32_check.encode_bytes(fmt.hrp, payload)
    if encoding is Encoding.SS58:
        return ss58.encode(fmt.ss58_prefix, payload)
    if encoding is Encoding.BASE58:
        return base58.encode(payload)
    raise ValueError(f"Unhandled encoding {encoding!r}")


def derive_address(key: bytes, shape: KeyShape, fmt: AddressFormat, spec: DerivationSpec) -> str:
    return encode_address(fmt, derive_payload(key, shape, spec))
