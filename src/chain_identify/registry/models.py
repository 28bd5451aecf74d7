"""
Registry row types.

A chain is a list of address formats. A format names one encoding family and
the discriminator that family uses; a format may also say how to derive its
address from a public key, as a short pipeline of hash steps.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Encoding(str, Enum):
    """Address encoding families."""

    HEX = "hex"
    BASE58CHECK = "base58check"
    BECH32 = "bech32"
    BASE58 = "base58"
    SS58 = "ss58"


class KeyType(str, Enum):
    SECP256K1 = "secp256k1"
    # 32 raw bytes; Ed25519 and sr25519 share this shape
    ED25519 = "ed25519"


class KeyForm(str, Enum):
    """Serialization of the public key fed to a derivation pipeline."""

    AS_GIVEN = "as-given"
    COMPRESSED = "compressed"
    UNCOMPRESSED_XY = "uncompressed-xy"
    RAW = "raw"


class HashStep(str, Enum):
    SHA256 = "sha256"
    KECCAK256 = "keccak256"
    RIPEMD160 = "ripemd160"
    BLAKE2B_256 = "blake2b-256"
    BLAKE2B_224 = "blake2b-224"


@dataclass(frozen=True)
class DerivationSpec:
    """
    Public key -> address payload.

    The key serialized as `key_form` goes through `pipeline` in order; the
    digest is then cut to its first `take_first` or last `take_last` bytes and
    prefixed with `header`. The format's own encoding turns the payload into
    text.
    """

    key_type: KeyType
    key_form: KeyForm
    pipeline: tuple[HashStep, ...] = ()
    take_first: int | None = None
    take_last: int | None = None
    header: bytes = b""

    def __post_init__(self):
        if self.take_first is not None and self.take_last is not None:
            raise ValueError("take_first and take_last are mutually exclusive")


@dataclass(frozen=True)
class AddressFormat:
    """
    One address shape of a chain.

    Exactly one discriminator applies per encoding:
      - HEX: text_prefix ("0x")
      - BASE58CHECK: version byte
      - BECH32: hrp, plus `witness` for SegWit programs
      - SS58: ss58_prefix
      - BASE58: none, only payload_lengths

    An empty `payload_lengths` leaves the length to the encoding's own rules
    (witness programs).

    `testnet` marks a test network form; it scores below the mainnet tier.
    """

    encoding: Encoding
    label: str
    payload_lengths: tuple[int, ...] = ()
    text_prefix: str | None = None
    version: int | None = None
    hrp: str | None = None
    witness: bool = False
    ss58_prefix: int | None = None
    max_length: int | None = 90
    testnet: bool = False
    derivations: tuple[DerivationSpec, ...] = ()

    def __post_init__(self):
        discriminators = {
            Encoding.HEX: self.text_prefix,
            Encoding.BASE58CHECK: self.version,
            Encoding.BECH32: self.hrp,
            Encoding.SS58: self.ss58_prefix,
        }
        if self.encoding in discriminators and discriminators[self.encoding] is None:
            raise ValueError(f"{self.encoding.value} format '{self.label}' lacks its discriminator")
        if self.encoding is Encoding.BASE58 and not self.payload_lengths:
            raise ValueError(f"base58 format '{self.label}' needs payload lengths")

    def accepts_length(self, length: int) -> bool:
        return not self.payload_lengths or length in self.payload_lengths

    def shape(self) -> tuple:
        """Everything that decides whether an input fits; the label is excluded."""
        return (
            self.encoding,
            self.payload_lengths,
            self.text_prefix,
            self.version,
            self.hrp,
            self.witness,
            self.ss58_prefix,
            self.testnet,
        )

    @property
    def length_only(self) -> bool:
        return self.encoding is Encoding.BASE58


@dataclass(frozen=True)
class ChainDescriptor:
    id: str
    name: str
    formats: tuple[AddressFormat, ...]
    primary: bool = False

    def __post_init__(self):
        if not self.formats:
            raise ValueError(f"Chain '{self.id}' declares no address formats")
