"""
Unit tests for chain_identify.resolve.derivation and public key resolution.

Keys used throughout:
  - the secp256k1 generator G (private key 1), compressed and uncompressed
  - the 32 bytes of G.x read as an Ed25519-like key
"""

import pytest

from chain_identify.config import DEFAULT_SCORING
from chain_identify.crypto.keys import KeyShape
from chain_identify.errors import DerivationNotImplemented, InvalidInput
from chain_identify.registry import (
    AddressFormat,
    ChainDescriptor,
    Encoding,
    HashStep,
    KeyForm,
    Registry,
    default_registry,
)
from chain_identify.registry.chains import EVM_CHAINS
from chain_identify.resolve.derivation import (
    derive_address,
    encode_address,
    prepare_key,
    run_pipeline,
)
from chain_identify.resolve.public_keys import detect_public_key, resolve_public_key
from chain_identify.signature import characterize

G_X = "79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
G_Y = "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
G_COMPRESSED = "02" + G_X
G_UNCOMPRESSED = "04" + G_X + G_Y

EVM_FROM_G = "0x7E5F4552091A69125d5DfCb7b8C2659029395Bdf"

SECP256K1_COMPRESSED_EXPECTED = {
    "ethereum": EVM_FROM_G,
    "bitcoin": "1BgGZ9tcN4rm9KBzDn7KprQz87SZ26SAMH",
    "litecoin": "LVuDpNCSSj6pQ7t9Pv6d6sUkLKoqDEVUnJ",
    "dogecoin": "DFpN6QqFfUm3gKNaxN6tNcab1FArL9cZLE",
    "tron": "TMVQGm1qAQYVdetCeGRRkTWYYrLXuHK2HC",
    "polkadot": "1wN11UvgKd7qkoMoRuVZNob1kAC3AW7PgjY2uAvErixsbTJ",
    "kusama": "DWgWzZjSuNa9scHcVfYKBLSJiSn9Xm9mZqoGGTXAZuwSNjp",
    "substrate": "5D14rgDrpYMeQDnqqnrVRDySA8AYLrwyKC13scBZgmhSh9ur",
}

ED25519_EXPECTED = {
    "solana": "9CEiuSgdHtub59syFf4Usf5eEJaEN5eQqEjJNeCatrJs",
    "polkadot": "13kdMaTqmFKf7yBZhRSfWBp1Qp1cTD4n3Yj9AAZSG8Yr5oXQ",
    "kusama": "FKwsZYeXq57S5zVWVCiFzLrhnJCZaKpRRqQPXr3BqjpeH1W",
    "substrate": "5EpLDFCmuU4BgSB3jnPfN2yrZC1xkuWdy3zezsa5i3XKuTni",
    "cosmos-hub": "cosmos1zvhnn2vvxxa2mkax2f046sljj4z8yztlvpaydc",
    "osmosis": "osmo1zvhnn2vvxxa2mkax2f046sljj4z8yztly6w5m2",
    "juno": "juno1zvhnn2vvxxa2mkax2f046sljj4z8yztl6n7l2y",
    "akash": "akash1zvhnn2vvxxa2mkax2f046sljj4z8yztlp6sr5z",
    "stargaze": "stars1zvhnn2vvxxa2mkax2f046sljj4z8yztlca2exf",
    "secret-network": "secret1zvhnn2vvxxa2mkax2f046sljj4z8yztlwyfdsy",
    "terra": "terra1zvhnn2vvxxa2mkax2f046sljj4z8yztl298y0c",
    "kava": "kava1zvhnn2vvxxa2mkax2f046sljj4z8yztls5feml",
    "regen": "regen1zvhnn2vvxxa2mkax2f046sljj4z8yztlnrkcmu",
    "sentinel": "sent1zvhnn2vvxxa2mkax2f046sljj4z8yztlh6tafh",
    "cardano": "addr1v8r52uheum3mrnhtfegcqa592utpkv54pvvpnk3kmyws73q2auh7r",
}


def _derived(text, registry=None):
    resolutions = resolve_public_key(characterize(text), registry or default_registry(), DEFAULT_SCORING)
    return {r.candidate.chain: r.candidate.derived_address for r in resolutions}


# ==============================================================================
# Pipeline building blocks
# ==============================================================================


class TestPrepareKey:
    def test_uncompressed_xy_from_compressed(self):
        key = bytes.fromhex(G_COMPRESSED)
        out = prepare_key(key, KeyShape.SECP256K1_COMPRESSED, KeyForm.UNCOMPRESSED_XY)
        assert out.hex() == G_X + G_Y

    def test_compressed_from_uncompressed(self):
        key = bytes.fromhex(G_UNCOMPRESSED)
        out = prepare_key(key, KeyShape.SECP256K1_UNCOMPRESSED, KeyForm.COMPRESSED)
        assert out.hex() == G_COMPRESSED

    def test_as_given_is_untouched(self):
        key = bytes.fromhex(G_UNCOMPRESSED)
        assert prepare_key(key, KeyShape.SECP256K1_UNCOMPRESSED, KeyForm.AS_GIVEN) == key

    def test_secp_form_on_ed25519_key_rejected(self):
        with pytest.raises(ValueError, match="needs a secp256k1 key"):
            prepare_key(bytes.fromhex(G_X), KeyShape.ED25519, KeyForm.COMPRESSED)


class TestPipeline:
    def test_empty_pipeline_is_identity(self):
        assert run_pipeline(b"abc", ()) == b"abc"

    def test_steps_run_in_order(self):
        out = run_pipeline(b"abc", (HashStep.SHA256, HashStep.RIPEMD160))
        assert len(out) == 20

    def test_encode_address_hex_is_checksummed(self):
        fmt = EVM_CHAINS[0].formats[0]
        assert encode_address(fmt, bytes.fromhex(EVM_FROM_G[2:].lower())) == EVM_FROM_G

    def test_encode_address_witness(self):
        fmt = default_registry().get("bitcoin").formats[2]
        payload = bytes.fromhex("751e76e8199196d454941c45d1b3a323f1433bd6")
        assert encode_address(fmt, payload) == "bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4"

    def test_derive_address(self):
        chain = default_registry().get("tron")
        fmt = chain.formats[0]
        key = bytes.fromhex(G_UNCOMPRESSED)
        assert derive_address(key, KeyShape.SECP256K1_UNCOMPRESSED, fmt, fmt.derivations[0]) == (
            SECP256K1_COMPRESSED_EXPECTED["tron"]
        )


# ==============================================================================
# Public key detection
# ==============================================================================


class TestDetectPublicKey:
    def test_hex_compressed(self):
        key = detect_public_key(characterize(G_COMPRESSED))
        assert key.shape is KeyShape.SECP256K1_COMPRESSED
        assert key.source == "hex"

    def test_hex_with_prefix(self):
        key = detect_public_key(characterize("0x" + G_X))
        assert key.shape is KeyShape.ED25519
        assert key.normalized(had_0x=True) == "0x" + G_X

    def test_base58_ed25519(self):
        key = detect_public_key(characterize(ED25519_EXPECTED["solana"]))
        assert key.shape is KeyShape.ED25519
        assert key.raw.hex() == G_X
        assert key.source == "base58"

    def test_off_curve_rejected(self):
        with pytest.raises(InvalidInput, match="Invalid secp256k1 public key"):
            detect_public_key(characterize("02" + (5).to_bytes(32, "big").hex()))

    def test_not_a_key(self):
        assert detect_public_key(characterize("0x" + "11" * 20)) is None


# ==============================================================================
# Derivation across the registry
# ==============================================================================


class TestDerivedAddresses:
    def test_ed25519_key(self):
        assert _derived(G_X) == ED25519_EXPECTED

    def test_compressed_key(self):
        derived = _derived(G_COMPRESSED)
        for chain_id, address in SECP256K1_COMPRESSED_EXPECTED.items():
            assert derived[chain_id] == address
        assert len(derived) == 17

    def test_all_evm_chains_share_the_derived_address(self):
        derived = _derived(G_COMPRESSED)
        assert {derived[c.id] for c in EVM_CHAINS} == {EVM_FROM_G}

    def test_compressed_and_uncompressed_agree_for_evm(self):
        assert _derived(G_COMPRESSED)["ethereum"] == _derived(G_UNCOMPRESSED)["ethereum"] == EVM_FROM_G

    def test_compressed_and_uncompressed_agree_for_substrate(self):
        assert _derived(G_COMPRESSED)["polkadot"] == _derived(G_UNCOMPRESSED)["polkadot"]

    def test_bitcoin_hashes_the_key_as_given(self):
        assert _derived(G_UNCOMPRESSED)["bitcoin"] == "1EHNa6Q4Jz2uvNExL497mE43ikXhwF6kZm"
        assert _derived(G_UNCOMPRESSED)["litecoin"] == "LYWKqJhtPeGyBAw7WC8R3F7ovxtzAiubdM"
        assert _derived(G_UNCOMPRESSED)["dogecoin"] == "DJRU7MLhcPwCTNRZ4e8gJzDebtG1H5M7pc"

    def test_confidence_and_normalized(self):
        resolutions = resolve_public_key(characterize(G_X.upper()), default_registry(), DEFAULT_SCORING)
        assert {r.candidate.confidence for r in resolutions} == {DEFAULT_SCORING.derived}
        assert {r.normalized for r in resolutions} == {G_X}

    def test_no_pipeline_for_key_type(self):
        registry = Registry(EVM_CHAINS)
        with pytest.raises(DerivationNotImplemented) as exc_info:
            resolve_public_key(characterize(G_X), registry, DEFAULT_SCORING)
        assert exc_info.value.key_type == "ed25519"

    def test_chain_without_pipelines_is_skipped(self):
        plain = ChainDescriptor(
            id="plain",
            name="Plain",
            formats=(AddressFormat(encoding=Encoding.BASE58, label="account", payload_lengths=(32,)),),
        )
        registry = Registry([plain, *EVM_CHAINS])
        assert set(_derived(G_COMPRESSED, registry)) == {c.id for c in EVM_CHAINS}
