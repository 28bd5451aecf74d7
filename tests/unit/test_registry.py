"""
Unit tests for chain_identify.registry — row validation, lookups,
compatibility filtering and derivation selection.
"""

import pytest

from chain_identify.registry import (
    CHAINS,
    AddressFormat,
    ChainDescriptor,
    DerivationSpec,
    Encoding,
    KeyForm,
    KeyType,
    Registry,
    default_registry,
)
from chain_identify.signature import characterize

EVM_IDS = [
    "ethereum",
    "polygon",
    "bsc",
    "avalanche",
    "arbitrum",
    "optimism",
    "base",
    "fantom",
    "celo",
    "gnosis",
]
COSMOS_IDS = [
    "cosmos-hub",
    "osmosis",
    "juno",
    "akash",
    "stargaze",
    "secret-network",
    "terra",
    "kava",
    "regen",
    "sentinel",
]


def _chain(chain_id, **fmt):
    fmt.setdefault("encoding", Encoding.BASE58)
    fmt.setdefault("label", "account")
    fmt.setdefault("payload_lengths", (32,))
    return ChainDescriptor(id=chain_id, name=chain_id.title(), formats=(AddressFormat(**fmt),))


# ==============================================================================
# Row types
# ==============================================================================


class TestRowValidation:
    def test_format_requires_discriminator(self):
        with pytest.raises(ValueError, match="lacks its discriminator"):
            AddressFormat(encoding=Encoding.BASE58CHECK, label="p2pkh", payload_lengths=(20,))

    def test_base58_format_requires_lengths(self):
        with pytest.raises(ValueError, match="needs payload lengths"):
            AddressFormat(encoding=Encoding.BASE58, label="account")

    def test_chain_requires_formats(self):
        with pytest.raises(ValueError, match="declares no address formats"):
            ChainDescriptor(id="empty", name="Empty", formats=())

    def test_derivation_window_is_exclusive(self):
        with pytest.raises(ValueError, match="mutually exclusive"):
            DerivationSpec(KeyType.ED25519, KeyForm.RAW, take_first=20, take_last=20)

    def test_shape_ignores_label(self):
        a = AddressFormat(encoding=Encoding.HEX, label="a", payload_lengths=(20,), text_prefix="0x")
        b = AddressFormat(encoding=Encoding.HEX, label="b", payload_lengths=(20,), text_prefix="0x")
        assert a.shape() == b.shape()

    def test_rows_are_immutable(self):
        chain = default_registry().get("bitcoin")
        with pytest.raises(AttributeError):
            chain.primary = True


# ==============================================================================
# Registry lookups
# ==============================================================================


class TestRegistry:
    def test_default_registry_is_built_once(self):
        assert default_registry() is default_registry()

    def test_contents(self):
        registry = default_registry()
        assert len(registry) == len(CHAINS) == 29
        for chain_id in EVM_IDS + COSMOS_IDS + ["bitcoin", "litecoin", "dogecoin", "tron", "solana"]:
            assert chain_id in registry
        for chain_id in ("polkadot", "kusama", "substrate", "cardano"):
            assert chain_id in registry

    def test_only_ethereum_is_primary(self):
        assert [c.id for c in default_registry().chains if c.primary] == ["ethereum"]

    def test_get_and_order(self):
        registry = default_registry()
        assert registry.get("bitcoin").name == "Bitcoin"
        assert registry.order("ethereum") == 0
        assert registry.order("polygon") == 1

    def test_get_unknown(self):
        with pytest.raises(KeyError, match="Unknown chain"):
            default_registry().get("nope")

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="Duplicate chain ids"):
            Registry([_chain("a"), _chain("b"), _chain("a")])

    def test_formats_for(self):
        rows = default_registry().formats_for(Encoding.SS58)
        assert [(c.id, f.ss58_prefix) for c, f in rows] == [
            ("polkadot", 0),
            ("kusama", 2),
            ("substrate", 42),
        ]

    def test_is_shared(self):
        registry = default_registry()
        evm_format = registry.get("polygon").formats[0]
        p2pkh = registry.get("bitcoin").formats[0]
        assert registry.is_shared(evm_format)
        assert not registry.is_shared(p2pkh)

    def test_bitcoin_formats(self):
        formats = default_registry().get("bitcoin").formats
        assert [(f.label, f.version, f.hrp) for f in formats] == [
            ("p2pkh", 0x00, None),
            ("p2sh", 0x05, None),
            ("segwit", None, "bc"),
            ("testnet p2pkh", 0x6F, None),
            ("testnet p2sh", 0xC4, None),
            ("testnet segwit", None, "tb"),
        ]
        assert [f.testnet for f in formats] == [False] * 3 + [True] * 3

    def test_testnet_formats_carry_no_derivations(self):
        for chain in default_registry().chains:
            for fmt in chain.formats:
                if fmt.testnet:
                    assert fmt.derivations == ()

    def test_testnet_flag_is_part_of_the_shape(self):
        mainnet = AddressFormat(encoding=Encoding.BECH32, label="a", hrp="x")
        testnet = AddressFormat(encoding=Encoding.BECH32, label="a", hrp="x", testnet=True)
        assert mainnet.shape() != testnet.shape()


class TestCompatible:
    def test_evm_input(self):
        rows = default_registry().compatible(characterize("0xd8da6bf26964af9d7eed9e03e53415d37aa96045"))
        assert [c.id for c, _ in rows] == EVM_IDS

    def test_evm_requires_0x(self):
        rows = default_registry().compatible(characterize("d8da6bf26964af9d7eed9e03e53415d37aa96045"))
        assert rows == []

    def test_version_byte_selects_chain(self):
        rows = default_registry().compatible(characterize("1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"))
        assert [(c.id, f.label) for c, f in rows] == [("bitcoin", "p2pkh")]

    def test_hrp_selects_chain(self):
        rows = default_registry().compatible(characterize("osmo1zvhnn2vvxxa2mkax2f046sljj4z8yztly6w5m2"))
        assert [c.id for c, _ in rows] == ["osmosis"]

    def test_ss58_prefix_selects_chain(self):
        rows = default_registry().compatible(characterize("5C4hrfjw9DjXZTzV3MwzrrAr9P1MJhSrvWGWqi1eSuyUpnhM"))
        assert [c.id for c, _ in rows] == ["substrate"]

    def test_testnet_version_byte(self):
        rows = default_registry().compatible(characterize("mfWxJ45yp2SFn7UciZyNpvDKrzbhyfKrY8"))
        assert [(c.id, f.label) for c, f in rows] == [("bitcoin", "testnet p2pkh")]

    def test_checksum_not_considered(self):
        # structurally a Bitcoin P2PKH, checksum broken
        rows = default_registry().compatible(characterize("1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNb"))
        assert [c.id for c, _ in rows] == ["bitcoin"]


class TestDerivationsFor:
    def test_ed25519(self):
        rows = default_registry().derivations_for(KeyType.ED25519)
        ids = [c.id for c, _, _ in rows]
        assert ids == ["solana", "polkadot", "kusama", "substrate"] + COSMOS_IDS + ["cardano"]

    def test_secp256k1(self):
        rows = default_registry().derivations_for(KeyType.SECP256K1)
        ids = [c.id for c, _, _ in rows]
        assert ids == EVM_IDS + ["bitcoin", "litecoin", "dogecoin", "tron", "polkadot", "kusama", "substrate"]

    def test_first_accepting_spec_per_chain(self):
        rows = default_registry().derivations_for(KeyType.SECP256K1)
        by_chain = {c.id: (f, spec) for c, f, spec in rows}
        fmt, spec = by_chain["bitcoin"]
        assert fmt.label == "p2pkh"
        assert spec.key_form is KeyForm.AS_GIVEN
        _, spec = by_chain["polkadot"]
        assert spec.key_form is KeyForm.COMPRESSED

    def test_empty_for_registry_without_pipelines(self):
        registry = Registry([_chain("plain")])
        assert registry.derivations_for(KeyType.ED25519) == []
