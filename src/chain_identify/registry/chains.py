"""
Built-in chain table.

Rows are declared in ranking order: when two candidates score the same, the
one declared first is listed first. Adding a chain means adding a row here.
"""

from __future__ import annotations

from chain_identify.registry.models import (
    AddressFormat,
    ChainDescriptor,
    DerivationSpec,
    Encoding,
    HashStep,
    KeyForm,
    KeyType,
)

# ==============================================================================
# Derivation pipelines
# ==============================================================================

KECCAK_LAST_20 = DerivationSpec(
    key_type=KeyType.SECP256K1,
    key_form=KeyForm.UNCOMPRESSED_XY,
    pipeline=(HashStep.KECCAK256,),
    take_last=20,
)

HASH160 = DerivationSpec(
    key_type=KeyType.SECP256K1,
    key_form=KeyForm.AS_GIVEN,
    pipeline=(HashStep.SHA256, HashStep.RIPEMD160),
)

SS58_ED25519 = DerivationSpec(key_type=KeyType.ED25519, key_form=KeyForm.RAW)

# Substrate ECDSA account id: Blake2b-256 of the 33-byte compressed key
SS58_ECDSA = DerivationSpec(
    key_type=KeyType.SECP256K1,
    key_form=KeyForm.COMPRESSED,
    pipeline=(HashStep.BLAKE2B_256,),
)

SHA256_FIRST_20 = DerivationSpec(
    key_type=KeyType.ED25519,
    key_form=KeyForm.RAW,
    pipeline=(HashStep.SHA256,),
    take_first=20,
)

IDENTITY_ED25519 = DerivationSpec(key_type=KeyType.ED25519, key_form=KeyForm.RAW)

# Shelley enterprise address, mainnet: header 0b0110_0001
CARDANO_ENTERPRISE = DerivationSpec(
    key_type=KeyType.ED25519,
    key_form=KeyForm.RAW,
    pipeline=(HashStep.BLAKE2B_224,),
    header=b"\x61",
)


# ==============================================================================
# Row builders
# ==============================================================================


def _evm(chain_id: str, name: str, primary: bool = False) -> ChainDescriptor:
    return ChainDescriptor(
        id=chain_id,
        name=name,
        primary=primary,
        formats=(
            AddressFormat(
                encoding=Encoding.HEX,
                label="account",
                payload_lengths=(20,),
                text_prefix="0x",
                derivations=(KECCAK_LAST_20,),
            ),
        ),
    )


def _utxo_formats(p2pkh: int, p2sh: int, segwit_hrp: str | None, testnet: bool = False) -> list[AddressFormat]:
    # key derivation targets mainnet only
    prefix = "testnet " if testnet else ""
    formats = [
        AddressFormat(
            encoding=Encoding.BASE58CHECK,
            label=f"{prefix}p2pkh",
            payload_lengths=(20,),
            version=p2pkh,
            testnet=testnet,
            derivations=() if testnet else (HASH160,),
        ),
        AddressFormat(
            encoding=Encoding.BASE58CHECK,
            label=f"{prefix}p2sh",
            payload_lengths=(20,),
            version=p2sh,
            testnet=testnet,
        ),
    ]
    if segwit_hrp is not None:
        formats.append(
            AddressFormat(
                encoding=Encoding.BECH32,
                label=f"{prefix}segwit",
                hrp=segwit_hrp,
                witness=True,
                testnet=testnet,
            )
        )
    return formats


def _utxo(
    chain_id: str,
    name: str,
    p2pkh: int,
    p2sh: int,
    segwit_hrp: str | None = None,
    testnet: tuple[int, int, str | None] | None = None,
) -> ChainDescriptor:
    """`testnet` is (p2pkh version, p2sh version, segwit HRP) of the test network."""
    formats = _utxo_formats(p2pkh, p2sh, segwit_hrp)
    if testnet is not None:
        formats += _utxo_formats(*testnet, testnet=True)
    return ChainDescriptor(id=chain_id, name=name, formats=tuple(formats))


def _substrate(chain_id: str, name: str, prefix: int) -> ChainDescriptor:
    return ChainDescriptor(
        id=chain_id,
        name=name,
        formats=(
            AddressFormat(
                encoding=Encoding.SS58,
                label="account",
                payload_lengths=(32, 33),
                ss58_prefix=prefix,
                derivations=(SS58_ED25519, SS58_ECDSA),
            ),
        ),
    )


def _cosmos(chain_id: str, name: str, hrp: str) -> ChainDescriptor:
    return ChainDescriptor(
        id=chain_id,
        name=name,
        formats=(
            AddressFormat(
                encoding=Encoding.BECH32,
                label="account",
                payload_lengths=(20, 32),
                hrp=hrp,
                derivations=(SHA256_FIRST_20,),
            ),
        ),
    )


# ==============================================================================
# Chain table
# ==============================================================================

EVM_CHAINS = (
    _evm("ethereum", "Ethereum", primary=True),
    _evm("polygon", "Polygon"),
    _evm("bsc", "BNB Smart Chain"),
    _evm("avalanche", "Avalanche C-Chain"),
    _evm("arbitrum", "Arbitrum One"),
    _evm("optimism", "Optimism"),
    _evm("base", "Base"),
    _evm("fantom", "Fantom"),
    _evm("celo", "Celo"),
    _evm("gnosis", "Gnosis"),
)

UTXO_CHAINS = (
    _utxo("bitcoin", "Bitcoin", p2pkh=0x00, p2sh=0x05, segwit_hrp="bc", testnet=(0x6F, 0xC4, "tb")),
    _utxo("litecoin", "Litecoin", p2pkh=0x30, p2sh=0x32, segwit_hrp="ltc"),
    _utxo("dogecoin", "Dogecoin", p2pkh=0x1E, p2sh=0x16),
)

TRON = ChainDescriptor(
    id="tron",
    name="Tron",
    formats=(
        AddressFormat(
            encoding=Encoding.BASE58CHECK,
            label="account",
            payload_lengths=(20,),
            version=0x41,
            derivations=(KECCAK_LAST_20,),
        ),
    ),
)

SOLANA = ChainDescriptor(
    id="solana",
    name="Solana",
    formats=(
        AddressFormat(
            encoding=Encoding.BASE58,
            label="account",
            payload_lengths=(32,),
            derivations=(IDENTITY_ED25519,),
        ),
    ),
)

SUBSTRATE_CHAINS = (
    _substrate("polkadot", "Polkadot", 0),
    _substrate("kusama", "Kusama", 2),
    _substrate("substrate", "Substrate (generic)", 42),
)

COSMOS_CHAINS = (
    _cosmos("cosmos-hub", "Cosmos Hub", "cosmos"),
    _cosmos("osmosis", "Osmosis", "osmo"),
    _cosmos("juno", "Juno", "juno"),
    _cosmos("akash", "Akash", "akash"),
    _cosmos("stargaze", "Stargaze", "stars"),
    _cosmos("secret-network", "Secret Network", "secret"),
    _cosmos("terra", "Terra", "terra"),
    _cosmos("kava", "Kava", "kava"),
    _cosmos("regen", "Regen", "regen"),
    _cosmos("sentinel", "Sentinel", "sent"),
)

# Shelley addresses run past the 90-character Bech32 limit
CARDANO = ChainDescriptor(
    id="cardano",
    name="Cardano",
    formats=(
        AddressFormat(
            encoding=Encoding.BECH32,
            label="payment",
            payload_lengths=(29, 57),
            hrp="addr",
            max_length=None,
            derivations=(CARDANO_ENTERPRISE,),
        ),
        AddressFormat(
            encoding=Encoding.BECH32,
            label="stake",
            payload_lengths=(29,),
            hrp="stake",
            max_length=None,
        ),
        AddressFormat(
            encoding=Encoding.BECH32,
            label="testnet payment",
            payload_lengths=(29, 57),
            hrp="addr_test",
            max_length=None,
            testnet=True,
        ),
        AddressFormat(
            encoding=Encoding.BECH32,
            label="testnet stake",
            payload_lengths=(29,),
            hrp="stake_test",
            max_length=None,
            testnet=True,
        ),
    ),
)

CHAINS = (
    *EVM_CHAINS,
    *UTXO_CHAINS,
    TRON,
    SOLANA,
    *SUBSTRATE_CHAINS,
    *COSMOS_CHAINS,
    CARDANO,
)
