"""BIP39 mnemonic derivation for ML-DSA (FIPS 204) post-quantum signatures.

Same mnemonic + passphrase + level + path always gives the same keypair;
each level and each path gets an independent key.

    from mldsa_bip39 import MlDsaLevel, derive_keypair, mnemonic_to_seed

    seed = mnemonic_to_seed("abandon abandon ... about", "")
    keypair = derive_keypair(seed, 1337, 0, 0, MlDsaLevel.DSA_44)
    signature = keypair.sign(b"Hello, post-quantum world!")
    assert keypair.verify(b"Hello, post-quantum world!", signature)

Paths, one purpose per level:

    ML-DSA-44: m/8844'/coin'/account'/0/index
    ML-DSA-65: m/8865'/coin'/account'/0/index
    ML-DSA-87: m/8887'/coin'/account'/0/index
"""
from .config import SILICA_COIN_TYPE, Settings, get_settings
from .derivation import derive_default_keypair, derive_keypair, derive_scheme_seed
from .errors import (
    BackendUnavailable,
    InvalidDerivationPath,
    InvalidMnemonic,
    InvalidPublicKey,
    InvalidSeedLength,
    InvalidSignatureEncoding,
    KeygenFailed,
    MlDsaBip39Error,
    SigningFailed,
    UnsupportedLevel,
)
from .keypair import MlDsaKeyPair, MlDsaSignature, verify
from .level import MlDsaLevel
from .path import DerivationPath
from .seed import generate_mnemonic, mnemonic_to_seed, validate_mnemonic

__version__ = "0.1.0"

__all__ = [
    "BackendUnavailable",
    "DerivationPath",
    "InvalidDerivationPath",
    "InvalidMnemonic",
    "InvalidPublicKey",
    "InvalidSeedLength",
    "InvalidSignatureEncoding",
    "KeygenFailed",
    "MlDsaBip39Error",
    "MlDsaKeyPair",
    "MlDsaLevel",
    "MlDsaSignature",
    "SILICA_COIN_TYPE",
    "Settings",
    "SigningFailed",
    "UnsupportedLevel",
    "derive_default_keypair",
    "derive_keypair",
    "derive_scheme_seed",
    "generate_mnemonic",
    "get_settings",
    "mnemonic_to_seed",
    "validate_mnemonic",
    "verify",
]
