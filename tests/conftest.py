"""Shared fixtures for the mldsa_bip39 test suite.

ABANDON_MNEMONIC: the all-zero-entropy BIP39 test phrase
root_seed: its 64-byte seed with an empty passphrase
"""
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from mldsa_bip39 import MlDsaLevel, derive_keypair, mnemonic_to_seed
from mldsa_bip39.backend import get_backend
from mldsa_bip39.config import get_settings

ABANDON_MNEMONIC = " ".join(["abandon"] * 11 + ["about"])

ALL_LEVELS = [MlDsaLevel.DSA_44, MlDsaLevel.DSA_65, MlDsaLevel.DSA_87]


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop cached settings and backend so env overrides take effect."""
    get_settings.cache_clear()
    get_backend.cache_clear()
    yield
    get_settings.cache_clear()
    get_backend.cache_clear()


@pytest.fixture(scope="session")
def root_seed() -> bytes:
    """Root seed for ABANDON_MNEMONIC, empty passphrase (read-only copy)."""
    return bytes(mnemonic_to_seed(ABANDON_MNEMONIC, ""))


@pytest.fixture
def keypair44(root_seed):
    """ML-DSA-44 keypair at m/8844'/0'/0'/0/0."""
    return derive_keypair(root_seed, 0, 0, 0, MlDsaLevel.DSA_44)
