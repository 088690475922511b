"""Deterministic BIP39 -> ML-DSA key derivation.

    scheme_seed = SHAKE256(domain_separator || root_seed || path)[:32]

``domain_separator`` is unique per level, ``root_seed`` is the 64-byte BIP39
seed and ``path`` is the 20-byte encoding from ``DerivationPath.encode``.
Different levels differ in both the separator and the purpose field; different
paths differ in the path encoding.
"""
import hashlib
import logging

from .backend import get_backend
from .config import get_settings
from .errors import InvalidSeedLength, KeygenFailed
from .keypair import MlDsaKeyPair
from .level import MlDsaLevel
from .memory import scoped_secret
from .path import DerivationPath
from .seed import ROOT_SEED_SIZE

logger = logging.getLogger(__name__)


def _check_root_seed(root_seed) -> None:
    if not isinstance(root_seed, (bytes, bytearray, memoryview)):
        raise TypeError(f"root seed must be bytes, got a {type(root_seed).__name__}")
    if len(root_seed) != ROOT_SEED_SIZE:
        raise InvalidSeedLength(len(root_seed))


def derive_scheme_seed(level, root_seed, coin: int, account: int, index: int) -> bytearray:
    """Derive the 32-byte ML-DSA seed for one level and path.

    Raises:
        UnsupportedLevel: ``level`` is not one of the three levels.
        InvalidSeedLength: ``root_seed`` is not 64 bytes.
        TypeError: ``root_seed`` is not bytes-like.
        InvalidDerivationPath: a path field is outside the 32-bit range.
    """
    level = MlDsaLevel.coerce(level)
    _check_root_seed(root_seed)
    path = DerivationPath.for_level(level, coin, account, index)

    shake = hashlib.shake_256()
    shake.update(level.domain_separator)
    shake.update(root_seed)
    shake.update(path.encode())
    return bytearray(shake.digest(level.seed_size))


def derive_keypair(root_seed, coin: int, account: int, index: int, level) -> MlDsaKeyPair:
    """Derive the keypair at ``m/{purpose}'/{coin}'/{account}'/0/{index}``.

    Example::

        seed = mnemonic_to_seed("abandon " * 11 + "about")
        keypair = derive_keypair(seed, 1337, 0, 0, MlDsaLevel.DSA_44)

    Raises:
        UnsupportedLevel, InvalidSeedLength, InvalidDerivationPath: bad input.
        KeygenFailed: the backend rejected the seed or returned a key of the
            wrong size.
    """
    level = MlDsaLevel.coerce(level)
    with scoped_secret(derive_scheme_seed(level, root_seed, coin, account, index)) as scheme_seed:
        public_key, _ = get_backend().keygen_from_seed(level, scheme_seed)
        if len(public_key) != level.public_key_size:
            raise KeygenFailed(
                f"backend returned a {len(public_key)}-byte public key for {level}, "
                f"expected {level.public_key_size}"
            )
        keypair = MlDsaKeyPair(level, scheme_seed, public_key)

    logger.debug(
        "derived %s keypair at %s (pk %s)",
        level,
        DerivationPath.for_level(level, coin, account, index),
        hashlib.sha256(public_key).hexdigest()[:16],
    )
    return keypair


def derive_default_keypair(root_seed, account: int = 0, index: int = 0, level=None) -> MlDsaKeyPair:
    """Derive with the configured default coin type and level."""
    settings = get_settings()
    if level is None:
        level = settings.default_level
    return derive_keypair(root_seed, settings.DEFAULT_COIN_TYPE, account, index, level)
