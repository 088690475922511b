"""Seed phrase handling, delegated to python-mnemonic (BIP39).

mnemonic -> PBKDF2-HMAC-SHA512("mnemonic" + passphrase, 2048 rounds) -> 64 bytes
"""
import logging

from mnemonic import Mnemonic

from .config import get_settings
from .errors import InvalidMnemonic

logger = logging.getLogger(__name__)

ROOT_SEED_SIZE = 64


def _wordlist() -> Mnemonic:
    return Mnemonic(get_settings().MNEMONIC_LANGUAGE)


def _normalize_phrase(mnemonic) -> str:
    if isinstance(mnemonic, str):
        words = mnemonic.split()
    else:
        words = [str(w).strip() for w in mnemonic]
    return " ".join(words)


def generate_mnemonic(strength: int = 256) -> str:
    """Generate a fresh seed phrase; 256 bits of entropy gives 24 words."""
    return _wordlist().generate(strength=strength)


def validate_mnemonic(mnemonic) -> bool:
    """Return True if ``mnemonic`` has a valid length, wordlist and checksum."""
    return _wordlist().check(_normalize_phrase(mnemonic))


def mnemonic_to_seed(mnemonic, passphrase: str = "") -> bytearray:
    """Convert a seed phrase to the 64-byte BIP39 root seed.

    Args:
        mnemonic: Space separated words, or a sequence of words. Any standard
            length (12, 15, 18, 21 or 24 words) is accepted.
        passphrase: Optional passphrase; empty gives the standard seed.

    Returns:
        A mutable 64-byte buffer. Wipe it with ``memory.wipe`` when done.

    Raises:
        InvalidMnemonic: on a bad word count, unknown word or bad checksum.
    """
    phrase = _normalize_phrase(mnemonic)
    if not _wordlist().check(phrase):
        raise InvalidMnemonic(
            f"Invalid mnemonic: {len(phrase.split())} words failed wordlist or checksum validation"
        )
    seed = bytearray(Mnemonic.to_seed(phrase, passphrase))
    logger.debug("derived root seed from %d-word mnemonic", len(phrase.split()))
    return seed
