"""Exception hierarchy for mldsa_bip39.

Every failure is raised to the caller with its kind. Nothing here is retried:
all operations are deterministic, so a second attempt fails the same way.
"""


class MlDsaBip39Error(Exception):
    """Base class for all errors raised by this package."""


class InvalidMnemonic(MlDsaBip39Error, ValueError):
    """The seed phrase has a bad length, unknown words or a bad checksum."""


class InvalidSeedLength(MlDsaBip39Error, ValueError):
    """The root seed is not exactly 64 bytes."""

    def __init__(self, length):
        super().__init__(f"Invalid seed length: expected 64 bytes, got {length}")
        self.length = length


class InvalidDerivationPath(MlDsaBip39Error, ValueError):
    """A path field is not an unsigned 32-bit integer."""


class UnsupportedLevel(MlDsaBip39Error, ValueError):
    """The requested security level is not ML-DSA-44, -65 or -87."""


class InvalidPublicKey(MlDsaBip39Error, ValueError):
    """A detached public key has the wrong length for its level."""


class InvalidSignatureEncoding(MlDsaBip39Error, ValueError):
    """A signature blob is structurally malformed for the level."""


class SigningFailed(MlDsaBip39Error):
    """The backend could not produce a signature."""


class KeygenFailed(MlDsaBip39Error):
    """The backend rejected the scheme seed during key generation."""


class BackendUnavailable(MlDsaBip39Error):
    """The configured signature backend is unknown or not installed."""
