"""Backend-agnostic keypair and signature values.

A keypair stores the 32-byte scheme seed rather than the expanded secret key.
The seed is wiped on ``wipe()``, on leaving a ``with`` block, and when the
object is garbage collected.
"""
from .backend import get_backend
from .errors import InvalidPublicKey, InvalidSignatureEncoding, SigningFailed
from .level import MlDsaLevel
from .memory import wipe
from .path import DerivationPath


class MlDsaSignature:
    """Signature bytes tagged with the level that produced them."""

    __slots__ = ("_level", "_bytes")

    def __init__(self, level: MlDsaLevel, data: bytes):
        self._level = level
        self._bytes = bytes(data)

    @classmethod
    def from_bytes(cls, level, data) -> "MlDsaSignature":
        """Parse a raw signature, checking its length against ``level``."""
        level = MlDsaLevel.coerce(level)
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidSignatureEncoding(
                f"signature must be bytes, got {type(data).__name__}"
            )
        if len(data) != level.signature_size:
            raise InvalidSignatureEncoding(
                f"expected {level.signature_size} bytes for {level}, got {len(data)}"
            )
        return cls(level, data)

    @property
    def level(self) -> MlDsaLevel:
        return self._level

    def __bytes__(self) -> bytes:
        return self._bytes

    def __len__(self) -> int:
        return len(self._bytes)

    def __eq__(self, other):
        if not isinstance(other, MlDsaSignature):
            return NotImplemented
        return self._level is other._level and self._bytes == other._bytes

    def __hash__(self):
        return hash((self._level, self._bytes))

    def __repr__(self):
        return f"MlDsaSignature(level={self._level}, len={len(self._bytes)})"


def _as_message(message) -> bytes:
    if not isinstance(message, (bytes, bytearray, memoryview)):
        raise TypeError(f"message must be bytes, got {type(message).__name__}")
    return bytes(message)


def _coerce_signature(level: MlDsaLevel, signature) -> MlDsaSignature:
    if isinstance(signature, MlDsaSignature):
        if signature.level is not level:
            raise InvalidSignatureEncoding(
                f"signature level {signature.level} doesn't match expected level {level}"
            )
        if len(signature) != level.signature_size:
            raise InvalidSignatureEncoding(
                f"expected {level.signature_size} bytes for {level}, got {len(signature)}"
            )
        return signature
    return MlDsaSignature.from_bytes(level, signature)


def verify(public_key, level, message: bytes, signature) -> bool:
    """Verify ``signature`` over ``message`` against a detached public key.

    Returns False for a well-formed signature that doesn't match.

    Raises:
        InvalidPublicKey: if the key length doesn't match the level.
        InvalidSignatureEncoding: if the signature is malformed for the level.
        UnsupportedLevel: if ``level`` is not one of the three levels.
    """
    level = MlDsaLevel.coerce(level)
    if len(public_key) != level.public_key_size:
        raise InvalidPublicKey(
            f"expected {level.public_key_size} bytes for {level}, got {len(public_key)}"
        )
    signature = _coerce_signature(level, signature)
    return get_backend().verify(level, bytes(public_key), _as_message(message), bytes(signature))


class MlDsaKeyPair:
    """ML-DSA keypair derived from a seed phrase.

    Only the level, the public key and the 32-byte seed are held. The seed is
    never returned; it is used implicitly by ``sign``.
    """

    __slots__ = ("_level", "_seed", "_public_key", "_wiped")

    def __init__(self, level: MlDsaLevel, seed, public_key: bytes):
        self._level = level
        self._seed = bytearray(seed)
        self._public_key = bytes(public_key)
        self._wiped = False

    @property
    def level(self) -> MlDsaLevel:
        return self._level

    @property
    def public_key(self) -> bytes:
        return self._public_key

    @property
    def is_wiped(self) -> bool:
        return self._wiped

    def sign(self, message: bytes) -> MlDsaSignature:
        """Sign ``message`` deterministically with the held seed.

        Raises:
            SigningFailed: if the keypair was wiped or the backend fails.
        """
        if self.is_wiped:
            raise SigningFailed("keypair seed has been wiped")
        data = get_backend().sign(self._level, self._seed, _as_message(message))
        return MlDsaSignature(self._level, data)

    def verify(self, message: bytes, signature) -> bool:
        """Check ``signature`` against this keypair's public key.

        ``signature`` may be an ``MlDsaSignature`` or raw bytes. Returns False
        on mismatch; raises ``InvalidSignatureEncoding`` only for a malformed
        blob.
        """
        return verify(self._public_key, self._level, message, signature)

    def derivation_path(self, coin: int, account: int, index: int) -> str:
        """Textual path for this level: ``m/{purpose}'/{coin}'/{account}'/0/{index}``."""
        return str(DerivationPath.for_level(self._level, coin, account, index))

    def wipe(self) -> None:
        wipe(self._seed)
        self._wiped = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.wipe()

    def __del__(self):
        seed = getattr(self, "_seed", None)
        if seed is not None:
            wipe(seed)

    def __reduce__(self):
        raise TypeError("MlDsaKeyPair holds secret material and cannot be pickled")

    def __repr__(self):
        return (
            f"MlDsaKeyPair(level={self._level}, "
            f"public_key_len={len(self._public_key)}, seed=[REDACTED])"
        )
