"""ML-DSA signature backends.

A backend exposes three operations, parameterized by level:

    keygen_from_seed(level, seed) -> (public_key, secret_key)
    sign(level, seed, message) -> signature bytes
    verify(level, public_key, message, signature) -> bool

Keypairs keep only the 32-byte seed; the expanded signing key is regenerated
from it for every signature and dropped straight after.
"""
import logging
from functools import lru_cache

from dilithium_py.ml_dsa import ML_DSA_44, ML_DSA_65, ML_DSA_87

from .config import get_settings
from .errors import (
    BackendUnavailable,
    InvalidSignatureEncoding,
    KeygenFailed,
    SigningFailed,
)
from .level import MlDsaLevel

logger = logging.getLogger(__name__)


class DilithiumPyBackend:
    """FIPS 204 ML-DSA from dilithium-py, keygen via ``key_derive(seed)``."""

    name = "dilithium-py"

    _schemes = {
        MlDsaLevel.DSA_44: ML_DSA_44,
        MlDsaLevel.DSA_65: ML_DSA_65,
        MlDsaLevel.DSA_87: ML_DSA_87,
    }

    def _scheme(self, level: MlDsaLevel):
        return self._schemes[MlDsaLevel.coerce(level)]

    def keygen_from_seed(self, level: MlDsaLevel, seed) -> tuple[bytes, bytes]:
        if len(seed) != level.seed_size:
            raise KeygenFailed(f"expected a {level.seed_size}-byte seed, got {len(seed)}")
        try:
            return self._scheme(level).key_derive(seed)
        except ValueError as exc:
            raise KeygenFailed(str(exc)) from exc

    def sign(self, level: MlDsaLevel, seed, message: bytes) -> bytes:
        _, secret_key = self.keygen_from_seed(level, seed)
        try:
            # Deterministic variant with an empty context string.
            return self._scheme(level).sign(secret_key, bytes(message), deterministic=True)
        except ValueError as exc:
            raise SigningFailed(str(exc)) from exc

    def verify(self, level: MlDsaLevel, public_key: bytes, message: bytes, signature: bytes) -> bool:
        try:
            return bool(self._scheme(level).verify(bytes(public_key), bytes(message), bytes(signature)))
        except (ValueError, IndexError) as exc:
            raise InvalidSignatureEncoding(f"failed to decode signature: {exc}") from exc


_BACKENDS = {
    DilithiumPyBackend.name: DilithiumPyBackend,
}


@lru_cache()
def get_backend():
    """Return the backend named by configuration, resolved once per process."""
    name = get_settings().BACKEND
    try:
        backend_cls = _BACKENDS[name]
    except KeyError:
        raise BackendUnavailable(
            f"unknown ML-DSA backend {name!r}; available: {', '.join(sorted(_BACKENDS))}"
        ) from None
    logger.debug("using ML-DSA backend %s", name)
    return backend_cls()

