"""ML-DSA security levels (FIPS 204).

| Level     | NIST category | Security | Purpose | Public key | Signature |
|-----------|---------------|----------|---------|------------|-----------|
| ML-DSA-44 | 2             | 128-bit  | 8844    | 1312 B     | 2420 B    |
| ML-DSA-65 | 3             | 192-bit  | 8865    | 1952 B     | 3309 B    |
| ML-DSA-87 | 5             | 256-bit  | 8887    | 2592 B     | 4627 B    |

Levels are independent derivation namespaces, not a hierarchy: each one has its
own domain separator and its own purpose field.
"""
from dataclasses import dataclass
from enum import Enum

from .errors import UnsupportedLevel

SEED_SIZE = 32


@dataclass(frozen=True)
class _LevelParams:
    label: str
    purpose: int
    domain_separator: bytes
    public_key_size: int
    signature_size: int
    nist_category: int
    security_bits: int


_PARAMS = {
    44: _LevelParams("ML-DSA-44", 8844, b"ML-DSA-BIP39:ML-DSA-44:V1", 1312, 2420, 2, 128),
    65: _LevelParams("ML-DSA-65", 8865, b"ML-DSA-BIP39:ML-DSA-65:V1", 1952, 3309, 3, 192),
    87: _LevelParams("ML-DSA-87", 8887, b"ML-DSA-BIP39:ML-DSA-87:V1", 2592, 4627, 5, 256),
}


class MlDsaLevel(Enum):
    """ML-DSA parameter set; the value is the FIPS 204 parameter id."""

    DSA_44 = 44
    DSA_65 = 65
    DSA_87 = 87

    @property
    def _params(self) -> _LevelParams:
        return _PARAMS[self.value]

    @property
    def label(self) -> str:
        return self._params.label

    @property
    def purpose(self) -> int:
        """BIP44-style purpose field: 8844, 8865 or 8887."""
        return self._params.purpose

    @property
    def domain_separator(self) -> bytes:
        """Hash prefix that keeps the same root seed apart across levels."""
        return self._params.domain_separator

    @property
    def public_key_size(self) -> int:
        return self._params.public_key_size

    @property
    def signature_size(self) -> int:
        return self._params.signature_size

    @property
    def seed_size(self) -> int:
        return SEED_SIZE

    @property
    def nist_category(self) -> int:
        return self._params.nist_category

    @property
    def security_bits(self) -> int:
        return self._params.security_bits

    def __str__(self) -> str:
        return self.label

    @classmethod
    def default(cls) -> "MlDsaLevel":
        return cls.DSA_44

    @classmethod
    def coerce(cls, value) -> "MlDsaLevel":
        """Resolve a member, label ("ML-DSA-65"), member name or parameter id.

        Raises:
            UnsupportedLevel: if ``value`` names none of the three levels.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            for level in cls:
                if key in (level.label, level.name):
                    return level
        elif isinstance(value, int) and not isinstance(value, bool):
            if value in _PARAMS:
                return cls(value)
        raise UnsupportedLevel(f"Unsupported ML-DSA level: {value!r}")
