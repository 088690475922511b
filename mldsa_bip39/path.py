"""BIP44-style derivation paths: ``m/{purpose}'/{coin}'/{account}'/0/{index}``.

The binary form is five unsigned 32-bit big-endian fields in path order:

    purpose || coin || account || change || index    (20 bytes)

Fixed widths keep the encoding injective. This layout is part of the
derivation format: changing it re-derives every key.
"""
import struct
from dataclasses import dataclass

from .errors import InvalidDerivationPath
from .level import MlDsaLevel

UINT32_MAX = 0xFFFFFFFF

_PATH_STRUCT = struct.Struct(">5I")


def _check_field(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDerivationPath(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    if not 0 <= value <= UINT32_MAX:
        raise InvalidDerivationPath(
            f"{name} must be in 0..{UINT32_MAX}, got {value}"
        )


@dataclass(frozen=True)
class DerivationPath:
    purpose: int
    coin: int
    account: int
    index: int
    change: int = 0

    def __post_init__(self):
        for name in ("purpose", "coin", "account", "change", "index"):
            _check_field(name, getattr(self, name))
        if self.change != 0:
            raise InvalidDerivationPath(f"change must be 0, got {self.change}")

    @classmethod
    def for_level(cls, level, coin: int, account: int, index: int) -> "DerivationPath":
        return cls(MlDsaLevel.coerce(level).purpose, coin, account, index)

    def encode(self) -> bytes:
        return _PATH_STRUCT.pack(self.purpose, self.coin, self.account, self.change, self.index)

    def __str__(self) -> str:
        return f"m/{self.purpose}'/{self.coin}'/{self.account}'/{self.change}/{self.index}"
