"""
Runtime configuration using pydantic-settings.

Priority for loading:
1. Environment variables prefixed with ``MLDSA_BIP39_``
2. .env file
3. Default values

The signature backend is chosen here once per process; nothing switches it
per call.
"""
from functools import lru_cache

from mnemonic import Mnemonic
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .level import MlDsaLevel
from .path import UINT32_MAX

# Coin type of the Silica network, used when callers don't pick one.
SILICA_COIN_TYPE = 1337


class Settings(BaseSettings):
    """Typed settings for derivation defaults and backend selection."""

    # ─────────────────────────────────────────────────────────────
    # Signature backend
    # ─────────────────────────────────────────────────────────────
    BACKEND: str = "dilithium-py"

    # ─────────────────────────────────────────────────────────────
    # Derivation defaults for derive_default_keypair()
    # ─────────────────────────────────────────────────────────────
    DEFAULT_COIN_TYPE: int = SILICA_COIN_TYPE
    DEFAULT_LEVEL: str = "ML-DSA-44"

    # ─────────────────────────────────────────────────────────────
    # Seed phrase wordlist language (python-mnemonic name)
    # ─────────────────────────────────────────────────────────────
    MNEMONIC_LANGUAGE: str = "english"

    @field_validator("BACKEND", "MNEMONIC_LANGUAGE", mode="before")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        return str(v).strip().lower()

    @field_validator("MNEMONIC_LANGUAGE")
    @classmethod
    def check_language(cls, v: str) -> str:
        languages = Mnemonic.list_languages()
        if v not in languages:
            raise ValueError(
                f"unknown mnemonic language {v!r}; available: {', '.join(sorted(languages))}"
            )
        return v

    @field_validator("DEFAULT_COIN_TYPE")
    @classmethod
    def check_coin_type(cls, v: int) -> int:
        if not 0 <= v <= UINT32_MAX:
            raise ValueError(f"coin type must fit in 32 bits, got {v}")
        return v

    @field_validator("DEFAULT_LEVEL")
    @classmethod
    def check_level(cls, v: str) -> str:
        # UnsupportedLevel is a ValueError, so pydantic reports it as a
        # validation error.
        return MlDsaLevel.coerce(v).label

    model_config = SettingsConfigDict(
        env_prefix="MLDSA_BIP39_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def default_level(self) -> MlDsaLevel:
        return MlDsaLevel.coerce(self.DEFAULT_LEVEL)


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance, loaded once per process."""
    return Settings()
