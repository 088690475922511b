"""Unit tests for settings and backend selection."""
import pytest
from pydantic import ValidationError

from mldsa_bip39 import BackendUnavailable, MlDsaLevel, Settings, get_settings
from mldsa_bip39.backend import DilithiumPyBackend, get_backend


class TestSettings:
    def test_defaults(self):
        settings = get_settings()
        assert settings.BACKEND == "dilithium-py"
        assert settings.DEFAULT_COIN_TYPE == 1337
        assert settings.default_level is MlDsaLevel.DSA_44
        assert settings.MNEMONIC_LANGUAGE == "english"

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("MLDSA_BIP39_DEFAULT_LEVEL", "dsa_65")
        assert get_settings().DEFAULT_LEVEL == "ML-DSA-65"

    def test_rejects_unknown_level(self, monkeypatch):
        monkeypatch.setenv("MLDSA_BIP39_DEFAULT_LEVEL", "ML-DSA-128")
        with pytest.raises(ValidationError):
            Settings()

    def test_rejects_unknown_language(self, monkeypatch):
        monkeypatch.setenv("MLDSA_BIP39_MNEMONIC_LANGUAGE", "klingon")
        with pytest.raises(ValidationError, match="klingon"):
            Settings()

    def test_language_normalized(self, monkeypatch):
        monkeypatch.setenv("MLDSA_BIP39_MNEMONIC_LANGUAGE", " English ")
        assert Settings().MNEMONIC_LANGUAGE == "english"

    @pytest.mark.parametrize("value", ["-1", str(2 ** 32)])
    def test_rejects_out_of_range_coin(self, monkeypatch, value):
        monkeypatch.setenv("MLDSA_BIP39_DEFAULT_COIN_TYPE", value)
        with pytest.raises(ValidationError):
            Settings()


class TestBackendSelection:
    def test_default_backend(self):
        assert isinstance(get_backend(), DilithiumPyBackend)

    def test_resolved_once(self):
        assert get_backend() is get_backend()

    def test_backend_name_normalized(self, monkeypatch):
        monkeypatch.setenv("MLDSA_BIP39_BACKEND", "  Dilithium-PY ")
        assert isinstance(get_backend(), DilithiumPyBackend)

    def test_unknown_backend(self, monkeypatch):
        monkeypatch.setenv("MLDSA_BIP39_BACKEND", "liboqs")
        with pytest.raises(BackendUnavailable, match="dilithium-py"):
            get_backend()
