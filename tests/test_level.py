"""Unit tests for security level parameters."""
import pytest

from mldsa_bip39 import MlDsaLevel, UnsupportedLevel

from conftest import ALL_LEVELS


class TestLevelParameters:
    """Per-level constants must match the FIPS 204 parameter table."""

    @pytest.mark.parametrize("level,purpose,pk_size,sig_size", [
        (MlDsaLevel.DSA_44, 8844, 1312, 2420),
        (MlDsaLevel.DSA_65, 8865, 1952, 3309),
        (MlDsaLevel.DSA_87, 8887, 2592, 4627),
    ])
    def test_table(self, level, purpose, pk_size, sig_size):
        assert level.purpose == purpose
        assert level.public_key_size == pk_size
        assert level.signature_size == sig_size
        assert level.seed_size == 32

    def test_security_metadata(self):
        assert [lvl.security_bits for lvl in ALL_LEVELS] == [128, 192, 256]
        assert [lvl.nist_category for lvl in ALL_LEVELS] == [2, 3, 5]

    def test_unique_purposes(self):
        purposes = [lvl.purpose for lvl in ALL_LEVELS]
        assert len(set(purposes)) == len(purposes)

    def test_unique_domain_separators(self):
        tags = [lvl.domain_separator for lvl in ALL_LEVELS]
        assert len(set(tags)) == 3
        assert MlDsaLevel.DSA_44.domain_separator == b"ML-DSA-BIP39:ML-DSA-44:V1"
        assert MlDsaLevel.DSA_87.domain_separator == b"ML-DSA-BIP39:ML-DSA-87:V1"

    def test_str_is_label(self):
        assert str(MlDsaLevel.DSA_65) == "ML-DSA-65"

    def test_default_is_dsa44(self):
        assert MlDsaLevel.default() is MlDsaLevel.DSA_44


class TestLevelCoerce:
    """MlDsaLevel.coerce accepts several spellings and rejects the rest."""

    @pytest.mark.parametrize("value", [MlDsaLevel.DSA_65, "ML-DSA-65", "ml-dsa-65", "DSA_65", 65])
    def test_accepts(self, value):
        assert MlDsaLevel.coerce(value) is MlDsaLevel.DSA_65

    @pytest.mark.parametrize("value", ["ML-DSA-99", 128, 0, None, True, 44.0, b"ML-DSA-44"])
    def test_rejects(self, value):
        with pytest.raises(UnsupportedLevel):
            MlDsaLevel.coerce(value)
