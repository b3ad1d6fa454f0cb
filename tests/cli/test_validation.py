"""Tests for CLI validation utilities."""

import pytest

from src.cli.utils.validation import validate_algorithm, validate_modulus_length


class TestValidateAlgorithm:
    """Tests for algorithm name validation."""

    def test_valid_algorithm(self):
        """Supported algorithms are returned unchanged."""
        assert validate_algorithm("RS256") == "RS256"
        assert validate_algorithm("A128GCM") == "A128GCM"

    def test_strips_whitespace(self):
        """Whitespace is stripped from the algorithm."""
        assert validate_algorithm("  ES256  ") == "ES256"

    def test_empty_raises(self):
        """Empty algorithm raises ValueError."""
        with pytest.raises(ValueError, match="cannot be empty"):
            validate_algorithm("   ")

    def test_unsupported_raises(self):
        """Unknown algorithms list the supported ones."""
        with pytest.raises(ValueError, match="Supported: A128GCM"):
            validate_algorithm("EdDSA")

    def test_case_sensitive(self):
        """Algorithm names are case-sensitive."""
        with pytest.raises(ValueError, match="Unsupported algorithm"):
            validate_algorithm("rs256")


class TestValidateModulusLength:
    """Tests for RSA modulus length validation."""

    def test_valid_lengths(self):
        """2048 and larger multiples of 8 are accepted."""
        assert validate_modulus_length(2048) == 2048
        assert validate_modulus_length(4096) == 4096

    def test_too_small_raises(self):
        """Moduli under 2048 bits raise ValueError."""
        with pytest.raises(ValueError, match="at least 2048"):
            validate_modulus_length(1024)

    def test_not_byte_aligned_raises(self):
        """Moduli must be a whole number of bytes."""
        with pytest.raises(ValueError, match="multiple of 8"):
            validate_modulus_length(2049)
