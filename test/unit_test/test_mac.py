"""
Tests for the HMAC engine.
"""
import logging

import pytest

from crypto_utils.sha import (
    AlgorithmMac,
    CryptographicMac,
    EngineFinalizedError,
    InvalidKeyError,
)

SECRET = b"secret"
INPUT = b"input"

EXPECTED_HMAC_SHA1 = "30440f36ddc2809bbd4c8b1f37a6e80d7588c303"
EXPECTED_HMAC_SHA256 = "8d8985d04b7abd32cbaa3779a3daa019e0d269a22aec15af8e7296f702cc68c6"
EXPECTED_HMAC_SHA512 = (
    "2ac95ed3717e042c7064a5fa7c318230cd36d85e06f8ff8373d04ca17e361629"
    "e09f46b7f151ff382a3f48c5b19121446e45c2588f0ff1de9f74b0400daef81f"
)


class TestKnownMacs:
    """Tests against known HMAC values."""

    def test_hmac_sha1(self):
        """Test an HMAC-SHA1 code."""
        mac = CryptographicMac.hash(AlgorithmMac.HMAC_SHA1, SECRET, INPUT)
        assert mac.hex() == EXPECTED_HMAC_SHA1

    def test_hmac_sha256(self):
        """Test an HMAC-SHA256 code."""
        mac = CryptographicMac.hash(AlgorithmMac.HMAC_SHA256, SECRET, INPUT)
        assert mac.hex() == EXPECTED_HMAC_SHA256

    def test_hmac_sha512(self):
        """Test an HMAC-SHA512 code."""
        mac = CryptographicMac.hash(AlgorithmMac.HMAC_SHA512, SECRET, INPUT)
        assert mac.hex() == EXPECTED_HMAC_SHA512

    def test_password_vector(self):
        """Test HMAC-SHA1 of a password-like string."""
        mac = CryptographicMac.hash(AlgorithmMac.HMAC_SHA1, SECRET, b"P@ssw0rd")
        assert mac.hex() == "20bbb9ec2d4574845911b13695b776097bd46e41"


class TestStreaming:
    """Tests for incremental MAC computation."""

    @pytest.mark.parametrize("algorithm", list(AlgorithmMac))
    def test_chunked_equals_one_shot(self, algorithm):
        """Test streaming input yields the one-shot MAC."""
        mac = CryptographicMac.new(algorithm, SECRET)
        mac.update(b"in")
        mac.update(b"")
        mac.update(b"put")
        assert mac.finalize() == CryptographicMac.hash(algorithm, SECRET, INPUT)

    @pytest.mark.parametrize("algorithm", list(AlgorithmMac))
    def test_output_size(self, algorithm):
        """Test MAC length matches the underlying digest."""
        mac = CryptographicMac.new(algorithm, SECRET)
        assert mac.digest_size == algorithm.digest_size
        assert len(mac.finalize()) == algorithm.digest_size

    def test_single_bit_changes_output(self):
        """Test flipping one bit of key or input changes the MAC."""
        baseline = CryptographicMac.hash(AlgorithmMac.HMAC_SHA256, SECRET, INPUT)

        flipped_key = bytes([SECRET[0] ^ 0x01]) + SECRET[1:]
        flipped_input = INPUT[:-1] + bytes([INPUT[-1] ^ 0x01])

        assert CryptographicMac.hash(AlgorithmMac.HMAC_SHA256, flipped_key, INPUT) != baseline
        assert CryptographicMac.hash(AlgorithmMac.HMAC_SHA256, SECRET, flipped_input) != baseline

    def test_key_is_copied(self):
        """Test mutating the caller's key buffer does not affect the engine."""
        key = bytearray(SECRET)
        mac = CryptographicMac.new(AlgorithmMac.HMAC_SHA1, key)
        key[:] = b"XXXXXX"
        mac.update(INPUT)
        assert mac.finalize().hex() == EXPECTED_HMAC_SHA1


class TestInvalidKey:
    """Tests for key rejection."""

    @pytest.mark.parametrize("algorithm", list(AlgorithmMac))
    def test_empty_key(self, algorithm):
        """Test an empty key is rejected."""
        with pytest.raises(InvalidKeyError) as exc_info:
            CryptographicMac.new(algorithm, b"")
        assert exc_info.value.error_code == "InvalidKey"

    def test_non_bytes_key(self):
        """Test a text key is rejected."""
        with pytest.raises(InvalidKeyError):
            CryptographicMac.new(AlgorithmMac.HMAC_SHA256, "secret")

    def test_one_shot_propagates_invalid_key(self):
        """Test hash() surfaces key errors."""
        with pytest.raises(InvalidKeyError):
            CryptographicMac.hash(AlgorithmMac.HMAC_SHA512, b"", INPUT)

    def test_rejection_is_logged(self, caplog):
        """Test key rejection logs a warning without the key."""
        with caplog.at_level(logging.WARNING, logger="crypto_utils.sha.mac"):
            with pytest.raises(InvalidKeyError):
                CryptographicMac.new(AlgorithmMac.HMAC_SHA1, b"")
        assert "Rejected empty HMAC_SHA1 key" in caplog.text

    def test_long_key_accepted(self):
        """Test keys longer than the block size are accepted."""
        mac = CryptographicMac.hash(AlgorithmMac.HMAC_SHA256, b"k" * 200, INPUT)
        assert len(mac) == 32


class TestFinalize:
    """Tests for the one-shot finalize contract."""

    def test_finalize_twice(self):
        """Test a second finalize is rejected."""
        mac = CryptographicMac.new(AlgorithmMac.HMAC_SHA1, SECRET)
        mac.finalize()
        with pytest.raises(EngineFinalizedError):
            mac.finalize()

    def test_update_after_finalize(self):
        """Test update after finalize is rejected."""
        mac = CryptographicMac.new(AlgorithmMac.HMAC_SHA256, SECRET)
        mac.update(INPUT)
        mac.finalize()
        with pytest.raises(EngineFinalizedError) as exc_info:
            mac.update(INPUT)
        assert exc_info.value.error_code == "EngineFinalized"
