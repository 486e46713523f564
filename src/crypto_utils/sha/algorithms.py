"""
Algorithm selectors for the digest and MAC engines.
"""
from enum import Enum


def _normalize(name: str) -> str:
    return name.strip().upper().replace("-", "").replace("_", "")


class Algorithm(str, Enum):
    """Hashing algorithms supported by CryptographicHash."""

    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA512 = "SHA512"

    @property
    def digest_size(self) -> int:
        """Digest length in bytes."""
        if self is Algorithm.SHA1:
            return 20
        if self is Algorithm.SHA256:
            return 32
        return 64

    @classmethod
    def from_name(cls, name: str) -> "Algorithm":
        """
        Parse an algorithm name such as ``sha256`` or ``SHA-512``.

        Raises:
            ValueError: If the name does not match a supported algorithm
        """
        key = _normalize(name)
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"Unsupported hash algorithm: {name}")


class AlgorithmMac(str, Enum):
    """HMAC algorithms supported by CryptographicMac."""

    HMAC_SHA1 = "HMAC_SHA1"
    HMAC_SHA256 = "HMAC_SHA256"
    HMAC_SHA512 = "HMAC_SHA512"

    @property
    def hash_algorithm(self) -> Algorithm:
        """The underlying hash algorithm."""
        if self is AlgorithmMac.HMAC_SHA1:
            return Algorithm.SHA1
        if self is AlgorithmMac.HMAC_SHA256:
            return Algorithm.SHA256
        return Algorithm.SHA512

    @property
    def digest_size(self) -> int:
        """MAC length in bytes, equal to the underlying digest size."""
        return self.hash_algorithm.digest_size

    @classmethod
    def from_name(cls, name: str) -> "AlgorithmMac":
        """
        Parse a MAC algorithm name such as ``hmac-sha1`` or ``HMAC_SHA256``.

        Raises:
            ValueError: If the name does not match a supported algorithm
        """
        key = _normalize(name)
        for member in cls:
            if _normalize(member.value) == key:
                return member
        raise ValueError(f"Unsupported MAC algorithm: {name}")
