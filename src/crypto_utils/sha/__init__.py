"""
SHA-1, SHA-256 and SHA-512 digests and their HMAC variants.

Example usage:
    from crypto_utils.sha import Algorithm, AlgorithmMac, CryptographicHash, CryptographicMac

    # Digest in one call
    digest = CryptographicHash.hash(Algorithm.SHA256, b"input")

    # Streaming digest, reusable after finalize
    hasher = CryptographicHash.new(Algorithm.SHA1)
    hasher.update(b"in")
    hasher.update(b"put")
    digest = hasher.finalize()

    # HMAC
    try:
        mac = CryptographicMac.hash(AlgorithmMac.HMAC_SHA256, b"secret", b"input")
    except InvalidKeyError:
        print("Key rejected")
"""

from .algorithms import Algorithm, AlgorithmMac
from .digest import CryptographicHash
from .exceptions import (
    ShaError,
    InvalidKeyError,
    EngineFinalizedError,
)
from .mac import CryptographicMac

__all__ = [
    "Algorithm",
    "AlgorithmMac",
    "CryptographicHash",
    "CryptographicMac",
    "ShaError",
    "InvalidKeyError",
    "EngineFinalizedError",
]
