"""
Streaming SHA-1 / SHA-2 digests backed by ``cryptography``.
"""
from cryptography.hazmat.primitives import hashes

from .algorithms import Algorithm


def _new_context(algorithm: Algorithm) -> hashes.Hash:
    if algorithm is Algorithm.SHA1:
        return hashes.Hash(hashes.SHA1())
    if algorithm is Algorithm.SHA256:
        return hashes.Hash(hashes.SHA256())
    if algorithm is Algorithm.SHA512:
        return hashes.Hash(hashes.SHA512())
    raise ValueError(f"Unsupported hash algorithm: {algorithm!r}")


class CryptographicHash:
    """
    Compute a SHA-1, SHA-256 or SHA-512 digest.

    The engine keeps one live hashing context for the algorithm chosen at
    construction. ``finalize`` returns the digest and resets the context,
    so the same instance can be reused for the next computation.

    Example:
        digest = CryptographicHash.hash(Algorithm.SHA1, b"P@ssw0rd")

        hasher = CryptographicHash.new(Algorithm.SHA256)
        hasher.update(b"P@ss")
        hasher.update(b"w0rd")
        digest = hasher.finalize()
    """

    def __init__(self, algorithm: Algorithm):
        """
        Create a new hasher.

        Args:
            algorithm: Algorithm member (or its value, e.g. "SHA256")
        """
        self.algorithm = Algorithm(algorithm)
        self._ctx = _new_context(self.algorithm)

    @classmethod
    def new(cls, algorithm: Algorithm) -> "CryptographicHash":
        """Create a new hasher for ``algorithm``."""
        return cls(algorithm)

    @property
    def digest_size(self) -> int:
        return self.algorithm.digest_size

    def update(self, data: bytes) -> None:
        """Append ``data`` to the running digest."""
        self._ctx.update(data)

    def finalize(self) -> bytes:
        """
        Compute the digest and reset the hasher.

        Returns:
            20, 32 or 64 digest bytes depending on the algorithm
        """
        digest = self._ctx.finalize()
        self._ctx = _new_context(self.algorithm)
        return digest

    def copy(self) -> "CryptographicHash":
        """Return an independent hasher with the same intermediate state."""
        clone = type(self).__new__(type(self))
        clone.algorithm = self.algorithm
        clone._ctx = self._ctx.copy()
        return clone

    @staticmethod
    def hash(algorithm: Algorithm, data: bytes) -> bytes:
        """Compute the digest of ``data`` in a single call."""
        hasher = CryptographicHash(algorithm)
        hasher.update(data)
        return hasher.finalize()

    def __repr__(self) -> str:
        return f"CryptographicHash(algorithm={self.algorithm.value})"
