"""
Keyed HMAC-SHA computations backed by ``cryptography``.
"""
import logging

from cryptography.exceptions import AlreadyFinalized
from cryptography.hazmat.primitives import hashes, hmac

from .algorithms import AlgorithmMac
from .exceptions import EngineFinalizedError, InvalidKeyError

logger = logging.getLogger(__name__)


def _new_context(algorithm: AlgorithmMac, key: bytes) -> hmac.HMAC:
    if algorithm is AlgorithmMac.HMAC_SHA1:
        return hmac.HMAC(key, hashes.SHA1())
    if algorithm is AlgorithmMac.HMAC_SHA256:
        return hmac.HMAC(key, hashes.SHA256())
    if algorithm is AlgorithmMac.HMAC_SHA512:
        return hmac.HMAC(key, hashes.SHA512())
    raise ValueError(f"Unsupported MAC algorithm: {algorithm!r}")


class CryptographicMac:
    """
    Compute an HMAC-SHA1, HMAC-SHA256 or HMAC-SHA512 code.

    Unlike CryptographicHash, ``finalize`` consumes the engine: the key and
    the authenticated input belong to a single computation, and any later
    ``update`` or ``finalize`` raises EngineFinalizedError.

    Example:
        mac = CryptographicMac.hash(AlgorithmMac.HMAC_SHA1, b"secret", b"P@ssw0rd")
    """

    def __init__(self, algorithm: AlgorithmMac, key: bytes):
        """
        Create a new HMAC engine.

        Args:
            algorithm: AlgorithmMac member (or its value, e.g. "HMAC_SHA256")
            key: Secret key bytes; copied into the engine

        Raises:
            InvalidKeyError: If the key is empty, not bytes, or rejected
                by the HMAC primitive
        """
        self.algorithm = AlgorithmMac(algorithm)

        if not isinstance(key, (bytes, bytearray, memoryview)):
            logger.warning("Rejected %s key of type %s", self.algorithm.value, type(key).__name__)
            raise InvalidKeyError(f"HMAC key must be bytes, not {type(key).__name__}")

        key = bytes(key)
        if not key:
            logger.warning("Rejected empty %s key", self.algorithm.value)
            raise InvalidKeyError("HMAC key must not be empty")

        try:
            self._ctx = _new_context(self.algorithm, key)
        except (TypeError, ValueError) as e:
            logger.warning("HMAC primitive rejected %s key: %s", self.algorithm.value, e)
            raise InvalidKeyError(str(e)) from e

    @classmethod
    def new(cls, algorithm: AlgorithmMac, key: bytes) -> "CryptographicMac":
        """Create a new HMAC engine, see ``__init__``."""
        return cls(algorithm, key)

    @property
    def digest_size(self) -> int:
        return self.algorithm.digest_size

    def update(self, data: bytes) -> None:
        """Append ``data`` to the authenticated input."""
        try:
            self._ctx.update(data)
        except AlreadyFinalized as e:
            raise EngineFinalizedError() from e

    def finalize(self) -> bytes:
        """
        Compute the MAC. The engine cannot be used afterwards.

        Returns:
            MAC bytes, as long as the underlying digest
        """
        try:
            return self._ctx.finalize()
        except AlreadyFinalized as e:
            raise EngineFinalizedError() from e

    @staticmethod
    def hash(algorithm: AlgorithmMac, key: bytes, data: bytes) -> bytes:
        """
        Compute the MAC of ``data`` in a single call.

        Raises:
            InvalidKeyError: If the key is rejected
        """
        mac = CryptographicMac(algorithm, key)
        mac.update(data)
        return mac.finalize()

    def __repr__(self) -> str:
        return f"CryptographicMac(algorithm={self.algorithm.value})"
