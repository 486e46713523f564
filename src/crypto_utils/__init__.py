"""
Cryptography utilities: SHA digests, HMAC codes, and HS256 JSON Web Tokens.

Example usage:
    from crypto_utils import Algorithm, CryptographicHash, Claims, Token

    digest = CryptographicHash.hash(Algorithm.SHA1, b"P@ssw0rd")
    assert digest.hex() == "21bd12dc183f740ee76f27b78eb39c8ad972a757"

    token = Token.new(b"secret", Claims.new("user_1234", 24))
    claims = Token.decode(b"secret", token.encoded)
"""

from .sha import (
    Algorithm,
    AlgorithmMac,
    CryptographicHash,
    CryptographicMac,
    ShaError,
    InvalidKeyError,
    EngineFinalizedError,
)
from .security import (
    Claims,
    Token,
    JWTError,
    InvalidSignatureError,
    ExpiredSignatureError,
    MalformedTokenError,
    InvalidAlgorithmError,
    SigningError,
)

__version__ = "0.4.1"

__all__ = [
    "__version__",
    # Digests and MACs
    "Algorithm",
    "AlgorithmMac",
    "CryptographicHash",
    "CryptographicMac",
    "ShaError",
    "InvalidKeyError",
    "EngineFinalizedError",
    # Tokens
    "Claims",
    "Token",
    "JWTError",
    "InvalidSignatureError",
    "ExpiredSignatureError",
    "MalformedTokenError",
    "InvalidAlgorithmError",
    "SigningError",
]
