"""
JWT issuing and validation with HS256 (HMAC-SHA256) signing.

Example usage:
    from crypto_utils.security import Claims, Token, ExpiredSignatureError

    # Build claims valid for 24 hours
    claims = Claims.new("user123", 24)

    # Sign
    token = Token.new(b"secret", claims)

    # Verify and decode
    try:
        decoded = Token.decode(b"secret", token.encoded)
        print(f"User ID: {decoded.sub}")
    except ExpiredSignatureError:
        print("Token has expired")
"""

from .claims import Claims
from .exceptions import (
    JWTError,
    InvalidSignatureError,
    ExpiredSignatureError,
    MalformedTokenError,
    InvalidAlgorithmError,
    SigningError,
)
from .token_operations import Token

__all__ = [
    "Claims",
    "Token",
    "JWTError",
    "InvalidSignatureError",
    "ExpiredSignatureError",
    "MalformedTokenError",
    "InvalidAlgorithmError",
    "SigningError",
]
