"""
Custom exceptions for JWT issuing and validation.
"""


class JWTError(Exception):
    """Base exception for JWT-related errors."""
    def __init__(self, message: str, error_code: str):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidSignatureError(JWTError):
    """Token signature does not verify against the key."""
    def __init__(self, message: str = "Invalid token signature"):
        super().__init__(message, "InvalidSignature")


class ExpiredSignatureError(JWTError):
    """Token signature is valid but the token has expired."""
    def __init__(self, message: str = "Token has expired"):
        super().__init__(message, "ExpiredSignature")


class MalformedTokenError(JWTError):
    """Token is malformed or missing required claims."""
    def __init__(self, message: str = "Token is malformed"):
        super().__init__(message, "MalformedToken")


class InvalidAlgorithmError(JWTError):
    """Token header names an algorithm other than HS256."""
    def __init__(self, message: str = "Token uses an invalid algorithm"):
        super().__init__(message, "InvalidAlgorithm")


class SigningError(JWTError):
    """Token could not be signed."""
    def __init__(self, message: str = "Token could not be signed"):
        super().__init__(message, "SigningError")
