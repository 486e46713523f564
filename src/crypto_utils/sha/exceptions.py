"""
Custom exceptions for the digest and MAC engines.
"""


class ShaError(Exception):
    """Base exception for hashing errors."""
    def __init__(self, message: str, error_code: str):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidKeyError(ShaError):
    """HMAC key was rejected."""
    def __init__(self, message: str = "invalid key"):
        super().__init__(message, "InvalidKey")


class EngineFinalizedError(ShaError):
    """MAC engine was used after finalize."""
    def __init__(self, message: str = "MAC engine has already been finalized"):
        super().__init__(message, "EngineFinalized")
