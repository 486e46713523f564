"""
JWT token operations for issuing, verifying, and decoding HS256 tokens.
"""
import logging
from typing import Any, ClassVar, Dict, List, Optional, Union

import jwt
from pydantic import BaseModel, ConfigDict, ValidationError

from crypto_utils.config.token_config import get_token_config
from crypto_utils.utils.clock import Clock, unix_seconds, utc_now

from .claims import Claims
from .exceptions import (
    JWTError,
    ExpiredSignatureError,
    InvalidSignatureError,
    MalformedTokenError,
    InvalidAlgorithmError,
    SigningError,
)

logger = logging.getLogger(__name__)

Key = Union[bytes, str]


def _key_problem(key: Key) -> Optional[str]:
    """Describe why ``key`` cannot sign or verify, or return None."""
    if not isinstance(key, (bytes, str)):
        return f"key must be bytes or str, not {type(key).__name__}"
    if not key:
        return "key must not be empty"
    return None


class Token(BaseModel):
    """
    A signed JSON Web Token.

    The encoded string is the only thing meant to leave the process. Tokens
    are self-contained: nothing is stored, and decoding rebuilds the token
    from the string alone.

    Example:
        claims = Claims.new("user_1234", 24)
        token = Token.new(b"secret", claims)

        try:
            decoded = Token.decode(b"secret", token.encoded)
        except ExpiredSignatureError:
            print("Token has expired")
    """
    model_config = ConfigDict(frozen=True)

    ALGORITHM: ClassVar[str] = "HS256"
    ALLOWED_ALGORITHMS: ClassVar[List[str]] = ["HS256"]
    REQUIRED_CLAIMS: ClassVar[List[str]] = ["sub", "exp", "iat"]

    header: Dict[str, Any]
    claims: Claims
    encoded: str

    @classmethod
    def new(cls, key: Key, claims: Claims) -> "Token":
        """
        Sign ``claims`` with ``key``.

        Args:
            key: HMAC secret
            claims: Claims to embed

        Returns:
            Signed Token

        Raises:
            SigningError: If the key is empty or not bytes/str, or signing fails
        """
        header = {"typ": "JWT", "alg": cls.ALGORITHM}

        problem = _key_problem(key)
        if problem:
            logger.error("Token signing failed: %s", problem)
            raise SigningError(f"Token could not be signed: {problem}")

        try:
            # Unsorted header keeps {"typ","alg"} order, matching other HS256 implementations
            encoded = jwt.encode(
                claims.model_dump(),
                key,
                algorithm=cls.ALGORITHM,
                sort_headers=False,
            )
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            logger.error("Token signing failed: %s", e)
            raise SigningError(f"Token could not be signed: {e}") from e

        logger.debug("Issued token for subject %s expiring at %s", claims.sub, claims.exp)
        return cls(header=header, claims=claims, encoded=encoded)

    @classmethod
    def decode(
        cls,
        key: Key,
        encoded: Union[str, bytes],
        clock: Clock = utc_now,
        leeway: Optional[int] = None,
    ) -> Claims:
        """
        Verify and decode a token.

        Checks run in order and stop at the first failure: signature and
        algorithm, then claims structure, then expiry.

        Args:
            key: HMAC secret the token was signed with
            encoded: Encoded token string
            clock: Time source for the expiry check
            leeway: Clock skew tolerance in seconds (default: from TokenConfig)

        Returns:
            The verified claims

        Raises:
            InvalidSignatureError: If the key is unusable or the signature does not verify
            InvalidAlgorithmError: If the token is not HS256
            MalformedTokenError: If the token or its claims are malformed
            ExpiredSignatureError: If the token has expired
        """
        return cls.from_encoded(key, encoded, clock=clock, leeway=leeway).claims

    @classmethod
    def from_encoded(
        cls,
        key: Key,
        encoded: Union[str, bytes],
        clock: Clock = utc_now,
        leeway: Optional[int] = None,
    ) -> "Token":
        """
        Verify and decode a token, returning header and claims together.

        Runs the same checks as ``decode``.
        """
        try:
            return cls._verify(key, encoded, clock, leeway)
        except JWTError as e:
            logger.warning("Rejected token: %s", e.error_code)
            raise

    @classmethod
    def _verify(
        cls,
        key: Key,
        encoded: Union[str, bytes],
        clock: Clock,
        leeway: Optional[int],
    ) -> "Token":
        problem = _key_problem(key)
        if problem:
            raise InvalidSignatureError(f"Key cannot verify token: {problem}")

        if leeway is None:
            leeway = get_token_config().leeway_seconds

        # Expiry is checked below against the injected clock
        options = {
            "verify_signature": True,
            "verify_exp": False,
            "verify_iat": False,
            "verify_nbf": False,
            "verify_aud": False,
            "verify_iss": False,
            "require": cls.REQUIRED_CLAIMS,
        }

        try:
            decoded = jwt.decode_complete(
                encoded,
                key,
                algorithms=cls.ALLOWED_ALGORITHMS,
                options=options,
            )
        except jwt.InvalidSignatureError as e:
            raise InvalidSignatureError() from e
        except jwt.InvalidAlgorithmError as e:
            raise InvalidAlgorithmError(
                f"Invalid algorithm. Only {cls.ALLOWED_ALGORITHMS} allowed."
            ) from e
        except jwt.InvalidKeyError as e:
            raise InvalidSignatureError(f"Key cannot verify token: {e}") from e
        except jwt.MissingRequiredClaimError as e:
            raise MalformedTokenError(f"Token missing required claim: {e.claim}") from e
        except jwt.DecodeError as e:
            raise MalformedTokenError("Token is malformed") from e
        except jwt.InvalidTokenError as e:
            raise MalformedTokenError(f"Invalid token: {e}") from e

        try:
            claims = Claims.model_validate(decoded["payload"])
        except ValidationError as e:
            raise MalformedTokenError(f"Invalid token claims: {e.error_count()} error(s)") from e

        if claims.is_expired(unix_seconds(clock), leeway):
            raise ExpiredSignatureError()

        if isinstance(encoded, bytes):
            encoded = encoded.decode("ascii")

        return cls(header=decoded["header"], claims=claims, encoded=encoded)

    @staticmethod
    def decode_unverified(encoded: Union[str, bytes]) -> Dict[str, Any]:
        """
        Decode a token WITHOUT verification.

        WARNING: This method does NOT verify the signature or any claim.
        Use only for debugging and troubleshooting purposes.

        Raises:
            MalformedTokenError: If the token cannot be decoded
        """
        try:
            return jwt.decode(encoded, options={"verify_signature": False})
        except jwt.InvalidTokenError as e:
            raise MalformedTokenError("Token is malformed") from e
