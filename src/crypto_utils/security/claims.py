"""
Token claims.
"""
from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from crypto_utils.utils.clock import Clock, unix_seconds, utc_now

SECONDS_PER_HOUR = 3600


class Claims(BaseModel):
    """
    Payload of a signed token.

    Field order is the serialized order on the wire: sub, exp, iat.
    """
    model_config = ConfigDict(frozen=True, extra="ignore")

    sub: StrictStr = Field(..., description="Subject identifier, opaque to this library")
    exp: StrictInt = Field(..., description="Expiry time, seconds since the epoch")
    iat: StrictInt = Field(..., description="Issue time, seconds since the epoch")

    @classmethod
    def new(cls, subject: str, lifetime_hours: int, clock: Clock = utc_now) -> "Claims":
        """
        Create claims issued now and expiring after ``lifetime_hours``.

        A negative lifetime is allowed and produces claims that are already
        expired.

        Args:
            subject: Subject identifier (e.g. a user ID)
            lifetime_hours: Token lifetime in hours
            clock: Time source, defaults to the UTC wall clock

        Returns:
            Claims instance
        """
        iat = unix_seconds(clock)
        return cls(sub=subject, exp=iat + lifetime_hours * SECONDS_PER_HOUR, iat=iat)

    @property
    def subject(self) -> str:
        return self.sub

    @property
    def issued_at(self) -> int:
        return self.iat

    @property
    def expires_at(self) -> int:
        return self.exp

    def is_expired(self, now: int, leeway: int = 0) -> bool:
        """Whether ``exp`` lies before ``now`` minus ``leeway`` seconds."""
        return self.exp < now - leeway
