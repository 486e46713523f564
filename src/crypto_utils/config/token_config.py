from functools import lru_cache

from pydantic import BaseModel, Field


class TokenConfig(BaseModel):
    """
    Token validation settings. Signing keys are never part of this config;
    callers pass them on every call.
    """
    leeway_seconds: int = Field(default=60, ge=0, description="Clock skew tolerance for the expiry check")
    default_lifetime_hours: int = Field(default=24, description="Token lifetime used when none is given")

    @classmethod
    def from_env(cls) -> "TokenConfig":
        """
        Load token configuration from environment variables.

        Environment variables:
            JWT_LEEWAY_SECONDS: Expiry check tolerance in seconds (default: 60)
            JWT_DEFAULT_LIFETIME_HOURS: Default token lifetime in hours (default: 24)

        Returns:
            TokenConfig instance
        """
        import os

        leeway_seconds = os.getenv("JWT_LEEWAY_SECONDS", "60")
        default_lifetime_hours = os.getenv("JWT_DEFAULT_LIFETIME_HOURS", "24")

        return cls(
            leeway_seconds=leeway_seconds,
            default_lifetime_hours=default_lifetime_hours,
        )


@lru_cache()
def get_token_config() -> TokenConfig:
    """
    Get cached token configuration loaded from environment variables.
    """
    return TokenConfig.from_env()
