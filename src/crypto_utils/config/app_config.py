"""Application configuration from YAML file."""
import logging
import os
import yaml
from functools import lru_cache
from pydantic import BaseModel, Field, field_validator
from typing import Optional

from crypto_utils.sha.algorithms import Algorithm, AlgorithmMac


class AppConfig(BaseModel):
    """Application configuration from config.yaml."""

    default_digest_algorithm: Algorithm = Field(
        default=Algorithm.SHA256,
        description="Digest algorithm used when none is given"
    )
    default_mac_algorithm: AlgorithmMac = Field(
        default=AlgorithmMac.HMAC_SHA256,
        description="MAC algorithm used when none is given"
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level name"
    )

    @field_validator("default_digest_algorithm", mode="before")
    @classmethod
    def parse_digest_algorithm(cls, v):
        """Accept names such as 'sha-256'."""
        if isinstance(v, str):
            return Algorithm.from_name(v)
        return v

    @field_validator("default_mac_algorithm", mode="before")
    @classmethod
    def parse_mac_algorithm(cls, v):
        """Accept names such as 'hmac-sha1'."""
        if isinstance(v, str):
            return AlgorithmMac.from_name(v)
        return v

    @field_validator("log_level")
    @classmethod
    def log_level_known(cls, v: str) -> str:
        """Validate and upper-case the level name."""
        v = v.strip().upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"Unknown log level: {v}")
        return v

    @classmethod
    def from_yaml(cls, config_path: Optional[str] = None) -> "AppConfig":
        """
        Load application configuration from YAML file.

        Args:
            config_path: Path to config.yaml file. If None, uses CRYPTO_UTILS_CONFIG_PATH
                        env var or defaults to ./config.yaml

        Returns:
            AppConfig instance
        """
        if config_path is None:
            config_path = os.getenv("CRYPTO_UTILS_CONFIG_PATH", "config.yaml")

        # If file doesn't exist, return default config
        if not os.path.exists(config_path):
            return cls()

        try:
            with open(config_path, 'r') as f:
                config_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError):
            logging.getLogger(__name__).warning("Could not read %s, using defaults", config_path)
            return cls()

        return cls(
            default_digest_algorithm=config_data.get("DEFAULT_DIGEST_ALGORITHM", Algorithm.SHA256),
            default_mac_algorithm=config_data.get("DEFAULT_MAC_ALGORITHM", AlgorithmMac.HMAC_SHA256),
            log_level=config_data.get("LOG_LEVEL", "WARNING"),
        )


@lru_cache()
def get_app_config() -> AppConfig:
    """
    Get cached application configuration.

    Returns:
        AppConfig instance
    """
    return AppConfig.from_yaml()
