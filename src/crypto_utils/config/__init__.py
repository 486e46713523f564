from .app_config import AppConfig, get_app_config
from .token_config import TokenConfig, get_token_config

__all__ = ["AppConfig", "get_app_config", "TokenConfig", "get_token_config"]
