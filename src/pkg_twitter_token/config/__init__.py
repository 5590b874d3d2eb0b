"""
pkg_twitter_token.config

- TokenStrategySettings: consumer credentials, endpoints and field names.
- settings_from_env: build settings from TWITTER_* environment variables.
"""

from .env import settings_from_env
from .settings import TokenStrategySettings

__all__ = ["TokenStrategySettings", "settings_from_env"]
