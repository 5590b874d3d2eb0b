from __future__ import annotations

import os

from ..domain.exceptions import ConfigurationError
from .settings import TokenStrategySettings


def settings_from_env() -> TokenStrategySettings:
    """
    Build settings from TWITTER_* environment variables.

    Every TokenStrategySettings field has a variable; unset ones keep the
    Twitter defaults. TWITTER_CONSUMER_KEY and TWITTER_CONSUMER_SECRET are
    required.
    """

    def _bool(key: str, default: bool = False) -> bool:
        raw = os.getenv(key)
        if raw is None:
            return default
        return str(raw).strip().lower() in {"1", "true", "yes", "on"}

    consumer_key = os.getenv("TWITTER_CONSUMER_KEY")
    consumer_secret = os.getenv("TWITTER_CONSUMER_SECRET")
    if not all([consumer_key, consumer_secret]):
        missing = [
            n
            for n, v in [
                ("TWITTER_CONSUMER_KEY", consumer_key),
                ("TWITTER_CONSUMER_SECRET", consumer_secret),
            ]
            if not v
        ]
        raise ConfigurationError(f"Missing Twitter settings: {', '.join(missing)}")

    return TokenStrategySettings.from_options(
        consumer_key=consumer_key,
        consumer_secret=consumer_secret,
        request_token_url=os.getenv("TWITTER_REQUEST_TOKEN_URL"),
        access_token_url=os.getenv("TWITTER_ACCESS_TOKEN_URL"),
        user_authorization_url=os.getenv("TWITTER_USER_AUTHORIZATION_URL"),
        session_key=os.getenv("TWITTER_SESSION_KEY"),
        profile_url=os.getenv("TWITTER_PROFILE_URL"),
        skip_extended_user_profile=_bool("TWITTER_SKIP_EXTENDED_PROFILE"),
        include_email=_bool("TWITTER_INCLUDE_EMAIL"),
        token_field=os.getenv("TWITTER_TOKEN_FIELD"),
        token_secret_field=os.getenv("TWITTER_TOKEN_SECRET_FIELD"),
        user_id_field=os.getenv("TWITTER_USER_ID_FIELD"),
        pass_request_to_callback=_bool("TWITTER_PASS_REQUEST_TO_CALLBACK"),
    )
