from __future__ import annotations

from typing import Optional

import httpx

from ...adapters.twitter.oauth_client import OAuth1SignedClient
from ...application.use_cases.authenticate import TwitterTokenStrategy
from ...config.env import settings_from_env
from ...config.settings import TokenStrategySettings
from ...domain.ports import ProfileNormalizer, VerifyCallback


def create_twitter_token_strategy(
        *,
        verify: VerifyCallback,
        settings: Optional[TokenStrategySettings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        normalizer: Optional[ProfileNormalizer] = None,
) -> TwitterTokenStrategy:
    """
    High-level factory: settings + verify callback -> TwitterTokenStrategy.

    - falls back to `settings_from_env()` when no settings are given
    - builds an OAuth1SignedClient for the consumer key/secret
    - wires everything into the strategy

    Pass `http_client` to share an existing `httpx.AsyncClient` (or a mocked
    transport in tests).
    """
    settings = settings or settings_from_env()

    client = OAuth1SignedClient(
        consumer_key=settings.consumer_key,
        consumer_secret=settings.consumer_secret,
        client=http_client,
    )

    return TwitterTokenStrategy(
        settings=settings,
        verify=verify,
        client=client,
        normalizer=normalizer,
    )
