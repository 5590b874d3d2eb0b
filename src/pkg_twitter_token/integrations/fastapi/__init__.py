from __future__ import annotations

from typing import Optional

import httpx

from .deps import FastAPITokenAuth
from .security import extract_auth_request
from ..common.auth_factory import create_twitter_token_strategy
from ...config.settings import TokenStrategySettings
from ...domain.ports import VerifyCallback


def create_fastapi_token_auth(
    *,
    verify: VerifyCallback,
    settings: Optional[TokenStrategySettings] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastAPITokenAuth:
    """
    High-level helper for FastAPI apps:

    - Creates a TwitterTokenStrategy (settings default to the environment)
    - Wraps it in FastAPITokenAuth, exposing dependencies like:

        twitter_auth.get_current_user
        twitter_auth.get_optional_user
    """
    strategy = create_twitter_token_strategy(
        verify=verify,
        settings=settings,
        http_client=http_client,
    )
    return FastAPITokenAuth(strategy=strategy)


__all__ = ["FastAPITokenAuth", "create_fastapi_token_auth", "extract_auth_request"]
