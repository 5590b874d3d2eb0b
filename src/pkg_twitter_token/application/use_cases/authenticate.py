from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional

import httpx

from ..strategy import OAuthStrategy
from ...config.settings import TokenStrategySettings
from ...domain.constants import STRATEGY_NAME
from ...domain.entities import AuthRequest, Profile
from ...domain.exceptions import InternalOAuthError
from ...domain.outcomes import Outcome
from ...domain.ports import ProfileNormalizer, SignedClient, VerifyCallback
from .normalize import TwitterProfileNormalizer

logger = logging.getLogger(__name__)


class TwitterTokenStrategy(OAuthStrategy):
    """
    Authenticates requests that already carry a Twitter access token.

    The client obtains `oauth_token` / `oauth_token_secret` (and `user_id`)
    on its own, e.g. through a mobile SDK, and posts them here. The strategy:

      1. rejects requests Twitter sent back with `?denied=...`
      2. reads token, secret and user id from the body, then the query string
      3. loads the user's profile (one signed users/show call, or straight
         from the params when `skip_extended_user_profile` is set)
      4. hands `(token, token_secret, profile)` to the verify callback

    Usage:

        strategy = TwitterTokenStrategy(
            TokenStrategySettings(consumer_key="...", consumer_secret="..."),
            verify=find_or_create_user,
            client=OAuth1SignedClient("...", "..."),
        )
        outcome = await strategy.authenticate(auth_request)
    """

    name = STRATEGY_NAME

    def __init__(
        self,
        settings: TokenStrategySettings,
        verify: VerifyCallback,
        client: SignedClient,
        normalizer: Optional[ProfileNormalizer] = None,
    ) -> None:
        super().__init__(settings, verify)
        self._client = client
        self._normalizer: ProfileNormalizer = normalizer or TwitterProfileNormalizer()
        self._fields = settings.credential_fields
        self._skip_extended_user_profile = settings.skip_extended_user_profile

    async def aclose(self) -> None:
        close = getattr(self._client, "aclose", None)
        if close is not None:
            await close()

    # ------------------------------------------------------------------ #
    # Strategy entry point
    # ------------------------------------------------------------------ #

    async def authenticate(
        self,
        request: AuthRequest,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Outcome:
        """
        Authenticate a request and return exactly one Outcome.

        Never raises for provider or callback problems; those come back as
        `Error`. Input problems come back as `Fail`.
        """
        if request.denied:
            return self.fail()

        creds = request.credentials(self._fields)
        if not creds.token:
            return self.fail({"message": f"You should provide {self._fields.token}"})

        try:
            profile = await self._load_user_profile(creds.token, creds.token_secret, creds.params)
        except Exception as exc:
            return self.error(exc)

        return await self._call_verify(request, creds.token, creds.token_secret, profile)

    # ------------------------------------------------------------------ #
    # Profile loading
    # ------------------------------------------------------------------ #

    async def user_profile(
        self,
        token: str,
        token_secret: Optional[str],
        params: Mapping[str, Any],
    ) -> Profile:
        """
        Retrieve the user profile from Twitter.

        With `skip_extended_user_profile` the profile is built from `params`
        (`user_id`, and `screen_name` if present) without any HTTP request.

        Raises:
            InternalOAuthError  when the users/show call fails
            json.JSONDecodeError when the response body is not JSON
        """
        if self._skip_extended_user_profile:
            logger.debug("%s: building profile from params", self.name)
            return self._normalizer.from_params(params)

        query: dict[str, Any] = {}
        if params.get("user_id"):
            query["user_id"] = params["user_id"]
        if self.settings.include_email:
            query["include_email"] = "true"

        try:
            body, _ = await self._client.get(self.settings.profile_url, token, token_secret, query)
        except httpx.HTTPError as exc:
            logger.warning("%s: profile request failed: %s", self.name, exc)
            raise InternalOAuthError("failed to fetch user profile", exc) from exc

        payload = json.loads(body)
        if not isinstance(payload, dict):
            raise ValueError(f"Unexpected profile payload: {type(payload).__name__}")
        return self._normalizer.from_payload(body, payload)

    # ------------------------------------------------------------------ #
    # Authorization redirect
    # ------------------------------------------------------------------ #

    def user_authorization_params(self, options: Mapping[str, Any]) -> dict[str, Any]:
        """
        Extra Twitter parameters for the user authorization redirect.

        Recognized options: `force_login`, `screen_name`.
        """
        params: dict[str, Any] = {}
        if options.get("force_login"):
            params["force_login"] = options["force_login"]
        if options.get("screen_name"):
            params["screen_name"] = options["screen_name"]
        return params
