from __future__ import annotations

import inspect
import logging
from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from ..config.settings import TokenStrategySettings
from ..domain.entities import AuthRequest, Profile
from ..domain.outcomes import Error, Fail, Outcome, Success
from ..domain.ports import VerifyCallback

logger = logging.getLogger(__name__)


class OAuthStrategy(ABC):
    """
    Generic OAuth 1.0a strategy.

    Holds the settings and the application's verify callback, and gives
    subclasses the reporting helpers (`success` / `fail` / `error`), each of
    which builds the single Outcome an authentication attempt ends with.

    Subclasses implement `authenticate` and `user_profile`.
    """

    name: str = "oauth"

    def __init__(self, settings: TokenStrategySettings, verify: VerifyCallback) -> None:
        if not callable(verify):
            raise TypeError("OAuth strategy requires a verify callback")

        self._settings = settings
        self._verify = verify
        self._pass_req_to_callback = settings.pass_request_to_callback

    @property
    def settings(self) -> TokenStrategySettings:
        return self._settings

    # ------------------------------------------------------------------ #
    # Subclass contract
    # ------------------------------------------------------------------ #

    @abstractmethod
    async def authenticate(
        self,
        request: AuthRequest,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Outcome:
        ...

    @abstractmethod
    async def user_profile(
        self,
        token: str,
        token_secret: Optional[str],
        params: Mapping[str, Any],
    ) -> Profile:
        ...

    def user_authorization_params(self, options: Mapping[str, Any]) -> dict[str, Any]:
        return {}

    # ------------------------------------------------------------------ #
    # Outcome reporting
    # ------------------------------------------------------------------ #

    def success(self, user: Any, info: Any = None) -> Success:
        logger.debug("%s: authentication succeeded", self.name)
        return Success(user=user, info=info)

    def fail(self, info: Any = None) -> Fail:
        logger.debug("%s: authentication failed: %r", self.name, info)
        return Fail(info=info)

    def error(self, err: BaseException) -> Error:
        logger.debug("%s: authentication error: %s", self.name, err)
        return Error(error=err)

    # ------------------------------------------------------------------ #
    # Helpers for subclasses
    # ------------------------------------------------------------------ #

    async def _load_user_profile(
        self,
        token: str,
        token_secret: Optional[str],
        params: Mapping[str, Any],
    ) -> Profile:
        return await self.user_profile(token, token_secret, params)

    async def _call_verify(
        self,
        request: AuthRequest,
        token: str,
        token_secret: Optional[str],
        profile: Profile,
    ) -> Outcome:
        """
        Run the verify callback and turn its result into an Outcome.

        The callback may be sync or async and may return either a user or a
        plain `(user, info)` tuple. Tuple subclasses such as namedtuples are
        treated as the user itself; a plain tuple of any other length is an
        error.
        """
        try:
            if self._pass_req_to_callback:
                result = self._verify(request.raw, token, token_secret, profile)
            else:
                result = self._verify(token, token_secret, profile)
            if inspect.isawaitable(result):
                result = await result

            if type(result) is tuple:
                if len(result) != 2:
                    raise ValueError(
                        f"verify must return a user or a (user, info) pair, got a {len(result)}-tuple"
                    )
                user, info = result
            else:
                user, info = result, None
        except Exception as exc:
            return self.error(exc)

        if not user:
            return self.fail(info)
        return self.success(user, info)
