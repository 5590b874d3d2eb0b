from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi import HTTPException, Request, status

from .security import extract_auth_request
from ...application.use_cases.authenticate import TwitterTokenStrategy
from ...domain.exceptions import InternalOAuthError
from ...domain.outcomes import Error, Fail, Outcome, Success


@dataclass(slots=True)
class FastAPITokenAuth:
    """
    FastAPI integration for pkg_twitter_token.

    Runs the strategy for the incoming request and turns its Outcome into
    either the verified user or an HTTPException:

      - Fail                         -> 401
      - Error (provider unreachable) -> 502
      - Error (anything else)        -> 500
    """

    strategy: TwitterTokenStrategy

    # ------------------------------------------------------------------ #
    # Dependencies
    # ------------------------------------------------------------------ #

    async def get_current_user(self, request: Request) -> Any:
        """Dependency: Require authentication."""
        outcome = await self._authenticate(request)
        if isinstance(outcome, Success):
            return outcome.user
        raise self._to_http_exception(outcome)

    async def get_optional_user(self, request: Request) -> Any | None:
        """Dependency: Optional authentication. Errors still raise."""
        outcome = await self._authenticate(request)
        if isinstance(outcome, Success):
            return outcome.user
        if isinstance(outcome, Error):
            raise self._to_http_exception(outcome)
        return None

    # ------------------------------------------------------------------ #
    # helpers
    # ------------------------------------------------------------------ #

    async def _authenticate(self, request: Request) -> Outcome:
        auth_request = await extract_auth_request(request)
        return await self.strategy.authenticate(auth_request)

    @staticmethod
    def _to_http_exception(outcome: Fail | Error) -> HTTPException:
        if isinstance(outcome, Fail):
            return HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail=outcome.message or "Unauthorized",
            )
        if isinstance(outcome.error, InternalOAuthError):
            return HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=str(outcome.error),
            )
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Authentication error",
        )


"""

from fastapi import Depends, FastAPI
from pkg_twitter_token.integrations.fastapi import create_fastapi_token_auth

async def find_or_create_user(token, token_secret, profile):
    user = await users.get_or_create(twitter_id=profile.id, username=profile.username)
    return user, {"scope": "read"}

twitter_auth = create_fastapi_token_auth(verify=find_or_create_user)

app = FastAPI()

@app.post("/auth/twitter/token")
async def login(user=Depends(twitter_auth.get_current_user)):
    return {"id": user.id}

"""
