from __future__ import annotations

from typing import Any, Awaitable, Mapping, Optional, Protocol, Tuple, Union

from .entities import Profile


class SignedClient(Protocol):
    """
    Port for an OAuth 1.0a signing HTTP client.

    Implementations live in the adapters layer (e.g. `OAuth1SignedClient`).
    """

    async def get(
        self,
        url: str,
        token: str,
        token_secret: Optional[str],
        params: Optional[Mapping[str, Any]] = None,
    ) -> Tuple[str, Any]:
        """
        Issue a signed GET and return `(body_text, response)`.

        Raises:
          - httpx.HTTPError on transport failure or non-2xx status
        """
        ...


class ProfileNormalizer(Protocol):
    """Port mapping provider payloads onto the canonical `Profile`."""

    def from_payload(self, body: str, payload: Mapping[str, Any]) -> Profile:
        ...

    def from_params(self, params: Mapping[str, Any]) -> Profile:
        ...


# Either a user or a `(user, info)` pair, possibly awaitable.
VerifyResult = Union[Any, Tuple[Any, Any]]


class VerifyCallback(Protocol):
    """
    Application hook that maps validated credentials + profile to a user.

    Called as `verify(token, token_secret, profile)`, or with the raw request
    first when the strategy is configured to pass it. Raise to signal an
    error; return a falsy user to reject.
    """

    def __call__(self, *args: Any) -> Union[VerifyResult, Awaitable[VerifyResult]]:
        ...
