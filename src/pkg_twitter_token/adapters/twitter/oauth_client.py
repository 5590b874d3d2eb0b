from typing import Any, Mapping, Optional, Tuple

import httpx
from authlib.integrations.httpx_client import OAuth1Auth

from ...domain.ports import SignedClient


class OAuth1SignedClient(SignedClient):
    """
    Adapter implementing SignedClient port using httpx and Authlib.

    Infrastructure layer:
    - Knows how to sign requests with OAuth 1.0a (HMAC-SHA1, header style).
    - Owns (or borrows) a single `httpx.AsyncClient`; the signing auth is
      built per call, so one instance serves concurrent requests.
    """

    def __init__(
        self,
        consumer_key: str,
        consumer_secret: str,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 30.0,
    ) -> None:
        self._consumer_key = consumer_key
        self._consumer_secret = consumer_secret
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def aclose(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------ #
    # Port implementation
    # ------------------------------------------------------------------ #

    async def get(
        self,
        url: str,
        token: str,
        token_secret: Optional[str],
        params: Optional[Mapping[str, Any]] = None,
    ) -> Tuple[str, httpx.Response]:
        """
        Signed GET.

        Returns:
            (response text, response)

        Raises:
            httpx.HTTPError on transport failure or a non-2xx status
        """
        resp = await self._client.get(
            url,
            params=dict(params or {}),
            auth=self._auth(token, token_secret),
        )
        resp.raise_for_status()
        return resp.text, resp

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    def _auth(self, token: str, token_secret: Optional[str]) -> OAuth1Auth:
        return OAuth1Auth(
            self._consumer_key,
            client_secret=self._consumer_secret,
            token=token,
            token_secret=token_secret,
        )
