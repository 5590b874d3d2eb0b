import json

import httpx
import pytest

from pkg_twitter_token import (
    AuthRequest,
    Error,
    InternalOAuthError,
    OAuth1SignedClient,
    Success,
    TokenStrategySettings,
    create_twitter_token_strategy,
)

from conftest import ALICE


def provider(status_code=200, body=None, seen=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, text=body if body is not None else json.dumps(ALICE))

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_signed_get_sends_oauth_header():
    seen = []
    client = OAuth1SignedClient("ck", "cs", client=provider(seen=seen))

    body, resp = await client.get(
        "https://api.twitter.com/1.1/users/show.json", "t1", "s1", {"user_id": "42"}
    )
    await client.aclose()

    assert json.loads(body) == ALICE
    assert resp.status_code == 200

    request = seen[0]
    assert request.url.params["user_id"] == "42"
    auth = request.headers["Authorization"]
    assert auth.startswith("OAuth ")
    assert 'oauth_consumer_key="ck"' in auth
    assert 'oauth_token="t1"' in auth
    assert "oauth_signature=" in auth


@pytest.mark.asyncio
async def test_signed_get_raises_on_error_status():
    client = OAuth1SignedClient("ck", "cs", client=provider(status_code=401, body="{}"))

    with pytest.raises(httpx.HTTPStatusError):
        await client.get("https://api.twitter.com/1.1/users/show.json", "t1", "s1")


@pytest.mark.asyncio
async def test_factory_end_to_end():
    profiles = []

    def verify(token, token_secret, profile):
        profiles.append(profile)
        return {"twitter_id": profile.id}, None

    strategy = create_twitter_token_strategy(
        verify=verify,
        settings=TokenStrategySettings(consumer_key="ck", consumer_secret="cs"),
        http_client=provider(),
    )

    outcome = await strategy.authenticate(
        AuthRequest(query={"oauth_token": "t1", "oauth_token_secret": "s1", "user_id": "42"})
    )
    await strategy.aclose()

    assert outcome == Success({"twitter_id": 42}, None)
    assert profiles[0].to_dict() == {
        "provider": "twitter",
        "id": 42,
        "username": "alice",
        "displayName": "Alice A",
        "name": {"familyName": "A", "givenName": "Alice", "middleName": ""},
        "emails": [],
        "photos": [{"value": "https://x/p.jpg"}],
        "_raw": json.dumps(ALICE),
        "_json": ALICE,
    }


@pytest.mark.asyncio
async def test_factory_provider_rejection_is_error():
    strategy = create_twitter_token_strategy(
        verify=lambda *args: "never",
        settings=TokenStrategySettings(consumer_key="ck", consumer_secret="cs"),
        http_client=provider(status_code=503, body="unavailable"),
    )

    outcome = await strategy.authenticate(AuthRequest(body={"oauth_token": "t1"}))

    assert isinstance(outcome, Error)
    assert isinstance(outcome.error, InternalOAuthError)
    assert isinstance(outcome.error.oauth_error, httpx.HTTPStatusError)
