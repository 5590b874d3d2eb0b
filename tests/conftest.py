"""Pytest configuration and fixtures."""

import json

import pytest

from pkg_twitter_token import TokenStrategySettings, TwitterTokenStrategy


ALICE = {
    "id": 42,
    "screen_name": "alice",
    "name": "Alice A",
    "profile_image_url_https": "https://x/p.jpg",
}


class FakeSignedClient:
    """Stands in for OAuth1SignedClient; records every signed GET."""

    def __init__(self, body=None, exc=None):
        self.body = body if body is not None else json.dumps(ALICE)
        self.exc = exc
        self.calls = []

    async def get(self, url, token, token_secret, params=None):
        self.calls.append((url, token, token_secret, dict(params or {})))
        if self.exc is not None:
            raise self.exc
        return self.body, None


class RecordingVerify:
    """Verify callback returning a canned result and recording its args."""

    def __init__(self, result=("user-1", None), exc=None):
        self.result = result
        self.exc = exc
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)
        if self.exc is not None:
            raise self.exc
        return self.result


@pytest.fixture
def settings():
    return TokenStrategySettings(consumer_key="ck", consumer_secret="cs")


@pytest.fixture
def fake_client():
    return FakeSignedClient()


@pytest.fixture
def verify():
    return RecordingVerify()


@pytest.fixture
def strategy(settings, verify, fake_client):
    return TwitterTokenStrategy(settings, verify, fake_client)
