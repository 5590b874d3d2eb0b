import json

import httpx
import pytest
from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from pkg_twitter_token import TokenStrategySettings
from pkg_twitter_token.integrations.fastapi import create_fastapi_token_auth

from conftest import ALICE


def make_app(status_code=200, verify=None):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=json.dumps(ALICE))

    def default_verify(token, token_secret, profile):
        return {"username": profile.username}, None

    twitter_auth = create_fastapi_token_auth(
        verify=verify or default_verify,
        settings=TokenStrategySettings(consumer_key="ck", consumer_secret="cs"),
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )

    app = FastAPI()

    @app.post("/auth/twitter/token")
    async def login(user=Depends(twitter_auth.get_current_user)):
        return {"user": user}

    @app.get("/maybe")
    async def maybe(user=Depends(twitter_auth.get_optional_user)):
        return {"user": user}

    return TestClient(app)


CREDS = {"oauth_token": "t1", "oauth_token_secret": "s1", "user_id": "42"}


@pytest.mark.parametrize(
    "kwargs",
    [
        {"json": CREDS},
        {"data": CREDS},
        {"params": CREDS},
    ],
)
def test_login_accepts_json_form_or_query(kwargs):
    client = make_app()

    resp = client.post("/auth/twitter/token", **kwargs)

    assert resp.status_code == 200
    assert resp.json() == {"user": {"username": "alice"}}


def test_missing_token_is_401():
    client = make_app()

    resp = client.post("/auth/twitter/token", json={"user_id": "42"})

    assert resp.status_code == 401
    assert resp.json()["detail"] == "You should provide oauth_token"


def test_denied_is_401():
    client = make_app()

    resp = client.post("/auth/twitter/token", params={"denied": "abc"})

    assert resp.status_code == 401
    assert resp.json()["detail"] == "Unauthorized"


def test_provider_failure_is_502():
    client = make_app(status_code=500)

    resp = client.post("/auth/twitter/token", json=CREDS)

    assert resp.status_code == 502


def test_verify_error_is_500():
    def verify(token, token_secret, profile):
        raise RuntimeError("db down")

    client = make_app(verify=verify)

    resp = client.post("/auth/twitter/token", json=CREDS)

    assert resp.status_code == 500
    assert resp.json()["detail"] == "Authentication error"


def test_optional_user():
    client = make_app()

    assert client.get("/maybe").json() == {"user": None}
    assert client.get("/maybe", params=CREDS).json() == {"user": {"username": "alice"}}


def token_echo(token, token_secret, profile):
    return {"token": token, "token_secret": token_secret}, None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"content": b"{not json", "headers": {"content-type": "application/json"}},
        {"json": ["oauth_token", "from-body"]},
        {"files": {"oauth_token": ("token.txt", b"from-file")}},
    ],
    ids=["malformed-json", "json-list", "multipart-upload"],
)
def test_unusable_body_falls_back_to_query(kwargs):
    client = make_app(verify=token_echo)

    resp = client.post("/auth/twitter/token", params=CREDS, **kwargs)

    assert resp.status_code == 200
    assert resp.json() == {"user": {"token": "t1", "token_secret": "s1"}}
