from __future__ import annotations

from typing import Any

from starlette.requests import Request

from ...domain.entities import AuthRequest

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def extract_auth_request(request: Request) -> AuthRequest:
    """
    Build an AuthRequest from a Starlette/FastAPI request.

      1. query string -> `query`
      2. JSON object body or form body -> `body`

    Anything else (no body, non-object JSON, unparsable JSON) leaves `body`
    empty so lookups fall through to the query string.
    """
    query = dict(request.query_params)
    body: dict[str, Any] = {}

    content_type = request.headers.get("content-type", "")
    if content_type.startswith(JSON_CONTENT_TYPE):
        try:
            data = await request.json()
        except ValueError:
            data = None
        if isinstance(data, dict):
            body = data
    elif content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        # uploaded files never carry credentials
        body = {k: v for k, v in form.items() if isinstance(v, str)}

    return AuthRequest(query=query, body=body, raw=request)
