# src/pkg_twitter_token/domain/value_objects.py

from __future__ import annotations

from dataclasses import dataclass

from .constants import TOKEN_FIELD, TOKEN_SECRET_FIELD, USER_ID_FIELD


# --- Profile value objects ------------------------------------------------


@dataclass(frozen=True, slots=True)
class ProfileValue:
    """
    A single `{value: ...}` entry of a profile's `emails` or `photos` list.
    """
    value: str

    def __str__(self) -> str:
        return self.value

    def to_dict(self) -> dict[str, str]:
        return {"value": self.value}


# --- Request lookup value objects -----------------------------------------


@dataclass(frozen=True, slots=True)
class CredentialFields:
    """
    Names of the request fields that carry the OAuth credentials.

    Each name is looked up in the request body first, then in the query string.
    """
    token: str = TOKEN_FIELD
    token_secret: str = TOKEN_SECRET_FIELD
    user_id: str = USER_ID_FIELD

    def __post_init__(self) -> None:
        for attr in ("token", "token_secret", "user_id"):
            name = getattr(self, attr)
            if not isinstance(name, str) or not name.strip():
                raise ValueError(f"Invalid credential field name for {attr}: {name!r}")
