from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional

from ..domain import constants
from ..domain.exceptions import ConfigurationError
from ..domain.value_objects import CredentialFields


@dataclass(frozen=True, slots=True)
class TokenStrategySettings:
    """
    Twitter token strategy settings.

    Endpoint URLs, session key and credential field names default to the
    Twitter values; anything passed explicitly wins. Host code decides how to
    construct this (env, config file, etc.).
    """
    consumer_key: str
    consumer_secret: str

    request_token_url: str = constants.REQUEST_TOKEN_URL
    access_token_url: str = constants.ACCESS_TOKEN_URL
    user_authorization_url: str = constants.USER_AUTHORIZATION_URL
    session_key: str = constants.SESSION_KEY

    profile_url: str = constants.PROFILE_URL
    skip_extended_user_profile: bool = False
    include_email: bool = False

    token_field: str = constants.TOKEN_FIELD
    token_secret_field: str = constants.TOKEN_SECRET_FIELD
    user_id_field: str = constants.USER_ID_FIELD

    pass_request_to_callback: bool = False

    def __post_init__(self) -> None:
        missing = [
            n for n in ("consumer_key", "consumer_secret") if not getattr(self, n)
        ]
        if missing:
            raise ConfigurationError(f"Missing Twitter settings: {', '.join(missing)}")

    @property
    def credential_fields(self) -> CredentialFields:
        return CredentialFields(
            token=self.token_field,
            token_secret=self.token_secret_field,
            user_id=self.user_id_field,
        )

    @classmethod
    def from_options(
        cls,
        options: Optional[Mapping[str, Any]] = None,
        **overrides: Any,
    ) -> "TokenStrategySettings":
        """
        Merge caller options over the defaults.

        `None` values are treated as "not given" so the default applies.
        """
        merged = {**(options or {}), **overrides}
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(merged) - known)
        if unknown:
            raise ConfigurationError(f"Unknown Twitter settings: {', '.join(unknown)}")

        return cls(**{k: v for k, v in merged.items() if v is not None})
