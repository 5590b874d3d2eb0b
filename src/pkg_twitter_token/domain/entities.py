from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, List

from .constants import DENIED_QUERY_PARAM, PROVIDER
from .value_objects import CredentialFields, ProfileValue


def _lookup(source: Mapping[str, Any], name: str) -> Optional[str]:
    value = source.get(name)
    # only non-empty strings and numeric ids count; False, 0 and objects are missing
    if not value or isinstance(value, bool) or not isinstance(value, (str, int)):
        return None
    return str(value)


@dataclass(slots=True)
class AuthRequest:
    """
    Transport-neutral view of an inbound authentication request.

    The transport layer (see `integrations.fastapi.security`) fills `query`
    and `body` with flat mappings; `raw` keeps the original request object so
    it can be handed to the verify callback.
    """
    query: Mapping[str, Any] = field(default_factory=dict)
    body: Mapping[str, Any] = field(default_factory=dict)
    raw: Any = None

    def lookup(self, name: str) -> Optional[str]:
        """Body first, then query string. Empty values count as missing."""
        return _lookup(self.body, name) or _lookup(self.query, name)

    @property
    def denied(self) -> bool:
        return bool(self.query.get(DENIED_QUERY_PARAM))

    def credentials(self, fields: CredentialFields) -> "Credentials":
        return Credentials(
            token=self.lookup(fields.token),
            token_secret=self.lookup(fields.token_secret),
            user_id=self.lookup(fields.user_id),
        )


@dataclass(frozen=True, slots=True)
class Credentials:
    """
    OAuth credentials extracted from a single request.
    """
    token: Optional[str] = None
    token_secret: Optional[str] = None
    user_id: Optional[str] = None

    @property
    def params(self) -> dict[str, Optional[str]]:
        return {"user_id": self.user_id}


@dataclass(slots=True)
class ProfileName:
    family_name: Optional[str] = None
    given_name: Optional[str] = None
    middle_name: Optional[str] = None

    def to_dict(self) -> dict[str, Optional[str]]:
        return {
            "familyName": self.family_name,
            "givenName": self.given_name,
            "middleName": self.middle_name,
        }


@dataclass(slots=True)
class Profile:
    """
    Normalized user profile.

    Produced either from the provider's users/show payload (extended) or
    straight from the request params (lightweight). The lightweight path
    leaves display name, name parts, emails and photos empty.
    """
    provider: str = PROVIDER
    id: Any = None
    username: Optional[str] = None
    display_name: Optional[str] = None
    name: ProfileName = field(default_factory=ProfileName)
    emails: List[ProfileValue] = field(default_factory=list)
    photos: List[ProfileValue] = field(default_factory=list)

    # Provider payload as received, for application use
    raw: Optional[str] = None
    json: Optional[Mapping[str, Any]] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "provider": self.provider,
            "id": self.id,
            "username": self.username,
            "displayName": self.display_name,
            "name": self.name.to_dict(),
            "emails": [e.to_dict() for e in self.emails],
            "photos": [p.to_dict() for p in self.photos],
            "_raw": self.raw,
            "_json": self.json,
        }
