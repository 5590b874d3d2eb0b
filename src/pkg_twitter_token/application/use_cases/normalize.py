from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ...domain.constants import PROVIDER
from ...domain.entities import Profile, ProfileName
from ...domain.ports import ProfileNormalizer
from ...domain.value_objects import ProfileValue


def _split_name(full_name: Optional[str]) -> ProfileName:
    """
    Twitter only has a single free-form `name`; treat the first word as the
    given name and the rest as the family name.
    """
    if not full_name:
        return ProfileName()
    parts = full_name.strip().split(" ", 1)
    return ProfileName(
        given_name=parts[0],
        family_name=parts[1] if len(parts) > 1 else "",
        middle_name="",
    )


@dataclass(frozen=True, slots=True)
class TwitterProfileNormalizer(ProfileNormalizer):
    """
    Maps Twitter payloads onto the canonical `Profile`.

    - `from_payload`: users/show (or verify_credentials) JSON
    - `from_params`:  the params handed to `user_profile`, no network involved
    """

    provider: str = PROVIDER

    def from_payload(self, body: str, payload: Mapping[str, Any]) -> Profile:
        display_name = payload.get("name")
        email = payload.get("email")
        photo = payload.get("profile_image_url_https")

        return Profile(
            provider=self.provider,
            id=payload.get("id"),
            username=payload.get("screen_name"),
            display_name=display_name,
            name=_split_name(display_name),
            emails=[ProfileValue(email)] if email else [],
            photos=[ProfileValue(photo)] if photo else [],
            raw=body,
            json=payload,
        )

    def from_params(self, params: Mapping[str, Any]) -> Profile:
        # screen_name is rarely present here; callers must cope with None
        return Profile(
            provider=self.provider,
            id=params.get("user_id"),
            username=params.get("screen_name"),
        )
