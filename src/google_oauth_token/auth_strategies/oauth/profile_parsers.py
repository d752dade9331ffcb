# auth_strategies/oauth/profile_parsers.py

"""
Parsers turning a Google profile payload into a GoogleProfile.

Two payload shapes are supported:

    parse_profile:        OpenID Connect user-info (``/oauth2/v3/userinfo``)
    parse_people_profile: People API ``people/me`` with names, emailAddresses,
                          phoneNumbers and photos lists

Both accept the payload either as the serialized JSON string or as an
already-parsed mapping. A string that is not JSON raises
``json.JSONDecodeError`` unchanged.
"""

import json
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from google_oauth_token.auth_strategies.constants import (
    CLAIM_EMAIL,
    CLAIM_EMAIL_VERIFIED,
    CLAIM_FAMILY_NAME,
    CLAIM_GIVEN_NAME,
    CLAIM_ID,
    CLAIM_NAME,
    CLAIM_PICTURE,
    CLAIM_SUB,
    GOOGLE,
    PEOPLE_EMAIL_ADDRESSES,
    PEOPLE_METADATA,
    PEOPLE_NAMES,
    PEOPLE_PHONE_NUMBERS,
    PEOPLE_PHOTOS,
)
from google_oauth_token.core.exceptions import ProfileParseError
from google_oauth_token.schemas.profile import (
    GoogleProfile,
    ProfileEmail,
    ProfileName,
    ProfilePhoto,
)

ProfileParser = Callable[[Any], GoogleProfile]

_BOOL = TypeAdapter(bool)


def load_payload(data: str | bytes | Mapping[str, Any]) -> tuple[str, dict[str, Any]]:
    """Return the payload as (serialized, parsed)."""
    if isinstance(data, bytes):
        data = data.decode("utf-8")

    if isinstance(data, str):
        parsed = json.loads(data)
        raw = data
    else:
        parsed = dict(data)
        raw = json.dumps(parsed)

    if not isinstance(parsed, dict):
        raise ProfileParseError(f"Expected a JSON object, got {type(parsed).__name__}")

    return raw, parsed


def _first(items: Any) -> dict[str, Any]:
    if isinstance(items, list) and items and isinstance(items[0], Mapping):
        return dict(items[0])
    return {}


def _mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _is_verified(value: Any) -> bool:
    """Read a verification flag sent as a bool, "true"/"false" or 0/1."""
    if value is None:
        return False
    try:
        return _BOOL.validate_python(value)
    except ValidationError:
        return False


def _as_str(value: Any) -> str | None:
    if value is None or value == "":
        return None
    return str(value)


def parse_profile(data: str | bytes | Mapping[str, Any]) -> GoogleProfile:
    """
    Parse an OpenID Connect user-info payload.

    The amount of detail depends on the granted scopes: ``profile`` adds
    the names and picture, ``email`` adds the address and its verification
    flag.
    """
    raw, payload = load_payload(data)

    profile_id = _as_str(payload.get(CLAIM_SUB)) or _as_str(payload.get(CLAIM_ID))
    if not profile_id:
        raise ProfileParseError("Google profile has no 'sub' or 'id'")

    emails = []
    if payload.get(CLAIM_EMAIL):
        emails.append(
            ProfileEmail(
                value=str(payload[CLAIM_EMAIL]),
                verified=_is_verified(payload.get(CLAIM_EMAIL_VERIFIED)),
            )
        )

    photos = []
    if payload.get(CLAIM_PICTURE):
        photos.append(ProfilePhoto(value=str(payload[CLAIM_PICTURE])))

    return GoogleProfile(
        provider=GOOGLE,
        id=profile_id,
        display_name=payload.get(CLAIM_NAME) or "",
        name=ProfileName(
            given_name=_as_str(payload.get(CLAIM_GIVEN_NAME)),
            family_name=_as_str(payload.get(CLAIM_FAMILY_NAME)),
        ),
        emails=emails,
        photos=photos,
        raw=raw,
        raw_json=payload,
    )


def _people_source_id(payload: dict[str, Any], name: dict[str, Any]) -> str | None:
    source = _mapping(_mapping(name.get(PEOPLE_METADATA)).get("source"))
    source_id = _as_str(source.get("id"))
    if source_id:
        return source_id

    # Profiles without a names entry still list their sources
    sources = _mapping(payload.get(PEOPLE_METADATA)).get("sources") or []
    for entry in sources if isinstance(sources, list) else []:
        if isinstance(entry, Mapping) and _as_str(entry.get("id")):
            return str(entry["id"])
    return None


def parse_people_profile(data: str | bytes | Mapping[str, Any]) -> GoogleProfile:
    """
    Parse a People API ``people/me`` payload.

    Only the first entry of each list is used. The id comes from the first
    name's source metadata.
    """
    raw, payload = load_payload(data)

    name = _first(payload.get(PEOPLE_NAMES))
    email = _first(payload.get(PEOPLE_EMAIL_ADDRESSES))
    phone = _first(payload.get(PEOPLE_PHONE_NUMBERS))
    photo = _first(payload.get(PEOPLE_PHOTOS))

    profile_id = _people_source_id(payload, name)
    if not profile_id:
        raise ProfileParseError("Google People profile has no source id")

    emails = []
    if email.get("value"):
        emails.append(
            ProfileEmail(
                value=str(email["value"]),
                verified=_is_verified(_mapping(email.get(PEOPLE_METADATA)).get("verified")),
            )
        )

    phone_numbers = [str(phone["value"])] if phone.get("value") else []
    photos = [ProfilePhoto(value=str(photo.get("url") or ""))] if photo else []

    return GoogleProfile(
        provider=GOOGLE,
        id=profile_id,
        display_name=name.get("displayName") or "",
        name=ProfileName(
            given_name=_as_str(name.get("givenName")),
            family_name=_as_str(name.get("familyName")),
        ),
        emails=emails,
        photos=photos,
        phone_numbers=phone_numbers,
        raw=raw,
        raw_json=payload,
    )
