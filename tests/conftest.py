import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from google_oauth_token.auth_strategies.oauth.google import GoogleOAuthTokenStrategy

CLIENT_ID = "123456"
CLIENT_SECRET = "abcxyz"  # pragma: allowlist secret
ACCESS_TOKEN = "123abc"
REFRESH_TOKEN = "456xyz"

USERINFO: dict[str, Any] = {
    "sub": "1",
    "name": "Jared Hanson",
    "given_name": "Jared",
    "family_name": "Hanson",
    "picture": "http://example.com/p.jpg",
    "email": "jared@example.com",
    "email_verified": True,
    "locale": "en",
}

PEOPLE_PROFILE: dict[str, Any] = {
    "resourceName": "people/108",
    "etag": "%EgUBAi43PRoEAQIFByIMa0ZkU1E=",
    "names": [
        {
            "metadata": {"primary": True, "source": {"type": "PROFILE", "id": "108"}},
            "displayName": "Jared Hanson",
            "familyName": "Hanson",
            "givenName": "Jared",
            "displayNameLastFirst": "Hanson, Jared",
            "unstructuredName": "Jared Hanson",
        }
    ],
    "photos": [
        {
            "metadata": {"primary": True, "source": {"type": "PROFILE", "id": "108"}},
            "url": "https://lh3.googleusercontent.com/a/photo.jpg",
            "default": True,
        }
    ],
    "emailAddresses": [
        {
            "metadata": {
                "primary": True,
                "verified": True,
                "source": {"type": "ACCOUNT", "id": "108"},
            },
            "value": "jared@example.com",
        }
    ],
    "phoneNumbers": [
        {
            "metadata": {
                "primary": True,
                "verified": True,
                "source": {"type": "PROFILE", "id": "108"},
            },
            "value": "+1 555-0100",
            "canonicalForm": "+15550100",
            "type": "mobile",
        }
    ],
    "metadata": {
        "sources": [{"type": "PROFILE", "id": "108", "etag": "#abc"}],
        "objectType": "PERSON",
    },
}


def json_transport(
    payload: Any, status_code: int = 200, calls: list[httpx.Request] | None = None
) -> httpx.MockTransport:
    """Transport answering every request with ``payload`` (a str is sent verbatim)."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        if isinstance(payload, str):
            return httpx.Response(status_code, text=payload)
        return httpx.Response(status_code, text=json.dumps(payload))

    return httpx.MockTransport(handler)


def failing_transport(message: str = "connection refused") -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError(message, request=request)

    return httpx.MockTransport(handler)


def profile_as_user(
    access_token: str, refresh_token: str, profile: Any
) -> tuple[Any, dict[str, str]]:
    return profile, {"info": "foo"}


@pytest.fixture
def userinfo() -> dict[str, Any]:
    return dict(USERINFO)


@pytest.fixture
def people_profile() -> dict[str, Any]:
    return json.loads(json.dumps(PEOPLE_PROFILE))


@pytest.fixture
def make_strategy() -> Callable[..., GoogleOAuthTokenStrategy]:
    def _make(
        verify: Callable[..., Any] = profile_as_user,
        transport: httpx.AsyncBaseTransport | None = None,
        **options: Any,
    ) -> GoogleOAuthTokenStrategy:
        options.setdefault("client_id", CLIENT_ID)
        options.setdefault("client_secret", CLIENT_SECRET)
        return GoogleOAuthTokenStrategy(verify, transport=transport, **options)

    return _make
