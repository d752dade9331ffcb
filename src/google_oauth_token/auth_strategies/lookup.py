# auth_strategies/lookup.py

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from starlette.requests import Request

from google_oauth_token.auth_strategies.constants import (
    ACCESS_TOKEN_FIELD,
    AUTHORIZATION_HEADER,
    BEARER_SCHEME,
)

logger = logging.getLogger(__name__)

_AUTHORIZATION_RE = re.compile(r"(\S+)\s+(\S+)")


class RequestLike(Protocol):
    """Anything exposing body, query and header mappings."""

    body: Mapping[str, Any] | None
    query: Mapping[str, Any] | None
    headers: Mapping[str, Any] | None


@dataclass
class TokenRequest:
    body: Mapping[str, Any] = field(default_factory=dict)
    query: Mapping[str, Any] = field(default_factory=dict)
    headers: Mapping[str, Any] = field(default_factory=dict)


async def from_starlette(request: Request) -> TokenRequest:
    """
    Snapshot a Starlette/FastAPI request into a TokenRequest.

    JSON and form bodies are read; any other (or malformed) body is treated
    as empty so the query string and headers can still carry the token.
    """
    body: Mapping[str, Any] = {}
    content_type = request.headers.get("content-type", "")

    if content_type.startswith("application/json"):
        raw = await request.body()
        if raw:
            try:
                parsed = await request.json()
            except ValueError:
                logger.debug("Ignoring request body that is not valid JSON")
            else:
                if isinstance(parsed, Mapping):
                    body = parsed
    elif content_type.startswith(
        ("application/x-www-form-urlencoded", "multipart/form-data")
    ):
        form = await request.form()
        body = {key: value for key, value in form.items() if isinstance(value, str)}

    return TokenRequest(
        body=body,
        query=dict(request.query_params),
        headers=request.headers,
    )


def _get(source: Any, key: str) -> Any:
    if not isinstance(source, Mapping):
        return None
    return source.get(key)


def _get_header(headers: Any, name: str) -> Any:
    if not isinstance(headers, Mapping):
        return None
    value = headers.get(name)
    if value:
        return value
    # Plain dicts are case-sensitive, HTTP header names are not
    lowered = name.lower()
    for key, candidate in headers.items():
        if isinstance(key, str) and key.lower() == lowered:
            return candidate
    return None


def lookup_authorization(request: RequestLike) -> str:
    """Return the token of an ``Authorization: Bearer <token>`` header, or ''."""
    header = _get_header(getattr(request, "headers", None), AUTHORIZATION_HEADER)
    if not header or not isinstance(header, str):
        return ""

    match = _AUTHORIZATION_RE.match(header)
    if not match or match.group(1).lower() != BEARER_SCHEME:
        return ""

    return match.group(2)


def lookup(request: RequestLike, field_name: str) -> str:
    """
    Find ``field_name`` in the request body, then query, then headers.

    The first non-empty value wins. For the access token an
    ``Authorization: Bearer`` header is tried last. Returns '' if absent.
    """
    for value in (
        _get(getattr(request, "body", None), field_name),
        _get(getattr(request, "query", None), field_name),
        _get_header(getattr(request, "headers", None), field_name),
    ):
        if value:
            return value if isinstance(value, str) else str(value)

    if field_name == ACCESS_TOKEN_FIELD:
        return lookup_authorization(request)

    return ""
