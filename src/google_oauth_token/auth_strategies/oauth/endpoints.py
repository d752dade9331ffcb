# auth_strategies/oauth/endpoints.py

from pydantic import BaseModel, ConfigDict

from google_oauth_token.auth_strategies.constants import (
    DEFAULT_AUTH_URL_VERSION,
    DEFAULT_TOKEN_URL_VERSION,
    DEFAULT_USERINFO_URL_VERSION,
    GOOGLE_AUTHORIZATION_URL_TEMPLATE,
    GOOGLE_TOKEN_URL_TEMPLATE,
    GOOGLE_USERINFO_URL_TEMPLATE,
)


class GoogleEndpoints(BaseModel):
    """The three Google endpoints a strategy talks to, fixed at construction."""

    model_config = ConfigDict(frozen=True)

    authorization_url: str
    token_url: str
    profile_url: str


def resolve_endpoints(
    authorization_url: str | None = None,
    token_url: str | None = None,
    profile_url: str | None = None,
    auth_url_version: str | None = None,
    token_url_version: str | None = None,
    userinfo_url_version: str | None = None,
) -> GoogleEndpoints:
    """
    Resolve the authorization, token and user-info URLs.

    An explicit URL always wins. Otherwise the endpoint's own version tag is
    substituted verbatim into its template; it never affects the other two.
    Empty strings count as absent.
    """
    return GoogleEndpoints(
        authorization_url=authorization_url
        or GOOGLE_AUTHORIZATION_URL_TEMPLATE.format(
            version=auth_url_version or DEFAULT_AUTH_URL_VERSION
        ),
        token_url=token_url
        or GOOGLE_TOKEN_URL_TEMPLATE.format(version=token_url_version or DEFAULT_TOKEN_URL_VERSION),
        profile_url=profile_url
        or GOOGLE_USERINFO_URL_TEMPLATE.format(
            version=userinfo_url_version or DEFAULT_USERINFO_URL_VERSION
        ),
    )
