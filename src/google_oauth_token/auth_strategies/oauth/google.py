# auth_strategies/oauth/google.py

from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field

from google_oauth_token.auth_strategies.constants import STRATEGY_NAME
from google_oauth_token.auth_strategies.oauth.base_oauth import (
    BaseOAuthStrategy,
    SkipUserProfile,
    VerifyFunction,
)
from google_oauth_token.auth_strategies.oauth.endpoints import resolve_endpoints
from google_oauth_token.auth_strategies.oauth.profile_parsers import ProfileParser, parse_profile


class GoogleOAuthTokenOptions(BaseModel):
    """Construction-time options of GoogleOAuthTokenStrategy."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    client_id: str = Field(..., min_length=1)
    client_secret: str = ""
    authorization_url: str | None = None
    token_url: str | None = None
    profile_url: str | None = None
    auth_url_version: str | None = None
    token_url_version: str | None = None
    userinfo_url_version: str | None = None
    scope: list[str] = Field(default_factory=list)
    redirect_uri: str | None = None
    profile_parser: ProfileParser = parse_profile
    skip_user_profile: SkipUserProfile = False
    pass_request_to_callback: bool = False
    name: str = STRATEGY_NAME
    timeout: float = 10.0


class GoogleOAuthTokenStrategy(BaseOAuthStrategy):
    """
    Authenticate requests carrying a Google OAuth2 access token.

    The token is looked up in the request body, query string and headers
    (falling back to ``Authorization: Bearer``). Google's user-info endpoint
    is queried with it and the normalized profile is passed to ``verify``:

        async def verify(access_token, refresh_token, profile):
            user = await users.find_or_create(google_id=profile.id)
            return user, {"scope": "read"}

        strategy = GoogleOAuthTokenStrategy(verify, client_id="...", client_secret="...")
        result = await strategy.authenticate(request)

    Endpoint URLs are resolved once: explicit URLs win, otherwise the
    ``*_version`` tags pick the Google API version (``v2`` auth, ``v4``
    token, ``v3`` userinfo by default). Pass ``profile_parser`` to swap the
    normalizer, e.g. ``parse_people_profile`` with a People API profile URL.
    """

    def __init__(
        self,
        verify: VerifyFunction,
        options: GoogleOAuthTokenOptions | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        **kwargs: Any,
    ):
        if options is None:
            options = GoogleOAuthTokenOptions(**kwargs)
        elif kwargs:
            options = options.model_copy(update=kwargs)

        self.options = options

        super().__init__(
            provider_name=options.name,
            client_id=options.client_id,
            client_secret=options.client_secret,
            endpoints=resolve_endpoints(
                authorization_url=options.authorization_url,
                token_url=options.token_url,
                profile_url=options.profile_url,
                auth_url_version=options.auth_url_version,
                token_url_version=options.token_url_version,
                userinfo_url_version=options.userinfo_url_version,
            ),
            verify=verify,
            profile_parser=options.profile_parser,
            scope=options.scope,
            redirect_uri=options.redirect_uri,
            skip_user_profile=options.skip_user_profile,
            pass_request_to_callback=options.pass_request_to_callback,
            timeout=options.timeout,
            transport=transport,
        )
