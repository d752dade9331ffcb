"""
Strategy factory: builds configured Google strategies from settings.

Reads credentials from settings so endpoints don't need to know about config.
"""

from typing import Literal

from google_oauth_token.auth_strategies.constants import PEOPLE_STRATEGY_NAME, STRATEGY_NAME
from google_oauth_token.auth_strategies.oauth.base_oauth import VerifyFunction
from google_oauth_token.auth_strategies.oauth.google import (
    GoogleOAuthTokenOptions,
    GoogleOAuthTokenStrategy,
)
from google_oauth_token.auth_strategies.oauth.profile_parsers import (
    parse_people_profile,
    parse_profile,
)
from google_oauth_token.core.config import Settings, settings
from google_oauth_token.core.exceptions import AuthenticationError

ProfileVariant = Literal["basic", "people"]


def build_options(variant: ProfileVariant, config: Settings) -> GoogleOAuthTokenOptions:
    base = GoogleOAuthTokenOptions(
        client_id=config.GOOGLE_CLIENT_ID,
        client_secret=config.GOOGLE_CLIENT_SECRET,
        authorization_url=config.GOOGLE_AUTHORIZATION_URL,
        token_url=config.GOOGLE_TOKEN_URL,
        profile_url=config.GOOGLE_PROFILE_URL,
        auth_url_version=config.GOOGLE_AUTH_URL_VERSION,
        token_url_version=config.GOOGLE_TOKEN_URL_VERSION,
        userinfo_url_version=config.GOOGLE_USERINFO_URL_VERSION,
        timeout=config.HTTP_TIMEOUT_SECONDS,
        profile_parser=parse_profile,
        name=STRATEGY_NAME,
    )
    if variant == "basic":
        return base
    if variant == "people":
        return base.model_copy(
            update={
                "profile_url": config.GOOGLE_PEOPLE_PROFILE_URL,
                "scope": list(config.GOOGLE_PEOPLE_SCOPES),
                "profile_parser": parse_people_profile,
                "name": PEOPLE_STRATEGY_NAME,
            }
        )
    raise AuthenticationError(
        f"Unknown Google profile variant: '{variant}'. Supported variants: basic, people"
    )


def get_google_strategy(
    verify: VerifyFunction,
    variant: ProfileVariant = "basic",
    config: Settings | None = None,
) -> GoogleOAuthTokenStrategy:
    """
    Return a configured Google strategy.

    Args:
        verify:  Verification callback receiving tokens and profile
        variant: "basic" (OpenID user-info) or "people" (People API with phone numbers)
        config:  Settings to read; the global settings by default

    Raises:
        AuthenticationError: If Google OAuth is not configured or the variant is unknown
    """
    config = config or settings

    if not config.google_configured:
        raise AuthenticationError("Google OAuth is not configured.", error_code="NOT_CONFIGURED")

    return GoogleOAuthTokenStrategy(verify, options=build_options(variant, config))
