from google_oauth_token.auth_strategies.oauth.base_oauth import BaseOAuthStrategy
from google_oauth_token.auth_strategies.oauth.endpoints import GoogleEndpoints, resolve_endpoints
from google_oauth_token.auth_strategies.oauth.google import (
    GoogleOAuthTokenOptions,
    GoogleOAuthTokenStrategy,
)
from google_oauth_token.auth_strategies.oauth.profile_parsers import (
    parse_people_profile,
    parse_profile,
)

__all__ = [
    "BaseOAuthStrategy",
    "GoogleEndpoints",
    "GoogleOAuthTokenOptions",
    "GoogleOAuthTokenStrategy",
    "parse_people_profile",
    "parse_profile",
    "resolve_endpoints",
]
