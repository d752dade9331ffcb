from google_oauth_token.auth_strategies.lookup import TokenRequest, from_starlette, lookup
from google_oauth_token.auth_strategies.oauth import (
    GoogleEndpoints,
    GoogleOAuthTokenOptions,
    GoogleOAuthTokenStrategy,
    parse_people_profile,
    parse_profile,
    resolve_endpoints,
)
from google_oauth_token.core.exceptions import (
    AuthenticationError,
    AuthenticationFailedError,
    ProfileFetchError,
    ProfileParseError,
)
from google_oauth_token.schemas import AuthOutcome, AuthResult, GoogleProfile

__version__ = "1.0.0"

__all__ = [
    "AuthenticationError",
    "AuthenticationFailedError",
    "AuthOutcome",
    "AuthResult",
    "GoogleEndpoints",
    "GoogleOAuthTokenOptions",
    "GoogleOAuthTokenStrategy",
    "GoogleProfile",
    "ProfileFetchError",
    "ProfileParseError",
    "TokenRequest",
    "from_starlette",
    "lookup",
    "parse_people_profile",
    "parse_profile",
    "resolve_endpoints",
]
