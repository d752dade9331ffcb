import logging

from fastapi import HTTPException, status

from google_oauth_token.auth_strategies.oauth.factory import get_google_strategy
from google_oauth_token.auth_strategies.oauth.google import GoogleOAuthTokenStrategy
from google_oauth_token.core.exceptions import (
    AuthenticationError,
    GoogleOAuthTokenException,
    convert_to_http_exception,
)
from google_oauth_token.schemas.profile import GoogleProfile

logger = logging.getLogger(__name__)


def profile_as_user(
    access_token: str, refresh_token: str, profile: GoogleProfile | None
) -> GoogleProfile | None:
    """Default verify callback: the normalized profile is the user."""
    return profile


def get_google_token_strategy() -> GoogleOAuthTokenStrategy:
    try:
        return get_google_strategy(profile_as_user, variant="basic")
    except AuthenticationError as e:
        raise convert_to_http_exception(e) from e


def get_google_people_strategy() -> GoogleOAuthTokenStrategy:
    try:
        return get_google_strategy(profile_as_user, variant="people")
    except AuthenticationError as e:
        raise convert_to_http_exception(e) from e


def outcome_error_to_http(error: Exception | None) -> HTTPException:
    """Map the error of an ``error`` outcome to an HTTPException."""
    if isinstance(error, GoogleOAuthTokenException):
        return convert_to_http_exception(error)
    if isinstance(error, ValueError):
        # json.JSONDecodeError and friends: Google answered with garbage
        return HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Invalid profile payload from Google",
        )

    logger.error(f"Unexpected authentication error: {error!r}")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Authentication error",
    )
