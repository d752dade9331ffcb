import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, status

from google_oauth_token.api.dependencies.deps import (
    get_google_people_strategy,
    get_google_token_strategy,
    outcome_error_to_http,
)
from google_oauth_token.auth_strategies.lookup import from_starlette
from google_oauth_token.auth_strategies.oauth.google import GoogleOAuthTokenStrategy
from google_oauth_token.schemas.auth import AuthOutcome
from google_oauth_token.schemas.profile import GoogleProfile

logger = logging.getLogger(__name__)

router = APIRouter()


async def _authenticate(strategy: GoogleOAuthTokenStrategy, request: Request) -> Any:
    token_request = await from_starlette(request)
    result = await strategy.authenticate(token_request)

    if result.outcome is AuthOutcome.SUCCESS:
        return result.user

    if result.outcome is AuthOutcome.FAIL:
        logger.info(f"[{strategy.name}] Authentication failed: {result.info}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"message": "Authentication failed", "info": result.info},
            headers={"WWW-Authenticate": "Bearer"},
        )

    raise outcome_error_to_http(result.error) from result.error


@router.post("/google", response_model=GoogleProfile, response_model_by_alias=True)
async def sign_in_with_google(
    request: Request,
    strategy: GoogleOAuthTokenStrategy = Depends(get_google_token_strategy),
) -> Any:
    """
    Authenticate with a Google access token and return the normalized profile.

    The token may be sent as ``access_token`` in the JSON/form body, the
    query string, a header, or as ``Authorization: Bearer <token>``.
    """
    return await _authenticate(strategy, request)


@router.post("/google-with-phone", response_model=GoogleProfile, response_model_by_alias=True)
async def sign_in_with_google_phone(
    request: Request,
    strategy: GoogleOAuthTokenStrategy = Depends(get_google_people_strategy),
) -> Any:
    """Same as /google, reading the People API profile including phone numbers."""
    return await _authenticate(strategy, request)
