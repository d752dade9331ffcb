from fastapi import APIRouter

from google_oauth_token.api.v1.public import google
from google_oauth_token.core.config import settings
from google_oauth_token.schemas.auth import HealthResponse

api_router = APIRouter()

api_router.include_router(google.router, prefix=settings.AUTH_PREFIX, tags=["auth"])


@api_router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", version=settings.APP_VERSION)
