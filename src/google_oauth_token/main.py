import logging

import uvicorn
from fastapi import FastAPI

from google_oauth_token.api.v1.router import api_router
from google_oauth_token.core.config import settings

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)

logger = logging.getLogger(__name__)

# Silence noisy libraries
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description=settings.APP_DESCRIPTION,
)

app.include_router(api_router)

if not settings.google_configured:
    logger.warning("GOOGLE_CLIENT_ID/GOOGLE_CLIENT_SECRET not set; auth routes will answer 503")

if __name__ == "__main__":
    uvicorn.run(
        "google_oauth_token.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
