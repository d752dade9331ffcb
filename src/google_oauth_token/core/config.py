from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="", case_sensitive=True, extra="ignore"
    )

    # Application
    APP_NAME: str = "GoogleOAuthToken"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "Authenticate requests bearing a Google OAuth2 access token"
    DEBUG: bool = False
    AUTH_PREFIX: str = "/auth"

    # Google client credentials
    GOOGLE_CLIENT_ID: str = ""
    GOOGLE_CLIENT_SECRET: str = ""

    # Endpoint overrides (take precedence over the version tags)
    GOOGLE_AUTHORIZATION_URL: str | None = None
    GOOGLE_TOKEN_URL: str | None = None
    GOOGLE_PROFILE_URL: str | None = None

    # Endpoint version tags
    GOOGLE_AUTH_URL_VERSION: str = "v2"
    GOOGLE_TOKEN_URL_VERSION: str = "v4"
    GOOGLE_USERINFO_URL_VERSION: str = "v3"

    # People API variant (profile with phone numbers)
    GOOGLE_PEOPLE_PROFILE_URL: str = Field(
        default="https://people.googleapis.com/v1/people/me",
        description="People API endpoint used by the google-with-phone route",
    )
    GOOGLE_PEOPLE_SCOPES: str | list[str] = [
        "email",
        "profile",
        "https://www.googleapis.com/auth/user.phonenumbers.read",
    ]

    # Outbound HTTP
    HTTP_TIMEOUT_SECONDS: float = 10.0

    @field_validator("GOOGLE_PEOPLE_SCOPES", mode="before")
    @classmethod
    def parse_scopes(cls, v: Any) -> Any:
        if isinstance(v, str):
            if v.startswith("[") and v.endswith("]"):
                import json

                return json.loads(v)
            return [scope.strip() for scope in v.split(",") if scope.strip()]
        return v

    @property
    def google_configured(self) -> bool:
        return bool(self.GOOGLE_CLIENT_ID and self.GOOGLE_CLIENT_SECRET)


# Global settings instance
settings = Settings()
