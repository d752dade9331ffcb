from .auth import AuthOutcome, AuthResult, HealthResponse
from .profile import GoogleProfile, ProfileEmail, ProfileName, ProfilePhoto

__all__ = [
    "AuthOutcome",
    "AuthResult",
    "HealthResponse",
    "GoogleProfile",
    "ProfileEmail",
    "ProfileName",
    "ProfilePhoto",
]
