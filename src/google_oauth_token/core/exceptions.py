# core/exceptions.py

from typing import Any

from fastapi import HTTPException, status


class GoogleOAuthTokenException(Exception):
    def __init__(
        self, message: str, error_code: str | None = None, details: dict[str, Any] | None = None
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class AuthenticationError(GoogleOAuthTokenException):
    pass


class AuthenticationFailedError(AuthenticationError):
    """The verification callback did not yield a user."""

    def __init__(self, message: str = "Authentication failed", info: Any = None):
        super().__init__(message, error_code="AUTHENTICATION_FAILED", details={"info": info})
        self.info = info


class ProfileFetchError(AuthenticationError):
    """
    The user-info endpoint could not be reached or answered with an error.

    The underlying transport error is kept on ``cause`` and chained as
    ``__cause__`` by the code raising it.
    """

    def __init__(
        self, message: str = "Failed to fetch user profile", cause: Exception | None = None
    ):
        details: dict[str, Any] = {}
        if cause is not None:
            details["cause"] = str(cause)
        super().__init__(message, error_code="PROFILE_FETCH_FAILED", details=details)
        self.cause = cause


class ProfileParseError(GoogleOAuthTokenException, ValueError):
    def __init__(self, message: str = "Invalid Google profile payload"):
        super().__init__(message, error_code="INVALID_PROFILE")


# HTTP Exception converters
def convert_to_http_exception(exc: GoogleOAuthTokenException) -> HTTPException:
    status_map = {
        "AUTHENTICATION_FAILED": status.HTTP_401_UNAUTHORIZED,
        "NOT_CONFIGURED": status.HTTP_503_SERVICE_UNAVAILABLE,
        "PROFILE_FETCH_FAILED": status.HTTP_502_BAD_GATEWAY,
        "INVALID_PROFILE": 422,
    }

    status_code = status_map.get(exc.error_code or "", status.HTTP_500_INTERNAL_SERVER_ERROR)

    return HTTPException(
        status_code=status_code,
        detail={"message": exc.message, "error_code": exc.error_code, "details": exc.details},
    )
