from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel

from google_oauth_token.core.exceptions import AuthenticationError, AuthenticationFailedError


class AuthOutcome(str, Enum):
    SUCCESS = "success"
    FAIL = "fail"
    ERROR = "error"


@dataclass(frozen=True)
class AuthResult:
    """Terminal outcome of one authentication attempt."""

    outcome: AuthOutcome
    user: Any = None
    info: Any = None
    error: Exception | None = None

    @classmethod
    def success(cls, user: Any, info: Any = None) -> "AuthResult":
        return cls(outcome=AuthOutcome.SUCCESS, user=user, info=info)

    @classmethod
    def fail(cls, info: Any = None) -> "AuthResult":
        return cls(outcome=AuthOutcome.FAIL, info=info)

    @classmethod
    def errored(cls, error: Exception) -> "AuthResult":
        return cls(outcome=AuthOutcome.ERROR, error=error)

    @property
    def ok(self) -> bool:
        return self.outcome is AuthOutcome.SUCCESS

    def raise_for_outcome(self) -> Any:
        """
        Return the authenticated user, or raise for fail/error outcomes.

        Raises:
            AuthenticationFailedError: verification yielded no user
            Exception: the error recorded for an ``error`` outcome
        """
        if self.outcome is AuthOutcome.SUCCESS:
            return self.user
        if self.outcome is AuthOutcome.FAIL:
            raise AuthenticationFailedError(info=self.info)
        if self.error is not None:
            raise self.error
        raise AuthenticationError("Authentication errored without an error value")


class HealthResponse(BaseModel):
    status: str
    version: str
