# auth_strategies/base.py

from abc import ABC, abstractmethod

from google_oauth_token.auth_strategies.lookup import RequestLike
from google_oauth_token.schemas.auth import AuthResult


class BaseAuthStrategy(ABC):
    """
    Base class for all authentication strategies
    All strategies must implement this interface
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    async def authenticate(self, request: RequestLike) -> AuthResult:
        """
        Authenticate an incoming request

        Args:
            request: Request-like object exposing body, query and headers

        Returns:
            AuthResult carrying exactly one of success, fail or error
        """
