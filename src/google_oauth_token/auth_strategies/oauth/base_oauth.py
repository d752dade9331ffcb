# auth_strategies/oauth/base_oauth.py

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import httpx
from authlib.integrations.httpx_client import AsyncOAuth2Client

from google_oauth_token.auth_strategies.base import BaseAuthStrategy
from google_oauth_token.auth_strategies.constants import ACCESS_TOKEN_FIELD, REFRESH_TOKEN_FIELD
from google_oauth_token.auth_strategies.lookup import RequestLike, lookup
from google_oauth_token.auth_strategies.oauth.endpoints import GoogleEndpoints
from google_oauth_token.auth_strategies.oauth.profile_parsers import ProfileParser
from google_oauth_token.core.exceptions import AuthenticationError, ProfileFetchError
from google_oauth_token.schemas.auth import AuthResult
from google_oauth_token.schemas.profile import GoogleProfile

logger = logging.getLogger(__name__)

# verify(access_token, refresh_token, profile) or, with the request passed,
# verify(request, access_token, refresh_token, profile). Returns the user, or
# a (user, info) pair; may be a coroutine function.
VerifyFunction = Callable[..., Any]
SkipUserProfile = bool | Callable[..., bool | Awaitable[bool]]

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


def _mask(token: str) -> str:
    return f"{token[:6]}..." if token else "<empty>"


def _takes_token(predicate: Callable[..., Any]) -> bool:
    try:
        parameters = inspect.signature(predicate).parameters.values()
    except (TypeError, ValueError):
        return True
    return any(p.kind in _POSITIONAL_KINDS for p in parameters)


class BaseOAuthStrategy(BaseAuthStrategy):
    """
    Base class for strategies authenticating a provider-issued access token.

    The client never goes through the redirect dance with this strategy: it
    already holds an access token (mobile apps, SPAs) and sends it along.

    Flow:
        1. lookup()               : find access/refresh token in the request
        2. load_user_profile()    : fetch and parse the provider profile
        3. verify callback        : the application maps profile to a user
        4. AuthResult             : success, fail or error, reported once
    """

    def __init__(
        self,
        provider_name: str,
        client_id: str,
        client_secret: str,
        endpoints: GoogleEndpoints,
        verify: VerifyFunction,
        profile_parser: ProfileParser,
        scope: list[str] | None = None,
        redirect_uri: str | None = None,
        skip_user_profile: SkipUserProfile = False,
        pass_request_to_callback: bool = False,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(provider_name)
        if not callable(verify):
            raise TypeError(f"{self.__class__.__name__} requires a verify callback")

        self.provider_name = provider_name
        self.client_id = client_id
        self.client_secret = client_secret
        self.endpoints = endpoints
        self.scope = scope or []
        self.redirect_uri = redirect_uri
        self.profile_parser = profile_parser
        self.skip_user_profile = skip_user_profile
        self.pass_request_to_callback = pass_request_to_callback
        self.timeout = timeout
        self.transport = transport
        self._verify = verify

    @property
    def authorization_url(self) -> str:
        return self.endpoints.authorization_url

    @property
    def token_url(self) -> str:
        return self.endpoints.token_url

    @property
    def profile_url(self) -> str:
        return self.endpoints.profile_url

    def get_http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport)

    def get_oauth_client(self) -> AsyncOAuth2Client:
        """Create a fresh async OAuth2 client for this provider."""
        return AsyncOAuth2Client(
            client_id=self.client_id,
            client_secret=self.client_secret,
            redirect_uri=self.redirect_uri,
            scope=" ".join(self.scope) or None,
            timeout=self.timeout,
            transport=self.transport,
        )

    # -------------------------------------------------------------------------
    # Delegated to authlib: authorization redirect and code exchange
    # -------------------------------------------------------------------------

    async def get_authorization_url(self, state: str | None = None, **params: Any) -> str:
        """
        Build the URL that sends a user to the provider's consent page.

        Args:
            state:  CSRF protection token; authlib generates one when omitted
            params: Extra query parameters (access_type, prompt, ...)
        """
        async with self.get_oauth_client() as client:
            uri, _ = client.create_authorization_url(self.authorization_url, state=state, **params)
            return uri

    async def exchange_code_for_tokens(self, code: str) -> dict[str, Any]:
        """
        Exchange an authorization code for provider tokens.

        Raises:
            AuthenticationError: If the token endpoint rejects the exchange
        """
        async with self.get_oauth_client() as client:
            try:
                token = await client.fetch_token(
                    self.token_url,
                    code=code,
                    grant_type="authorization_code",
                )
                return dict(token)
            except Exception as e:
                logger.error(f"[{self.provider_name}] Token exchange failed: {e}")
                raise AuthenticationError(
                    f"Failed to exchange authorization code with {self.provider_name}"
                ) from e

    # -------------------------------------------------------------------------
    # Profile loading
    # -------------------------------------------------------------------------

    async def fetch_user_profile(self, access_token: str) -> GoogleProfile:
        """
        Fetch the profile belonging to ``access_token`` and parse it.

        Raises:
            ProfileFetchError: transport failure or non-2xx answer
            json.JSONDecodeError: the body is not JSON
            ProfileParseError: the JSON carries no usable identifier
        """
        async with self.get_http_client() as client:
            try:
                response = await client.get(
                    self.profile_url,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
                response.raise_for_status()
            except httpx.HTTPError as e:
                logger.error(f"[{self.provider_name}] UserInfo fetch failed: {e}")
                raise ProfileFetchError(cause=e) from e

        return self.profile_parser(response.text)

    async def should_skip_profile(self, access_token: str) -> bool:
        skip = self.skip_user_profile
        if callable(skip):
            # predicates may take the access token or nothing at all
            result = skip(access_token) if _takes_token(skip) else skip()
            if inspect.isawaitable(result):
                result = await result
            return bool(result)
        return bool(skip)

    async def load_user_profile(self, access_token: str) -> GoogleProfile | None:
        if await self.should_skip_profile(access_token):
            logger.debug(f"[{self.provider_name}] Skipping user profile fetch")
            return None
        return await self.fetch_user_profile(access_token)

    # -------------------------------------------------------------------------
    # Authentication
    # -------------------------------------------------------------------------

    async def _call_verify(
        self,
        request: RequestLike,
        access_token: str,
        refresh_token: str,
        profile: GoogleProfile | None,
    ) -> tuple[Any, Any]:
        if self.pass_request_to_callback:
            result = self._verify(request, access_token, refresh_token, profile)
        else:
            result = self._verify(access_token, refresh_token, profile)

        if inspect.isawaitable(result):
            result = await result

        if isinstance(result, tuple) and len(result) == 2:
            return result[0], result[1]
        return result, None

    async def authenticate(self, request: RequestLike) -> AuthResult:
        access_token = lookup(request, ACCESS_TOKEN_FIELD)
        refresh_token = lookup(request, REFRESH_TOKEN_FIELD)

        if not access_token:
            logger.info(f"[{self.provider_name}] No access token in request")
            return AuthResult.fail({"message": "Missing access_token"})

        try:
            profile = await self.load_user_profile(access_token)
        except Exception as e:
            logger.warning(f"[{self.provider_name}] Could not load profile: {e}")
            return AuthResult.errored(e)

        try:
            user, info = await self._call_verify(request, access_token, refresh_token, profile)
        except Exception as e:
            logger.exception(f"[{self.provider_name}] Verify callback raised: {e}")
            return AuthResult.errored(e)

        if not user:
            logger.info(f"[{self.provider_name}] Verification rejected token {_mask(access_token)}")
            return AuthResult.fail(info)

        logger.info(f"[{self.provider_name}] Authenticated token {_mask(access_token)}")
        return AuthResult.success(user, info)
