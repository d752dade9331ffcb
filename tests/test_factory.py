import pytest

from conftest import profile_as_user
from google_oauth_token.auth_strategies.oauth.factory import get_google_strategy
from google_oauth_token.auth_strategies.oauth.profile_parsers import (
    parse_people_profile,
    parse_profile,
)
from google_oauth_token.core.config import Settings
from google_oauth_token.core.exceptions import AuthenticationError


def make_settings(**overrides) -> Settings:
    values = {"GOOGLE_CLIENT_ID": "client", "GOOGLE_CLIENT_SECRET": "secret"}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestGetGoogleStrategy:
    def test_basic_variant(self):
        strategy = get_google_strategy(profile_as_user, config=make_settings())

        assert strategy.name == "google-oauth-token"
        assert strategy.client_id == "client"
        assert strategy.profile_parser is parse_profile
        assert strategy.profile_url == "https://www.googleapis.com/oauth2/v3/userinfo"

    def test_people_variant(self):
        strategy = get_google_strategy(profile_as_user, variant="people", config=make_settings())

        assert strategy.name == "google-oauth-token-with-phone-number"
        assert strategy.profile_parser is parse_people_profile
        assert strategy.profile_url == "https://people.googleapis.com/v1/people/me"
        assert "https://www.googleapis.com/auth/user.phonenumbers.read" in strategy.scope

    def test_settings_versions_and_overrides(self):
        config = make_settings(
            GOOGLE_TOKEN_URL_VERSION="v1",
            GOOGLE_AUTHORIZATION_URL="https://example.com/authorize",
        )

        strategy = get_google_strategy(profile_as_user, config=config)

        assert strategy.token_url == "https://www.googleapis.com/oauth2/v1/token"
        assert strategy.authorization_url == "https://example.com/authorize"

    def test_scopes_from_comma_separated_string(self):
        config = make_settings(GOOGLE_PEOPLE_SCOPES="email, profile")

        strategy = get_google_strategy(profile_as_user, variant="people", config=config)

        assert strategy.scope == ["email", "profile"]

    def test_not_configured(self):
        with pytest.raises(AuthenticationError) as exc_info:
            get_google_strategy(profile_as_user, config=make_settings(GOOGLE_CLIENT_ID=""))

        assert exc_info.value.error_code == "NOT_CONFIGURED"

    def test_unknown_variant(self):
        with pytest.raises(AuthenticationError):
            get_google_strategy(profile_as_user, variant="twitter", config=make_settings())
