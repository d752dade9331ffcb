# auth_strategies/constants.py

GOOGLE = "google"
STRATEGY_NAME = "google-oauth-token"
PEOPLE_STRATEGY_NAME = "google-oauth-token-with-phone-number"

# Request fields searched by the token lookup
ACCESS_TOKEN_FIELD = "access_token"
REFRESH_TOKEN_FIELD = "refresh_token"
AUTHORIZATION_HEADER = "authorization"
BEARER_SCHEME = "bearer"

# Google OAuth URL templates, filled with a version tag
GOOGLE_AUTHORIZATION_URL_TEMPLATE = "https://accounts.google.com/o/oauth2/{version}/auth"
GOOGLE_TOKEN_URL_TEMPLATE = "https://www.googleapis.com/oauth2/{version}/token"
GOOGLE_USERINFO_URL_TEMPLATE = "https://www.googleapis.com/oauth2/{version}/userinfo"

DEFAULT_AUTH_URL_VERSION = "v2"
DEFAULT_TOKEN_URL_VERSION = "v4"
DEFAULT_USERINFO_URL_VERSION = "v3"

# Standard claim keys
CLAIM_SUB = "sub"
CLAIM_ID = "id"
CLAIM_EMAIL = "email"
CLAIM_EMAIL_VERIFIED = "email_verified"
CLAIM_GIVEN_NAME = "given_name"
CLAIM_FAMILY_NAME = "family_name"
CLAIM_NAME = "name"
CLAIM_PICTURE = "picture"

# People API keys
PEOPLE_NAMES = "names"
PEOPLE_EMAIL_ADDRESSES = "emailAddresses"
PEOPLE_PHONE_NUMBERS = "phoneNumbers"
PEOPLE_PHOTOS = "photos"
PEOPLE_METADATA = "metadata"
