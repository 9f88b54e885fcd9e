"""Application constants - centralized configuration values."""

# =============================================================================
# API Timeouts (in seconds)
# =============================================================================
HTTPX_TIMEOUT = 10.0

# =============================================================================
# External API URLs
# =============================================================================
GITHUB_OAUTH_BASE_URL = "https://github.com"
GITHUB_API_BASE_URL = "https://api.github.com"

GITHUB_TOKEN_PATH = "/login/oauth/access_token"
GITHUB_AUTHORIZE_PATH = "/login/oauth/authorize"
GITHUB_USER_PATH = "/user"

# =============================================================================
# Identity
# =============================================================================
GITHUB_URN_PREFIX = "urn:github:"
DEFAULT_LOGIN = "unknown"
DEFAULT_AVATAR = "#"

# =============================================================================
# Headers
# =============================================================================
VERSION_HEADER = "X-Socialpass-Version"
