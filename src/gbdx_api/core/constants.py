"""
Application-wide constants for the GBDX API client.

Resource path segments are fixed by the platform; only the API root is configurable.
"""

# Platform root, overridable with the GBDX_API environment variable
DEFAULT_API_ROOT = "https://geobigdata.io"

# Resource path segments (appended to the API root)
AUTH_PATH = "/auth/v1/oauth"
USERS_PATH = "/users/v1/users"
ACCOUNTS_PATH = "/accounts/v1/accounts"
BILLING_PATH = "/billing/v1"

# Search pagination
DEFAULT_PAGE_SIZE = 100
DEFAULT_PAGE = 1

# Users still paginate with per_page; accounts already moved to limit
USERS_LIMIT_PARAM = "per_page"
ACCOUNTS_LIMIT_PARAM = "limit"

# Execution modes
MODE_DEVELOPMENT = "development"
MODE_PRODUCTION = "production"
MODE_TEST = "test"
VALID_MODES = (MODE_DEVELOPMENT, MODE_PRODUCTION, MODE_TEST)
DEFAULT_MODE = MODE_PRODUCTION

# Transport defaults: no timeout override, no retries
DEFAULT_TIMEOUT = None
DEFAULT_MAX_RETRIES = 0
