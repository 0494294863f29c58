"""
Application-wide constants for the hospital auth client.

Defaults used when neither the config file nor the environment provides a value.
"""

# API defaults
DEFAULT_API_BASE_URL = "http://localhost:8080/api/v1"
DEFAULT_API_TIMEOUT = 10  # seconds
DEFAULT_API_MAX_RETRIES = 0
DEFAULT_VERIFY_SSL = True

# Status codes retried by the transport when max_retries > 0
RETRY_STATUS_CODES = [429, 500, 502, 503, 504]

# Logging
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_CONFIG_FILE = "config.json"

# Auth endpoints (relative to the API base URL)
AUTH_PREFIX = "/auth/"
REGISTER_ENDPOINT = "/auth/register"
LOGIN_ENDPOINT = "/auth/login"
REFRESH_ENDPOINT = "/auth/refresh"
LOGOUT_ENDPOINT = "/auth/logout"

BEARER_TOKEN_TYPE = "Bearer"
