"""
Client for the hospital management backend's authentication endpoints.

Provides the auth operations, the HTTP transport they run on and an
in-memory signed-in session.
"""

import logging
from typing import Optional

from .core import Config, setup_logger
from .api import APIClient, AuthClient, HttpClient
from .session import AuthSession
from .models import (
    RegistrationRequest,
    LoginRequest,
    RefreshRequest,
    LogoutRequest,
    UserSummary,
    AuthResult,
)

__version__ = "0.1.0"


def create_session(
    config: Optional[Config] = None,
    logger: Optional[logging.Logger] = None
) -> AuthSession:
    """
    Build a transport, auth client and session from configuration.

    Args:
        config: Configuration; loaded from file/environment when None
        logger: Logger instance shared by all components; configured from
                config when None

    Returns:
        AuthSession bound to a new APIClient
    """
    config = config or Config()
    logger = logger or setup_logger(log_file=config.log_file, log_level=config.log_level)
    transport = APIClient(
        base_url=config.api_base_url,
        timeout=config.api_timeout,
        max_retries=config.api_max_retries,
        verify_ssl=config.api_verify_ssl,
        logger=logger,
    )
    return AuthSession(AuthClient(transport, logger=logger), transport=transport, logger=logger)


__all__ = [
    "Config",
    "APIClient",
    "AuthClient",
    "HttpClient",
    "AuthSession",
    "RegistrationRequest",
    "LoginRequest",
    "RefreshRequest",
    "LogoutRequest",
    "UserSummary",
    "AuthResult",
    "create_session",
]
