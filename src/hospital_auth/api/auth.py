"""
Authentication operations for the hospital management API.

Maps register, login, refresh and logout onto the /auth endpoints. Bodies are
passed through to the transport and decoded responses are returned as-is;
transport errors reach the caller untouched.
"""

import logging
from typing import Dict, Any, Optional

from ..core import constants
from ..models.auth import (
    RegistrationRequest,
    LoginRequest,
    RefreshRequest,
    LogoutRequest,
)
from .client import HttpClient


class AuthClient:
    """Stateless binding of the auth endpoints onto an HttpClient."""

    def __init__(self, http: HttpClient, logger: Optional[logging.Logger] = None):
        """
        Initialize auth client.

        Args:
            http: Transport used for every request
            logger: Logger instance
        """
        self.http = http
        self.logger = logger or logging.getLogger(__name__)

    def register(self, request: RegistrationRequest) -> Dict[str, Any]:
        """
        Register a new user.

        Args:
            request: Registration data

        Returns:
            Decoded auth response (see AuthResult.from_dict)
        """
        self.logger.debug(f"POST {constants.REGISTER_ENDPOINT} for {request.username}")
        return self.http.post_json(constants.REGISTER_ENDPOINT, request.to_dict())

    def login(self, request: LoginRequest) -> Dict[str, Any]:
        """
        Log in with credentials.

        Args:
            request: Login data

        Returns:
            Decoded auth response (see AuthResult.from_dict)
        """
        self.logger.debug(f"POST {constants.LOGIN_ENDPOINT} for {request.login}")
        return self.http.post_json(constants.LOGIN_ENDPOINT, request.to_dict())

    def refresh(self, refresh_token: str) -> Dict[str, Any]:
        """
        Exchange a refresh token for a new token bundle.

        Args:
            refresh_token: Refresh token from a previous auth response

        Returns:
            Decoded auth response (see AuthResult.from_dict)
        """
        self.logger.debug(f"POST {constants.REFRESH_ENDPOINT}")
        body = RefreshRequest(refresh_token=refresh_token).to_dict()
        return self.http.post_json(constants.REFRESH_ENDPOINT, body)

    def logout(self, user_id: str) -> None:
        """
        Log out a user. The response body is ignored.

        Args:
            user_id: ID of the user to log out
        """
        self.logger.debug(f"POST {constants.LOGOUT_ENDPOINT} for user {user_id}")
        self.http.post_json(constants.LOGOUT_ENDPOINT, LogoutRequest(user_id=user_id).to_dict())
