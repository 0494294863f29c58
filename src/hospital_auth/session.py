"""
Signed-in session for the hospital management backend.

Keeps the current user and token pair in memory, pushes the access token to
the transport and refreshes it when the backend rejects it.
"""

import logging
from typing import Optional

from .api.auth import AuthClient
from .api.client import APIClient
from .core.logger import LoggerContext
from .models.auth import AuthResult, LoginRequest, RegistrationRequest, UserSummary


class AuthSession:
    """In-memory auth state on top of an AuthClient."""

    def __init__(
        self,
        auth_client: AuthClient,
        transport: Optional[APIClient] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize session.

        Args:
            auth_client: Client used for the auth calls
            transport: Optional APIClient; receives the access token and uses
                       this session to refresh it on 401
            logger: Logger instance
        """
        self.auth_client = auth_client
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)

        self._user: Optional[UserSummary] = None
        self._access_token: Optional[str] = None
        self._refresh_token: Optional[str] = None

        if self.transport is not None:
            self.transport.unauthorized_handler = self.refresh_access_token

    @property
    def user(self) -> Optional[UserSummary]:
        return self._user

    @property
    def access_token(self) -> Optional[str]:
        return self._access_token

    @property
    def refresh_token(self) -> Optional[str]:
        return self._refresh_token

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def _set_access_token(self, token: Optional[str]) -> None:
        self._access_token = token
        if self.transport is not None:
            self.transport.access_token = token

    def _store(self, result: AuthResult) -> UserSummary:
        self._user = result.user
        self._refresh_token = result.refresh_token
        self._set_access_token(result.access_token)
        return result.user

    def clear(self) -> None:
        """Forget the user and both tokens."""
        self._user = None
        self._refresh_token = None
        self._set_access_token(None)

    def sign_in(self, login: str, password: str, organization_id: str) -> UserSummary:
        """
        Log in and keep the returned tokens.

        Args:
            login: Username or email
            password: Password
            organization_id: Organization to sign in to

        Returns:
            The signed-in user
        """
        with LoggerContext(self.logger, "sign in", failure_level=logging.WARNING):
            response = self.auth_client.login(
                LoginRequest(login=login, password=password, organization_id=organization_id)
            )
            user = self._store(AuthResult.from_dict(response))
        self.logger.info(f"Signed in as {user.username} ({user.organization_name})")
        return user

    def sign_up(
        self,
        username: str,
        email: str,
        password: str,
        registration_number: str,
        full_name: str,
        area: Optional[str] = None
    ) -> UserSummary:
        """
        Register a new user and keep the returned tokens.

        Returns:
            The registered user
        """
        with LoggerContext(self.logger, "sign up", failure_level=logging.WARNING):
            response = self.auth_client.register(
                RegistrationRequest(
                    username=username,
                    email=email,
                    password=password,
                    full_name=full_name,
                    registration_number=registration_number,
                    area=area,
                )
            )
            user = self._store(AuthResult.from_dict(response))
        self.logger.info(f"Registered and signed in as {user.username}")
        return user

    def sign_out(self) -> None:
        """
        Log out the current user and clear the session.

        The session is cleared even when the logout call fails; the error is
        re-raised.
        """
        try:
            if self._user is not None:
                self.auth_client.logout(self._user.id)
        finally:
            self.clear()
        self.logger.info("Signed out")

    def refresh_access_token(self) -> str:
        """
        Get a new access token with the stored refresh token.

        Returns:
            The new access token

        Raises:
            RuntimeError: If no refresh token is stored
        """
        if not self._refresh_token:
            raise RuntimeError("No refresh token")

        # The refresh call must not carry the rejected bearer token
        self._set_access_token(None)
        try:
            response = self.auth_client.refresh(self._refresh_token)
            access_token = response["accessToken"]
        except Exception:
            self.logger.warning("Token refresh failed, clearing session")
            self.clear()
            raise

        if response.get("refreshToken"):
            self._refresh_token = response["refreshToken"]
        self._set_access_token(access_token)
        self.logger.debug("Access token refreshed")
        return access_token
