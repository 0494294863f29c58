"""
Authentication data models.

Contains DTOs for the auth endpoints. Attributes are snake_case; to_dict()
and from_dict() translate to and from the backend's camelCase JSON.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional


@dataclass(frozen=True)
class RegistrationRequest:
    """Body of POST /auth/register."""

    username: str
    email: str
    password: str
    full_name: str
    registration_number: str
    area: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """
        Build the JSON body.

        Returns:
            Request body; 'area' is left out when not set
        """
        body = {
            "username": self.username,
            "email": self.email,
            "password": self.password,
            "fullName": self.full_name,
            "registrationNumber": self.registration_number,
        }
        if self.area is not None:
            body["area"] = self.area
        return body


@dataclass(frozen=True)
class LoginRequest:
    """Body of POST /auth/login."""

    login: str
    password: str
    organization_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "login": self.login,
            "password": self.password,
            "organizationId": self.organization_id,
        }


@dataclass(frozen=True)
class RefreshRequest:
    """Body of POST /auth/refresh."""

    refresh_token: str

    def to_dict(self) -> Dict[str, Any]:
        return {"refreshToken": self.refresh_token}


@dataclass(frozen=True)
class LogoutRequest:
    """Body of POST /auth/logout."""

    user_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {"userId": self.user_id}


@dataclass(frozen=True)
class UserSummary:
    """User embedded in an auth response."""

    id: str
    username: str
    email: str
    full_name: str
    organization_id: str
    organization_name: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserSummary":
        return cls(
            id=data["id"],
            username=data["username"],
            email=data["email"],
            full_name=data["fullName"],
            organization_id=data["organizationId"],
            organization_name=data["organizationName"],
        )


@dataclass(frozen=True)
class AuthResult:
    """Token bundle and user returned by register, login and refresh."""

    access_token: str
    refresh_token: str
    token_type: str
    expires_in: int  # seconds
    user: UserSummary

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuthResult":
        """
        Build a typed view of a decoded auth response.

        Args:
            data: Decoded JSON body

        Returns:
            AuthResult instance

        Raises:
            KeyError: If a required field is missing
        """
        return cls(
            access_token=data["accessToken"],
            refresh_token=data["refreshToken"],
            token_type=data["tokenType"],
            expires_in=data["expiresIn"],
            user=UserSummary.from_dict(data["user"]),
        )
