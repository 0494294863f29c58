"""
Data models for the hospital auth client.

Contains DTOs for registration, login, refresh, logout and auth results.
"""

from .auth import (
    RegistrationRequest,
    LoginRequest,
    RefreshRequest,
    LogoutRequest,
    UserSummary,
    AuthResult,
)

__all__ = [
    "RegistrationRequest",
    "LoginRequest",
    "RefreshRequest",
    "LogoutRequest",
    "UserSummary",
    "AuthResult",
]
