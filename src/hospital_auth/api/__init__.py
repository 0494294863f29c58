"""
API layer for the hospital management backend.

Provides the HTTP transport and the authentication operations built on it.
"""

from .client import APIClient, HttpClient
from .auth import AuthClient

__all__ = [
    "APIClient",
    "HttpClient",
    "AuthClient",
]
