"""
Base API client for the hospital management backend.

Handles HTTP requests, session management, bearer tokens and error handling.
"""

import logging
from typing import Any, Callable, Dict, Optional, Protocol

import requests  # type: ignore
from requests.adapters import HTTPAdapter  # type: ignore
from urllib3.util.retry import Retry  # type: ignore

from ..core import constants


class HttpClient(Protocol):
    """Transport capability the auth operations depend on."""

    def post_json(self, endpoint: str, body: Dict[str, Any]) -> Any:
        """Send body as JSON to endpoint and return the decoded response."""
        ...


class APIClient:
    """Base client for interacting with the hospital management API."""

    def __init__(
        self,
        base_url: str = constants.DEFAULT_API_BASE_URL,
        timeout: float = constants.DEFAULT_API_TIMEOUT,
        max_retries: int = constants.DEFAULT_API_MAX_RETRIES,
        verify_ssl: bool = constants.DEFAULT_VERIFY_SSL,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize API client.

        Args:
            base_url: Base URL for the API (including the /api/v1 prefix)
            timeout: Request timeout in seconds
            max_retries: Maximum number of retry attempts on connection
                         errors and 429/5xx responses
            verify_ssl: Whether to verify SSL certificates
            logger: Logger instance
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)
        self.verify_ssl = verify_ssl

        # Called on a 401 from a non-auth endpoint; returns a fresh access token
        self.unauthorized_handler: Optional[Callable[[], str]] = None
        self._access_token: Optional[str] = None

        if not verify_ssl:
            import urllib3
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

        self.session = requests.Session()
        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=1,
            status_forcelist=constants.RETRY_STATUS_CODES,
            allowed_methods=["GET", "POST", "PUT"],
            raise_on_status=False
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

        self._update_headers()

    @property
    def access_token(self) -> Optional[str]:
        """Bearer token sent with every request, if any."""
        return self._access_token

    @access_token.setter
    def access_token(self, token: Optional[str]) -> None:
        self._access_token = token
        self._update_headers()

    def _update_headers(self) -> None:
        """Update session headers with the current bearer token."""
        self.session.headers.update({
            "Content-Type": "application/json",
            "Accept": "application/json"
        })

        if self._access_token:
            self.session.headers["Authorization"] = (
                f"{constants.BEARER_TOKEN_TYPE} {self._access_token}"
            )
        else:
            self.session.headers.pop("Authorization", None)

    @staticmethod
    def _is_auth_endpoint(endpoint: str) -> bool:
        return ("/" + endpoint.lstrip("/")).startswith(constants.AUTH_PREFIX)

    def _make_request(
        self,
        method: str,
        endpoint: str,
        _retried: bool = False,
        **kwargs
    ) -> requests.Response:
        """
        Make HTTP request to API.

        A 401 from a non-auth endpoint is retried once after asking
        unauthorized_handler for a new access token.

        Args:
            method: HTTP method (GET, POST, PUT, etc.)
            endpoint: API endpoint (without base URL)
            **kwargs: Additional arguments for requests

        Returns:
            Response object

        Raises:
            requests.exceptions.RequestException: On request failure
        """
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        kwargs.setdefault("verify", self.verify_ssl)

        if not self._access_token:
            self.logger.debug(f"No access token set, sending {method} {url} unauthenticated")
        self.logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                timeout=self.timeout,
                **kwargs
            )
        except requests.exceptions.RequestException as e:
            self.logger.error(f"API request failed: {method} {url} - {e}")
            raise

        if (
            response.status_code == 401
            and not _retried
            and self.unauthorized_handler is not None
            and not self._is_auth_endpoint(endpoint)
        ):
            self.logger.info(f"Access token rejected for {method} {url}, refreshing")
            self.access_token = self.unauthorized_handler()
            return self._make_request(method, endpoint, _retried=True, **kwargs)

        try:
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            self.logger.error(f"API request failed: {method} {url} - {e}")
            raise

        return response

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        """Decode a JSON body; an empty body decodes to None."""
        if not response.content:
            return None
        return response.json()

    def get(self, endpoint: str, params: Optional[Dict] = None) -> Any:
        """
        Make GET request.

        Args:
            endpoint: API endpoint
            params: Query parameters

        Returns:
            Decoded JSON response
        """
        response = self._make_request("GET", endpoint, params=params)
        return self._decode(response)

    def post_json(self, endpoint: str, body: Dict[str, Any]) -> Any:
        """
        Make POST request with a JSON body.

        Args:
            endpoint: API endpoint
            body: Request body data

        Returns:
            Decoded JSON response, or None when the response has no body
        """
        response = self._make_request("POST", endpoint, json=body)
        return self._decode(response)

    def put(self, endpoint: str, data: Dict[str, Any]) -> Any:
        """
        Make PUT request.

        Args:
            endpoint: API endpoint
            data: Request body data

        Returns:
            Decoded JSON response
        """
        response = self._make_request("PUT", endpoint, json=data)
        return self._decode(response)

    def close(self) -> None:
        """Close the session."""
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
