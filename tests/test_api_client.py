"""
Tests for the HTTP transport.

The requests session is replaced with mocks; no network access.
"""

import unittest
from unittest.mock import Mock

import requests  # type: ignore

from src.hospital_auth.api import APIClient


def make_response(status_code=200, body=None, content=None):
    """Build a mock requests.Response."""
    response = Mock(spec=requests.Response)
    response.status_code = status_code
    response.content = content if content is not None else (b"{}" if body is not None else b"")
    response.json.return_value = body
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error", response=response
        )
    return response


class TestAPIClient(unittest.TestCase):
    """Test APIClient request handling."""

    def setUp(self):
        self.client = APIClient(base_url="http://backend:8080/api/v1/", logger=Mock())
        self.client.session.request = Mock()

    def tearDown(self):
        self.client.close()

    def test_defaults(self):
        client = APIClient()
        self.assertEqual(client.base_url, "http://localhost:8080/api/v1")
        self.assertEqual(client.timeout, 10)
        self.assertEqual(client.session.headers["Content-Type"], "application/json")
        self.assertEqual(client.session.get_adapter("http://localhost").max_retries.total, 0)
        client.close()

    def test_post_json_sends_body_and_decodes_response(self):
        self.client.session.request.return_value = make_response(body={"ok": True})

        result = self.client.post_json("/auth/login", {"login": "u"})

        self.assertEqual(result, {"ok": True})
        self.client.session.request.assert_called_once_with(
            method="POST",
            url="http://backend:8080/api/v1/auth/login",
            timeout=10,
            json={"login": "u"},
            verify=True,
        )

    def test_empty_body_decodes_to_none(self):
        self.client.session.request.return_value = make_response(status_code=204)

        self.assertIsNone(self.client.post_json("auth/logout", {"userId": "1"}))

    def test_http_error_is_raised(self):
        self.client.session.request.return_value = make_response(status_code=500, body={})

        with self.assertRaises(requests.exceptions.HTTPError):
            self.client.post_json("/auth/login", {})
        self.client.logger.error.assert_called_once()

    def test_connection_error_is_raised(self):
        self.client.session.request.side_effect = requests.exceptions.ConnectionError("refused")

        with self.assertRaises(requests.exceptions.ConnectionError):
            self.client.get("/patients")

    def test_access_token_sets_and_removes_header(self):
        self.client.access_token = "abc"
        self.assertEqual(self.client.session.headers["Authorization"], "Bearer abc")

        self.client.access_token = None
        self.assertNotIn("Authorization", self.client.session.headers)

    def test_unauthorized_refreshes_once_and_retries(self):
        self.client.access_token = "expired"
        self.client.unauthorized_handler = Mock(return_value="fresh")
        self.client.session.request.side_effect = [
            make_response(status_code=401, body={}),
            make_response(body=[{"id": "p1"}]),
        ]

        result = self.client.get("/patients")

        self.assertEqual(result, [{"id": "p1"}])
        self.client.unauthorized_handler.assert_called_once_with()
        self.assertEqual(self.client.session.request.call_count, 2)
        self.assertEqual(self.client.session.headers["Authorization"], "Bearer fresh")

    def test_unauthorized_after_retry_raises(self):
        self.client.unauthorized_handler = Mock(return_value="fresh")
        self.client.session.request.side_effect = [
            make_response(status_code=401, body={}),
            make_response(status_code=401, body={}),
        ]

        with self.assertRaises(requests.exceptions.HTTPError):
            self.client.get("/patients")
        self.client.unauthorized_handler.assert_called_once_with()

    def test_unauthorized_on_auth_endpoint_is_not_retried(self):
        self.client.unauthorized_handler = Mock(return_value="fresh")
        self.client.session.request.return_value = make_response(status_code=401, body={})

        with self.assertRaises(requests.exceptions.HTTPError):
            self.client.post_json("/auth/refresh", {"refreshToken": "r"})
        self.client.unauthorized_handler.assert_not_called()

    def test_unauthorized_handler_errors_propagate(self):
        self.client.unauthorized_handler = Mock(side_effect=RuntimeError("No refresh token"))
        self.client.session.request.return_value = make_response(status_code=401, body={})

        with self.assertRaises(RuntimeError):
            self.client.get("/patients")

    def test_put_sends_body_and_decodes_response(self):
        self.client.session.request.return_value = make_response(body={"id": "p1", "name": "Ana"})

        result = self.client.put("/patients/p1", {"name": "Ana"})

        self.assertEqual(result, {"id": "p1", "name": "Ana"})
        self.client.session.request.assert_called_once_with(
            method="PUT",
            url="http://backend:8080/api/v1/patients/p1",
            timeout=10,
            json={"name": "Ana"},
            verify=True,
        )

    def test_context_manager_closes_session(self):
        with APIClient() as client:
            client.session = Mock()
        client.session.close.assert_called_once()


if __name__ == "__main__":
    unittest.main()
