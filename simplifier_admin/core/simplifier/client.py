"""Low-level HTTP client for the Simplifier REST API.

Handles authentication, the Simplifier response envelope, and HTTP operations.
"""
from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Optional, Dict, Any

import requests

from .exceptions import SimplifierAPIError, SimplifierConnectionError

REQUEST_TIMEOUT = 10
TOKEN_HEADER = "SimplifierToken"
PING_PATH = "/client/2.0/ping"

logger = logging.getLogger(__name__)


class SimplifierClient:
    """HTTP client for the Simplifier API.

    Features:
    - Static SimplifierToken or token generated from a credentials file
    - Unwrapping of the ``{success, result, message, error}`` envelope
    - Centralized error handling

    Usage:
        client = SimplifierClient("https://myinstance.simplifier.cloud", token="...")
        methods = client.get_result("/UserInterface/api/LoginMethods")
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        token: Optional[str] = None,
        credentials_file: Optional[str] = None,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        """Initialize Simplifier client.

        Args:
            base_url: Instance base URL (defaults to SIMPLIFIER_BASE_URL env var)
            token: Pre-obtained SimplifierToken
            credentials_file: JSON file with {"user", "pass"} used to generate a token
            timeout: Per-request timeout in seconds
            session: Optional requests session (defaults to a new one)
        """
        self.base_url = (base_url or os.environ.get("SIMPLIFIER_BASE_URL", "")).rstrip("/")
        self.timeout = timeout
        self._token = token
        self._credentials_file = credentials_file
        self._session = session or requests.Session()

    def authenticate_credentials(self, user: str, password: str) -> str:
        """Generate a SimplifierToken from user credentials and keep it for later calls.

        Args:
            user: Simplifier user name
            password: Simplifier password

        Returns:
            SimplifierToken

        Raises:
            SimplifierAPIError: If the token endpoint rejects the credentials
        """
        url = f"{self.base_url}/genToken/"
        resp = self._send(self._session.post, url, json={"user": user, "pass": password})
        if resp.status_code != 200:
            raise SimplifierAPIError(resp.status_code, resp.text, url)
        self._token = resp.json()["result"]
        logger.info("Generated SimplifierToken for user '%s'", user)
        return self._token

    def authenticate_credentials_file(self, path: str) -> str:
        """Read {"user", "pass"} from a JSON file and generate a token."""
        credentials = json.loads(Path(path).read_text(encoding="utf-8"))
        return self.authenticate_credentials(credentials["user"], credentials["pass"])

    def _ensure_authenticated(self) -> None:
        """Ensure a token is available, generating one from the credentials file if needed."""
        if self._token:
            return
        if self._credentials_file:
            self.authenticate_credentials_file(self._credentials_file)
            return
        raise SimplifierAPIError(
            401,
            "Not authenticated - configure SIMPLIFIER_TOKEN or SIMPLIFIER_CREDENTIALS_FILE",
            self.base_url,
        )

    def _headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = {"Content-Type": "application/json", TOKEN_HEADER: self._token or ""}
        if extra:
            headers.update(extra)
        return headers

    def get(self, path: str, params: Optional[Dict] = None, **kwargs) -> requests.Response:
        """Execute GET request with authentication.

        Args:
            path: API endpoint path (e.g., "/UserInterface/api/LoginMethods")
            params: Query parameters
            **kwargs: Additional arguments for requests

        Returns:
            Response object

        Raises:
            SimplifierAPIError: On HTTP error
            SimplifierConnectionError: If the instance cannot be reached
        """
        self._ensure_authenticated()
        headers = self._headers(kwargs.pop("headers", None))
        resp = self._send(self._session.get, f"{self.base_url}{path}", params=params, headers=headers, **kwargs)
        self._handle_error(resp)
        return resp

    def post(self, path: str, json: Optional[Dict] = None, **kwargs) -> requests.Response:
        """Execute POST request with authentication.

        Raises:
            SimplifierAPIError: On HTTP error
            SimplifierConnectionError: If the instance cannot be reached
        """
        self._ensure_authenticated()
        headers = self._headers(kwargs.pop("headers", None))
        resp = self._send(self._session.post, f"{self.base_url}{path}", json=json, headers=headers, **kwargs)
        self._handle_error(resp)
        return resp

    def put(self, path: str, json: Optional[Dict] = None, **kwargs) -> requests.Response:
        """Execute PUT request with authentication.

        Raises:
            SimplifierAPIError: On HTTP error
            SimplifierConnectionError: If the instance cannot be reached
        """
        self._ensure_authenticated()
        headers = self._headers(kwargs.pop("headers", None))
        resp = self._send(self._session.put, f"{self.base_url}{path}", json=json, headers=headers, **kwargs)
        self._handle_error(resp)
        return resp

    def get_result(self, path: str, params: Optional[Dict] = None) -> Any:
        """GET an endpoint and return the ``result`` of the Simplifier envelope."""
        body = self._unwrap(self.get(path, params=params))
        return body.get("result", body) if isinstance(body, dict) else body

    def ping(self) -> bool:
        """Return True when the instance answers the ping endpoint with "pong"."""
        resp = self._send(self._session.get, f"{self.base_url}{PING_PATH}")
        self._handle_error(resp)
        try:
            body = resp.json()
        except ValueError:
            return False
        return isinstance(body, dict) and body.get("msg") == "pong"

    def _send(self, send, url: str, **kwargs) -> requests.Response:
        """Issue a request with the client timeout, wrapping transport failures.

        Raises:
            SimplifierConnectionError: On connection errors and timeouts
        """
        try:
            return send(url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            raise SimplifierConnectionError(url, exc) from exc

    @staticmethod
    def message_of(resp: requests.Response) -> Any:
        """Return the ``message`` of a write response verbatim (falls back to ``result``)."""
        body = SimplifierClient._unwrap(resp)
        if not isinstance(body, dict):
            return body
        if body.get("message") is not None:
            return body["message"]
        return body.get("result", body)

    @staticmethod
    def _unwrap(resp: requests.Response) -> Any:
        """Decode a response body, raising on ``success: false`` envelopes."""
        try:
            body = resp.json()
        except ValueError:
            return resp.text
        if isinstance(body, dict) and body.get("success") is False:
            message = body.get("error") or body.get("message") or "request failed"
            raise SimplifierAPIError(resp.status_code, message, resp.url)
        return body

    def _handle_error(self, resp: requests.Response) -> None:
        """Centralized error handling for HTTP responses.

        Raises:
            SimplifierAPIError: If response status indicates error
        """
        if resp.status_code >= 400:
            raise SimplifierAPIError(resp.status_code, resp.text, resp.url)
