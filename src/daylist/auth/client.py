# src/daylist/auth/client.py

"""
HTTP client for the remote auth backend.

Contract:
    POST /login    {username, password} -> 200 {"token": "..."}
    POST /register {username, password} -> 2xx

Any failure (network, 4xx/5xx, malformed body) surfaces as AuthError with a
user-facing message. The server's "message" field is used verbatim when present.
No retries: the user re-submits.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

LOGIN_FALLBACK_MESSAGE = "Invalid username or password."
REGISTER_FALLBACK_MESSAGE = "Registration failed."
NETWORK_ERROR_MESSAGE = "Could not reach the server. Check your connection and try again."


class AuthError(Exception):
    """Login/registration failed. `str(err)` is safe to show to the user."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _server_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if not isinstance(body, dict):
        return None
    msg = body.get("message")
    if isinstance(msg, str) and msg.strip():
        return msg
    return None


class AuthClient:
    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 15.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._base_url = (base_url or "").rstrip("/")
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=httpx.Timeout(timeout))

    @classmethod
    def from_settings(cls, settings) -> "AuthClient":
        return cls(
            str(getattr(settings, "api_base_url", "")),
            timeout=float(getattr(settings, "http_timeout_seconds", 15.0)),
        )

    def close(self) -> None:
        if self._owns_client:
            self._http.close()

    def _post(self, path: str, payload: dict[str, Any], *, fallback: str) -> httpx.Response:
        url = f"{self._base_url}{path}"
        try:
            response = self._http.post(url, json=payload)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Auth request %s failed: %s", path, e.__class__.__name__)
            raise AuthError(NETWORK_ERROR_MESSAGE) from e

        if response.is_success:
            return response

        message = _server_message(response) or fallback
        logger.info("Auth request %s rejected status=%s", path, response.status_code)
        raise AuthError(message, status_code=response.status_code)

    def login(self, username: str, password: str) -> str:
        """Return the session token for valid credentials."""
        payload = {"username": username.strip(), "password": password.strip()}
        response = self._post("/login", payload, fallback=LOGIN_FALLBACK_MESSAGE)

        if response.status_code != 200:
            raise AuthError(LOGIN_FALLBACK_MESSAGE, status_code=response.status_code)

        try:
            body = response.json()
        except ValueError as e:
            raise AuthError(LOGIN_FALLBACK_MESSAGE, status_code=response.status_code) from e

        token = body.get("token") if isinstance(body, dict) else None
        if not isinstance(token, str) or not token:
            logger.warning("Login response has no token field")
            raise AuthError(LOGIN_FALLBACK_MESSAGE, status_code=response.status_code)

        logger.info("Login succeeded for user=%s", payload["username"])
        return token

    def register(self, username: str, password: str) -> None:
        payload = {"username": username.strip(), "password": password.strip()}
        self._post("/register", payload, fallback=REGISTER_FALLBACK_MESSAGE)
        logger.info("Registration succeeded for user=%s", payload["username"])
