# tests/test_auth_client.py

from __future__ import annotations

import json

import httpx
import pytest

from daylist.auth.client import (
    LOGIN_FALLBACK_MESSAGE,
    NETWORK_ERROR_MESSAGE,
    REGISTER_FALLBACK_MESSAGE,
    AuthClient,
    AuthError,
)

BASE = "http://auth.test"


def _client(handler) -> AuthClient:
    http = httpx.Client(transport=httpx.MockTransport(handler))
    return AuthClient(BASE + "/", http_client=http)


def test_login_posts_trimmed_credentials_and_returns_token() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"token": "abc"})

    token = _client(handler).login("  alice ", " secret1 ")

    assert token == "abc"
    assert len(seen) == 1
    assert seen[0].method == "POST"
    assert str(seen[0].url) == f"{BASE}/login"
    assert json.loads(seen[0].content) == {"username": "alice", "password": "secret1"}


def test_login_uses_server_message_verbatim() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"message": "User not found"})

    with pytest.raises(AuthError) as exc:
        _client(handler).login("bob", "whatever")

    assert exc.value.message == "User not found"
    assert exc.value.status_code == 401


def test_login_falls_back_when_no_message() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="<html>oops</html>")

    with pytest.raises(AuthError) as exc:
        _client(handler).login("bob", "whatever")

    assert str(exc.value) == LOGIN_FALLBACK_MESSAGE
    assert exc.value.status_code == 500


def test_login_without_token_is_an_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"ok": True})

    with pytest.raises(AuthError):
        _client(handler).login("alice", "secret1")


def test_login_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    with pytest.raises(AuthError) as exc:
        _client(handler).login("alice", "secret1")

    assert exc.value.message == NETWORK_ERROR_MESSAGE
    assert exc.value.status_code is None


def test_register_accepts_any_2xx() -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(201, json={"message": "created"})

    _client(handler).register("carol", "secret1")
    assert seen == ["/register"]


def test_register_failure_messages() -> None:
    def taken(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, json={"message": "Username already exists"})

    def bare(request: httpx.Request) -> httpx.Response:
        return httpx.Response(422)

    with pytest.raises(AuthError, match="Username already exists"):
        _client(taken).register("carol", "secret1")

    with pytest.raises(AuthError) as exc:
        _client(bare).register("carol", "secret1")
    assert exc.value.message == REGISTER_FALLBACK_MESSAGE


def test_malformed_base_url_is_an_auth_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.InvalidURL("Invalid URL")

    with pytest.raises(AuthError) as exc:
        _client(handler).login("alice", "secret1")

    assert exc.value.message == NETWORK_ERROR_MESSAGE
