# src/daylist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The commands depend on Protocols instead of concrete implementations.
This keeps the auth backend and session storage swappable and makes testing easier.
"""

from typing import Protocol

from .notify import Notification


class AuthClient(Protocol):
    """Remote auth backend. Failures raise daylist.auth.client.AuthError."""

    def login(self, username: str, password: str) -> str: ...
    def register(self, username: str, password: str) -> None: ...
    def close(self) -> None: ...


class SessionRepo(Protocol):
    """Process-wide session: set on login, cleared on logout."""

    def load(self) -> str | None: ...
    def save(self, token: str) -> None: ...
    def clear(self) -> None: ...


class Notifier(Protocol):
    def notify(self, notification: Notification) -> None: ...
