# src/daylist/auth/validation.py

"""Local checks for the login / register forms. Nothing here touches the network."""

from __future__ import annotations

DEFAULT_MIN_PASSWORD_LENGTH = 6


def validate_login(username: str, password: str) -> str | None:
    if not (username or "").strip() or not (password or "").strip():
        return "Username and password are required."
    return None


def validate_registration(
    username: str,
    password: str,
    confirm: str,
    *,
    min_length: int = DEFAULT_MIN_PASSWORD_LENGTH,
) -> str | None:
    if not (username or "").strip() or not (password or "").strip() or not (confirm or "").strip():
        return "All fields are required."

    if len(password) < min_length:
        return f"Password must be at least {min_length} characters."

    if password != confirm:
        return "Password and confirmation must match."

    return None
