# tests/test_auth_forms.py

from __future__ import annotations

from pathlib import Path

from daylist.auth.session import SessionStore
from daylist.auth.validation import validate_login, validate_registration


def test_validate_login() -> None:
    assert validate_login("alice", "secret1") is None
    assert validate_login("", "secret1") == "Username and password are required."
    assert validate_login("alice", "   ") == "Username and password are required."


def test_validate_registration_rules_in_order() -> None:
    assert validate_registration("alice", "secret1", "secret1") is None
    assert validate_registration("alice", "", "") == "All fields are required."
    assert validate_registration("alice", "abc", "abc") == "Password must be at least 6 characters."
    assert validate_registration("alice", "secret1", "secret2") == "Password and confirmation must match."
    assert validate_registration("alice", "abcd", "abcd", min_length=4) is None


def test_session_store_save_load_clear(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "session.json"
    store = SessionStore(path)
    assert store.load() is None
    assert not store.is_authenticated

    store.save("tok-1")
    assert store.load() == "tok-1"
    assert SessionStore(path).is_authenticated

    store.clear()
    assert store.load() is None
    assert not path.exists()
    store.clear()


def test_session_store_keeps_other_keys_on_clear(tmp_path: Path) -> None:
    path = tmp_path / "session.json"
    path.write_text('{"token": "t", "theme": "dark"}', "utf-8")

    SessionStore(path).clear()

    assert path.read_text("utf-8") == '{"theme": "dark"}'


def test_session_store_tolerates_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "session.json"
    path.write_text("{not json", "utf-8")
    store = SessionStore(path)

    assert store.load() is None

    store.save("fresh")
    assert store.load() == "fresh"
