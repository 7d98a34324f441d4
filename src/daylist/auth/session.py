# src/daylist/auth/session.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_SESSION_KEY = "token"


def _load_json(path: Path) -> dict[str, Any]:
    raw = path.read_text("utf-8")
    val = json.loads(raw)
    if isinstance(val, dict):
        return val
    raise ValueError("Expected JSON object")


def _atomic_write_json(path: Path, data: dict[str, Any]) -> None:
    tmp = path.with_suffix(".tmp")
    tmp.write_text(json.dumps(data, ensure_ascii=False), "utf-8")
    os.replace(tmp, path)
    with contextlib.suppress(OSError):
        # Not critical on Windows or restricted FS.
        os.chmod(path, 0o600)


class SessionStore:
    """
    Opaque session token kept in a small JSON file under a fixed key.

    The file holds a credential: keep it under a gitignored local dir.
    Set on login success, removed on logout.
    """

    def __init__(self, path: str | Path, *, key: str = DEFAULT_SESSION_KEY) -> None:
        self._path = Path(path)
        self._key = key

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> str | None:
        if not self._path.exists():
            return None
        try:
            data = _load_json(self._path)
        except (OSError, ValueError) as e:
            logger.warning("Failed to read session file %s: %r", self._path, e)
            return None
        token = data.get(self._key)
        if isinstance(token, str) and token:
            return token
        return None

    @property
    def is_authenticated(self) -> bool:
        return self.load() is not None

    def save(self, token: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        data: dict[str, Any] = {}
        if self._path.exists():
            try:
                data = _load_json(self._path)
            except (OSError, ValueError):
                data = {}
        data[self._key] = token
        _atomic_write_json(self._path, data)
        logger.info("Session saved to %s", self._path)

    def clear(self) -> None:
        if not self._path.exists():
            return
        try:
            data = _load_json(self._path)
        except (OSError, ValueError):
            data = {}
        data.pop(self._key, None)
        if data:
            _atomic_write_json(self._path, data)
        else:
            self._path.unlink(missing_ok=True)
        logger.info("Session cleared")
