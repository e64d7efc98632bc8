from __future__ import annotations

from typing import Any, Mapping, MutableMapping, Optional, Protocol

from flask import session

_KEY = "auth"


class SessionStore(Protocol):
    """Where the logged-in identity lives between requests."""

    def load(self) -> Optional[Mapping[str, Any]]:
        raise NotImplementedError

    def save(self, data: Mapping[str, Any]) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError


class FlaskSessionStore:
    """Signed-cookie session; the cookie is the restorable token across reloads."""

    def __init__(self, *, permanent: bool = True):
        self._permanent = permanent

    def load(self) -> Optional[Mapping[str, Any]]:
        return session.get(_KEY)

    def save(self, data: Mapping[str, Any]) -> None:
        session.clear()
        session.permanent = self._permanent
        session[_KEY] = dict(data)

    def clear(self) -> None:
        session.clear()


class DictSessionStore:
    """Process-local store for scripts and service-level tests."""

    def __init__(self, backing: Optional[MutableMapping[str, Any]] = None):
        self._backing = backing if backing is not None else {}

    def load(self) -> Optional[Mapping[str, Any]]:
        return self._backing.get(_KEY)

    def save(self, data: Mapping[str, Any]) -> None:
        self._backing.clear()
        self._backing[_KEY] = dict(data)

    def clear(self) -> None:
        self._backing.clear()
