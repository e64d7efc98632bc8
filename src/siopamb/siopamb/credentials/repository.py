from __future__ import annotations

from typing import Optional, Protocol

from .model import Credential


class CredentialRepository(Protocol):
    """Senhas ficam separadas do perfil: um registro por conta."""

    def get(self, account_id: str) -> Optional[Credential]:
        raise NotImplementedError

    def put(self, *, account_id: str, password_hash: str) -> None:
        """Insert or replace the credential of an account."""
        raise NotImplementedError

    def delete(self, account_id: str) -> bool:
        raise NotImplementedError
