from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional

from ..accounts.model import ADMIN_ACCOUNT, Account
from ..accounts.repository import AccountRepository
from ..common.validators import require_matching
from ..core.constants import ADMIN_USERNAME
from ..core.enums import Platoon, Rank, Role
from ..core.exceptions import AuthenticationError, NotAuthenticatedError
from ..credentials.service import CredentialService
from .session_store import SessionStore

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Nome de usuário ou senha inválidos."


@dataclass(frozen=True)
class SessionUser:
    """What we store into the session after login."""

    account_id: str
    display_name: str
    rank: Optional[Rank]
    platoon: Optional[Platoon]
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @classmethod
    def from_account(cls, account: Account) -> "SessionUser":
        return cls(
            account_id=account.account_id,
            display_name=account.display_name,
            rank=account.rank,
            platoon=account.platoon,
            role=account.role,
        )

    def to_session(self) -> dict:
        data = asdict(self)
        data["rank"] = self.rank.value if self.rank else None
        data["platoon"] = self.platoon.value if self.platoon else None
        data["role"] = self.role.value
        return data

    @classmethod
    def from_session(cls, data: Mapping[str, Any]) -> "SessionUser":
        return cls(
            account_id=str(data["account_id"]),
            display_name=str(data["display_name"]),
            rank=Rank(data["rank"]) if data.get("rank") else None,
            platoon=Platoon(data["platoon"]) if data.get("platoon") else None,
            role=Role(data["role"]),
        )


class AuthService:
    """Use case: login / logout / change password."""

    def __init__(self, accounts: AccountRepository, credentials: CredentialService, store: SessionStore):
        self._accounts = accounts
        self._credentials = credentials
        self._store = store

    def _resolve(self, identifier: str) -> Optional[Account]:
        name = (identifier or "").strip()
        if not name:
            return None
        if name.lower() == ADMIN_USERNAME:
            return ADMIN_ACCOUNT
        return self._accounts.get_by_display_name(name)

    def authenticate(self, identifier: str, secret: str) -> SessionUser:
        """Check credentials without touching the session."""
        account = self._resolve(identifier)
        if not account or not self._credentials.verify(account.account_id, secret or ""):
            raise AuthenticationError(INVALID_CREDENTIALS)
        return SessionUser.from_account(account)

    def login(self, identifier: str, secret: str) -> SessionUser:
        user = self.authenticate(identifier, secret)
        self._store.save(user.to_session())
        logger.info("login: %s (%s)", user.display_name, user.role.value)
        return user

    def logout(self) -> None:
        self._store.clear()

    def current_user(self) -> Optional[SessionUser]:
        data = self._store.load()
        if not data:
            return None
        try:
            user = SessionUser.from_session(data)
        except (KeyError, ValueError):
            # Stale or tampered payload: treat as anonymous.
            self._store.clear()
            return None

        if user.is_admin:
            return user
        # The account may have been deleted while this session was alive.
        account = self._accounts.get_by_id(user.account_id)
        if account is None:
            logger.info("session dropped for missing account %s", user.account_id)
            self._store.clear()
            return None
        return SessionUser.from_account(account)

    def change_password(self, new_secret: str, confirm_secret: str) -> None:
        """Replace the current account's password, then end the session."""
        require_matching(new_secret, confirm_secret)
        self._credentials.validate(new_secret)

        user = self.current_user()
        if user is None:
            raise NotAuthenticatedError("Usuário não encontrado. Por favor, faça login novamente.")

        self._credentials.set_password(user.account_id, new_secret)
        self.logout()
        logger.info("password changed: %s", user.display_name)
