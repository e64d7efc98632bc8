from __future__ import annotations

import logging
import uuid
from typing import Optional, Sequence

from ..common.validators import normalize_display_name, require_letters
from ..core.constants import ADMIN_ACCOUNT_ID, ADMIN_USERNAME
from ..core.enums import Platoon, Rank
from ..core.exceptions import AuthorizationError, DuplicateNameError, NotFoundError, ValidationError
from ..credentials.service import CredentialService
from ..reports.repository import ReportRepository
from .model import Account
from .repository import AccountRepository

logger = logging.getLogger(__name__)


def _coerce_rank(value) -> Rank:
    try:
        return Rank(value)
    except ValueError:
        raise ValidationError("Graduação/Posto inválido")


def _coerce_platoon(value) -> Platoon:
    try:
        return Platoon(value)
    except ValueError:
        raise ValidationError("Pelotão inválido")


class AccountService:
    """Use case: manage the account directory (signup and admin screens)."""

    def __init__(
        self,
        accounts: AccountRepository,
        credentials: CredentialService,
        reports: ReportRepository,
    ):
        self._accounts = accounts
        self._credentials = credentials
        self._reports = reports

    def create_account(self, display_name: str, rank, platoon) -> Account:
        name = normalize_display_name(require_letters(display_name, "Nome de guerra"))
        rank = _coerce_rank(rank)
        platoon = _coerce_platoon(platoon)

        if name.lower() == ADMIN_USERNAME or self._accounts.get_by_display_name(name):
            raise DuplicateNameError("Este nome de guerra já está em uso.")

        account_id = uuid.uuid4().hex
        self._accounts.create(account_id=account_id, display_name=name, rank=rank, platoon=platoon)
        logger.info("account created: %s (%s)", name, account_id)
        return Account(account_id=account_id, display_name=name, rank=rank, platoon=platoon)

    def register(self, *, display_name: str, password: str, rank, platoon) -> Account:
        """Account + credential. Used by signup and by the admin 'new user' form."""
        self._credentials.validate(password)
        account = self.create_account(display_name, rank, platoon)
        try:
            self._credentials.set_password(account.account_id, password)
        except Exception:
            # No transaction spans both stores: undo the profile row so no account is left without a password.
            self._accounts.delete_by_id(account.account_id)
            raise
        return account

    def update_account(
        self,
        account_id: str,
        *,
        rank=None,
        platoon=None,
        password: Optional[str] = None,
    ) -> Account:
        current = self.get_account(account_id)
        new_rank = _coerce_rank(rank) if rank else current.rank
        new_platoon = _coerce_platoon(platoon) if platoon else current.platoon

        if password:
            self._credentials.set_password(account_id, password)

        if not self._accounts.update(account_id=account_id, rank=new_rank, platoon=new_platoon):
            raise NotFoundError("Usuário não encontrado")
        logger.info("account updated: %s", account_id)
        return Account(
            account_id=current.account_id,
            display_name=current.display_name,
            rank=new_rank,
            platoon=new_platoon,
        )

    def delete_account(self, account_id: str) -> None:
        if account_id == ADMIN_ACCOUNT_ID:
            raise AuthorizationError("Não é possível excluir o administrador")
        account = self.get_account(account_id)

        self._credentials.remove(account_id)
        removed = self._reports.delete_by_account(account_id)
        self._accounts.delete_by_id(account_id)
        logger.info("account deleted: %s (%d reports removed)", account.display_name, removed)

    def get_account(self, account_id: str) -> Account:
        account = self._accounts.get_by_id(account_id)
        if not account:
            raise NotFoundError("Usuário não encontrado")
        return account

    def find_by_display_name(self, display_name: str) -> Optional[Account]:
        return self._accounts.get_by_display_name(display_name.strip())

    def list_accounts(self) -> Sequence[Account]:
        return list(self._accounts.list_all())
