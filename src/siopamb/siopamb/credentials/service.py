from __future__ import annotations

import logging

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_min_length
from ..core.constants import ADMIN_ACCOUNT_ID, DEFAULT_ADMIN_PASSWORD, DEFAULT_PASSWORD_MIN_LENGTH
from .repository import CredentialRepository

logger = logging.getLogger(__name__)


class CredentialService:
    """Use case: store and verify passwords (hash only, never plain text)."""

    def __init__(
        self,
        credentials: CredentialRepository,
        *,
        min_length: int = DEFAULT_PASSWORD_MIN_LENGTH,
        admin_default_password: str = DEFAULT_ADMIN_PASSWORD,
    ):
        self._credentials = credentials
        self._min_length = int(min_length)
        self._admin_default_password = admin_default_password

    @property
    def min_length(self) -> int:
        return self._min_length

    def validate(self, password: str) -> str:
        return require_min_length(password, "A senha", self._min_length)

    def set_password(self, account_id: str, password: str) -> None:
        self.validate(password)
        self._credentials.put(account_id=account_id, password_hash=generate_password_hash(password))
        logger.info("credential replaced for account %s", account_id)

    def verify(self, account_id: str, password: str) -> bool:
        credential = self._credentials.get(account_id)
        if credential is None:
            # Admin without a stored row still logs in with the configured default.
            if account_id == ADMIN_ACCOUNT_ID:
                return password == self._admin_default_password
            return False

        try:
            return check_password_hash(credential.password_hash, password)
        except (ValueError, TypeError):
            # Hash column holds something werkzeug cannot parse
            return False

    def remove(self, account_id: str) -> bool:
        return self._credentials.delete(account_id)
