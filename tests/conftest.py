from __future__ import annotations

from datetime import datetime
from typing import Optional

import pytest

from siopamb.accounts.model import Account
from siopamb.auth.session_store import DictSessionStore
from siopamb.container import assemble
from siopamb.core.enums import Platoon, Rank
from siopamb.credentials.model import Credential


class InMemoryAccounts:
    def __init__(self):
        self._rows: dict[str, Account] = {}

    def get_by_id(self, account_id: str) -> Optional[Account]:
        return self._rows.get(account_id)

    def get_by_display_name(self, display_name: str) -> Optional[Account]:
        for account in self._rows.values():
            if account.display_name.lower() == display_name.lower():
                return account
        return None

    def create(self, *, account_id, display_name, rank, platoon) -> None:
        self._rows[account_id] = Account(account_id=account_id, display_name=display_name, rank=rank, platoon=platoon)

    def update(self, *, account_id, rank, platoon) -> bool:
        current = self._rows.get(account_id)
        if not current:
            return False
        self._rows[account_id] = Account(
            account_id=account_id,
            display_name=current.display_name,
            rank=rank,
            platoon=platoon,
        )
        return True

    def delete_by_id(self, account_id: str) -> bool:
        return self._rows.pop(account_id, None) is not None

    def list_all(self):
        return list(self._rows.values())


class InMemoryCredentials:
    def __init__(self):
        self.rows: dict[str, Credential] = {}

    def get(self, account_id: str) -> Optional[Credential]:
        return self.rows.get(account_id)

    def put(self, *, account_id: str, password_hash: str) -> None:
        self.rows[account_id] = Credential(account_id=account_id, password_hash=password_hash)

    def delete(self, account_id: str) -> bool:
        return self.rows.pop(account_id, None) is not None


class InMemoryReports:
    def __init__(self):
        self.rows = []

    def append(self, report) -> None:
        self.rows.append(report)

    def append_many(self, reports) -> int:
        self.rows.extend(reports)
        return len(reports)

    def list_all(self):
        return list(self.rows)

    def delete_by_account(self, account_id: str) -> int:
        before = len(self.rows)
        self.rows = [r for r in self.rows if r.account_id != account_id]
        return before - len(self.rows)


@pytest.fixture
def fixed_now():
    return datetime(2026, 2, 1, 8, 30, 0)


@pytest.fixture
def repos():
    return {
        "accounts_repo": InMemoryAccounts(),
        "credentials_repo": InMemoryCredentials(),
        "reports_repo": InMemoryReports(),
    }


@pytest.fixture
def session_backing():
    return {}


@pytest.fixture
def container(repos, session_backing):
    """Services over in-memory repositories, session kept in a plain dict."""
    return assemble(**repos, session_store=DictSessionStore(session_backing))


@pytest.fixture
def officer(container):
    return container.account_service.register(
        display_name="joao",
        password="segredo",
        rank=Rank.SOLDADO.value,
        platoon=Platoon.PRIMEIRO.value,
    )


@pytest.fixture
def app(repos):
    from siopamb.main import create_app

    flask_container = assemble(**repos)
    app = create_app(container=flask_container, settings_module="config.testing")
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
