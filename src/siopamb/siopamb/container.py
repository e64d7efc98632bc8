from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .accounts.mysql_account_repository import MySQLAccountRepository
from .accounts.repository import AccountRepository
from .accounts.service import AccountService
from .auth.service import AuthService
from .auth.session_store import FlaskSessionStore, SessionStore
from .core.constants import DEFAULT_ADMIN_PASSWORD, DEFAULT_PASSWORD_MIN_LENGTH
from .credentials.mysql_credential_repository import MySQLCredentialRepository
from .credentials.repository import CredentialRepository
from .credentials.service import CredentialService
from .database.connection import DatabaseConnection, DBConfig
from .reports.mysql_report_repository import MySQLReportRepository
from .reports.repository import ReportRepository
from .reports.service import ReportService
from .stats.service import StatsService
from .transfer.service import TransferService


@dataclass(frozen=True)
class Container:
    accounts_repo: AccountRepository
    credentials_repo: CredentialRepository
    reports_repo: ReportRepository

    credential_service: CredentialService
    account_service: AccountService
    auth_service: AuthService
    report_service: ReportService
    stats_service: StatsService
    transfer_service: TransferService


def assemble(
    *,
    accounts_repo: AccountRepository,
    credentials_repo: CredentialRepository,
    reports_repo: ReportRepository,
    session_store: Optional[SessionStore] = None,
    password_min_length: int = DEFAULT_PASSWORD_MIN_LENGTH,
    admin_default_password: str = DEFAULT_ADMIN_PASSWORD,
) -> Container:
    """Wire services over any repository implementation (MySQL or in-memory)."""
    credential_service = CredentialService(
        credentials_repo,
        min_length=password_min_length,
        admin_default_password=admin_default_password,
    )
    account_service = AccountService(accounts_repo, credential_service, reports_repo)
    auth_service = AuthService(accounts_repo, credential_service, session_store or FlaskSessionStore())
    report_service = ReportService(reports_repo, accounts_repo)

    return Container(
        accounts_repo=accounts_repo,
        credentials_repo=credentials_repo,
        reports_repo=reports_repo,
        credential_service=credential_service,
        account_service=account_service,
        auth_service=auth_service,
        report_service=report_service,
        stats_service=StatsService(),
        transfer_service=TransferService(report_service),
    )


def build_container(
    *,
    db_config: dict,
    password_min_length: int = DEFAULT_PASSWORD_MIN_LENGTH,
    admin_default_password: str = DEFAULT_ADMIN_PASSWORD,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return assemble(
        accounts_repo=MySQLAccountRepository(conn),
        credentials_repo=MySQLCredentialRepository(conn),
        reports_repo=MySQLReportRepository(conn),
        password_min_length=password_min_length,
        admin_default_password=admin_default_password,
    )
