from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import datetime
from typing import Callable, Sequence

from ..accounts.repository import AccountRepository
from ..common.datetime_utils import now_local
from ..core.exceptions import NotFoundError
from .fields import ReportFields
from .model import ActivityReport
from .repository import ReportRepository

logger = logging.getLogger(__name__)


class ReportService:
    """Use case: the append-only report ledger."""

    def __init__(
        self,
        reports: ReportRepository,
        accounts: AccountRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._reports = reports
        self._accounts = accounts
        self._clock = clock

    def submit(self, fields: ReportFields, account_id: str) -> ActivityReport:
        account = self._accounts.get_by_id(account_id)
        if not account:
            raise NotFoundError("Usuário não encontrado")

        report = ActivityReport(
            report_id=uuid.uuid4().hex,
            account_id=account.account_id,
            submitted_by=account.display_name,
            submitted_at=self._clock(),
            fields=fields,
        )
        self._reports.append(report)
        logger.info("report %s submitted by %s", report.report_id, account.display_name)
        return report

    def bulk_append(self, records: Sequence[ActivityReport]) -> int:
        """Append records as given, each with a fresh id. No de-duplication."""
        fresh = [replace(r, report_id=uuid.uuid4().hex) for r in records]
        if not fresh:
            return 0
        count = self._reports.append_many(fresh)
        logger.info("bulk append: %d reports", count)
        return count

    def list_all(self) -> Sequence[ActivityReport]:
        return list(self._reports.list_all())

    def list_recent(self) -> Sequence[ActivityReport]:
        return list(reversed(self.list_all()))
