from __future__ import annotations

from typing import Protocol, Sequence

from .model import ActivityReport


class ReportRepository(Protocol):
    def append(self, report: ActivityReport) -> None:
        raise NotImplementedError

    def append_many(self, reports: Sequence[ActivityReport]) -> int:
        raise NotImplementedError

    def list_all(self) -> Sequence[ActivityReport]:
        """Insertion order."""
        raise NotImplementedError

    def delete_by_account(self, account_id: str) -> int:
        """Cascade used when an account is removed; returns rows deleted."""
        raise NotImplementedError
