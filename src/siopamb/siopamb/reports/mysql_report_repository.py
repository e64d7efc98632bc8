from __future__ import annotations

from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_datetime, normalize_mysql_decimal
from .fields import FIELD_NAMES, FIELD_SPECS, FieldKind, ReportFields
from .model import ActivityReport
from .repository import ReportRepository

_META = ("report_id", "account_id", "submitted_by", "submitted_at")
_ALL_COLUMNS = _META + FIELD_NAMES
_INSERT = (
    f"INSERT INTO activity_reports({', '.join(_ALL_COLUMNS)}) "
    f"VALUES({', '.join(['%s'] * len(_ALL_COLUMNS))})"
)
_SELECT = f"SELECT {', '.join(_ALL_COLUMNS)} FROM activity_reports ORDER BY seq ASC"


def _to_params(report: ActivityReport) -> tuple:
    values = report.fields.as_dict()
    return (
        report.report_id,
        report.account_id,
        report.submitted_by,
        report.submitted_at,
    ) + tuple(values[name] for name in FIELD_NAMES)


_DEFAULTS = ReportFields()


def _column(spec, value):
    if value is None:
        return getattr(_DEFAULTS, spec.name)
    if spec.kind == FieldKind.DECIMAL:
        return normalize_mysql_decimal(value)
    if spec.kind == FieldKind.COUNTER:
        return int(value)
    return str(value)


def _to_report(row: dict) -> ActivityReport:
    values = {spec.name: _column(spec, row.get(spec.name)) for spec in FIELD_SPECS}
    return ActivityReport(
        report_id=row["report_id"],
        account_id=row.get("account_id"),
        submitted_by=row.get("submitted_by") or "",
        submitted_at=normalize_mysql_datetime(row.get("submitted_at")),
        fields=ReportFields(**values),
    )


class MySQLReportRepository(ReportRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def append(self, report: ActivityReport) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_INSERT, _to_params(report))

    def append_many(self, reports: Sequence[ActivityReport]) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(_INSERT, [_to_params(r) for r in reports])
        return len(reports)

    def list_all(self) -> Sequence[ActivityReport]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT)
            return [_to_report(r) for r in fetchall(cur)]

    def delete_by_account(self, account_id: str) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM activity_reports WHERE account_id=%s", (account_id,))
            return int(cur.rowcount)
