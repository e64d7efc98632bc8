from __future__ import annotations

import logging
import uuid
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Sequence

from ..common.datetime_utils import parse_timestamp
from ..reports.fields import FIELD_SPECS, coerce_imported
from ..reports.model import ActivityReport
from ..reports.service import ReportService
from .codec import parse_workbook, write_workbook

logger = logging.getLogger(__name__)

META_KEYS = ("id", "userId", "submittedBy", "submittedAt")
EXPORT_COLUMNS = META_KEYS + tuple(spec.key for spec in FIELD_SPECS)


def _cell(value):
    if isinstance(value, Decimal):
        return float(value)
    return value


def to_row(report: ActivityReport) -> Dict[str, Any]:
    row: Dict[str, Any] = {
        "id": report.report_id,
        "userId": report.account_id,
        "submittedBy": report.submitted_by,
        "submittedAt": report.submitted_at.isoformat() if report.submitted_at else None,
    }
    for spec in FIELD_SPECS:
        row[spec.key] = _cell(getattr(report.fields, spec.name))
    return row


def export_all(reports: Sequence[ActivityReport]) -> bytes:
    """One row per report, columns named after the report keys."""
    return write_workbook([to_row(r) for r in reports], columns=EXPORT_COLUMNS)


def _timestamp(value):
    try:
        return parse_timestamp(value)
    except ValueError:
        return None


def import_rows(rows: Sequence[Mapping[str, Any]]) -> List[ActivityReport]:
    """Rows are taken as-is: unknown columns ignored, missing ones left blank."""
    out: List[ActivityReport] = []
    for row in rows:
        user_id = row.get("userId")
        out.append(
            ActivityReport(
                report_id=uuid.uuid4().hex,
                account_id=str(user_id) if user_id is not None else None,
                submitted_by=str(row.get("submittedBy") or ""),
                submitted_at=_timestamp(row.get("submittedAt")),
                fields=coerce_imported(row),
            )
        )
    return out


class TransferService:
    """Use case: admin import/export of the whole ledger."""

    def __init__(self, reports: ReportService):
        self._reports = reports

    def export_workbook(self) -> bytes:
        return export_all(self._reports.list_all())

    def import_workbook(self, data: bytes) -> int:
        rows = parse_workbook(data)
        count = self._reports.bulk_append(import_rows(rows))
        logger.info("imported %d rows from spreadsheet", count)
        return count
