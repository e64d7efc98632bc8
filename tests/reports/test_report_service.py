from __future__ import annotations

from datetime import datetime

import pytest

from siopamb.core.exceptions import NotFoundError
from siopamb.reports.fields import ReportFields
from siopamb.reports.model import ActivityReport
from siopamb.reports.service import ReportService


@pytest.fixture
def report_service(repos, fixed_now):
    return ReportService(repos["reports_repo"], repos["accounts_repo"], clock=lambda: fixed_now)


def test_submit_appends_one_report_stamped_with_author(report_service, officer, fixed_now, repos):
    fields = ReportFields(equipes_integradas="1º pel.", tipo_escala="Ordinária", tva=2)

    report = report_service.submit(fields, officer.account_id)

    assert repos["reports_repo"].rows == [report]
    assert report.account_id == officer.account_id
    assert report.submitted_by == "Joao"
    assert report.submitted_at == fixed_now
    assert report.fields == fields
    assert report.unit == "1º pel."
    assert report.scale_type == "Ordinária"


def test_submit_is_stamped_no_earlier_than_the_call(container, officer):
    for _ in range(20):
        before = datetime.now()
        report = container.report_service.submit(ReportFields(), officer.account_id)

        assert report.submitted_at >= before


def test_submit_for_unknown_account_raises(report_service, repos):
    with pytest.raises(NotFoundError):
        report_service.submit(ReportFields(), "missing")
    assert repos["reports_repo"].rows == []


def test_reports_keep_submission_order(report_service, officer):
    first = report_service.submit(ReportFields(tva=1), officer.account_id)
    second = report_service.submit(ReportFields(tva=2), officer.account_id)

    assert report_service.list_all() == [first, second]
    assert report_service.list_recent() == [second, first]


def test_bulk_append_assigns_fresh_ids_and_keeps_duplicates(report_service, fixed_now):
    record = ActivityReport(
        report_id="old",
        account_id=None,
        submitted_by="Planilha",
        submitted_at=fixed_now,
        fields=ReportFields(tva=1),
    )

    assert report_service.bulk_append([record, record]) == 2

    stored = report_service.list_all()
    assert len(stored) == 2
    assert {r.report_id for r in stored}.isdisjoint({"old"})
    assert stored[0].report_id != stored[1].report_id
    assert stored[0].fields == stored[1].fields


def test_bulk_append_of_nothing_is_a_noop(report_service, repos):
    assert report_service.bulk_append([]) == 0
    assert repos["reports_repo"].rows == []
