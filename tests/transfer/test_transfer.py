from __future__ import annotations

from decimal import Decimal

import pytest

from siopamb.core.exceptions import ValidationError
from siopamb.reports.fields import ReportFields
from siopamb.transfer.codec import parse_workbook, write_workbook
from siopamb.transfer.service import EXPORT_COLUMNS, export_all, import_rows


def test_export_then_import_preserves_content(container, officer, fixed_now):
    fields = ReportFields(
        equipes_integradas="3º pel.",
        numero_rso="123456",
        tipo_escala="DEJEM",
        tempo_trabalho=Decimal("8.5"),
        encarregado_equipe="Souza",
        tva=4,
        multa_arbitrada=Decimal("150.75"),
    )
    original = container.report_service.submit(fields, officer.account_id)

    rows = parse_workbook(export_all(container.report_service.list_all()))
    imported = import_rows(rows)

    assert len(imported) == 1
    copy = imported[0]
    assert copy.report_id != original.report_id
    assert copy.account_id == officer.account_id
    assert copy.submitted_by == "Joao"
    assert copy.submitted_at == original.submitted_at
    assert copy.fields == fields


def test_exported_sheet_has_every_column(container):
    rows = parse_workbook(write_workbook([{"id": "r1", "tva": 2}], columns=EXPORT_COLUMNS))

    assert list(rows[0].keys()) == list(EXPORT_COLUMNS)
    assert rows[0]["userId"] is None


def test_import_workbook_appends_every_row(container):
    data = write_workbook(
        [
            {"submittedBy": "Planilha", "equipesIntegradas": "1º pel.", "tva": 1},
            {"submittedBy": "Planilha", "equipesIntegradas": "1º pel.", "tva": 1},
            {"submittedBy": "Outro", "submittedAt": "não é data"},
        ],
        columns=EXPORT_COLUMNS,
    )

    assert container.transfer_service.import_workbook(data) == 3

    stored = container.report_service.list_all()
    assert len({r.report_id for r in stored}) == 3
    assert stored[2].submitted_at is None
    assert container.stats_service.dashboard(stored).total == 3


def test_garbage_bytes_are_rejected(container):
    with pytest.raises(ValidationError):
        container.transfer_service.import_workbook(b"definitely not a spreadsheet")
    assert container.report_service.list_all() == []
