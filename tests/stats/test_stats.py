from __future__ import annotations

from siopamb.reports.fields import ReportFields
from siopamb.reports.model import ActivityReport
from siopamb.stats.service import StatsService, count_by_scale_type, count_by_unit


def _report(unit: str, scale: str) -> ActivityReport:
    return ActivityReport(
        report_id=f"{unit}-{scale}",
        account_id="a1",
        submitted_by="Joao",
        submitted_at=None,
        fields=ReportFields(equipes_integradas=unit, tipo_escala=scale),
    )


def test_no_reports_gives_all_zero_buckets():
    assert count_by_unit([]) == {"1º pel.": 0, "2º pel.": 0, "3º pel.": 0, "2ª Cia.": 0}
    assert count_by_scale_type([]) == {"Ordinária": 0, "DEJEM": 0}


def test_counts_partition_the_reports():
    reports = [
        _report("1º pel.", "Ordinária"),
        _report("1º pel.", "DEJEM"),
        _report("3º pel.", "DEJEM"),
        _report("2ª Cia.", "Ordinária"),
        _report("2ª Cia.", "DEJEM"),
    ]

    by_unit = count_by_unit(reports)
    by_scale = count_by_scale_type(reports)

    assert by_unit == {"1º pel.": 2, "2º pel.": 0, "3º pel.": 1, "2ª Cia.": 2}
    assert by_scale == {"Ordinária": 2, "DEJEM": 3}
    assert sum(by_unit.values()) == len(reports)
    assert sum(by_scale.values()) == len(reports)


def test_unknown_values_are_ignored():
    reports = [_report("", ""), _report("Batalhão", "Extra"), _report("2º pel.", "DEJEM")]

    assert sum(count_by_unit(reports).values()) == 1
    assert sum(count_by_scale_type(reports).values()) == 1


def test_dashboard_json_shape():
    stats = StatsService().dashboard([_report("2º pel.", "Ordinária")])

    payload = stats.to_json()
    assert payload["total"] == 1
    assert {"name": "2º pel.", "value": 1} in payload["unit"]
    assert payload["scaleType"] == [{"name": "Ordinária", "value": 1}, {"name": "DEJEM", "value": 0}]
