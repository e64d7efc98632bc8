from __future__ import annotations

from decimal import Decimal

import pytest

from siopamb.core.exceptions import ValidationError
from siopamb.reports.fields import FIELD_KEYS, FIELD_SPECS, ReportFields, coerce_imported, parse_report_form


def test_every_field_has_a_distinct_key():
    assert len(FIELD_SPECS) == 39
    assert len(set(FIELD_KEYS)) == len(FIELD_KEYS)


def test_blank_form_gives_defaults():
    assert parse_report_form({}) == ReportFields()


def test_form_values_are_typed():
    fields = parse_report_form(
        {
            "equipesIntegradas": "2º pel.",
            "numeroRso": "004512",
            "tipoEscala": "DEJEM",
            "tempoTrabalho": "8,5",
            "pelotao": "2º",
            "encarregadoEquipe": "Sgt Souza",
            "tva": "3",
            "multaArbitrada": "150.75",
            "horasPoliciamentoNautico": "2.5",
        }
    )

    assert fields.equipes_integradas == "2º pel."
    assert fields.numero_rso == "004512"
    assert fields.tempo_trabalho == Decimal("8.5")
    assert fields.encarregado_equipe == "Sgt Souza"
    assert fields.tva == 3
    assert fields.multa_arbitrada == Decimal("150.75")
    assert fields.horas_policiamento_nautico == Decimal("2.5")


@pytest.mark.parametrize(
    "key, value",
    [
        ("tva", "11"),
        ("tva", "-1"),
        ("tva", "dois"),
        ("multaArbitrada", "1000"),
        ("multaArbitrada", "10.123"),
        ("tempoTrabalho", "1000"),
        ("horasPoliciamentoNautico", "1.25"),
        ("numeroRso", "1234567"),
        ("numeroRso", "12a"),
        ("encarregadoEquipe", "Souza 2"),
        ("equipesIntegradas", "4º pel."),
        ("tipoEscala", "Extra"),
    ],
)
def test_out_of_bounds_values_are_rejected(key, value):
    with pytest.raises(ValidationError):
        parse_report_form({key: value})


def test_upper_bounds_are_inclusive():
    fields = parse_report_form({"tva": "10", "multaArbitrada": "999.99", "horasPoliciamentoNautico": "999.9"})

    assert fields.tva == 10
    assert fields.multa_arbitrada == Decimal("999.99")
    assert fields.horas_policiamento_nautico == Decimal("999.9")


def test_imported_rows_are_not_bounds_checked():
    fields = coerce_imported({"tva": 42.0, "numeroRso": 123.0, "multaArbitrada": 5000, "unknownColumn": "x"})

    assert fields.tva == 42
    assert fields.numero_rso == "123"
    assert fields.multa_arbitrada == Decimal("5000.00")
    assert fields.tipo_escala == ""


@pytest.mark.parametrize("raw", ["Infinity", float("inf"), "-inf", "NaN", "abc"])
def test_imported_counter_that_is_not_a_number_becomes_zero(raw):
    assert coerce_imported({"tva": raw}).tva == 0


@pytest.mark.parametrize("raw", ["1e30", "Infinity", "NaN", "dez"])
def test_imported_decimal_that_cannot_be_stored_becomes_empty(raw):
    assert coerce_imported({"multaArbitrada": raw}).multa_arbitrada is None


def test_import_rows_survives_extreme_cells():
    from siopamb.transfer.service import import_rows

    records = import_rows([{"tva": "Infinity", "multaArbitrada": "1e30", "submittedBy": "Planilha"}])

    assert records[0].fields.tva == 0
    assert records[0].fields.multa_arbitrada is None
