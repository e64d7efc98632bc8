"""Campos do relatório de atividade.

`ReportFields` is the typed record the ledger stores. `FIELD_SPECS` describes
each field for the form (label, input kind, bounds) and for the spreadsheet
(external key). `parse_report_form` turns raw form values into a
`ReportFields`, raising `ValidationError` on the first bad field;
`coerce_imported` does a lenient conversion for spreadsheet rows.
"""
from __future__ import annotations

from dataclasses import dataclass, fields as dc_fields
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Mapping, Optional, Sequence, Tuple

from ..common.validators import parse_decimal_in_range, parse_int_in_range, require_letters
from ..core.constants import AMOUNT_MAX, COUNTER_MAX, HOURS_MAX, RSO_MAX_DIGITS, WORK_TIME_MAX
from ..core.enums import FormPlatoon, IntegratedTeam, ScaleType
from ..core.exceptions import ValidationError


class FieldKind(str, Enum):
    CHOICE = "choice"
    DIGITS = "digits"
    NAME = "name"
    COUNTER = "counter"
    DECIMAL = "decimal"


@dataclass(frozen=True)
class FieldSpec:
    name: str
    key: str
    label: str
    kind: FieldKind
    choices: Tuple[str, ...] = ()
    maximum: Optional[Decimal] = None
    places: int = 0

    @property
    def step(self) -> str:
        return "1" if self.places == 0 else str(Decimal(1).scaleb(-self.places))


def _choice(name, key, label, enum_cls) -> FieldSpec:
    return FieldSpec(name, key, label, FieldKind.CHOICE, choices=tuple(e.value for e in enum_cls))


def _counter(name, key, label) -> FieldSpec:
    return FieldSpec(name, key, label, FieldKind.COUNTER, maximum=Decimal(COUNTER_MAX))


def _decimal(name, key, label, maximum: str, places: int) -> FieldSpec:
    return FieldSpec(name, key, label, FieldKind.DECIMAL, maximum=Decimal(maximum), places=places)


FIELD_SPECS: Sequence[FieldSpec] = (
    _choice("equipes_integradas", "equipesIntegradas", "Equipes Integradas", IntegratedTeam),
    FieldSpec("numero_rso", "numeroRso", "Número do RSO", FieldKind.DIGITS),
    _choice("tipo_escala", "tipoEscala", "Tipo de Escala", ScaleType),
    _decimal("tempo_trabalho", "tempoTrabalho", "Tempo de Trabalho", WORK_TIME_MAX, 1),
    _choice("pelotao", "pelotao", "Pelotão", FormPlatoon),
    FieldSpec("encarregado_equipe", "encarregadoEquipe", "Encarregado da Equipe", FieldKind.NAME),
    FieldSpec("primeiro_auxiliar", "primeiroAuxiliar", "1º Auxiliar", FieldKind.NAME),
    FieldSpec("segundo_auxiliar", "segundoAuxiliar", "2º Auxiliar", FieldKind.NAME),
    # Fiscalizações
    _counter("fiscalizacao_tcra", "fiscalizacaoTCRA", "Fiscalização de TCRA (un.)"),
    _counter("fiscalizacoes_patio_madeireiro", "fiscalizacoesPatioMadeireiro", "Fisc. Pátio Madeireiro (un.)"),
    _counter("fiscalizacoes_uc", "fiscalizacoesUC", "Fisc. UC (exceto RPPN) (un.)"),
    _counter("fiscalizacoes_rppn", "fiscalizacoesRPPN", "Fisc. RPPN (un.)"),
    _counter("fiscalizacoes_criador_amador", "fiscalizacoesCriadorAmador", "Fisc. Criador Amador (un.)"),
    _counter("fiscalizacoes_caca", "fiscalizacoesCaca", "Fisc. Caça (em AISPA) (un.)"),
    _counter("fiscalizacoes_pesca", "fiscalizacoesPesca", "Fisc. Pesca (em AISPA) (un.)"),
    _counter("fiscalizacoes_piracema", "fiscalizacoesPiracema", "Fisc. em Piracema (un.)"),
    # Ocorrências
    _counter("tva", "tva", "TVA (un.)"),
    _counter("bo_pamb", "boPamb", "BO/PAmb (un.)"),
    _counter("aia", "aia", "AIA (un.)"),
    _decimal("multa_arbitrada", "multaArbitrada", "Multa Arbitrada (R$)", AMOUNT_MAX, 2),
    _counter("area_autuada", "areaAutuada", "Área Autuada (ha)"),
    _counter("palmito_in_natura", "palmitoInNatura", "Palmito in natura (un.)"),
    _decimal("palmito_beneficiado", "palmitoBeneficiado", "Palmito beneficiado (kg)", AMOUNT_MAX, 2),
    _decimal("pescado_apreendido", "pescadoApreendido", "Pescado Apreendido (kg)", AMOUNT_MAX, 2),
    # Apreensões e abordagens
    _counter("animais_apreendidos", "animaisApreendidos", "Animais Apreendidos (un.)"),
    _counter("pessoas_abordadas", "pessoasAbordadas", "Pessoas Abordadas (un.)"),
    _counter("pessoas_autuadas_aia", "pessoasAutuadasAIA", "Pessoas Autuadas em AIA (un.)"),
    _counter("pessoas_presas", "pessoasPresas", "Pessoas Presas (un.)"),
    _counter("pessoas_foragidas", "pessoasForagidas", "Foragidos Capturados (un.)"),
    _counter("armas_fogo_apreendidas", "armasFogoApreendidas", "Armas de Fogo Apreendidas (un.)"),
    _counter("armas_brancas_apreendidas", "armasBrancasApreendidas", "Armas Brancas Apreendidas (un.)"),
    _counter("municoes_apreendidas", "municoesApreendidas", "Munições Apreendidas (un.)"),
    _decimal("entorpecentes_apreendidos", "entorpecentesApreendidos", "Entorpecentes Apreendidos (kg)", AMOUNT_MAX, 2),
    # Vistorias
    _counter("embarcacoes_vistoriadas", "embarcacoesVistoriadas", "Embarcações Vistoriadas (un.)"),
    _counter("embarcacoes_apreendidas", "embarcacoesApreendidas", "Embarcações Apreendidas (un.)"),
    _counter("veiculos_vistoriados", "veiculosVistoriados", "Veículos Vistoriados (un.)"),
    _counter("veiculos_apreendidos", "veiculosApreendidos", "Veículos Apreendidos (un.)"),
    _counter("veiculos_recuperados", "veiculosRecuperados", "Veículos Recuperados (un.)"),
    # Outros
    _decimal("horas_policiamento_nautico", "horasPoliciamentoNautico", "Horas de Policiamento Náutico", HOURS_MAX, 1),
)

FIELD_NAMES: Tuple[str, ...] = tuple(spec.name for spec in FIELD_SPECS)
FIELD_KEYS: Tuple[str, ...] = tuple(spec.key for spec in FIELD_SPECS)


@dataclass(frozen=True)
class ReportFields:
    """Valores do formulário, já validados e tipados."""

    equipes_integradas: str = ""
    numero_rso: str = ""
    tipo_escala: str = ""
    tempo_trabalho: Optional[Decimal] = None
    pelotao: str = ""
    encarregado_equipe: str = ""
    primeiro_auxiliar: str = ""
    segundo_auxiliar: str = ""
    fiscalizacao_tcra: int = 0
    fiscalizacoes_patio_madeireiro: int = 0
    fiscalizacoes_uc: int = 0
    fiscalizacoes_rppn: int = 0
    fiscalizacoes_criador_amador: int = 0
    fiscalizacoes_caca: int = 0
    fiscalizacoes_pesca: int = 0
    fiscalizacoes_piracema: int = 0
    tva: int = 0
    bo_pamb: int = 0
    aia: int = 0
    multa_arbitrada: Optional[Decimal] = None
    area_autuada: int = 0
    palmito_in_natura: int = 0
    palmito_beneficiado: Optional[Decimal] = None
    pescado_apreendido: Optional[Decimal] = None
    animais_apreendidos: int = 0
    pessoas_abordadas: int = 0
    pessoas_autuadas_aia: int = 0
    pessoas_presas: int = 0
    pessoas_foragidas: int = 0
    armas_fogo_apreendidas: int = 0
    armas_brancas_apreendidas: int = 0
    municoes_apreendidas: int = 0
    entorpecentes_apreendidos: Optional[Decimal] = None
    embarcacoes_vistoriadas: int = 0
    embarcacoes_apreendidas: int = 0
    veiculos_vistoriados: int = 0
    veiculos_apreendidos: int = 0
    veiculos_recuperados: int = 0
    horas_policiamento_nautico: Optional[Decimal] = None

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in dc_fields(self)}


def parse_field(spec: FieldSpec, raw: Any):
    if spec.kind == FieldKind.CHOICE:
        value = (str(raw) if raw is not None else "").strip()
        if value and value not in spec.choices:
            raise ValidationError(f"{spec.label}: opção inválida")
        return value

    if spec.kind == FieldKind.DIGITS:
        value = (str(raw) if raw is not None else "").strip()
        if value and (not value.isdigit() or len(value) > RSO_MAX_DIGITS):
            raise ValidationError(f"{spec.label}: máximo {RSO_MAX_DIGITS} dígitos numéricos")
        return value

    if spec.kind == FieldKind.NAME:
        return require_letters(raw, spec.label, allow_blank=True)

    if spec.kind == FieldKind.COUNTER:
        return parse_int_in_range(raw, spec.label, minimum=0, maximum=int(spec.maximum))

    return parse_decimal_in_range(raw, spec.label, maximum=spec.maximum, places=spec.places)


def parse_report_form(form: Mapping[str, Any]) -> ReportFields:
    """Build a `ReportFields` from a flat form mapping keyed by external keys."""
    values = {spec.name: parse_field(spec, form.get(spec.key)) for spec in FIELD_SPECS}
    return ReportFields(**values)


def _lenient(spec: FieldSpec, raw: Any):
    if raw is None:
        return 0 if spec.kind == FieldKind.COUNTER else (None if spec.kind == FieldKind.DECIMAL else "")

    if spec.kind == FieldKind.COUNTER:
        try:
            return int(Decimal(str(raw).strip()))
        except (InvalidOperation, ValueError, OverflowError):
            return 0

    if spec.kind == FieldKind.DECIMAL:
        try:
            number = Decimal(str(raw).strip().replace(",", "."))
        except InvalidOperation:
            return None
        if not number.is_finite():
            return None
        try:
            return number.quantize(Decimal(1).scaleb(-spec.places))
        except InvalidOperation:
            # Too many digits for the context precision
            return None

    text = str(raw).strip()
    if spec.kind == FieldKind.DIGITS and text.endswith(".0"):
        # Spreadsheets hand numeric-looking text back as floats.
        text = text[:-2]
    return text


def coerce_imported(row: Mapping[str, Any]) -> ReportFields:
    """Lenient conversion of an imported row; no bounds are enforced."""
    return ReportFields(**{spec.name: _lenient(spec, row.get(spec.key)) for spec in FIELD_SPECS})
