from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .fields import ReportFields


@dataclass(frozen=True)
class ActivityReport:
    """Relatório de atividade: criado uma vez, nunca alterado."""

    report_id: str
    account_id: Optional[str]
    submitted_by: str
    submitted_at: Optional[datetime]
    fields: ReportFields

    @property
    def unit(self) -> str:
        return self.fields.equipes_integradas

    @property
    def scale_type(self) -> str:
        return self.fields.tipo_escala
