from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence, Type

from ..core.enums import IntegratedTeam, ScaleType
from ..reports.model import ActivityReport


def _count(values: Iterable[str], enum_cls: Type) -> Dict[str, int]:
    counts = {member.value: 0 for member in enum_cls}
    for value in values:
        if value in counts:
            counts[value] += 1
    return counts


def count_by_unit(reports: Iterable[ActivityReport]) -> Dict[str, int]:
    """Reports per integrated team; every known team present, unknown values ignored."""
    return _count((r.unit for r in reports), IntegratedTeam)


def count_by_scale_type(reports: Iterable[ActivityReport]) -> Dict[str, int]:
    return _count((r.scale_type for r in reports), ScaleType)


def as_chart_series(counts: Dict[str, int]) -> List[dict]:
    return [{"name": name, "value": value} for name, value in counts.items()]


@dataclass(frozen=True)
class DashboardStats:
    total: int
    by_unit: List[dict]
    by_scale_type: List[dict]

    def to_json(self) -> dict:
        return {"total": self.total, "unit": self.by_unit, "scaleType": self.by_scale_type}


class StatsService:
    """Read-side aggregation for the admin dashboard; recomputed on each call."""

    def dashboard(self, reports: Sequence[ActivityReport]) -> DashboardStats:
        return DashboardStats(
            total=len(reports),
            by_unit=as_chart_series(count_by_unit(reports)),
            by_scale_type=as_chart_series(count_by_scale_type(reports)),
        )
