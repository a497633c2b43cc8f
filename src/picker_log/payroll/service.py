from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional

from ..core.enums import PeriodMode
from ..entries.repository import EntryRepository
from ..entries.service import record_from_payload
from .aggregation import aggregate, category_breakdown
from .calculator.base import PayCalculator
from .calculator.standard_calculator import StandardPayCalculator
from .model import CategoryShare, PayResult, PeriodBucket


@dataclass(frozen=True)
class StatsReport:
    mode: PeriodMode
    buckets: list[PeriodBucket]
    current_period_key: Optional[str]
    breakdown: list[CategoryShare]

    def to_dict(self) -> dict:
        return {
            "period": self.mode.value,
            "buckets": [b.to_dict() for b in self.buckets],
            "currentPeriodKey": self.current_period_key,
            "breakdown": [s.to_dict() for s in self.breakdown],
        }


class PayrollReportService:
    def __init__(
        self,
        entries: EntryRepository,
        *,
        calculator: Optional[PayCalculator] = None,
    ):
        self._entries = entries
        self._calculator = calculator or StandardPayCalculator()

    async def build_stats(self, mode: PeriodMode) -> StatsReport:
        """Period buckets plus a per-category split of the most recent one."""
        records = await self._entries.load_all()
        buckets = aggregate(records, mode, calculator=self._calculator)

        current = buckets[0].period_key if buckets else None
        breakdown = category_breakdown(records, current, mode, calculator=self._calculator) if current else []
        return StatsReport(mode=PeriodMode(mode), buckets=buckets, current_period_key=current, breakdown=breakdown)

    def preview(self, payload: Mapping[str, Any], *, today: date) -> PayResult:
        """Pay for an unsaved entry form."""
        record = record_from_payload(payload, record_id="preview", default_date=today)
        return self._calculator.compute(record)
