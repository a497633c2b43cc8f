from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..entries.model import WorkRecord
from ..entries.repository import EntryRepository
from ..payroll.aggregation import summarize
from ..payroll.calculator.base import PayCalculator
from ..payroll.calculator.standard_calculator import StandardPayCalculator
from ..payroll.model import PayResult, PayTotals
from .indexer import DayMark, entries_for_day, group_by_date, mark_selection


@dataclass(frozen=True)
class CalendarView:
    marks: dict[str, DayMark]
    selected: Optional[str]
    day_entries: list[tuple[WorkRecord, PayResult]]
    day_totals: PayTotals

    def to_dict(self) -> dict:
        return {
            "selected": self.selected,
            "marks": {day: m.to_dict() for day, m in self.marks.items()},
            "day": {
                "entries": [{**r.to_dict(), "pay": pay.to_dict()} for r, pay in self.day_entries],
                "totals": self.day_totals.to_dict(),
            },
        }


class CalendarService:
    def __init__(self, entries: EntryRepository, *, calculator: Optional[PayCalculator] = None):
        self._entries = entries
        self._calculator = calculator or StandardPayCalculator()

    async def build_view(self, selected: Optional[str]) -> CalendarView:
        groups = group_by_date(await self._entries.load_all())
        day = entries_for_day(groups, selected) if selected else []
        return CalendarView(
            marks=mark_selection(groups, selected),
            selected=selected,
            day_entries=[(r, self._calculator.compute(r)) for r in day],
            day_totals=summarize(day, calculator=self._calculator),
        )
