from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Mapping, Optional, Sequence

from ..entries.model import WorkRecord


@dataclass(frozen=True)
class DayMark:
    """Calendar marker for one date."""

    has_entries: bool = False
    is_selected: bool = False

    def to_dict(self) -> dict:
        return {"hasEntries": self.has_entries, "isSelected": self.is_selected}


def group_by_date(records: Iterable[WorkRecord]) -> dict[str, list[WorkRecord]]:
    """Records per YYYY-MM-DD date, newest date first.

    Within a date, records keep their input order.
    """
    groups: dict[str, list[WorkRecord]] = {}
    for r in records:
        groups.setdefault(r.date, []).append(r)
    return {day: groups[day] for day in sorted(groups, reverse=True)}


def mark_selection(
    groups: Mapping[str, Sequence[WorkRecord]],
    selected_date: Optional[str],
) -> dict[str, DayMark]:
    """Entry dots for every grouped date, with the selection laid over them.

    Selecting a date never clears its entries marker.
    """
    marks = {day: DayMark(has_entries=bool(items)) for day, items in groups.items()}
    if selected_date:
        marks[selected_date] = replace(marks.get(selected_date, DayMark()), is_selected=True)
    return marks


def entries_for_day(groups: Mapping[str, list[WorkRecord]], day: str) -> list[WorkRecord]:
    return list(groups.get(day, []))
