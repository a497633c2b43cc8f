"""Period bucketing for the statistics view.

Records are folded into calendar-month (``YYYY-MM``) or ISO-week
(``YYYY-W##``) buckets. Weeks start on Monday and week 1 holds the year's
first Thursday, so the key uses the ISO year, which differs from the calendar
year around New Year.

A record whose date cannot be parsed lands in the ``unknown`` bucket, which
has no start instant and sorts after every dated bucket. Bucket totals
therefore always add up to the per-record totals of the whole input.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Optional

from ..common.datetime_utils import try_parse_iso_date
from ..common.numbers import round2
from ..core.constants import UNKNOWN_CATEGORY, UNKNOWN_PERIOD_KEY
from ..core.enums import PeriodMode
from ..entries.model import WorkRecord
from .calculator.base import PayCalculator
from .calculator.standard_calculator import StandardPayCalculator
from .model import CategoryShare, PayTotals, PeriodBucket


def period_key_for(day: date, mode: PeriodMode) -> str:
    if mode == PeriodMode.MONTHLY:
        return f"{day.year:04d}-{day.month:02d}"
    iso_year, iso_week, _ = day.isocalendar()
    return f"{iso_year:04d}-W{iso_week:02d}"


def period_start_for(day: date, mode: PeriodMode) -> datetime:
    """First instant of the month or ISO week containing `day`."""
    if mode == PeriodMode.MONTHLY:
        return datetime(day.year, day.month, 1)
    iso_year, iso_week, _ = day.isocalendar()
    monday = date.fromisocalendar(iso_year, iso_week, 1)
    return datetime(monday.year, monday.month, monday.day)


def record_period_key(record: WorkRecord, mode: PeriodMode) -> str:
    day = try_parse_iso_date(record.date)
    if day is None:
        return UNKNOWN_PERIOD_KEY
    return period_key_for(day, mode)


def aggregate(
    records: Iterable[WorkRecord],
    mode: PeriodMode,
    *,
    calculator: Optional[PayCalculator] = None,
) -> list[PeriodBucket]:
    """Sum gross/net per period, most recent period first."""
    calculator = calculator or StandardPayCalculator()
    mode = PeriodMode(mode)

    sums: dict[str, list[float]] = {}
    starts: dict[str, Optional[datetime]] = {}

    for r in records:
        pay = calculator.compute(r)
        day = try_parse_iso_date(r.date)
        if day is None:
            key, start = UNKNOWN_PERIOD_KEY, None
        else:
            key, start = period_key_for(day, mode), period_start_for(day, mode)

        s = sums.get(key)
        if s is None:
            s = [0.0, 0.0]
            sums[key] = s
            starts[key] = start
        s[0] += pay.gross
        s[1] += pay.net

    buckets = [
        PeriodBucket(period_key=key, gross_sum=s[0], net_sum=s[1], period_start=starts[key])
        for key, s in sums.items()
    ]
    dated = [b for b in buckets if b.period_start is not None]
    undated = [b for b in buckets if b.period_start is None]
    dated.sort(key=lambda b: b.period_start, reverse=True)
    return dated + undated


def summarize(records: Iterable[WorkRecord], *, calculator: Optional[PayCalculator] = None) -> PayTotals:
    """Gross/tax/net totals over the given records (day view footer)."""
    calculator = calculator or StandardPayCalculator()
    gross = tax = net = 0.0
    for r in records:
        pay = calculator.compute(r)
        gross += pay.gross
        tax += pay.tax_amount
        net += pay.net
    return PayTotals(gross=round2(gross), tax=round2(tax), net=round2(net))


def category_breakdown(
    records: Iterable[WorkRecord],
    period_key: str,
    mode: PeriodMode,
    *,
    calculator: Optional[PayCalculator] = None,
) -> list[CategoryShare]:
    """Net pay per category within one period, largest first.

    Categories whose rounded net is not positive are left out.
    """
    calculator = calculator or StandardPayCalculator()
    mode = PeriodMode(mode)

    by_category: dict[str, float] = {}
    for r in records:
        if record_period_key(r, mode) != period_key:
            continue
        name = r.category or UNKNOWN_CATEGORY
        by_category[name] = by_category.get(name, 0.0) + calculator.compute(r).net

    shares = [CategoryShare(category=k, net=round2(v)) for k, v in by_category.items()]
    shares = [s for s in shares if s.net > 0]
    shares.sort(key=lambda s: s.net, reverse=True)
    return shares
