from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class PayResult:
    """Derived pay figures for one record, each rounded to 2 dp."""

    gross: float
    tax_amount: float
    net: float

    def to_dict(self) -> dict:
        return {"gross": self.gross, "taxAmount": self.tax_amount, "net": self.net}


@dataclass(frozen=True)
class PayTotals:
    """Summed pay figures over several records (e.g. one calendar day)."""

    gross: float
    tax: float
    net: float

    def to_dict(self) -> dict:
        return {"gross": self.gross, "tax": self.tax, "net": self.net}


@dataclass(frozen=True)
class PeriodBucket:
    """Read-model for the statistics list: one month or one ISO week.

    `period_start` is None only for the unknown-period bucket.
    """

    period_key: str
    gross_sum: float
    net_sum: float
    period_start: Optional[datetime]

    def to_dict(self) -> dict:
        return {
            "periodKey": self.period_key,
            "grossSum": self.gross_sum,
            "netSum": self.net_sum,
            "periodStart": self.period_start.isoformat() if self.period_start else None,
        }


@dataclass(frozen=True)
class CategoryShare:
    category: str
    net: float

    def to_dict(self) -> dict:
        return {"category": self.category, "net": self.net}
