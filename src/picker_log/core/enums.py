from __future__ import annotations

from enum import Enum


class PayType(str, Enum):
    """How a work record is paid."""

    PIECE = "piece"
    HOURLY = "hourly"


class PieceUnit(str, Enum):
    """Quantity unit for piece-rate records."""

    KG = "kg"
    PUNNET = "punnet"
    BUCKET = "bucket"


class PeriodMode(str, Enum):
    """Bucket size used by the statistics report."""

    MONTHLY = "monthly"
    WEEKLY = "weekly"
