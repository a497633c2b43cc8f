"""Record builders and fake stores shared by the test modules."""

from __future__ import annotations

import asyncio
from typing import Optional

from picker_log.core.enums import PayType, PieceUnit
from picker_log.entries.model import WorkRecord


def run(coro):
    return asyncio.run(coro)


class FailingStore:
    """Store whose reads and/or writes blow up, like a full or locked disk."""

    def __init__(self, *, fail_get: bool = False, fail_set: bool = True, initial: Optional[str] = None):
        self.fail_get = fail_get
        self.fail_set = fail_set
        self.value = initial
        self.set_calls = 0

    async def get(self, key: str) -> Optional[str]:
        if self.fail_get:
            raise OSError("storage unavailable")
        return self.value

    async def set(self, key: str, value: str) -> None:
        self.set_calls += 1
        if self.fail_set:
            raise OSError("disk full")
        self.value = value


def piece(record_id: str, day: str, *, kg: float = 10, rate: float = 5, tax: float = 15, category: str = "Blueberry"):
    return WorkRecord(
        id=record_id,
        date=day,
        category=category,
        pay_type=PayType.PIECE,
        quantity_unit=PieceUnit.KG,
        kg_amount=kg,
        unit_rate=rate,
        tax_percent=tax,
    )


def hourly(record_id: str, day: str, *, hours: float = 3.5, rate: float = 20, tax: float = 0, category: str = "Strawberry"):
    return WorkRecord(
        id=record_id,
        date=day,
        category=category,
        pay_type=PayType.HOURLY,
        hours_worked=hours,
        unit_rate=rate,
        tax_percent=tax,
    )


