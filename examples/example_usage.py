"""Example: use the core directly (no Flask).

Controllers are a thin layer; logging entries and reading totals only needs
the repository and the payroll/calendar helpers.
"""

import asyncio

from picker_log.calendar.indexer import group_by_date, mark_selection
from picker_log.core.enums import PeriodMode
from picker_log.entries.repository import EntryRepository
from picker_log.entries.service import EntryService
from picker_log.payroll.aggregation import aggregate
from picker_log.storage.memory_store import InMemoryKeyValueStore


async def main():
    repo = EntryRepository(InMemoryKeyValueStore())
    entries = EntryService(repo)

    await entries.create({"date": "2025-10-20", "category": "Blueberry", "payType": "piece", "kgAmount": 42, "unitRate": 3.2})
    await entries.create({"date": "2025-10-21", "category": "Raspberry", "payType": "hourly", "hoursWorked": 7.5, "unitRate": 28})

    records = await repo.load_all()
    for bucket in aggregate(records, PeriodMode.WEEKLY):
        print(bucket.period_key, round(bucket.gross_sum, 2), round(bucket.net_sum, 2))
    print(mark_selection(group_by_date(records), "2025-10-20"))


if __name__ == "__main__":
    asyncio.run(main())
