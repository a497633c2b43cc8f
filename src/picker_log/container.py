from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .calendar.service import CalendarService
from .database.bootstrap import apply_schema
from .database.connection import DBConfig, DatabaseConnection
from .entries.repository import EntryRepository
from .entries.service import EntryService
from .entries.store import KeyValueStore
from .payroll.calculator.standard_calculator import StandardPayCalculator
from .payroll.service import PayrollReportService
from .storage.memory_store import InMemoryKeyValueStore
from .storage.mysql_store import MySQLKeyValueStore


@dataclass(frozen=True)
class Container:
    store: KeyValueStore
    entries_repo: EntryRepository

    entry_service: EntryService
    payroll_report_service: PayrollReportService
    calendar_service: CalendarService


def build_store(*, backend: str, db_config: Optional[dict] = None, auto_init_db: bool = False) -> KeyValueStore:
    backend = (backend or "memory").lower()
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config or {}))
        if auto_init_db:
            apply_schema(conn)
        return MySQLKeyValueStore(conn)
    raise ValueError(f"Unknown STORE_BACKEND: {backend!r}")


def build_container(*, store: KeyValueStore) -> Container:
    calculator = StandardPayCalculator()
    entries_repo = EntryRepository(store)

    return Container(
        store=store,
        entries_repo=entries_repo,
        entry_service=EntryService(entries_repo),
        payroll_report_service=PayrollReportService(entries_repo, calculator=calculator),
        calendar_service=CalendarService(entries_repo, calculator=calculator),
    )
