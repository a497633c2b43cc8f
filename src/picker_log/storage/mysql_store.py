from __future__ import annotations

import asyncio
from typing import Optional

from ..database.bootstrap import KV_TABLE
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone


class MySQLKeyValueStore:
    """Key-value store over a single MySQL table.

    mysql-connector is blocking, so each call runs in a worker thread and the
    coroutine suspends until it completes.
    """

    def __init__(self, conn_factory: DatabaseConnection, *, table: str = KV_TABLE):
        self._conn_factory = conn_factory
        self._table = table

    async def get(self, key: str) -> Optional[str]:
        return await asyncio.to_thread(self._get_sync, key)

    async def set(self, key: str, value: str) -> None:
        await asyncio.to_thread(self._set_sync, key, value)

    def _get_sync(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT store_value
                FROM {self._table}
                WHERE store_key=%s
                """,
                (key,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return r["store_value"]

    def _set_sync(self, key: str, value: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO {self._table} (store_key, store_value)
                VALUES (%s, %s)
                ON DUPLICATE KEY UPDATE store_value=VALUES(store_value)
                """,
                (key, value),
            )
