from __future__ import annotations

import logging

from .mysql_base import db_cursor

logger = logging.getLogger(__name__)

KV_TABLE = "kv_store"

SCHEMA_SQL = f"""
CREATE TABLE IF NOT EXISTS {KV_TABLE} (
    store_key VARCHAR(191) NOT NULL PRIMARY KEY,
    store_value LONGTEXT NOT NULL,
    updated_at TIMESTAMP NOT NULL DEFAULT CURRENT_TIMESTAMP ON UPDATE CURRENT_TIMESTAMP
)
"""


def apply_schema(conn_factory) -> None:
    """Create the key-value table (idempotent: CREATE IF NOT EXISTS)."""
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute(SCHEMA_SQL)
    logger.info("Key-value table %s ready", KV_TABLE)
