"""Create the key-value table used by the MySQL store backend."""

from __future__ import annotations

import importlib

from dotenv import load_dotenv

from picker_log.config import get_settings_module
from picker_log.database.bootstrap import apply_schema
from picker_log.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(DatabaseConnection.get_instance(DBConfig.from_dict(db_config)))
    print(f"OK: kv_store ready in {db_config['database']} at {db_config['host']}:{db_config['port']}")


if __name__ == "__main__":
    main()
