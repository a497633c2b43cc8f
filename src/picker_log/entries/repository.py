from __future__ import annotations

import json
import logging
from typing import Any, Optional, Sequence

from ..core.constants import STORAGE_KEY
from ..core.result import StoreResult
from .model import WorkRecord
from .store import KeyValueStore

logger = logging.getLogger(__name__)


def sort_entries(entries: Sequence[WorkRecord]) -> list[WorkRecord]:
    """Newest date first, id descending on ties (both lexicographic)."""
    return sorted(entries, key=lambda e: (e.date, e.id), reverse=True)


class EntryRepository:
    """All work records, persisted as one JSON array under a versioned key.

    Every mutation is a whole-collection read-modify-write. There is no
    locking: overlapping mutations race and the last write wins, so callers
    serialize mutating calls per user action.
    """

    def __init__(self, store: KeyValueStore, *, key: str = STORAGE_KEY):
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    async def load_all(self) -> list[WorkRecord]:
        """Load every record in canonical order; never raises."""
        try:
            raw = await self._store.get(self._key)
        except Exception:
            logger.exception("Failed to read entries from store key %s", self._key)
            return []

        records, _ = self._decode(raw)
        return sort_entries(records)

    async def get_by_id(self, record_id: str) -> Optional[WorkRecord]:
        for record in await self.load_all():
            if record.id == record_id:
                return record
        return None

    async def upsert(self, record: WorkRecord) -> StoreResult:
        """Replace the record with the same id in place, or add it."""
        try:
            entries, unparsed = await self._read_for_write()
        except Exception as e:
            logger.exception("Failed to read entries before upsert; nothing written")
            return StoreResult.failure(f"upsert failed: {e}")

        for i, existing in enumerate(entries):
            if existing.id == record.id:
                entries[i] = record
                break
        else:
            entries.insert(0, record)
        return await self._save_all(entries, _without_id(unparsed, record.id), action="upsert")

    async def remove(self, record_id: str) -> StoreResult:
        """Drop the record with this id; an unknown id is a no-op."""
        try:
            entries, unparsed = await self._read_for_write()
        except Exception as e:
            logger.exception("Failed to read entries before remove; nothing written")
            return StoreResult.failure(f"remove failed: {e}")

        kept = [e for e in entries if e.id != record_id]
        return await self._save_all(kept, _without_id(unparsed, record_id), action="remove")

    async def _read_for_write(self) -> tuple[list[WorkRecord], list[Any]]:
        """Current records plus the raw items that did not parse.

        Unlike load_all, a failing store read propagates so a mutation never
        writes over data it could not see.
        """
        return self._decode(await self._store.get(self._key))

    def _decode(self, raw: Optional[str]) -> tuple[list[WorkRecord], list[Any]]:
        if not raw:
            return [], []

        try:
            parsed = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Stored entries under %s are not valid JSON; treating as empty", self._key)
            return [], []

        if not isinstance(parsed, list):
            logger.warning("Stored entries under %s are not an array; treating as empty", self._key)
            return [], []

        records: list[WorkRecord] = []
        unparsed: list[Any] = []
        for index, item in enumerate(parsed):
            if not isinstance(item, dict):
                logger.warning("Skipping non-object entry at index %d", index)
                unparsed.append(item)
                continue
            try:
                records.append(WorkRecord.from_dict(item))
            except (KeyError, TypeError, ValueError) as e:
                logger.warning("Skipping malformed entry at index %d: %s", index, e)
                unparsed.append(item)
        return records, unparsed

    async def _save_all(self, entries: Sequence[WorkRecord], unparsed: Sequence[Any], *, action: str) -> StoreResult:
        # Items that failed to parse are written back untouched after the records.
        payload = json.dumps([e.to_dict() for e in sort_entries(entries)] + list(unparsed))
        try:
            await self._store.set(self._key, payload)
        except Exception as e:
            logger.exception("Failed to %s entries in store key %s", action, self._key)
            return StoreResult.failure(f"{action} failed: {e}")
        logger.debug("Saved %d entries after %s", len(entries), action)
        return StoreResult.success()


def _without_id(items: Sequence[Any], record_id: str) -> list[Any]:
    return [item for item in items if not (isinstance(item, dict) and item.get("id") == record_id)]
