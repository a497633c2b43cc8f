from __future__ import annotations

from typing import Optional


class InMemoryKeyValueStore:
    """Dict-backed store; process-local, lost on restart."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value
