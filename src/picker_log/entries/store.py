from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """Platform key-value store used exclusively by the entry repository."""

    async def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    async def set(self, key: str, value: str) -> None:
        raise NotImplementedError
