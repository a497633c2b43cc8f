from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class StoreResult:
    """Outcome of a repository mutation.

    Write failures are logged by the repository and reported here, so callers
    can retry or notify instead of assuming the write landed.
    """

    ok: bool
    error: Optional[str] = None

    @classmethod
    def success(cls) -> "StoreResult":
        return cls(ok=True)

    @classmethod
    def failure(cls, error: str) -> "StoreResult":
        return cls(ok=False, error=error)
