from __future__ import annotations

from abc import ABC, abstractmethod

from ...entries.model import WorkRecord
from ..model import PayResult


class PayCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute(self, record: WorkRecord) -> PayResult:
        raise NotImplementedError
