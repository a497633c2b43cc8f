from __future__ import annotations

from ...common.numbers import as_number, clamp, round2
from ...core.enums import PayType
from ...entries.model import WorkRecord
from ..model import PayResult
from .base import PayCalculator


class StandardPayCalculator(PayCalculator):
    """Standard rule: rate x quantity (or hours), tax withheld at a flat percent.

    Never raises: missing or invalid numbers count as 0, negative rates and
    quantities are floored at 0 and the tax percent is clamped to [0, 100].
    Gross is rounded on its own, so gross may differ from tax + net by 0.01.
    """

    def compute(self, record: WorkRecord) -> PayResult:
        rate = max(0.0, as_number(record.unit_rate))
        tax_rate = clamp(as_number(record.tax_percent), 0.0, 100.0) / 100

        if record.pay_type == PayType.PIECE:
            quantity = max(0.0, as_number(record.piece_quantity()))
        else:
            quantity = max(0.0, as_number(record.hours_worked))

        gross_raw = rate * quantity
        tax_amount = round2(gross_raw * tax_rate)
        net = max(0.0, round2(gross_raw - tax_amount))
        return PayResult(gross=round2(gross_raw), tax_amount=tax_amount, net=net)


_default = StandardPayCalculator()


def compute_pay(record: WorkRecord) -> PayResult:
    return _default.compute(record)
