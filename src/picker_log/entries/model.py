from __future__ import annotations

import time
import uuid
from dataclasses import dataclass, replace
from typing import Any, Optional

from ..core.enums import PayType, PieceUnit

# Persisted (camelCase) field name -> WorkRecord attribute.
_FIELD_MAP = {
    "id": "id",
    "date": "date",
    "category": "category",
    "payType": "pay_type",
    "quantityUnit": "quantity_unit",
    "kgAmount": "kg_amount",
    "punnetCount": "punnet_count",
    "bucketCount": "bucket_count",
    "hoursWorked": "hours_worked",
    "unitRate": "unit_rate",
    "taxPercent": "tax_percent",
    "comment": "comment",
}

_QUANTITY_FIELDS = {
    PieceUnit.KG: "kg_amount",
    PieceUnit.PUNNET: "punnet_count",
    PieceUnit.BUCKET: "bucket_count",
}


@dataclass(frozen=True)
class WorkRecord:
    """Domain entity: one day's logged work.

    `date` stays a YYYY-MM-DD string so it can serve as grouping and sort key
    directly; it is parsed only where calendar arithmetic is needed.
    """

    id: str
    date: str
    category: str
    pay_type: PayType
    unit_rate: float = 0.0
    tax_percent: float = 0.0
    quantity_unit: Optional[PieceUnit] = None
    kg_amount: Optional[float] = None
    punnet_count: Optional[float] = None
    bucket_count: Optional[float] = None
    hours_worked: Optional[float] = None
    comment: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping; unset optional fields are left out."""
        out: dict[str, Any] = {}
        for json_name, attr in _FIELD_MAP.items():
            value = getattr(self, attr)
            if value is None:
                continue
            if isinstance(value, (PayType, PieceUnit)):
                value = value.value
            out[json_name] = value
        return out

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "WorkRecord":
        """Build from a persisted/JSON mapping.

        Raises ValueError/KeyError when the identity fields or pay type are
        missing or unknown. An unknown quantity unit is dropped (kg default).
        """
        record_id = data["id"]
        record_date = data["date"]
        if not isinstance(record_id, str) or not record_id:
            raise ValueError("id must be a non-empty string")
        if not isinstance(record_date, str):
            raise ValueError("date must be a string")

        unit_raw = data.get("quantityUnit")
        try:
            unit = PieceUnit(unit_raw) if unit_raw is not None else None
        except ValueError:
            unit = None

        return cls(
            id=record_id,
            date=record_date,
            category=str(data.get("category") or ""),
            pay_type=PayType(data["payType"]),
            unit_rate=data.get("unitRate", 0.0),
            tax_percent=data.get("taxPercent", 0.0),
            quantity_unit=unit,
            kg_amount=data.get("kgAmount"),
            punnet_count=data.get("punnetCount"),
            bucket_count=data.get("bucketCount"),
            hours_worked=data.get("hoursWorked"),
            comment=data.get("comment"),
        )

    def normalized(self) -> "WorkRecord":
        """Keep only the quantity field that matches the pay type and unit."""
        if self.pay_type == PayType.HOURLY:
            return replace(self, quantity_unit=None, kg_amount=None, punnet_count=None, bucket_count=None)

        unit = self.quantity_unit or PieceUnit.KG
        cleared = {attr: None for attr in _QUANTITY_FIELDS.values() if attr != _QUANTITY_FIELDS[unit]}
        return replace(self, quantity_unit=unit, hours_worked=None, **cleared)

    def piece_quantity(self) -> Optional[float]:
        """Raw quantity for the record's unit (kg when the unit is unset)."""
        unit = self.quantity_unit or PieceUnit.KG
        return getattr(self, _QUANTITY_FIELDS[unit])


def new_record_id(*, now_ms: Optional[int] = None) -> str:
    """Fresh unique id that sorts by creation time.

    Millisecond timestamp plus a random suffix, so two records created in the
    same millisecond still get distinct ids.
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    return f"{now_ms:013d}-{uuid.uuid4().hex[:8]}"
