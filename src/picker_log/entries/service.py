from __future__ import annotations

from datetime import date
from typing import Any, Callable, Mapping, Optional

from ..common.datetime_utils import format_iso_date, today_local, try_parse_iso_date
from ..core.constants import DEFAULT_TAX_PERCENT
from ..core.enums import PayType, PieceUnit
from ..core.exceptions import NotFoundError, ValidationError
from ..core.result import StoreResult
from .model import WorkRecord, new_record_id
from .repository import EntryRepository


def record_from_payload(
    payload: Mapping[str, Any],
    *,
    record_id: str,
    default_date: date,
) -> WorkRecord:
    """Validate a camelCase payload from the UI and build a normalized record.

    Numeric fields are passed through untouched; the pay calculator coerces
    them. Only identity, date and the enum fields are checked here.
    """
    raw_date = payload.get("date") or format_iso_date(default_date)
    if try_parse_iso_date(raw_date) is None:
        raise ValidationError(f"date must be YYYY-MM-DD, got {raw_date!r}")

    try:
        pay_type = PayType(payload.get("payType") or PayType.PIECE.value)
    except ValueError:
        raise ValidationError(f"unknown payType {payload.get('payType')!r}") from None

    unit_raw = payload.get("quantityUnit")
    try:
        unit = PieceUnit(unit_raw) if unit_raw else None
    except ValueError:
        raise ValidationError(f"unknown quantityUnit {unit_raw!r}") from None

    comment = payload.get("comment")
    comment = comment.strip() if isinstance(comment, str) and comment.strip() else None

    tax_percent = payload.get("taxPercent")
    record = WorkRecord(
        id=record_id,
        date=raw_date.strip(),
        category=str(payload.get("category") or "").strip(),
        pay_type=pay_type,
        unit_rate=payload.get("unitRate", 0.0),
        tax_percent=DEFAULT_TAX_PERCENT if tax_percent is None else tax_percent,
        quantity_unit=unit,
        kg_amount=payload.get("kgAmount"),
        punnet_count=payload.get("punnetCount"),
        bucket_count=payload.get("bucketCount"),
        hours_worked=payload.get("hoursWorked"),
        comment=comment,
    )
    return record.normalized()


class EntryService:
    def __init__(
        self,
        entries: EntryRepository,
        *,
        today: Optional[Callable[[], date]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self._entries = entries
        self._today = today or today_local
        self._new_id = id_factory or new_record_id

    async def list_entries(self) -> list[WorkRecord]:
        return await self._entries.load_all()

    async def get(self, record_id: str) -> WorkRecord:
        record = await self._entries.get_by_id(record_id)
        if record is None:
            raise NotFoundError(f"entry {record_id} not found")
        return record

    def build_new(self, payload: Mapping[str, Any]) -> WorkRecord:
        """Record with a fresh id and today's date unless one is given."""
        return record_from_payload(payload, record_id=self._new_id(), default_date=self._today())

    async def create(self, payload: Mapping[str, Any]) -> tuple[WorkRecord, StoreResult]:
        record = self.build_new(payload)
        return record, await self._entries.upsert(record)

    async def replace(self, record_id: str, payload: Mapping[str, Any]) -> tuple[WorkRecord, StoreResult]:
        """Whole-record replacement; the id is immutable and must exist."""
        if not record_id:
            raise ValidationError("id is required")
        body_id = payload.get("id")
        if body_id is not None and body_id != record_id:
            raise ValidationError("id cannot be changed")

        await self.get(record_id)
        record = record_from_payload(payload, record_id=record_id, default_date=self._today())
        return record, await self._entries.upsert(record)

    async def delete(self, record_id: str) -> StoreResult:
        return await self._entries.remove(record_id)
