"""Store de reservas em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

from uuid import uuid4

from app.domain.booking import BookingRecord, BookingStatus
from app.protocols.booking_store import BookingStoreProtocol


class MemoryBookingStore(BookingStoreProtocol):
    """Store de reservas em memória: apenas para dev/test."""

    def __init__(self, records: list[BookingRecord] | None = None) -> None:
        self._records: dict[str, BookingRecord] = {record.id: record for record in records or []}

    async def list_all(self) -> list[BookingRecord]:
        return [record.model_copy() for record in self._records.values()]

    async def get(self, booking_id: str) -> BookingRecord | None:
        record = self._records.get(booking_id)
        return record.model_copy() if record is not None else None

    async def add(self, record: BookingRecord) -> BookingRecord:
        stored = record.model_copy(update={"id": uuid4().hex[:20]})
        self._records[stored.id] = stored
        return stored.model_copy()

    async def update_status(
        self,
        booking_id: str,
        status: BookingStatus,
    ) -> BookingRecord | None:
        record = self._records.get(booking_id)
        if record is None:
            return None
        updated = record.model_copy(update={"status": status})
        self._records[booking_id] = updated
        return updated.model_copy()
