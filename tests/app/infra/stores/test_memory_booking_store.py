"""Testes do MemoryBookingStore."""

from __future__ import annotations

import pytest

from app.domain.booking import BookingRecord, BookingStatus
from app.infra.stores import MemoryBookingStore
from app.protocols.booking_store import BookingStoreProtocol


def _record(**overrides: object) -> BookingRecord:
    data: dict[str, object] = {"id": "", "slot_id": "slot-a", "name": "Taro"}
    data.update(overrides)
    return BookingRecord(**data)


class TestMemoryBookingStore:
    """Store de reservas em memoria."""

    def test_implements_protocol(self) -> None:
        assert isinstance(MemoryBookingStore(), BookingStoreProtocol)

    @pytest.mark.asyncio
    async def test_add_assigns_id_and_persists(self) -> None:
        store = MemoryBookingStore()

        saved = await store.add(_record(id="ignored"))

        assert saved.id and saved.id != "ignored"
        assert await store.get(saved.id) == saved
        assert [record.id for record in await store.list_all()] == [saved.id]

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self) -> None:
        assert await MemoryBookingStore().get("missing") is None

    @pytest.mark.asyncio
    async def test_update_status(self) -> None:
        store = MemoryBookingStore()
        saved = await store.add(_record())

        updated = await store.update_status(saved.id, BookingStatus.SYNCED)

        assert updated is not None
        assert updated.status is BookingStatus.SYNCED
        stored = await store.get(saved.id)
        assert stored is not None and stored.status is BookingStatus.SYNCED

    @pytest.mark.asyncio
    async def test_update_status_missing_returns_none(self) -> None:
        assert await MemoryBookingStore().update_status("x", BookingStatus.DELETED) is None

    @pytest.mark.asyncio
    async def test_returned_records_are_copies(self) -> None:
        store = MemoryBookingStore([_record(id="r1")])

        first = await store.get("r1")
        second = await store.get("r1")

        assert first == second
        assert first is not second
