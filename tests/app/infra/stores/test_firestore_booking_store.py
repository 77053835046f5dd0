"""Testes do FirestoreBookingStore com client Firestore mockado."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from google.api_core.exceptions import ServiceUnavailable

from app.domain.booking import BookingRecord, BookingStatus
from app.infra.stores import FirestoreBookingStore
from utils.errors import FirestoreUnavailableError


def _snapshot(doc_id: str, data: dict[str, object] | None) -> SimpleNamespace:
    return SimpleNamespace(
        id=doc_id,
        exists=data is not None,
        to_dict=lambda: data,
    )


def _build_store() -> tuple[FirestoreBookingStore, MagicMock, MagicMock]:
    client = MagicMock()
    collection = MagicMock()
    client.collection.return_value = collection
    return FirestoreBookingStore(client, app_id="seminar"), client, collection


class TestFirestoreBookingStore:
    """Leitura e escrita de reservas no Firestore."""

    def test_collection_path_uses_app_id(self) -> None:
        store, _, _ = _build_store()

        assert store.collection_path == "artifacts/seminar/public/data/bookings"

    @pytest.mark.asyncio
    async def test_list_all_maps_documents(self) -> None:
        store, client, collection = _build_store()
        collection.stream.return_value = [
            _snapshot("b1", {"slotId": "slot-a", "status": "pending"}),
            _snapshot("b2", {"slotId": "slot-b", "status": "deleted"}),
        ]

        records = await store.list_all()

        client.collection.assert_called_with("artifacts/seminar/public/data/bookings")
        assert [(r.id, r.slot_id, r.status) for r in records] == [
            ("b1", "slot-a", BookingStatus.PENDING),
            ("b2", "slot-b", BookingStatus.DELETED),
        ]

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self) -> None:
        store, _, collection = _build_store()
        collection.document.return_value.get.return_value = _snapshot("x", None)

        assert await store.get("x") is None

    @pytest.mark.asyncio
    async def test_add_writes_document_with_generated_id(self) -> None:
        store, _, collection = _build_store()
        doc_ref = MagicMock()
        doc_ref.id = "auto-id"
        collection.document.return_value = doc_ref

        saved = await store.add(BookingRecord(id="", slot_id="slot-a", name="Taro"))

        assert saved.id == "auto-id"
        collection.document.assert_called_once_with()
        written = doc_ref.set.call_args.args[0]
        assert written["slotId"] == "slot-a"
        assert written["status"] == "pending"
        assert "id" not in written

    @pytest.mark.asyncio
    async def test_update_status_updates_only_status(self) -> None:
        store, _, collection = _build_store()
        doc_ref = collection.document.return_value
        doc_ref.get.return_value = _snapshot("b1", {"slotId": "slot-a", "status": "pending"})

        updated = await store.update_status("b1", BookingStatus.SYNCED)

        doc_ref.update.assert_called_once_with({"status": "synced"})
        assert updated is not None
        assert updated.status is BookingStatus.SYNCED

    @pytest.mark.asyncio
    async def test_update_status_missing_returns_none(self) -> None:
        store, _, collection = _build_store()
        doc_ref = collection.document.return_value
        doc_ref.get.return_value = _snapshot("b1", None)

        assert await store.update_status("b1", BookingStatus.DELETED) is None
        doc_ref.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_google_api_error_becomes_unavailable(self) -> None:
        store, _, collection = _build_store()
        collection.stream.side_effect = ServiceUnavailable("down")

        with pytest.raises(FirestoreUnavailableError):
            await store.list_all()
