"""Firestore Booking Store."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from google.api_core.exceptions import GoogleAPIError

from app.domain.booking import BookingRecord, BookingStatus
from app.protocols.booking_store import BookingStoreProtocol
from utils.errors import FirestoreUnavailableError

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient
    from google.cloud.firestore import CollectionReference

logger = logging.getLogger(__name__)

BOOKINGS_COLLECTION_TEMPLATE = "artifacts/{app_id}/public/data/bookings"


class FirestoreBookingStore(BookingStoreProtocol):
    """Store de reservas usando Firestore.

    Documentos ficam em `artifacts/{app_id}/public/data/bookings`, o mesmo
    caminho lido pelas paginas de reserva.
    """

    def __init__(self, firestore_client: FirestoreClient, *, app_id: str) -> None:
        self._db = firestore_client
        self._collection_path = BOOKINGS_COLLECTION_TEMPLATE.format(app_id=app_id)

    @property
    def collection_path(self) -> str:
        return self._collection_path

    async def list_all(self) -> list[BookingRecord]:
        return await asyncio.to_thread(self._list_all_sync)

    async def get(self, booking_id: str) -> BookingRecord | None:
        return await asyncio.to_thread(self._get_sync, booking_id)

    async def add(self, record: BookingRecord) -> BookingRecord:
        return await asyncio.to_thread(self._add_sync, record)

    async def update_status(
        self,
        booking_id: str,
        status: BookingStatus,
    ) -> BookingRecord | None:
        return await asyncio.to_thread(self._update_status_sync, booking_id, status)

    def _collection(self) -> CollectionReference:
        return self._db.collection(self._collection_path)

    def _list_all_sync(self) -> list[BookingRecord]:
        try:
            return [
                BookingRecord.from_firestore_dict(doc.id, doc.to_dict() or {})
                for doc in self._collection().stream()
            ]
        except GoogleAPIError as exc:
            raise self._unavailable("list_all", exc) from exc

    def _get_sync(self, booking_id: str) -> BookingRecord | None:
        try:
            doc = self._collection().document(booking_id).get()
        except GoogleAPIError as exc:
            raise self._unavailable("get", exc) from exc
        if not doc.exists:
            return None
        return BookingRecord.from_firestore_dict(doc.id, doc.to_dict() or {})

    def _add_sync(self, record: BookingRecord) -> BookingRecord:
        try:
            doc_ref = self._collection().document()
            doc_ref.set(record.to_firestore_dict())
        except GoogleAPIError as exc:
            raise self._unavailable("add", exc) from exc
        logger.debug("booking_document_created", extra={"booking_id": doc_ref.id})
        return record.model_copy(update={"id": doc_ref.id})

    def _update_status_sync(
        self,
        booking_id: str,
        status: BookingStatus,
    ) -> BookingRecord | None:
        try:
            doc_ref = self._collection().document(booking_id)
            snapshot = doc_ref.get()
            if not snapshot.exists:
                return None
            doc_ref.update({"status": status.value})
        except GoogleAPIError as exc:
            raise self._unavailable("update_status", exc) from exc
        record = BookingRecord.from_firestore_dict(snapshot.id, snapshot.to_dict() or {})
        return record.model_copy(update={"status": status})

    def _unavailable(self, action: str, exc: Exception) -> FirestoreUnavailableError:
        logger.error(
            "booking_store_failed",
            extra={
                "component": "firestore_booking_store",
                "action": action,
                "result": "error",
                "error_type": type(exc).__name__,
            },
        )
        return FirestoreUnavailableError(f"firestore indisponivel em {action}")
