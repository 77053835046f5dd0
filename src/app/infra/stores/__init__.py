"""Stores: implementações concretas de persistência de reservas.

Módulos disponíveis:
    - firestore_booking_store: reservas em `artifacts/{app_id}/public/data/bookings`
    - memory_booking_store: store em memória para desenvolvimento/testes
"""

from __future__ import annotations

from app.infra.stores.firestore_booking_store import FirestoreBookingStore
from app.infra.stores.memory_booking_store import MemoryBookingStore

__all__ = [
    # Firestore
    "FirestoreBookingStore",
    # Memory (dev/test)
    "MemoryBookingStore",
]
