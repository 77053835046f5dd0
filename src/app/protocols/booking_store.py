"""Protocolo para persistência de reservas.

Implementações: Firestore (produção) e memória (dev/test).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from app.domain.booking import BookingRecord, BookingStatus


@runtime_checkable
class BookingStoreProtocol(Protocol):
    """Contrato assíncrono para store de reservas."""

    async def list_all(self) -> list[BookingRecord]:
        """Lista todas as reservas, inclusive removidas."""
        ...

    async def get(self, booking_id: str) -> BookingRecord | None:
        """Busca reserva pelo id; None se não existir."""
        ...

    async def add(self, record: BookingRecord) -> BookingRecord:
        """Persiste nova reserva.

        O id é atribuído pelo store; o valor recebido em `record.id` é ignorado.

        Returns:
            Reserva persistida com o id definitivo.
        """
        ...

    async def update_status(
        self,
        booking_id: str,
        status: BookingStatus,
    ) -> BookingRecord | None:
        """Atualiza status; None se a reserva não existir."""
        ...
