"""Erros de dominio de reservas.

Erros de infraestrutura (rede, store, provider) ficam em `utils.errors`.
"""

from __future__ import annotations


class BookingError(Exception):
    """Base dos erros de dominio de reservas."""


class MalformedEventError(BookingError, ValueError):
    """Evento de calendario com inicio/fim ausente ou impossivel de interpretar."""

    def __init__(
        self,
        event_id: str,
        field: str,
        value: object,
        reason: str = "unparseable",
    ) -> None:
        super().__init__(f"evento {event_id!r}: {field} invalido ({reason}): {value!r}")
        self.event_id = event_id
        self.field = field
        self.value = value
        self.reason = reason


class SlotNotFoundError(BookingError):
    """Slot modelo inexistente no dia consultado."""

    def __init__(self, slot_id: str, date: str) -> None:
        super().__init__(f"slot {slot_id!r} nao encontrado em {date}")
        self.slot_id = slot_id
        self.date = date


class SlotUnavailableError(BookingError):
    """Slot ja reservado, em conflito ou confirmado no momento da leitura."""

    def __init__(self, slot_id: str) -> None:
        super().__init__(f"slot {slot_id!r} indisponivel")
        self.slot_id = slot_id


class BookingNotFoundError(BookingError):
    """Reserva inexistente no store."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(f"reserva {booking_id!r} nao encontrada")
        self.booking_id = booking_id


class BookingStateError(BookingError):
    """Transicao de status invalida para a reserva."""

    def __init__(self, booking_id: str, status: str, action: str) -> None:
        super().__init__(f"reserva {booking_id!r} com status {status!r} nao permite {action}")
        self.booking_id = booking_id
        self.status = status
        self.action = action


__all__ = [
    "BookingError",
    "BookingNotFoundError",
    "BookingStateError",
    "MalformedEventError",
    "SlotNotFoundError",
    "SlotUnavailableError",
]
