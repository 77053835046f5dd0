"""Protocolos e contratos do core da aplicação."""

from .booking_store import BookingStoreProtocol
from .calendar_service import CalendarServiceProtocol

__all__ = [
    "BookingStoreProtocol",
    "CalendarServiceProtocol",
]
