"""Contrato de calendario para o dominio de reservas.

Mantemos apenas o protocolo aqui para permitir troca de provider sem
impactar o servico de reservas.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import datetime

    from app.domain.calendar_event import CalendarEvent, ConfirmedEventData


@runtime_checkable
class CalendarServiceProtocol(Protocol):
    """Contrato para leitura de eventos e criacao de eventos confirmados."""

    async def list_events(self, time_min: datetime, time_max: datetime) -> list[CalendarEvent]:
        """Retorna eventos (instancias unicas, ordenadas por inicio) da janela."""
        ...

    async def insert_event(self, event: ConfirmedEventData) -> CalendarEvent:
        """Cria evento confirmado e retorna o evento persistido."""
        ...
