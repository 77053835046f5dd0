"""Fake in-memory de calendario para testes deterministas."""

from __future__ import annotations

from uuid import uuid4

from app.domain.calendar_event import CalendarEvent, ConfirmedEventData


class FakeCalendarService:
    """Implementa o protocolo sem IO para testes unitarios.

    Devolve sempre os mesmos eventos em `list_events`, ignorando a janela,
    e guarda os eventos confirmados para inspecao.
    """

    def __init__(self, events: list[CalendarEvent] | None = None) -> None:
        self._events = list(events or [])
        self.inserted: list[ConfirmedEventData] = []
        self.list_calls: list[tuple[object, object]] = []

    async def list_events(self, time_min, time_max) -> list[CalendarEvent]:
        self.list_calls.append((time_min, time_max))
        return [event.model_copy() for event in self._events]

    async def insert_event(self, event: ConfirmedEventData) -> CalendarEvent:
        created = CalendarEvent(
            id=uuid4().hex[:12],
            start=event.start,
            end=event.end,
            title=event.title,
            description=event.description,
        )
        self.inserted.append(event)
        self._events.append(created)
        return created.model_copy()


def make_event(
    event_id: str,
    start: str,
    end: str,
    *,
    title: str = "",
    description: str = "",
) -> CalendarEvent:
    return CalendarEvent(id=event_id, start=start, end=end, title=title, description=description)
