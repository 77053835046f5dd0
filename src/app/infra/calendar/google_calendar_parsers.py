"""Helpers internos de parsing para respostas da Google Calendar API."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.domain.calendar_event import CalendarEvent

if TYPE_CHECKING:
    from googleapiclient.errors import HttpError


def map_calendar_event(payload: dict[str, Any]) -> CalendarEvent:
    """Converte item da API em `CalendarEvent` mantendo inicio/fim crus.

    A interpretacao de horario fica com o resolver, que reporta o id do
    evento quando o dado vem invalido.
    """
    return CalendarEvent(
        id=str(payload.get("id") or ""),
        start=extract_event_time(payload.get("start")),
        end=extract_event_time(payload.get("end")),
        title=str(payload.get("summary") or ""),
        description=str(payload.get("description") or ""),
    )


def map_calendar_events(response: dict[str, Any]) -> list[CalendarEvent]:
    items = response.get("items") if isinstance(response, dict) else None
    if not isinstance(items, list):
        return []
    return [
        map_calendar_event(item)
        for item in items
        if isinstance(item, dict) and item.get("status") != "cancelled"
    ]


def extract_event_time(value: Any) -> str | None:
    """Prefere `dateTime`; eventos de dia inteiro trazem apenas `date`."""
    if not isinstance(value, dict):
        return None
    for key in ("dateTime", "date"):
        raw = value.get(key)
        if isinstance(raw, str) and raw.strip():
            return raw.strip()
    return None


def build_event_time(raw: str, timezone: str) -> dict[str, str]:
    """Monta o campo start/end da API a partir do valor cru do slot."""
    if len(raw) == 10:
        return {"date": raw}
    return {"dateTime": raw, "timeZone": timezone}


def http_status(exc: HttpError) -> int | None:
    response = getattr(exc, "resp", None)
    return int(response.status) if response and getattr(response, "status", None) else None
