"""Client concreto de Google Calendar para o dominio de reservas."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any

from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from app.infra.calendar.google_calendar_parsers import (
    build_event_time,
    http_status,
    map_calendar_event,
    map_calendar_events,
)
from app.observability import get_correlation_id
from app.protocols.calendar_service import CalendarServiceProtocol
from utils.errors import CalendarUnavailableError

if TYPE_CHECKING:
    from datetime import datetime

    from app.domain.calendar_event import CalendarEvent, ConfirmedEventData

logger = logging.getLogger(__name__)

_COMPONENT = "google_calendar_client"
_CALENDAR_SCOPE = "https://www.googleapis.com/auth/calendar.events"
_MAX_RESULTS = 250


class GoogleCalendarClient(CalendarServiceProtocol):
    """Implementacao do protocolo de calendario usando API v3 do Google."""

    __slots__ = ("_calendar_id", "_service", "_timezone")

    def __init__(self, *, calendar_id: str, credentials_json: str, timezone: str) -> None:
        credentials = service_account.Credentials.from_service_account_info(
            json.loads(credentials_json),
            scopes=[_CALENDAR_SCOPE],
        )
        self._calendar_id = calendar_id
        self._timezone = timezone
        self._service = build("calendar", "v3", credentials=credentials, cache_discovery=False)

    async def list_events(self, time_min: datetime, time_max: datetime) -> list[CalendarEvent]:
        params = {
            "calendarId": self._calendar_id,
            "timeMin": time_min.isoformat(),
            "timeMax": time_max.isoformat(),
            "singleEvents": True,
            "orderBy": "startTime",
            "maxResults": _MAX_RESULTS,
        }
        try:
            events: list[CalendarEvent] = []
            page_token: str | None = None
            while True:
                response = await asyncio.to_thread(self._list_events_sync, params, page_token)
                events.extend(map_calendar_events(response))
                page_token = response.get("nextPageToken")
                if not page_token:
                    return events
        except HttpError as exc:
            self._log_error(action="list_events", exc=exc)
            raise CalendarUnavailableError(
                "falha ao listar eventos", status_code=http_status(exc)
            ) from exc

    async def insert_event(self, event: ConfirmedEventData) -> CalendarEvent:
        body: dict[str, Any] = {
            "summary": event.title,
            "description": event.description,
            "start": build_event_time(event.start, self._timezone),
            "end": build_event_time(event.end, self._timezone),
            "attendees": [{"email": event.attendee_email}],
        }
        try:
            response = await asyncio.to_thread(self._insert_event_sync, body)
        except HttpError as exc:
            self._log_error(action="insert_event", exc=exc)
            raise CalendarUnavailableError(
                "falha ao criar evento", status_code=http_status(exc)
            ) from exc
        logger.info(
            "google_calendar_event_created",
            extra={
                "component": _COMPONENT,
                "action": "insert_event",
                "result": "created",
                "correlation_id": get_correlation_id(),
            },
        )
        return map_calendar_event(response)

    def _list_events_sync(self, params: dict[str, Any], page_token: str | None) -> dict[str, Any]:
        request_params = dict(params)
        if page_token:
            request_params["pageToken"] = page_token
        return self._service.events().list(**request_params).execute()

    def _insert_event_sync(self, body: dict[str, Any]) -> dict[str, Any]:
        return self._service.events().insert(
            calendarId=self._calendar_id,
            body=body,
            sendUpdates="all",
        ).execute()

    def _log_error(self, *, action: str, exc: HttpError) -> None:
        logger.error(
            "google_calendar_http_error",
            extra={
                "component": _COMPONENT,
                "action": action,
                "result": "error",
                "status_code": http_status(exc),
                "error_type": type(exc).__name__,
                "correlation_id": get_correlation_id(),
            },
        )
