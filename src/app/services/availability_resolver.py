"""Resolucao de disponibilidade dos slots modelo de um dia.

Funcao pura: recebe os eventos de uma janela (normalmente um dia) e as
reservas conhecidas, e devolve um `ResolvedSlot` por slot modelo.

Regras:
- slot modelo: titulo OU descricao contem o marcador de "reservavel";
- qualquer outro evento e ocupacao (busy);
- slot reservado se ha sobreposicao estrita com busy, reserva nao removida
  apontando para ele, ou marcador de "confirmado" na propria descricao.

Nao faz IO; erros possiveis sao apenas de dado (`MalformedEventError`).
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo

from app.domain.calendar_event import CalendarEvent, ResolvedSlot
from app.domain.errors import MalformedEventError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from app.domain.booking import BookingRecord

logger = logging.getLogger(__name__)

DEFAULT_BOOKABLE_MARKER = "予約可能"
DEFAULT_CONFIRMED_MARKER = "予約確定済み"
DEFAULT_TIMEZONE = "Asia/Tokyo"

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


@dataclass(frozen=True, slots=True)
class ResolverOptions:
    """Marcadores e timezone usados na resolucao."""

    bookable_marker: str = DEFAULT_BOOKABLE_MARKER
    confirmed_marker: str = DEFAULT_CONFIRMED_MARKER
    timezone: str = DEFAULT_TIMEZONE

    def __post_init__(self) -> None:
        if not self.bookable_marker:
            raise ValueError("bookable_marker nao pode ser vazio")
        if not self.confirmed_marker:
            raise ValueError("confirmed_marker nao pode ser vazio")

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


def is_template_slot(event: CalendarEvent, options: ResolverOptions) -> bool:
    marker = options.bookable_marker
    return marker in event.title or marker in event.description


def partition_events(
    events: Iterable[CalendarEvent],
    options: ResolverOptions,
) -> tuple[list[CalendarEvent], list[CalendarEvent]]:
    """Separa eventos em (slots modelo, ocupacoes) preservando a ordem."""
    templates: list[CalendarEvent] = []
    busy: list[CalendarEvent] = []
    for event in events:
        (templates if is_template_slot(event, options) else busy).append(event)
    return templates, busy


def overlaps(
    start: datetime,
    end: datetime,
    other_start: datetime,
    other_end: datetime,
) -> bool:
    """Sobreposicao estrita; extremos que apenas se tocam nao conflitam."""
    return start < other_end and end > other_start


def parse_event_instant(
    value: str | None,
    *,
    event_id: str,
    field: str,
    zone: ZoneInfo,
) -> datetime:
    """Converte inicio/fim cru do calendario em datetime com timezone.

    Data pura vira meia-noite local; datetime sem offset e interpretado no
    timezone configurado; datetime com offset e convertido para ele.
    """
    if not isinstance(value, str) or not value.strip():
        raise MalformedEventError(event_id, field, value, reason="missing")
    text = value.strip()
    if _DATE_ONLY.match(text):
        try:
            day = date.fromisoformat(text)
        except ValueError as exc:
            raise MalformedEventError(event_id, field, value) from exc
        return datetime.combine(day, time.min, tzinfo=zone)
    try:
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError as exc:
        raise MalformedEventError(event_id, field, value) from exc
    return parsed.replace(tzinfo=zone) if parsed.tzinfo is None else parsed.astimezone(zone)


def event_bounds(event: CalendarEvent, zone: ZoneInfo) -> tuple[datetime, datetime]:
    start = parse_event_instant(event.start, event_id=event.id, field="start", zone=zone)
    end = parse_event_instant(event.end, event_id=event.id, field="end", zone=zone)
    if end < start:
        raise MalformedEventError(event.id, "end", event.end, reason="end_before_start")
    return start, end


def resolve(
    events: Sequence[CalendarEvent],
    bookings: Sequence[BookingRecord],
    options: ResolverOptions | None = None,
) -> list[ResolvedSlot]:
    """Calcula o estado de reserva de cada slot modelo em `events`."""
    options = options or ResolverOptions()
    templates, busy = partition_events(events, options)
    if not templates:
        return []

    zone = options.zone
    busy_ranges = [event_bounds(event, zone) for event in busy]
    booked_slot_ids = {record.slot_id for record in bookings if record.is_active}

    resolved: list[ResolvedSlot] = []
    for template in templates:
        start, end = event_bounds(template, zone)
        conflict = any(overlaps(start, end, b_start, b_end) for b_start, b_end in busy_ranges)
        cloud_booked = template.id in booked_slot_ids
        marked_confirmed = options.confirmed_marker in template.description
        zero_width = start == end
        if zero_width:
            logger.warning(
                "template_slot_zero_width",
                extra={
                    "component": "availability_resolver",
                    "event_id": template.id,
                },
            )
        resolved.append(
            ResolvedSlot(
                id=template.id,
                start=start,
                end=end,
                raw_start=str(template.start),
                raw_end=str(template.end),
                booked=conflict or cloud_booked or marked_confirmed,
                zero_width=zero_width,
            )
        )

    logger.debug(
        "slots_resolved",
        extra={
            "component": "availability_resolver",
            "templates": len(templates),
            "busy": len(busy),
            "booked": sum(1 for slot in resolved if slot.booked),
        },
    )
    return resolved


__all__ = [
    "DEFAULT_BOOKABLE_MARKER",
    "DEFAULT_CONFIRMED_MARKER",
    "DEFAULT_TIMEZONE",
    "ResolverOptions",
    "event_bounds",
    "is_template_slot",
    "overlaps",
    "parse_event_instant",
    "partition_events",
    "resolve",
]
