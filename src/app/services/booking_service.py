"""Servico de reservas: leitura de slots do dia, pedido e administracao.

Orquestra calendario, store de reservas e o resolver. Leitura (resolve) e
escrita (add) sao operacoes separadas e sem transacao entre calendario e
store: dois convidados lendo o mesmo snapshot ainda podem reservar o mesmo
slot. A re-resolucao no envio apenas reduz essa janela.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from typing import TYPE_CHECKING

from app.domain.booking import BookingRecord, BookingRequest, BookingStatus
from app.domain.calendar_event import CalendarEvent, ConfirmedEventData
from app.domain.errors import (
    BookingNotFoundError,
    BookingStateError,
    MalformedEventError,
    SlotNotFoundError,
    SlotUnavailableError,
)
from app.observability import get_correlation_id
from app.services.availability_resolver import ResolverOptions, event_bounds, resolve

if TYPE_CHECKING:
    from app.domain.calendar_event import ResolvedSlot
    from app.protocols.booking_store import BookingStoreProtocol
    from app.protocols.calendar_service import CalendarServiceProtocol

logger = logging.getLogger(__name__)

_COMPONENT = "booking_service"
_CONFIRMED_DESCRIPTION = "お名前: {name}\nメール: {email}\n備考: {note}\n#{marker}"


@dataclass(frozen=True, slots=True)
class BookingServiceConfig:
    """Parametros do servico derivados das settings de calendario."""

    resolver: ResolverOptions
    confirmed_summary_template: str = "予約確定: {name}様"


class BookingService:
    """Casos de uso de reserva sobre os protocolos de calendario e store."""

    def __init__(
        self,
        *,
        calendar: CalendarServiceProtocol,
        store: BookingStoreProtocol,
        config: BookingServiceConfig,
    ) -> None:
        self._calendar = calendar
        self._store = store
        self._config = config

    @property
    def resolver_options(self) -> ResolverOptions:
        return self._config.resolver

    def day_window(self, day: date) -> tuple[datetime, datetime]:
        """Janela 00:00:00.000 ate 23:59:59.999 do dia no timezone configurado."""
        zone = self._config.resolver.zone
        start = datetime.combine(day, time.min, tzinfo=zone)
        end = start + timedelta(days=1) - timedelta(milliseconds=1)
        return start, end

    async def get_slots(self, day: date) -> list[ResolvedSlot]:
        """Slots modelo do dia com estado de reserva atual."""
        time_min, time_max = self.day_window(day)
        events = await self._calendar.list_events(time_min, time_max)
        bookings = await self._store.list_all()
        return resolve(events, bookings, self._config.resolver)

    async def submit_booking(self, request: BookingRequest) -> BookingRecord:
        """Cria reserva `pending` para um slot livre no momento da leitura.

        Raises:
            SlotNotFoundError: slot nao existe no dia informado.
            SlotUnavailableError: slot ja reservado/ocupado/confirmado.
        """
        day = date.fromisoformat(request.date)
        slots = await self.get_slots(day)
        slot = next((item for item in slots if item.id == request.slot_id), None)
        if slot is None:
            raise SlotNotFoundError(request.slot_id, request.date)
        if slot.booked:
            logger.info(
                "booking_rejected",
                extra={
                    "component": _COMPONENT,
                    "action": "submit_booking",
                    "result": "slot_unavailable",
                    "slot_id": slot.id,
                    "correlation_id": get_correlation_id(),
                },
            )
            raise SlotUnavailableError(slot.id)

        record = await self._store.add(
            BookingRecord(
                id="",
                slot_id=slot.id,
                name=request.name,
                email=request.email,
                note=request.note,
                status=BookingStatus.PENDING,
                date=request.date,
                slot_time=slot.time_label,
                raw_start=slot.raw_start,
                raw_end=slot.raw_end,
                created_at=datetime.now(UTC),
            )
        )
        logger.info(
            "booking_submitted",
            extra={
                "component": _COMPONENT,
                "action": "submit_booking",
                "result": "pending",
                "booking_id": record.id,
                "slot_id": slot.id,
                "correlation_id": get_correlation_id(),
            },
        )
        return record

    async def list_bookings(self) -> list[BookingRecord]:
        """Todas as reservas, mais recentes primeiro."""
        records = await self._store.list_all()
        return sorted(records, key=lambda record: record.created_at, reverse=True)

    async def sync_booking(self, booking_id: str) -> BookingRecord:
        """Confirma reserva pendente criando o evento no calendario.

        Evento e status nao sao gravados de forma atomica. Se o status falhar
        depois do insert, o retry encontra o evento confirmado ja existente
        (mesmos limites e email do convidado) e apenas atualiza o status.
        """
        record = await self._get_existing(booking_id)
        if record.status is not BookingStatus.PENDING:
            raise BookingStateError(booking_id, record.status.value, "sync")

        if await self._find_confirmed_event(record) is None:
            await self._calendar.insert_event(self._confirmed_event_data(record))
        else:
            logger.info(
                "booking_sync_event_exists",
                extra={
                    "component": _COMPONENT,
                    "action": "sync_booking",
                    "result": "event_reused",
                    "booking_id": booking_id,
                    "correlation_id": get_correlation_id(),
                },
            )
        updated = await self._store.update_status(booking_id, BookingStatus.SYNCED)
        if updated is None:
            raise BookingNotFoundError(booking_id)
        logger.info(
            "booking_synced",
            extra={
                "component": _COMPONENT,
                "action": "sync_booking",
                "result": "synced",
                "booking_id": booking_id,
                "correlation_id": get_correlation_id(),
            },
        )
        return updated

    async def delete_booking(self, booking_id: str) -> BookingRecord:
        """Marca a reserva como removida; o slot volta a ficar livre."""
        record = await self._get_existing(booking_id)
        if record.status is BookingStatus.DELETED:
            return record
        updated = await self._store.update_status(booking_id, BookingStatus.DELETED)
        if updated is None:
            raise BookingNotFoundError(booking_id)
        logger.info(
            "booking_deleted",
            extra={
                "component": _COMPONENT,
                "action": "delete_booking",
                "result": "deleted",
                "booking_id": booking_id,
                "previous_status": record.status.value,
                "correlation_id": get_correlation_id(),
            },
        )
        return updated

    def _confirmed_event_data(self, record: BookingRecord) -> ConfirmedEventData:
        name = self._strip_markers(record.name)
        return ConfirmedEventData(
            title=self._config.confirmed_summary_template.format(name=name),
            description=_CONFIRMED_DESCRIPTION.format(
                name=name,
                email=record.email,
                note=self._strip_markers(record.note),
                marker=self._config.resolver.confirmed_marker,
            ),
            start=record.raw_start,
            end=record.raw_end,
            attendee_email=record.email,
        )

    def _strip_markers(self, text: str) -> str:
        """Remove marcadores do texto livre do convidado.

        Um marcador de "reservavel" na descricao transformaria o evento
        confirmado em slot modelo.
        """
        options = self._config.resolver
        for marker in (options.bookable_marker, options.confirmed_marker):
            text = text.replace(marker, "")
        return text

    async def _find_confirmed_event(self, record: BookingRecord) -> CalendarEvent | None:
        zone = self._config.resolver.zone
        bounds = event_bounds(
            CalendarEvent(id=record.id, start=record.raw_start, end=record.raw_end),
            zone,
        )
        marker = self._config.resolver.confirmed_marker
        attendee = f"メール: {record.email}"
        for event in await self._calendar.list_events(*bounds):
            if marker not in event.description or attendee not in event.description:
                continue
            try:
                if event_bounds(event, zone) == bounds:
                    return event
            except MalformedEventError:
                continue
        return None

    async def _get_existing(self, booking_id: str) -> BookingRecord:
        record = await self._store.get(booking_id)
        if record is None:
            raise BookingNotFoundError(booking_id)
        return record


__all__ = ["BookingService", "BookingServiceConfig"]
