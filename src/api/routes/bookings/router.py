"""Rotas de reserva: slots do dia, pedido do convidado e administração.

As rotas apenas delegam ao BookingService; erros de domínio e de
infraestrutura são convertidos pelos handlers de `api.errors`.
"""

from __future__ import annotations

import datetime as dt

from fastapi import APIRouter, Depends, Query, status

from api.routes.bookings.schemas import SlotResponse
from app.bootstrap import get_booking_service
from app.domain.booking import BookingRecord, BookingRequest
from app.services.booking_service import BookingService

router = APIRouter()


@router.get("/slots", response_model=list[SlotResponse])
async def list_slots(
    day: dt.date = Query(..., alias="date", description="Dia consultado (YYYY-MM-DD)."),
    service: BookingService = Depends(get_booking_service),
) -> list[SlotResponse]:
    """Slots modelo do dia com estado de reserva."""
    slots = await service.get_slots(day)
    return [SlotResponse.from_slot(slot) for slot in slots]


@router.post(
    "/bookings",
    response_model=BookingRecord,
    status_code=status.HTTP_201_CREATED,
)
async def create_booking(
    request: BookingRequest,
    service: BookingService = Depends(get_booking_service),
) -> BookingRecord:
    """Registra pedido de reserva com status `pending`."""
    return await service.submit_booking(request)


@router.get("/admin/bookings", response_model=list[BookingRecord])
async def list_bookings(
    service: BookingService = Depends(get_booking_service),
) -> list[BookingRecord]:
    """Todas as reservas, mais recentes primeiro."""
    return await service.list_bookings()


@router.post("/admin/bookings/{booking_id}/sync", response_model=BookingRecord)
async def sync_booking(
    booking_id: str,
    service: BookingService = Depends(get_booking_service),
) -> BookingRecord:
    """Confirma reserva pendente criando o evento no calendário."""
    return await service.sync_booking(booking_id)


@router.delete("/admin/bookings/{booking_id}", response_model=BookingRecord)
async def delete_booking(
    booking_id: str,
    service: BookingService = Depends(get_booking_service),
) -> BookingRecord:
    """Remove a reserva (status `deleted`), liberando o slot."""
    return await service.delete_booking(booking_id)
