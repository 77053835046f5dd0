"""Tradução de exceções de domínio/infra em respostas HTTP.

Domínio vira 4xx com código estável em `error`; infraestrutura vira 503.
Mensagens internas não são devolvidas ao cliente.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from fastapi.responses import JSONResponse

from app.domain.errors import (
    BookingNotFoundError,
    BookingStateError,
    MalformedEventError,
    SlotNotFoundError,
    SlotUnavailableError,
)
from app.observability import get_correlation_id
from utils.errors import InfrastructureError

if TYPE_CHECKING:
    from fastapi import FastAPI, Request

logger = logging.getLogger(__name__)


def _error_response(status_code: int, error: str, **details: Any) -> JSONResponse:
    payload: dict[str, Any] = {"error": error, **details}
    return JSONResponse(status_code=status_code, content=payload)


async def _slot_not_found(_request: Request, exc: SlotNotFoundError) -> JSONResponse:
    return _error_response(404, "slot_not_found", slot_id=exc.slot_id, date=exc.date)


async def _slot_unavailable(_request: Request, exc: SlotUnavailableError) -> JSONResponse:
    return _error_response(409, "slot_unavailable", slot_id=exc.slot_id)


async def _booking_not_found(_request: Request, exc: BookingNotFoundError) -> JSONResponse:
    return _error_response(404, "booking_not_found", booking_id=exc.booking_id)


async def _booking_state(_request: Request, exc: BookingStateError) -> JSONResponse:
    return _error_response(
        409,
        "invalid_booking_state",
        booking_id=exc.booking_id,
        status=exc.status,
        action=exc.action,
    )


async def _malformed_event(_request: Request, exc: MalformedEventError) -> JSONResponse:
    logger.warning(
        "malformed_calendar_event",
        extra={
            "component": "api",
            "event_id": exc.event_id,
            "field": exc.field,
            "reason": exc.reason,
            "correlation_id": get_correlation_id(),
        },
    )
    return _error_response(
        422,
        "malformed_event",
        event_id=exc.event_id,
        field=exc.field,
        reason=exc.reason,
    )


async def _infrastructure(request: Request, exc: InfrastructureError) -> JSONResponse:
    logger.error(
        "infrastructure_unavailable",
        extra={
            "component": "api",
            "path": request.url.path,
            "error_type": type(exc).__name__,
            "status_code": getattr(exc, "status_code", None),
            "correlation_id": get_correlation_id(),
        },
    )
    return _error_response(503, "service_unavailable")


def register_exception_handlers(app: FastAPI) -> None:
    """Registra os handlers de erro de domínio e infraestrutura."""
    app.add_exception_handler(SlotNotFoundError, _slot_not_found)  # type: ignore[arg-type]
    app.add_exception_handler(SlotUnavailableError, _slot_unavailable)  # type: ignore[arg-type]
    app.add_exception_handler(BookingNotFoundError, _booking_not_found)  # type: ignore[arg-type]
    app.add_exception_handler(BookingStateError, _booking_state)  # type: ignore[arg-type]
    app.add_exception_handler(MalformedEventError, _malformed_event)  # type: ignore[arg-type]
    app.add_exception_handler(InfrastructureError, _infrastructure)  # type: ignore[arg-type]


__all__ = ["register_exception_handlers"]
