"""Factories de stores e serviços: criação de implementações concretas.

Este módulo centraliza a criação de stores e serviços baseados nas
configurações de ambiente.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.bootstrap.clients import create_firestore_client
from app.infra.script_backend import ScriptBackendClient
from app.infra.stores import FirestoreBookingStore, MemoryBookingStore
from app.services.availability_resolver import ResolverOptions
from app.services.booking_service import BookingService, BookingServiceConfig
from config.settings import (
    get_base_settings,
    get_calendar_settings,
    get_firestore_settings,
)
from utils.errors import CalendarUnavailableError

if TYPE_CHECKING:
    import httpx

    from app.protocols.booking_store import BookingStoreProtocol
    from app.protocols.calendar_service import CalendarServiceProtocol
    from config.settings import CalendarSettings, ScriptBackendSettings

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Booking Store Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_booking_store() -> BookingStoreProtocol:
    """Cria store de reservas baseado na configuração.

    Lê BOOKING_STORE_BACKEND da env:
    - "memory": MemoryBookingStore (dev only)
    - "firestore": FirestoreBookingStore (staging/production)

    Returns:
        Implementação de BookingStoreProtocol
    """
    settings = get_firestore_settings()
    backend = settings.store_backend

    if backend == "firestore":
        store = FirestoreBookingStore(create_firestore_client(), app_id=settings.app_id)
        logger.info(
            "booking_store_created",
            extra={"backend": "firestore", "collection": store.collection_path},
        )
        return store

    if backend == "memory":
        environment = get_base_settings().environment
        if environment not in ("development", "test"):
            logger.warning(
                "memory_store_in_non_dev",
                extra={"backend": "memory", "environment": environment},
            )
        logger.info("booking_store_created", extra={"backend": "memory"})
        return MemoryBookingStore()

    msg = f"BOOKING_STORE_BACKEND inválido: {backend}"
    raise ValueError(msg)


# ──────────────────────────────────────────────────────────────────────────────
# Booking Service Factory
# ──────────────────────────────────────────────────────────────────────────────


def build_service_config(settings: CalendarSettings) -> BookingServiceConfig:
    """Converte CalendarSettings nos parâmetros do serviço de reservas."""
    return BookingServiceConfig(
        resolver=ResolverOptions(
            bookable_marker=settings.bookable_marker,
            confirmed_marker=settings.confirmed_marker,
            timezone=settings.calendar_timezone,
        ),
        confirmed_summary_template=settings.confirmed_summary_template,
    )


def create_booking_service(
    *,
    calendar: CalendarServiceProtocol | None,
    store: BookingStoreProtocol,
) -> BookingService:
    """Monta BookingService; sem calendário o serviço fica indisponível.

    Raises:
        CalendarUnavailableError: integração de calendário desabilitada.
    """
    if calendar is None:
        raise CalendarUnavailableError("integracao com calendario desabilitada")
    return BookingService(
        calendar=calendar,
        store=store,
        config=build_service_config(get_calendar_settings()),
    )


# ──────────────────────────────────────────────────────────────────────────────
# Script Backend Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_script_backend_client(
    settings: ScriptBackendSettings,
    http_client: httpx.AsyncClient,
) -> ScriptBackendClient | None:
    """Cria client do web app de script quando a URL está configurada."""
    if not settings.enabled:
        logger.info("script_backend_disabled", extra={"component": "bootstrap"})
        return None
    errors = settings.validate()
    if errors:
        logger.warning(
            "script_backend_invalid_config",
            extra={"component": "bootstrap", "errors": errors},
        )
        return None
    client = ScriptBackendClient(web_app_url=settings.web_app_url, http_client=http_client)
    logger.info("script_backend_client_created", extra={"component": "bootstrap"})
    return client
