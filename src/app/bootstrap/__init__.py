"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_booking_service

    # Na inicialização do serviço
    initialize_app()

    # Em rotas FastAPI
    service: BookingService = Depends(get_booking_service)
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_calendar_settings,
    get_firestore_settings,
    get_script_backend_settings,
)

if TYPE_CHECKING:
    from app.protocols.booking_store import BookingStoreProtocol
    from app.protocols.calendar_service import CalendarServiceProtocol
    from app.services.booking_service import BookingService

# Nome do serviço para logs
SERVICE_NAME = "seminar_booking"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação com todas as configurações necessárias.

    Deve ser chamada uma vez no início do serviço.
    """
    configure_logging(
        level=get_base_settings().log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes com logging em DEBUG."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development`/`test` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"calendar: {error}" for error in get_calendar_settings().validate_settings())
    firestore_errors = get_firestore_settings().validate(base.gcp_project)
    errors.extend(f"firestore: {error}" for error in firestore_errors)
    errors.extend(
        f"script_backend: {error}" for error in get_script_backend_settings().validate()
    )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.is_strict:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Getters (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_booking_store() -> BookingStoreProtocol:
    """Obtém store de reservas (singleton)."""
    from app.bootstrap.dependencies import create_booking_store

    return create_booking_store()


@lru_cache(maxsize=1)
def get_calendar_service() -> CalendarServiceProtocol | None:
    """Obtém client de calendário (singleton); None quando desabilitado."""
    from app.bootstrap.clients import create_calendar_client

    return create_calendar_client()


def get_booking_service() -> BookingService:
    """Dependency FastAPI que monta o serviço de reservas.

    Raises:
        CalendarUnavailableError: calendário desabilitado ou sem credencial.
    """
    from app.bootstrap.dependencies import create_booking_service

    return create_booking_service(calendar=get_calendar_service(), store=get_booking_store())


__all__ = [
    "SERVICE_NAME",
    "get_booking_service",
    "get_booking_store",
    "get_calendar_service",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]
