"""Factories de clientes externos: Firestore, Google Calendar e HTTP.

Imports das bibliotecas de cloud ficam dentro das factories para que o
modo memória (dev/test) suba sem credenciais.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

import httpx

from config.settings import (
    get_base_settings,
    get_calendar_settings,
    get_firestore_settings,
)

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

    from app.infra.calendar.google_calendar_client import GoogleCalendarClient
    from config.settings import ScriptBackendSettings

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Firestore Client Factory
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def create_firestore_client() -> FirestoreClient:
    """Cria cliente Firestore (singleton).

    Usa FIRESTORE_PROJECT_ID e, na falta dele, o projeto GCP padrão.

    Returns:
        Cliente Firestore
    """
    from google.cloud import firestore

    project_id = get_firestore_settings().project_id or get_base_settings().gcp_project or None
    client = firestore.Client(project=project_id)
    logger.info("firestore_client_created", extra={"project": project_id})
    return client


# ──────────────────────────────────────────────────────────────────────────────
# Google Calendar Client Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_calendar_client() -> GoogleCalendarClient | None:
    """Cria GoogleCalendarClient se a feature flag estiver habilitada.

    Returns:
        Client configurado ou None (desabilitado / sem credencial).
    """
    settings = get_calendar_settings()
    if not settings.calendar_enabled:
        logger.info(
            "calendar_service_disabled",
            extra={
                "component": "bootstrap",
                "action": "create_calendar_client",
                "result": "disabled",
            },
        )
        return None
    if not settings.google_calendar_id or not settings.google_service_account_json:
        logger.warning(
            "calendar_service_missing_config",
            extra={
                "component": "bootstrap",
                "action": "create_calendar_client",
                "result": "missing_config",
            },
        )
        return None

    from app.infra.calendar.google_calendar_client import GoogleCalendarClient

    try:
        client = GoogleCalendarClient(
            calendar_id=settings.google_calendar_id,
            credentials_json=settings.google_service_account_json,
            timezone=settings.calendar_timezone,
        )
    except (ValueError, KeyError, TypeError) as exc:
        # JSON ou service account inválidos: rotas de reserva respondem 503.
        logger.error(
            "calendar_service_invalid_credentials",
            extra={
                "component": "bootstrap",
                "action": "create_calendar_client",
                "result": "invalid_credentials",
                "error_type": type(exc).__name__,
            },
        )
        return None
    logger.info(
        "calendar_service_created",
        extra={
            "component": "bootstrap",
            "action": "create_calendar_client",
            "result": "created",
        },
    )
    return client


# ──────────────────────────────────────────────────────────────────────────────
# HTTP Client Factory
# ──────────────────────────────────────────────────────────────────────────────


def create_http_client(settings: ScriptBackendSettings) -> httpx.AsyncClient:
    """Cria o httpx.AsyncClient compartilhado pelo backend de script.

    O chamador é dono do ciclo de vida (fechado no shutdown do app).
    """
    return httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout_seconds))
