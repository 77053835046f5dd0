"""Entrypoint do serviço de reservas de seminário.

Este módulo é o ponto de entrada principal do serviço.
Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080

Cloud Run:
    O container deve expor a porta 8080 (padrão do Cloud Run).
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.errors import register_exception_handlers
from api.middleware import correlation_id_middleware
from api.routes import create_api_router
from api.routes.health.router import FIRESTORE_HEALTH_COLLECTION
from app.bootstrap import (
    SERVICE_NAME,
    get_calendar_service,
    initialize_app,
    validate_runtime_settings,
)
from app.bootstrap.clients import create_firestore_client, create_http_client
from app.bootstrap.dependencies import create_script_backend_client
from app.observability import CORRELATION_ID_HEADER
from config.logging import get_logger
from config.settings import (
    get_base_settings,
    get_firestore_settings,
    get_script_backend_settings,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


async def _seed_firestore_health_doc(firestore_client: Any) -> None:
    """Escreve documento mínimo de health para check de readiness."""

    def _write_doc() -> None:
        firestore_client.collection(FIRESTORE_HEALTH_COLLECTION).document("check").set(
            {
                "updated_at": datetime.now(UTC).isoformat(),
                "service": SERVICE_NAME,
            }
        )

    await asyncio.to_thread(_write_doc)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Inicializa clientes (Firestore, Google Calendar, HTTP)

    Shutdown:
    - Fecha o client HTTP do backend de script
    """
    logger.info("app_starting", extra={"service": SERVICE_NAME})
    validate_runtime_settings()
    app.state.firestore_client = None
    app.state.calendar_client = None

    if get_firestore_settings().store_backend == "firestore":
        try:
            app.state.firestore_client = create_firestore_client()
            await _seed_firestore_health_doc(app.state.firestore_client)
        except Exception as exc:
            logger.warning("firestore_client_not_ready", extra={"error_type": type(exc).__name__})

    try:
        app.state.calendar_client = get_calendar_service()
    except Exception as exc:
        logger.warning("calendar_client_not_ready", extra={"error_type": type(exc).__name__})

    script_settings = get_script_backend_settings()
    app.state.http_client = create_http_client(script_settings)
    app.state.script_backend = create_script_backend_client(script_settings, app.state.http_client)

    yield

    logger.info("app_shutting_down", extra={"service": SERVICE_NAME})
    await app.state.http_client.aclose()


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="Seminar Booking",
        description="Reserva de horários de seminário sobre Google Calendar",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    origins = list(get_base_settings().cors_allow_origins)
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[CORRELATION_ID_HEADER],
    )
    fastapi_app.middleware("http")(correlation_id_middleware)

    register_exception_handlers(fastapi_app)

    # Registra todas as rotas
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": SERVICE_NAME})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting seminar-booking in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
