"""Agregador de rotas: registra todos os routers da API.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.bookings.router import router as bookings_router
from api.routes.health.router import router as health_router
from api.routes.script_backend.router import router as script_backend_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    # Reservas (convidado + admin)
    api_router.include_router(bookings_router, prefix="/api", tags=["bookings"])

    # Backend de script (web app)
    api_router.include_router(
        script_backend_router,
        prefix="/api/script",
        tags=["script-backend"],
    )

    return api_router
