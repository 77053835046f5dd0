"""Rotas HTTP da API.

Estrutura:
- routes/bookings/: slots do dia, pedido de reserva e administração
- routes/script_backend/: repasse para o web app de script
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
