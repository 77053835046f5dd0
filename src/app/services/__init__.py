"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.availability_resolver import ResolverOptions, resolve
from app.services.booking_service import BookingService, BookingServiceConfig

__all__ = [
    "BookingService",
    "BookingServiceConfig",
    "ResolverOptions",
    "resolve",
]
