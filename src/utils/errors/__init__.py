"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    CalendarUnavailableError,
    FirestoreUnavailableError,
    InfrastructureError,
    ScriptBackendError,
)

__all__ = [
    "CalendarUnavailableError",
    "FirestoreUnavailableError",
    "InfrastructureError",
    "ScriptBackendError",
]
