"""Exceções de infraestrutura para falhas de colaboradores externos."""

from __future__ import annotations


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura (calendario, store, backend HTTP)."""


class FirestoreUnavailableError(InfrastructureError):
    """Falha de indisponibilidade ao acessar Firestore."""


class CalendarUnavailableError(InfrastructureError):
    """Falha ao consultar ou escrever no provedor de calendario."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ScriptBackendError(InfrastructureError):
    """Resposta invalida ou recusa do backend de script (web app)."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
