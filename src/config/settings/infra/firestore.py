"""Settings do Firestore.

Configurações para Google Cloud Firestore.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from config.settings.sources import read_env_chain


@dataclass(frozen=True)
class FirestoreSettings:
    """Configurações do Firestore.

    Attributes:
        project_id: ID do projeto GCP (usa GCP_PROJECT se não definido)
        app_id: Namespace da aplicação em `artifacts/{app_id}/...`
        store_backend: "firestore" ou "memory" (dev/test)
    """

    project_id: str = ""
    app_id: str = "default-app-id"
    store_backend: str = "memory"

    @property
    def bookings_collection(self) -> str:
        return f"artifacts/{self.app_id}/public/data/bookings"

    def validate(self, gcp_project: str) -> list[str]:
        """Valida configurações do Firestore.

        Args:
            gcp_project: Projeto GCP padrão para fallback.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []
        if self.store_backend not in {"firestore", "memory"}:
            errors.append(f"BOOKING_STORE_BACKEND inválido: {self.store_backend}")
        if self.store_backend == "firestore" and not (self.project_id or gcp_project):
            errors.append("FIRESTORE_PROJECT_ID ou GCP_PROJECT deve estar configurado")
        if not self.app_id:
            errors.append("FIRESTORE_APP_ID não pode ser vazio")
        return errors


def _load_firestore_from_env() -> FirestoreSettings:
    """Carrega FirestoreSettings de variáveis de ambiente."""
    return FirestoreSettings(
        project_id=os.getenv("FIRESTORE_PROJECT_ID", ""),
        app_id=read_env_chain(["FIRESTORE_APP_ID", "APP_ID"]) or "default-app-id",
        store_backend=os.getenv("BOOKING_STORE_BACKEND", "memory").strip().lower(),
    )


@lru_cache(maxsize=1)
def get_firestore_settings() -> FirestoreSettings:
    """Retorna instância cacheada de FirestoreSettings."""
    return _load_firestore_from_env()
