"""Settings do backend de script (web app de planilha).

A URL do web app e resolvida em lista ordenada de variaveis; a primeira
preenchida vence. Mantemos os nomes usados pelos builds do front
(VITE_GAS_URL, REACT_APP_GAS_URL) para reaproveitar a mesma env de deploy.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from config.settings.sources import first_non_empty, read_env_chain

WEB_APP_URL_ENV_KEYS = ("SCRIPT_BACKEND_URL", "VITE_GAS_URL", "REACT_APP_GAS_URL")


@dataclass(frozen=True)
class ScriptBackendSettings:
    """Configurações do backend de script.

    Attributes:
        web_app_url: URL publicada do web app (termina em /exec)
        request_timeout_seconds: Timeout das chamadas HTTP
    """

    web_app_url: str = ""
    request_timeout_seconds: float = 15.0

    @property
    def enabled(self) -> bool:
        return bool(self.web_app_url)

    def validate(self) -> list[str]:
        """Valida configurações do backend de script."""
        errors: list[str] = []
        if self.web_app_url and not self.web_app_url.startswith("https"):
            errors.append("SCRIPT_BACKEND_URL deve comecar com https://")
        if self.request_timeout_seconds <= 0:
            errors.append("SCRIPT_BACKEND_TIMEOUT_SECONDS deve ser positivo")
        return errors


def resolve_web_app_url(override: str | None = None) -> str:
    """Resolve a URL do web app: override explicito, depois env em ordem."""
    return first_non_empty([override, read_env_chain(WEB_APP_URL_ENV_KEYS)]) or ""


def _load_script_backend_from_env() -> ScriptBackendSettings:
    """Carrega ScriptBackendSettings de variáveis de ambiente."""
    return ScriptBackendSettings(
        web_app_url=resolve_web_app_url(),
        request_timeout_seconds=float(os.getenv("SCRIPT_BACKEND_TIMEOUT_SECONDS", "15")),
    )


@lru_cache(maxsize=1)
def get_script_backend_settings() -> ScriptBackendSettings:
    """Retorna instância cacheada de ScriptBackendSettings."""
    return _load_script_backend_from_env()


__all__ = [
    "WEB_APP_URL_ENV_KEYS",
    "ScriptBackendSettings",
    "get_script_backend_settings",
    "resolve_web_app_url",
]
