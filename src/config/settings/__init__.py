"""Agregador de settings do serviço de reservas.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Calendar settings
from config.settings.calendar import (
    CalendarSettings,
    get_calendar_settings,
)

# Infrastructure settings
from config.settings.infra import (
    FirestoreSettings,
    get_firestore_settings,
)

# Script backend settings
from config.settings.script_backend import (
    ScriptBackendSettings,
    get_script_backend_settings,
    resolve_web_app_url,
)
from config.settings.sources import first_non_empty, read_env_chain

__all__ = [
    "BaseSettings",
    "CalendarSettings",
    "Environment",
    "FirestoreSettings",
    "ScriptBackendSettings",
    "first_non_empty",
    "get_base_settings",
    "get_calendar_settings",
    "get_firestore_settings",
    "get_script_backend_settings",
    "read_env_chain",
    "resolve_web_app_url",
]
