"""Configuração do pytest para o serviço de reservas."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture
def clear_settings_cache():
    """Limpa getters cacheados de settings antes e depois do teste."""
    from config.settings import (
        get_base_settings,
        get_calendar_settings,
        get_firestore_settings,
        get_script_backend_settings,
    )

    getters = (
        get_base_settings,
        get_calendar_settings,
        get_firestore_settings,
        get_script_backend_settings,
    )
    for getter in getters:
        getter.cache_clear()
    yield
    for getter in getters:
        getter.cache_clear()
