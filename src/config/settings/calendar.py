"""Settings de integracao com Google Calendar.

Centralizar a leitura de env aqui evita espalhar parse de configuracao
pela aplicacao e reduz risco de divergencia entre servicos.
"""

from __future__ import annotations

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field

from config.settings.sources import read_env_chain

DEFAULT_CONFIRMED_SUMMARY = "予約確定: {name}様"


class CalendarSettings(BaseModel):
    """Configuracoes de calendario usadas pelo dominio de reservas."""

    model_config = ConfigDict(extra="ignore")

    google_calendar_id: str = Field(
        default="primary",
        description="ID do calendario do administrador no Google Calendar.",
    )
    google_service_account_json: str | None = Field(
        default=None,
        description="Credencial JSON da service account em formato texto.",
    )
    calendar_timezone: str = Field(
        default="Asia/Tokyo",
        description="Timezone usado para montar o dia consultado e ler horarios.",
    )
    bookable_marker: str = Field(
        default="予約可能",
        min_length=1,
        description="Texto que marca um evento como slot reservavel.",
    )
    confirmed_marker: str = Field(
        default="予約確定済み",
        min_length=1,
        description="Texto que marca um slot como ja confirmado.",
    )
    confirmed_summary_template: str = Field(
        default=DEFAULT_CONFIRMED_SUMMARY,
        description="Titulo do evento criado ao sincronizar (aceita {name}).",
    )
    calendar_enabled: bool = Field(
        default=False,
        description="Feature flag para habilitar integracao real com calendario.",
    )

    def validate_settings(self) -> list[str]:
        """Valida configuracoes minimas quando a integracao esta ligada."""
        errors: list[str] = []
        if self.calendar_enabled and not self.google_service_account_json:
            errors.append("GOOGLE_SERVICE_ACCOUNT_JSON nao configurado")
        if not self.google_calendar_id:
            errors.append("GOOGLE_CALENDAR_ID nao pode ser vazio")
        return errors


def _read_optional_env(key: str) -> str | None:
    """Retorna valor opcional da env sem propagar string vazia."""
    return read_env_chain([key])


def _parse_bool(value: str) -> bool:
    """Converte texto de env em bool com o mesmo padrao dos outros settings."""
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _load_calendar_from_env() -> CalendarSettings:
    """Carrega CalendarSettings a partir de variaveis de ambiente."""
    return CalendarSettings(
        google_calendar_id=os.getenv("GOOGLE_CALENDAR_ID", "primary"),
        google_service_account_json=_read_optional_env("GOOGLE_SERVICE_ACCOUNT_JSON"),
        calendar_timezone=os.getenv("CALENDAR_TIMEZONE", "Asia/Tokyo"),
        bookable_marker=_read_optional_env("CALENDAR_BOOKABLE_MARKER") or "予約可能",
        confirmed_marker=_read_optional_env("CALENDAR_CONFIRMED_MARKER") or "予約確定済み",
        confirmed_summary_template=(
            _read_optional_env("CALENDAR_CONFIRMED_SUMMARY") or DEFAULT_CONFIRMED_SUMMARY
        ),
        calendar_enabled=_parse_bool(os.getenv("CALENDAR_ENABLED", "false")),
    )


@lru_cache(maxsize=1)
def get_calendar_settings() -> CalendarSettings:
    """Retorna instancia cacheada de CalendarSettings."""
    return _load_calendar_from_env()


__all__ = ["CalendarSettings", "get_calendar_settings"]
