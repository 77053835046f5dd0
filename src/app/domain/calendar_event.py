"""Modelos de dominio para eventos de calendario e slots resolvidos.

`CalendarEvent` guarda os limites crus do provider (instante ISO-8601 ou data
pura) porque a interpretacao de horario e responsabilidade do resolver, que
precisa falhar com o id do evento quando o dado vem quebrado.
"""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic

from pydantic import BaseModel, ConfigDict, Field


class CalendarEvent(BaseModel):
    """Evento lido do calendario do administrador."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = Field(..., description="Identificador unico do evento no calendario.")
    start: str | None = Field(
        default=None,
        description="Inicio cru: dateTime ISO-8601 ou date (YYYY-MM-DD).",
    )
    end: str | None = Field(
        default=None,
        description="Fim cru: dateTime ISO-8601 ou date (YYYY-MM-DD).",
    )
    title: str = Field(default="", description="Titulo (summary) do evento.")
    description: str = Field(default="", description="Descricao livre do evento.")


class ResolvedSlot(BaseModel):
    """Slot modelo com estado de reserva recalculado a cada leitura."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = Field(..., description="Id do evento modelo de origem.")
    start: datetime = Field(..., description="Inicio do slot no timezone configurado.")
    end: datetime = Field(..., description="Fim do slot no timezone configurado.")
    raw_start: str = Field(..., description="Inicio cru vindo do calendario.")
    raw_end: str = Field(..., description="Fim cru vindo do calendario.")
    booked: bool = Field(..., description="True se o slot nao pode mais ser reservado.")
    zero_width: bool = Field(
        default=False,
        description="Slot com inicio igual ao fim (problema de autoria do modelo).",
    )

    @property
    def time_label(self) -> str:
        """Rotulo HH:MM - HH:MM usado no registro de reserva."""
        return f"{self.start:%H:%M} - {self.end:%H:%M}"


class ConfirmedEventData(BaseModel):
    """Dados do evento criado no calendario ao sincronizar uma reserva."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., description="Titulo do evento confirmado.")
    description: str = Field(default="", description="Descricao com marcador de confirmado.")
    start: str = Field(..., description="Inicio cru reaproveitado do slot modelo.")
    end: str = Field(..., description="Fim cru reaproveitado do slot modelo.")
    attendee_email: str = Field(..., description="Email do convidado.")


__all__ = ["CalendarEvent", "ConfirmedEventData", "ResolvedSlot"]
