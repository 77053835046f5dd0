"""Schemas de resposta das rotas de reserva."""

from __future__ import annotations

from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from app.domain.calendar_event import ResolvedSlot


class SlotResponse(BaseModel):
    """Slot do dia como exibido na página de reserva."""

    id: str
    start: datetime
    end: datetime
    time_label: str
    booked: bool
    zero_width: bool = False

    @classmethod
    def from_slot(cls, slot: ResolvedSlot) -> SlotResponse:
        return cls(
            id=slot.id,
            start=slot.start,
            end=slot.end,
            time_label=slot.time_label,
            booked=slot.booked,
            zero_width=slot.zero_width,
        )
