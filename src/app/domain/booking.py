"""Registro de reserva persistido no store de documentos.

O documento no Firestore usa os nomes de campo herdados das paginas de
reserva (camelCase); a conversao fica concentrada em to/from_firestore_dict.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"

# campo do modelo -> campo do documento
_FIRESTORE_FIELDS = {
    "slot_id": "slotId",
    "name": "name",
    "email": "email",
    "note": "note",
    "status": "status",
    "date": "date",
    "slot_time": "slotTime",
    "raw_start": "rawStart",
    "raw_end": "rawEnd",
    "created_at": "createdAt",
}


def _utcnow() -> datetime:
    return datetime.now(UTC)


class BookingStatus(str, Enum):
    """Ciclo de vida de uma reserva."""

    PENDING = "pending"  # Criada pelo convidado
    SYNCED = "synced"  # Confirmada no calendario pelo admin
    DELETED = "deleted"  # Removida; nao bloqueia mais o slot


class BookingRequest(BaseModel):
    """Pedido de reserva enviado pelo convidado."""

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    slot_id: str = Field(..., min_length=1, description="Id do slot modelo escolhido.")
    date: str = Field(
        ..., pattern=r"^\d{4}-\d{2}-\d{2}$", description="Dia consultado (YYYY-MM-DD)."
    )
    name: str = Field(..., min_length=1, max_length=200, description="Nome completo.")
    email: str = Field(..., pattern=_EMAIL_PATTERN, description="Email de contato.")
    note: str = Field(default="", max_length=2000, description="Observacao livre.")

    @field_validator("date")
    @classmethod
    def validate_date_format(cls, value: str) -> str:
        """Aceita apenas datas de calendario validas no formato ISO."""
        try:
            datetime.strptime(value, "%Y-%m-%d")
        except ValueError as exc:
            raise ValueError("date deve estar no formato YYYY-MM-DD") from exc
        return value

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.lower()


class BookingRecord(BaseModel):
    """Reserva persistida; referencia um slot modelo pelo id."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., description="Id do documento no store.")
    slot_id: str = Field(..., description="Id do slot modelo reservado.")
    name: str = Field(default="")
    email: str = Field(default="")
    note: str = Field(default="")
    status: BookingStatus = Field(default=BookingStatus.PENDING)
    date: str = Field(default="", description="Dia do slot (YYYY-MM-DD).")
    slot_time: str = Field(default="", description="Rotulo HH:MM - HH:MM do slot.")
    raw_start: str = Field(default="", description="Inicio cru do slot modelo.")
    raw_end: str = Field(default="", description="Fim cru do slot modelo.")
    created_at: datetime = Field(default_factory=_utcnow)

    @property
    def is_active(self) -> bool:
        """Reserva que ainda bloqueia o slot."""
        return self.status is not BookingStatus.DELETED

    def to_firestore_dict(self) -> dict[str, Any]:
        """Converte para documento Firestore (sem o id, que e o nome do doc)."""
        data = self.model_dump(mode="json", exclude={"id"})
        return {_FIRESTORE_FIELDS[key]: value for key, value in data.items()}

    @classmethod
    def from_firestore_dict(cls, doc_id: str, data: dict[str, Any]) -> BookingRecord:
        """Cria instancia a partir de documento Firestore."""
        values: dict[str, Any] = {"id": doc_id}
        for field_name, doc_key in _FIRESTORE_FIELDS.items():
            if doc_key in data and data[doc_key] is not None:
                values[field_name] = data[doc_key]
        return cls(**values)


__all__ = ["BookingRecord", "BookingRequest", "BookingStatus"]
