"""Rotas de repasse para o backend de script (web app da planilha)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, ConfigDict, Field

from app.infra.script_backend import ScriptBackendClient, ScriptBookingResult, ScriptSlot
from utils.errors import ScriptBackendError

router = APIRouter()


class ScriptBookingBody(BaseModel):
    """Pedido de reserva no formato aceito pelo web app."""

    model_config = ConfigDict(str_strip_whitespace=True)

    slot_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(..., pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def get_script_backend_client(request: Request) -> ScriptBackendClient:
    """Client criado no lifespan; indisponível quando sem URL configurada."""
    client = getattr(request.app.state, "script_backend", None)
    if client is None:
        raise ScriptBackendError("backend de script nao configurado")
    return client


@router.get("/slots", response_model=list[ScriptSlot])
async def list_script_slots(
    client: ScriptBackendClient = Depends(get_script_backend_client),
) -> list[ScriptSlot]:
    return await client.fetch_slots()


@router.post("/bookings", response_model=ScriptBookingResult)
async def create_script_booking(
    body: ScriptBookingBody,
    client: ScriptBackendClient = Depends(get_script_backend_client),
) -> ScriptBookingResult:
    return await client.submit_booking(slot_id=body.slot_id, name=body.name, email=body.email)
