"""Client do backend de script (web app publicado a partir da planilha)."""

from app.infra.script_backend.script_backend_client import (
    ScriptBackendClient,
    ScriptBookingResult,
    ScriptSlot,
)

__all__ = ["ScriptBackendClient", "ScriptBookingResult", "ScriptSlot"]
