"""Client HTTP do backend de script.

O web app ja devolve os slots resolvidos (GET) e aceita a reserva (POST).
O POST usa `Content-Type: text/plain` porque o runtime de script nao
aceita preflight CORS; o corpo continua sendo JSON.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime  # noqa: TC003 - usado em runtime pelo schema do Pydantic
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from app.observability import get_correlation_id
from utils.errors import ScriptBackendError

logger = logging.getLogger(__name__)

_COMPONENT = "script_backend_client"


class ScriptSlot(BaseModel):
    """Slot livre devolvido pelo web app."""

    model_config = ConfigDict(extra="ignore")

    id: str
    start: datetime
    end: datetime


class ScriptBookingResult(BaseModel):
    """Resposta do web app ao POST de reserva."""

    model_config = ConfigDict(extra="ignore")

    success: bool = False
    message: str = Field(default="")


class ScriptBackendClient:
    """Leitura de slots e envio de reserva para o web app de script."""

    def __init__(self, *, web_app_url: str, http_client: httpx.AsyncClient) -> None:
        if not web_app_url.startswith("https"):
            raise ValueError("web_app_url deve comecar com https")
        self._url = web_app_url
        self._http = http_client

    async def fetch_slots(self) -> list[ScriptSlot]:
        """Retorna os slots do web app ordenados por inicio."""
        data = await self._request("fetch_slots", "GET")
        if not isinstance(data, list):
            logger.warning(
                "script_backend_unexpected_payload",
                extra={
                    "component": _COMPONENT,
                    "action": "fetch_slots",
                    "payload_type": type(data).__name__,
                },
            )
            return []
        try:
            slots = [ScriptSlot.model_validate(item) for item in data]
        except ValidationError as exc:
            raise ScriptBackendError("slot invalido na resposta do web app") from exc
        return sorted(slots, key=lambda slot: slot.start)

    async def submit_booking(self, *, slot_id: str, name: str, email: str) -> ScriptBookingResult:
        """Envia reserva; `success=false` vira `ScriptBackendError`."""
        body = json.dumps({"eventId": slot_id, "userName": name, "userEmail": email})
        data = await self._request(
            "submit_booking",
            "POST",
            content=body,
            headers={"Content-Type": "text/plain"},
        )
        result = ScriptBookingResult.model_validate(data if isinstance(data, dict) else {})
        if not result.success:
            logger.info(
                "script_backend_booking_rejected",
                extra={"component": _COMPONENT, "action": "submit_booking", "result": "rejected"},
            )
            raise ScriptBackendError(result.message or "reserva recusada pelo web app")
        logger.info(
            "script_backend_booking_accepted",
            extra={"component": _COMPONENT, "action": "submit_booking", "result": "accepted"},
        )
        return result

    async def _request(self, action: str, method: str, **kwargs: Any) -> Any:
        extra = {
            "component": _COMPONENT,
            "action": action,
            "correlation_id": get_correlation_id(),
        }
        try:
            response = await self._http.request(method, self._url, follow_redirects=True, **kwargs)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            logger.warning("script_backend_http_error", extra={**extra, "status_code": status_code})
            raise ScriptBackendError(
                f"web app respondeu {status_code}", status_code=status_code
            ) from exc
        except httpx.TimeoutException as exc:
            logger.warning("script_backend_timeout", extra=extra)
            raise ScriptBackendError("timeout ao acessar web app") from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "script_backend_connection_error",
                extra={**extra, "error_type": type(exc).__name__},
            )
            raise ScriptBackendError("falha de conexao com web app") from exc
        except ValueError as exc:
            logger.warning("script_backend_invalid_json", extra=extra)
            raise ScriptBackendError("resposta do web app nao e JSON") from exc
