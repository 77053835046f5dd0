"""Endpoints de health check para Cloud Run."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_firestore_settings

logger = logging.getLogger(__name__)

router = APIRouter()

FIRESTORE_HEALTH_COLLECTION = "_health"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    latency_ms: float | None = None
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "latency_ms": self.latency_ms,
            "error": self.error,
        }


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service="seminar-booking",
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe com verificação real de calendário e Firestore."""
    calendar_check, firestore_check = await asyncio.gather(
        _check_calendar(getattr(request.app.state, "calendar_client", None)),
        _check_firestore(getattr(request.app.state, "firestore_client", None)),
    )

    ready = calendar_check.status == "ok" and firestore_check.status in {"ok", "degraded"}

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "calendar": calendar_check.as_dict(),
            "firestore": firestore_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _check_calendar(calendar_client: Any | None) -> DependencyCheck:
    if calendar_client is None:
        return DependencyCheck(status="failed", error="not_configured")
    started_at = time.perf_counter()
    now = datetime.now(UTC)
    try:
        await asyncio.wait_for(
            calendar_client.list_events(now, now + timedelta(minutes=1)),
            timeout=5.0,
        )
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    except Exception as exc:
        logger.warning("readiness_calendar_check_failed", extra={"error_type": type(exc).__name__})
        return DependencyCheck(status="failed", error=type(exc).__name__)
    latency_ms = (time.perf_counter() - started_at) * 1000
    return DependencyCheck(status="ok", latency_ms=round(latency_ms, 2))


async def _check_firestore(firestore_client: Any | None) -> DependencyCheck:
    if firestore_client is None:
        # Só o store em memória (dev) dispensa o Firestore.
        if get_firestore_settings().store_backend == "memory":
            return DependencyCheck(status="degraded", error="not_configured")
        return DependencyCheck(status="failed", error="client_unavailable")
    started_at = time.perf_counter()
    try:
        exists = await asyncio.wait_for(
            asyncio.to_thread(_read_firestore_health_doc, firestore_client),
            timeout=3.0,
        )
    except TimeoutError:
        return DependencyCheck(status="failed", error="timeout")
    except Exception as exc:
        return DependencyCheck(status="failed", error=type(exc).__name__)
    latency_ms = (time.perf_counter() - started_at) * 1000
    status = "ok" if exists else "degraded"
    return DependencyCheck(status=status, latency_ms=round(latency_ms, 2))


def _read_firestore_health_doc(firestore_client: Any) -> bool:
    doc = firestore_client.collection(FIRESTORE_HEALTH_COLLECTION).document("check").get()
    return bool(getattr(doc, "exists", False))
