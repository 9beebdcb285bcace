"""Endpoint de liveness do gateway."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter()

SERVICE_NAME = "slack-bot-gateway"


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"
    backends: int = 0


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness probe: serviço de pé e RouteTable carregada."""
    route_table = getattr(request.app.state, "route_table", None)
    return HealthResponse(
        status="healthy",
        service=SERVICE_NAME,
        timestamp=datetime.now(UTC).isoformat(),
        backends=len(route_table) if route_table is not None else 0,
    )
