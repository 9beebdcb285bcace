"""Agregador de rotas do gateway.

/health é registrado antes do catch-all ``/{path:path}``: o Starlette casa
rotas na ordem de registro e o catch-all aceita qualquer path.
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.gateway import router as gateway_router
from api.routes.health.router import router as health_router


def create_api_router() -> APIRouter:
    api_router = APIRouter()
    api_router.include_router(health_router, tags=["health"])
    api_router.include_router(gateway_router, tags=["gateway"])
    return api_router
