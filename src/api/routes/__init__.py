"""Rotas HTTP da API: adapters de entrada.

Responsabilidades:
- routes/health/: liveness probe
- routes/gateway/: catch-all que decide o backend pelo payload e encaminha

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
