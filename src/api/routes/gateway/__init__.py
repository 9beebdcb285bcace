"""Rotas do gateway: catch-all que roteia callbacks pelo payload."""

from api.routes.gateway.proxy import router

__all__ = ["router"]
