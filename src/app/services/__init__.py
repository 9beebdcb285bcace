"""Serviços de aplicação.

Unidades puras do pipeline de roteamento (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.request_rewriter import (
    InboundRequest,
    OutboundRequest,
    apply_routing_decision,
    rewrite_request,
)
from app.services.route_resolver import resolve_backend

__all__ = [
    "InboundRequest",
    "OutboundRequest",
    "apply_routing_decision",
    "resolve_backend",
    "rewrite_request",
]
