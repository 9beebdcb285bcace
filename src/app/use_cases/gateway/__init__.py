"""Casos de uso do gateway de callbacks."""

from app.use_cases.gateway.route_callback import (
    NO_BACKEND_MATCH,
    NO_ROUTING_KEY,
    RoutingDecision,
    decide_route,
)

__all__ = [
    "NO_BACKEND_MATCH",
    "NO_ROUTING_KEY",
    "RoutingDecision",
    "decide_route",
]
