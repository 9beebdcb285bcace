"""Transporte HTTP de forwarding para os backends."""

from app.infra.http.forwarder import (
    HOP_BY_HOP_HEADERS,
    LOOP_GUARD_HEADER,
    ForwardError,
    ForwardingClient,
    ForwardingConfig,
    UpstreamResponse,
    filter_headers,
)

__all__ = [
    "HOP_BY_HOP_HEADERS",
    "LOOP_GUARD_HEADER",
    "ForwardError",
    "ForwardingClient",
    "ForwardingConfig",
    "UpstreamResponse",
    "filter_headers",
]
