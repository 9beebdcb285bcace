"""Reescrita do destino da requisição a partir da decisão de roteamento.

A requisição de saída difere da de entrada apenas em scheme/host, e só
quando houve match. Método, headers e bytes do body são preservados.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import urlsplit, urlunsplit

from config.logging import log_fallback

if TYPE_CHECKING:
    from app.domain.routing import BackendRoute
    from app.use_cases.gateway import RoutingDecision

logger = logging.getLogger(__name__)

# Backends recebem tráfego em texto plano
PLAINTEXT_SCHEME = "http"


@dataclass(frozen=True, slots=True)
class InboundRequest:
    """Snapshot da requisição recebida (body já bufferizado).

    Attributes:
        method: Método HTTP
        url: URL absoluta como recebida (scheme://host/path?query)
        headers: Pares (nome, valor) na ordem recebida, com duplicatas
        body: Bytes do body
    """

    method: str
    url: str
    headers: tuple[tuple[str, str], ...]
    body: bytes


@dataclass(frozen=True, slots=True)
class OutboundRequest:
    """Requisição a ser entregue ao transporte de forwarding."""

    method: str
    url: str
    headers: tuple[tuple[str, str], ...]
    body: bytes
    backend: BackendRoute | None = None

    @property
    def is_passthrough(self) -> bool:
        return self.backend is None


def rewrite_request(inbound: InboundRequest, backend: BackendRoute | None) -> OutboundRequest:
    """Aplica o backend resolvido ao destino da requisição.

    Com match: scheme vira http e o host vira o host:port do backend; path e
    query string são mantidos. Sem match: URL exatamente como recebida.
    """
    url = inbound.url
    if backend is not None:
        parts = urlsplit(inbound.url)
        url = urlunsplit(parts._replace(scheme=PLAINTEXT_SCHEME, netloc=backend.host))

    return OutboundRequest(
        method=inbound.method,
        url=url,
        headers=inbound.headers,
        body=inbound.body,
        backend=backend,
    )


def apply_routing_decision(inbound: InboundRequest, decision: RoutingDecision) -> OutboundRequest:
    """Registra a decisão no log e retorna a requisição reescrita."""
    _record_decision(decision)
    return rewrite_request(inbound, decision.backend)


def _record_decision(decision: RoutingDecision) -> None:
    # Falha de log nunca bloqueia o forward
    try:
        logger.info(
            "callback_received",
            extra={
                "payload": decision.payload_text,
                "callback_type": decision.callback_type,
                "routing_key": decision.routing_key.raw,
            },
        )
        if decision.backend is not None:
            logger.info(
                "callback_routed",
                extra={
                    "routing_key": decision.routing_key.normalized,
                    "backend_host": decision.backend.host,
                },
            )
        else:
            log_fallback(logger, "callback_router", reason=decision.failure)
    except Exception:  # noqa: BLE001
        return
