"""Caso de uso: decidir o destino de um callback a partir do body bruto.

Pipeline puro: decoder (api.connectors.slack) → resolver (app.services).
Nenhuma falha de decodificação ou roteamento é fatal; todas resultam em
passthrough com o motivo registrado em ``RoutingDecision.failure``.
"""

from __future__ import annotations

from dataclasses import dataclass

from api.connectors.slack import PayloadDecodeError, parse_callback, read_payload_field
from app.domain.routing import BackendRoute, RouteTable, RoutingKey
from app.services.route_resolver import resolve_backend

NO_ROUTING_KEY = "no_routing_key"
NO_BACKEND_MATCH = "no_backend_match"


@dataclass(frozen=True, slots=True)
class RoutingDecision:
    """Resultado da decisão de roteamento de uma requisição.

    Attributes:
        routing_key: Routing key extraída (vazia em caso de falha)
        backend: Backend escolhido ou None (passthrough)
        callback_type: Valor de ``type`` do payload, quando legível
        payload_text: JSON do payload, ou o body bruto se o form falhou
        failure: Motivo do passthrough (ex: "invalid_json", "no_backend_match")
    """

    routing_key: RoutingKey = RoutingKey()
    backend: BackendRoute | None = None
    callback_type: str | None = None
    payload_text: str = ""
    failure: str | None = None

    @property
    def is_passthrough(self) -> bool:
        return self.backend is None


def decide_route(raw_body: bytes, table: RouteTable) -> RoutingDecision:
    """Decodifica o body e resolve o backend.

    Args:
        raw_body: Cópia bufferizada do body da requisição
        table: RouteTable imutável carregada no startup

    Returns:
        RoutingDecision (nunca levanta por payload inválido)
    """
    try:
        payload_json = read_payload_field(raw_body)
    except PayloadDecodeError as exc:
        return RoutingDecision(
            payload_text=raw_body.decode("utf-8", errors="replace"),
            failure=exc.reason,
        )

    try:
        callback = parse_callback(payload_json)
    except PayloadDecodeError as exc:
        return RoutingDecision(payload_text=payload_json, failure=exc.reason)

    key = RoutingKey(callback.routing_key)
    if not key:
        return RoutingDecision(
            callback_type=callback.type,
            payload_text=payload_json,
            failure=NO_ROUTING_KEY,
        )

    backend = resolve_backend(key.raw, table)
    return RoutingDecision(
        routing_key=key,
        backend=backend,
        callback_type=callback.type,
        payload_text=payload_json,
        failure=None if backend is not None else NO_BACKEND_MATCH,
    )
