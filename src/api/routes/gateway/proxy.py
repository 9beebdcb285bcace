"""Endpoint catch-all do gateway de callbacks.

Fluxo por requisição:
1. Lê o body uma única vez (cópia bufferizada)
2. Decide o backend a partir do payload (decide_route)
3. Reescreve o destino e registra a decisão (apply_routing_decision)
4. Encaminha os mesmos bytes ao upstream e devolve a resposta

Nenhuma falha de payload rejeita a requisição: sem decisão de roteamento,
ela segue em passthrough. Viram 502 só a falha de transporte e o passthrough
que voltou ao próprio gateway (LOOP_GUARD_HEADER presente).
"""

from __future__ import annotations

import logging
from urllib.parse import urlunsplit

from fastapi import APIRouter, Request, Response, status

from app.infra.http import LOOP_GUARD_HEADER, ForwardError
from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.services.request_rewriter import InboundRequest, apply_routing_decision
from app.use_cases.gateway import decide_route

logger = logging.getLogger(__name__)

router = APIRouter()

PROXY_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


def build_inbound_request(request: Request, body: bytes) -> InboundRequest:
    """Snapshot da requisição ASGI com path e query ainda codificados."""
    raw_path = request.scope.get("raw_path") or request.url.path.encode("utf-8")
    query = request.scope.get("query_string", b"")
    netloc = request.headers.get("host") or request.url.netloc
    url = urlunsplit(
        (
            request.url.scheme,
            netloc,
            raw_path.decode("latin-1"),
            query.decode("latin-1"),
            "",
        )
    )
    return InboundRequest(
        method=request.method,
        url=url,
        headers=tuple(request.headers.items()),
        body=body,
    )


def _bad_gateway() -> Response:
    return Response(
        content="Bad Gateway",
        media_type="text/plain",
        status_code=status.HTTP_502_BAD_GATEWAY,
    )


@router.api_route("/{path:path}", methods=PROXY_METHODS, include_in_schema=False)
async def proxy_callback(request: Request) -> Response:
    """Encaminha o callback ao backend decidido pelo payload."""
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))

    try:
        if LOOP_GUARD_HEADER in request.headers:
            logger.warning(
                "passthrough_loop_detected",
                extra={"method": request.method, "path": request.url.path},
            )
            return _bad_gateway()

        raw_body = await request.body()
        inbound = build_inbound_request(request, raw_body)

        decision = decide_route(raw_body, request.app.state.route_table)
        outbound = apply_routing_decision(inbound, decision)

        try:
            upstream = await request.app.state.forwarding_client.forward(outbound)
        except ForwardError as exc:
            logger.warning(
                "callback_forward_failed",
                extra={
                    "correlation_id": get_correlation_id(),
                    "target_url": exc.url,
                    "timeout": exc.is_timeout,
                },
            )
            return _bad_gateway()

        response = Response(content=upstream.content, status_code=upstream.status_code)
        response.raw_headers.extend(
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in upstream.headers
        )
        return response

    finally:
        reset_correlation_id(token)
