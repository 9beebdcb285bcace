"""Testes do endpoint de liveness."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from starlette.requests import Request

from api.routes.health.router import SERVICE_NAME, health_check
from app.domain.routing import BackendRoute, RouteTable


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/health",
        "raw_path": b"/health",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


@pytest.mark.asyncio
async def test_health_reports_loaded_backends() -> None:
    table = RouteTable.from_routes(
        [
            BackendRoute(prefix="approve_req", host="b1:9001"),
            BackendRoute(prefix="form_submit", host="b2:9002"),
        ]
    )
    request = _build_request_with_state(SimpleNamespace(route_table=table))

    response = await health_check(request)

    assert response.status == "healthy"
    assert response.service == SERVICE_NAME
    assert response.backends == 2


@pytest.mark.asyncio
async def test_health_without_route_table() -> None:
    response = await health_check(_build_request_with_state(SimpleNamespace()))

    assert response.status == "healthy"
    assert response.backends == 0
