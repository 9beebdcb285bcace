"""Resolução routing key → backend.

Função pura sobre a routing key e a RouteTable estática. Sem match, o
chamador mantém o destino original da requisição (passthrough).
"""

from __future__ import annotations

from app.domain.routing import BackendRoute, RouteTable, RoutingKey


def resolve_backend(raw: str, table: RouteTable) -> BackendRoute | None:
    """Retorna o primeiro BackendRoute cujo prefix é igual à key normalizada.

    A key é normalizada cortando tudo a partir do primeiro "__"
    (``form_submit__abc123`` → ``form_submit``). Comparação por igualdade,
    não por prefixo. Key vazia (ou vazia após a normalização) nunca casa,
    mesmo com um prefix vazio configurado.
    """
    normalized = RoutingKey(raw).normalized
    if not normalized:
        return None
    for route in table:
        if route.prefix == normalized:
            return route
    return None
