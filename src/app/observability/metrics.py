"""Métricas do gateway registradas como logs estruturados.

Agregáveis depois (BigQuery, CloudWatch Insights, etc.) pelo campo
``metric_type``.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_forward(
    method: str,
    backend_host: str | None,
    status_code: int,
    latency_ms: float,
) -> None:
    """Registra uma requisição entregue ao upstream.

    Args:
        method: Método HTTP encaminhado
        backend_host: host:port do backend, ou None em passthrough
        status_code: Status devolvido pelo upstream
        latency_ms: Latência do forward em milissegundos
    """
    logger.info(
        "metric_forward",
        extra={
            "metric_type": "forward",
            "method": method,
            "backend_host": backend_host,
            "passthrough": backend_host is None,
            "status_code": status_code,
            "latency_ms": round(latency_ms, 2),
        },
    )
