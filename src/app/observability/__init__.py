"""Observabilidade do gateway: correlation_id por requisição e métrica de forward.

Tudo sai como log estruturado (config.logging); não há exporter separado.
"""

from app.observability.correlation import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import record_forward

__all__ = [
    "CORRELATION_ID_HEADER",
    "get_correlation_id",
    "record_forward",
    "reset_correlation_id",
    "set_correlation_id",
]
