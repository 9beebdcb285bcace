"""Filter que injeta o correlation_id da requisição em curso."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Preenche ``record.correlation_id`` a partir do contexto atual.

    Logs emitidos fora de uma requisição (startup, shutdown) saem com
    correlation_id vazio.

    Args:
        correlation_id_getter: Função que retorna o correlation_id atual
            (ex: ContextVar lido por app.observability).
    """

    def __init__(self, correlation_id_getter: Callable[[], str] | None = None) -> None:
        super().__init__()
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        # Valor passado via `extra` tem precedência
        if not getattr(record, "correlation_id", None):
            record.correlation_id = self._get_correlation_id()
        return True
