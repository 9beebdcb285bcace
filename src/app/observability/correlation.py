"""correlation_id por requisição encaminhada.

Lido do header ``x-correlation-id`` quando o remetente envia um; caso
contrário é gerado. Usa ContextVar, então cada requisição concorrente
enxerga o próprio valor.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

CORRELATION_ID_HEADER = "x-correlation-id"

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """correlation_id do contexto atual ("" fora de uma requisição)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id (UUID v4 novo se None ou vazio).

    Returns:
        Token para reset_correlation_id() no fim da requisição.
    """
    return _correlation_id.set(correlation_id or str(uuid.uuid4()))


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)
