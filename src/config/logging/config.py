"""Configuração centralizada de logging.

Logging estruturado JSON com:
- Campos obrigatórios (correlation_id, service, level, logger, message)
- Saída em stderr e, opcionalmente, append em ``<log_dir>/app.log``
- Níveis configuráveis por ambiente (LOG_LEVEL)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "slack_bot_gateway"

# Arquivo de log append-only dentro de log_dir
APP_LOG_FILENAME = "app.log"


class LogFileError(RuntimeError):
    """Falha ao abrir o arquivo de log (fatal no startup)."""


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    log_dir: str | Path | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez na inicialização do serviço (app/bootstrap/).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar).
        log_dir: Diretório onde ``app.log`` é aberto em modo append.
            Se None, loga apenas em stderr.

    Raises:
        ValueError: Se o nível de log for inválido.
        LogFileError: Se ``app.log`` não puder ser aberto.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_dir is not None:
        handlers.append(_open_app_log(Path(log_dir)))

    formatter = create_json_formatter(service_name)
    correlation_filter = CorrelationIdFilter(correlation_id_getter)
    for handler in handlers:
        handler.setLevel(level_upper)
        handler.setFormatter(formatter)
        handler.addFilter(correlation_filter)

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    for previous in root.handlers:
        if isinstance(previous, logging.FileHandler):
            previous.close()
    root.handlers = handlers


def _open_app_log(log_dir: Path) -> logging.FileHandler:
    log_path = log_dir / APP_LOG_FILENAME
    try:
        return logging.FileHandler(log_path, mode="a", encoding="utf-8")
    except OSError as exc:
        raise LogFileError(f"Não foi possível abrir {log_path}: {exc}") from exc


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    O handler injeta automaticamente service e correlation_id.
    """
    return logging.getLogger(name)


def log_fallback(
    logger: logging.Logger,
    component: str,
    reason: str | None = None,
    elapsed_ms: float | None = None,
) -> None:
    """Log observável de fallback usado.

    No gateway, o fallback é o passthrough: a requisição segue para o
    destino original porque não houve decisão de roteamento.

    Args:
        logger: Logger instance.
        component: Nome do componente (ex: "callback_router").
        reason: Razão do fallback (ex: "no_backend_match").
        elapsed_ms: Tempo decorrido em ms (quando aplicável).
    """
    extra: dict[str, object] = {
        "fallback_used": True,
        "component": component,
    }
    if reason:
        extra["reason"] = reason
    if elapsed_ms is not None:
        extra["elapsed_ms"] = elapsed_ms

    logger.info(
        "Fallback applied for %s",
        component,
        extra=extra,
    )
