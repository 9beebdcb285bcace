"""Logging JSON do gateway (stderr + <log_dir>/app.log).

O bootstrap chama configure_logging uma vez; os módulos usam
``logging.getLogger(__name__)`` e passam contexto via ``extra``:

    logger.info("callback_routed", extra={"backend_host": "b1:9001"})

Toda linha carrega correlation_id, service, level, logger, message e asctime.
"""

from config.logging.config import (
    APP_LOG_FILENAME,
    LogFileError,
    configure_logging,
    get_logger,
    log_fallback,
)
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "APP_LOG_FILENAME",
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    # Erros
    "LogFileError",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
    "log_fallback",
]
