"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging e converte GatewaySettings nos valores
imutáveis consumidos pelo pipeline (RouteTable, ForwardingConfig).

Uso:
    from app.bootstrap import initialize_app, build_route_table

    settings = load_gateway_settings(config_dir)
    initialize_app(settings)
    route_table = build_route_table(settings)
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from app.domain.routing import BackendRoute, RouteTable
from app.infra.http import ForwardingConfig
from app.observability import get_correlation_id
from config.logging import configure_logging

if TYPE_CHECKING:
    from config.settings import GatewaySettings

# Nome do serviço para logs e métricas
SERVICE_NAME = "slack_bot_gateway"

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def initialize_app(settings: GatewaySettings) -> None:
    """Configura logging JSON em stderr e em ``<log_dir>/app.log``.

    Raises:
        LogFileError: Se ``app.log`` não puder ser aberto (fatal).
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
        log_dir=settings.log_dir,
    )
    logger.info(
        "settings_loaded",
        extra={
            "component": "bootstrap",
            "listen_host": settings.host,
            "backend_count": len(settings.backends),
            "default_upstream": settings.default_upstream or None,
        },
    )
    if not settings.default_upstream:
        # Passthrough segue para o Host recebido; se for o próprio gateway, vira 502
        logger.warning("default_upstream_not_configured", extra={"component": "bootstrap"})


def build_route_table(settings: GatewaySettings) -> RouteTable:
    """Backends da configuração → RouteTable (ordem preservada)."""
    return RouteTable.from_routes(
        BackendRoute(prefix=backend.callback_prefix, host=backend.host)
        for backend in settings.backends
    )


def build_forwarding_config(settings: GatewaySettings) -> ForwardingConfig:
    return ForwardingConfig(
        timeout_seconds=settings.forward_timeout_seconds,
        default_upstream=settings.default_upstream,
    )
