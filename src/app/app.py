"""Entrypoint do slack_bot_gateway.

Proxy reverso que recebe callbacks de interatividade do Slack, decide o
backend pelo conteúdo do payload e encaminha a requisição sem alterar
método, headers ou body.

Uso (produção):
    slack-bot-gateway -c /etc/slack_bot_gateway

Uso (uvicorn direto, configs via GATEWAY_CONFIG_DIR):
    uvicorn app.app:create_app_from_env --factory --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

import argparse
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import build_forwarding_config, build_route_table, initialize_app
from app.infra.http import ForwardingClient
from config.logging import get_logger
from config.settings import get_gateway_settings, load_gateway_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Sequence

    from config.settings import GatewaySettings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Abre e fecha o cliente de forwarding compartilhado."""
    owns_client = app.state.forwarding_client is None
    if owns_client:
        app.state.forwarding_client = ForwardingClient(app.state.forwarding_config)

    logger.info("app_starting", extra={"backend_count": len(app.state.route_table)})

    yield

    logger.info("app_shutting_down")
    if owns_client:
        await app.state.forwarding_client.aclose()
        app.state.forwarding_client = None


def create_app(
    settings: GatewaySettings,
    forwarding_client: ForwardingClient | None = None,
) -> FastAPI:
    """Cria a aplicação FastAPI do gateway.

    Args:
        settings: Configuração imutável carregada no startup.
        forwarding_client: Cliente pronto (testes); se None, o lifespan cria
            e fecha um cliente próprio.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="slack_bot_gateway",
        description="Roteamento de callbacks do Slack por callback_id",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Estado somente leitura compartilhado entre requisições
    fastapi_app.state.route_table = build_route_table(settings)
    fastapi_app.state.forwarding_config = build_forwarding_config(settings)
    fastapi_app.state.forwarding_client = forwarding_client

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"backend_count": len(settings.backends)})

    return fastapi_app


def create_app_from_env() -> FastAPI:
    """Factory para ``uvicorn --factory`` (configs via GATEWAY_CONFIG_DIR)."""
    settings = get_gateway_settings()
    initialize_app(settings)
    return create_app(settings)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="slack-bot-gateway",
        description="Roteia callbacks do Slack para backends pelo callback_id.",
    )
    parser.add_argument("-c", "--config-dir", default="", help="Configs dir path")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Entrypoint de linha de comando.

    Config inválida ou ``app.log`` inacessível propagam como exceção e
    impedem o servidor de subir.
    """
    import uvicorn

    args = _parse_args(argv)
    if not args.config_dir or not Path(args.config_dir).exists():
        print("Config dir path does not exist", file=sys.stderr)
        return 1

    settings = load_gateway_settings(args.config_dir)
    initialize_app(settings)
    app = create_app(settings)

    logger.info("gateway_starting", extra={"listen_host": settings.host})
    uvicorn.run(
        app,
        host=settings.listen_hostname,
        port=settings.listen_port,
        log_config=None,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
