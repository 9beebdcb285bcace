"""Transporte de forwarding para os backends (httpx).

Entrega a OutboundRequest ao destino decidido pelo pipeline e devolve a
resposta do upstream. Sem retries: falhas de transporte viram ForwardError.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import urlsplit, urlunsplit

import httpx

from app.observability import record_forward

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.services.request_rewriter import OutboundRequest

logger = logging.getLogger(__name__)

# Headers de conexão que não atravessam o proxy
HOP_BY_HOP_HEADERS = frozenset(
    {
        "connection",
        "keep-alive",
        "proxy-authenticate",
        "proxy-authorization",
        "proxy-connection",
        "te",
        "trailer",
        "trailers",
        "transfer-encoding",
        "upgrade",
    }
)

# Recalculados pelo httpx a partir da URL e do body
_REQUEST_SKIP_HEADERS = HOP_BY_HOP_HEADERS | {"host", "content-length"}

# httpx entrega o body já descomprimido
_RESPONSE_SKIP_HEADERS = HOP_BY_HOP_HEADERS | {"content-length", "content-encoding"}

# Marca o passthrough enviado de volta ao Host recebido (o próprio gateway,
# quando não há default_upstream). O endpoint responde 502 ao vê-lo.
LOOP_GUARD_HEADER = "x-slack-gateway-passthrough"


@dataclass(frozen=True)
class ForwardingConfig:
    """Configuração do transporte.

    Attributes:
        timeout_seconds: Timeout total por requisição encaminhada
        default_upstream: host:port usado em passthrough (vazio = URL recebida)
    """

    timeout_seconds: float = 30.0
    default_upstream: str = ""


class ForwardError(Exception):
    """Falha ao entregar a requisição ao upstream."""

    def __init__(self, message: str, url: str, is_timeout: bool = False) -> None:
        super().__init__(message)
        self.url = url
        self.is_timeout = is_timeout


@dataclass(frozen=True)
class UpstreamResponse:
    """Resposta do upstream pronta para ser devolvida ao remetente."""

    status_code: int
    headers: tuple[tuple[str, str], ...]
    content: bytes


def filter_headers(headers: Iterable[tuple[str, str]], skip: frozenset[str]) -> list[tuple[str, str]]:
    return [(name, value) for name, value in headers if name.lower() not in skip]


def _to_wire(headers: Iterable[tuple[str, str]]) -> list[tuple[bytes, bytes]]:
    # Valores chegam decodificados em latin-1; voltam aos bytes originais
    return [(name.encode("latin-1"), value.encode("latin-1")) for name, value in headers]


def _from_wire(headers: Iterable[tuple[bytes, bytes]]) -> list[tuple[str, str]]:
    return [(name.decode("latin-1"), value.decode("latin-1")) for name, value in headers]


class ForwardingClient:
    """Cliente de forwarding com um httpx.AsyncClient compartilhado.

    Args:
        config: Configuração do transporte
        transport: Transport httpx opcional (ex: httpx.MockTransport em testes)
    """

    def __init__(
        self,
        config: ForwardingConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or ForwardingConfig()
        self._client = httpx.AsyncClient(
            timeout=self._config.timeout_seconds,
            follow_redirects=False,
            trust_env=False,
            transport=transport,
        )
        # Só os headers da requisição original seguem para o upstream
        self._client.headers.clear()

    def target_url(self, outbound: OutboundRequest) -> str:
        """URL efetiva de entrega.

        Requisições roteadas vão para a URL reescrita. Passthrough vai para o
        default_upstream configurado, ou para a URL exatamente como recebida
        (marcada com LOOP_GUARD_HEADER).
        """
        if not outbound.is_passthrough or not self._config.default_upstream:
            return outbound.url
        parts = urlsplit(outbound.url)
        return urlunsplit(parts._replace(scheme="http", netloc=self._config.default_upstream))

    async def forward(self, outbound: OutboundRequest) -> UpstreamResponse:
        """Envia a requisição e lê a resposta completa.

        Raises:
            ForwardError: Erro de conexão, timeout ou protocolo.
        """
        url = self.target_url(outbound)
        headers = filter_headers(outbound.headers, _REQUEST_SKIP_HEADERS)
        if outbound.is_passthrough and not self._config.default_upstream:
            headers.append((LOOP_GUARD_HEADER, "1"))

        started_at = time.perf_counter()
        try:
            response = await self._client.request(
                outbound.method,
                url,
                content=outbound.body,
                headers=_to_wire(headers),
            )
        except httpx.HTTPError as exc:
            logger.warning(
                "forward_failed",
                extra={
                    "method": outbound.method,
                    "target_url": url,
                    "error_type": type(exc).__name__,
                },
            )
            raise ForwardError(
                "forward_failed",
                url=url,
                is_timeout=isinstance(exc, httpx.TimeoutException),
            ) from exc

        record_forward(
            method=outbound.method,
            backend_host=outbound.backend.host if outbound.backend else None,
            status_code=response.status_code,
            latency_ms=(time.perf_counter() - started_at) * 1000,
        )
        return UpstreamResponse(
            status_code=response.status_code,
            headers=tuple(filter_headers(_from_wire(response.headers.raw), _RESPONSE_SKIP_HEADERS)),
            content=response.content,
        )

    async def aclose(self) -> None:
        await self._client.aclose()
