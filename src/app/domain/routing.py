"""Entidades de roteamento do gateway.

BackendRoute e RouteTable são carregadas uma única vez no startup e nunca
mutadas. RoutingKey é derivada por requisição e descartada após a decisão.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

# Separador entre o nome estável do handler e o sufixo de instância/sessão
INSTANCE_SUFFIX_MARKER = "__"


@dataclass(frozen=True, slots=True)
class BackendRoute:
    """Backend registrado para um prefixo de callback.

    Attributes:
        prefix: Prefixo de routing key atendido (config: callback_prefix)
        host: Endereço do backend no formato host:port
    """

    prefix: str
    host: str


@dataclass(frozen=True, slots=True)
class RouteTable:
    """Sequência ordenada de BackendRoute (first-match-wins)."""

    routes: tuple[BackendRoute, ...] = ()

    @classmethod
    def from_routes(cls, routes: Iterable[BackendRoute]) -> RouteTable:
        return cls(routes=tuple(routes))

    def __iter__(self) -> Iterator[BackendRoute]:
        return iter(self.routes)

    def __len__(self) -> int:
        return len(self.routes)


@dataclass(frozen=True, slots=True)
class RoutingKey:
    """Routing key extraída do payload.

    Attributes:
        raw: Identificador lido do payload (vazio se a extração falhou)
    """

    raw: str = ""

    @property
    def normalized(self) -> str:
        """raw sem o sufixo dinâmico (tudo a partir do primeiro "__")."""
        head, _, _ = self.raw.partition(INSTANCE_SUFFIX_MARKER)
        return head

    def __bool__(self) -> bool:
        return bool(self.raw)
