"""Settings do gateway de callbacks.

Carregadas uma única vez no startup a partir de ``<config_dir>/config.json``
(ou ``config.yaml``/``config.yml``). Qualquer problema de leitura, parse ou
validação é fatal: o processo não deve começar a servir.

Formato:
    {
        "log_dir": "/var/log/slack_bot_gateway",
        "host": ":8080",
        "default_upstream": "catchall:9000",
        "forward_timeout_seconds": 30,
        "backends": [
            {"callback_prefix": "approve_req", "host": "b1:9001"}
        ]
    }
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

# Procurados nesta ordem dentro do diretório de configs
CONFIG_FILENAMES: tuple[str, ...] = ("config.json", "config.yaml", "config.yml")

CONFIG_DIR_ENV = "GATEWAY_CONFIG_DIR"

# ":8080" escuta em todas as interfaces
DEFAULT_LISTEN_HOSTNAME = "0.0.0.0"


class GatewayConfigError(RuntimeError):
    """Configuração ausente ou inválida (fatal no startup)."""


@dataclass(frozen=True)
class BackendSettings:
    """Entrada ``backends[]`` do arquivo de configuração.

    Attributes:
        callback_prefix: Routing key normalizada atendida pelo backend
        host: Endereço host:port do backend
    """

    callback_prefix: str
    host: str


@dataclass(frozen=True)
class GatewaySettings:
    """Configurações do gateway.

    Attributes:
        log_dir: Diretório do ``app.log``
        host: Endereço de escuta (host:port; host vazio = todas as interfaces)
        backends: Backends na ordem do arquivo (first-match-wins)
        default_upstream: host:port do upstream de passthrough (opcional)
        forward_timeout_seconds: Timeout do transporte de forwarding
    """

    log_dir: str = ""
    host: str = ""
    backends: tuple[BackendSettings, ...] = ()
    default_upstream: str = ""
    forward_timeout_seconds: float = 30.0

    @property
    def listen_hostname(self) -> str:
        hostname, _, _ = self.host.rpartition(":")
        return hostname or DEFAULT_LISTEN_HOSTNAME

    @property
    def listen_port(self) -> int:
        _, _, port = self.host.rpartition(":")
        return int(port)

    def validate(self) -> list[str]:
        """Valida configurações mínimas do gateway.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.log_dir:
            errors.append("log_dir não configurado")

        if not _is_host_port(self.host, allow_empty_host=True):
            errors.append(f"host inválido (esperado host:port): {self.host!r}")

        if self.default_upstream and not _is_host_port(self.default_upstream):
            errors.append(f"default_upstream inválido: {self.default_upstream!r}")

        if self.forward_timeout_seconds <= 0:
            errors.append("forward_timeout_seconds deve ser > 0")

        for index, backend in enumerate(self.backends):
            if not backend.callback_prefix:
                errors.append(f"backends[{index}].callback_prefix vazio")
            if not _is_host_port(backend.host):
                errors.append(f"backends[{index}].host inválido: {backend.host!r}")

        return errors


def _is_host_port(value: str, *, allow_empty_host: bool = False) -> bool:
    hostname, sep, port = value.rpartition(":")
    if not sep or not port.isdigit():
        return False
    return allow_empty_host or bool(hostname)


def find_config_file(config_dir: str | Path) -> Path:
    """Retorna o primeiro arquivo de configuração existente no diretório.

    Raises:
        GatewayConfigError: Se nenhum arquivo existir.
    """
    base = Path(config_dir)
    for filename in CONFIG_FILENAMES:
        candidate = base / filename
        if candidate.is_file():
            return candidate
    raise GatewayConfigError(f"Config file does not exist: {base / CONFIG_FILENAMES[0]}")


def _read_config_file(path: Path) -> Any:
    try:
        with path.open(encoding="utf-8") as fh:
            if path.suffix == ".json":
                return json.load(fh)
            return yaml.safe_load(fh)
    except (OSError, UnicodeDecodeError) as exc:
        raise GatewayConfigError(f"Falha ao ler {path}: {exc}") from exc
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise GatewayConfigError(f"Arquivo de configuração inválido {path}: {exc}") from exc


def _require_str(raw: dict[str, Any], key: str, where: str) -> str:
    value = raw.get(key, "")
    if not isinstance(value, str):
        raise GatewayConfigError(f"{where}{key} deve ser string")
    return value


def _parse_backends(raw_backends: Any) -> tuple[BackendSettings, ...]:
    if raw_backends is None:
        return ()
    if not isinstance(raw_backends, list):
        raise GatewayConfigError("backends deve ser uma lista")

    backends: list[BackendSettings] = []
    for index, entry in enumerate(raw_backends):
        if not isinstance(entry, dict):
            raise GatewayConfigError(f"backends[{index}] deve ser um objeto")
        where = f"backends[{index}]."
        backends.append(
            BackendSettings(
                callback_prefix=_require_str(entry, "callback_prefix", where),
                host=_require_str(entry, "host", where),
            )
        )
    return tuple(backends)


def parse_gateway_settings(raw: Any) -> GatewaySettings:
    """Converte o documento carregado em GatewaySettings validado.

    Raises:
        GatewayConfigError: Se a estrutura ou os valores forem inválidos.
    """
    if not isinstance(raw, dict):
        raise GatewayConfigError("Configuração deve ser um objeto")

    timeout = raw.get("forward_timeout_seconds", 30.0)
    if isinstance(timeout, bool) or not isinstance(timeout, int | float):
        raise GatewayConfigError("forward_timeout_seconds deve ser numérico")

    settings = GatewaySettings(
        log_dir=_require_str(raw, "log_dir", ""),
        host=_require_str(raw, "host", ""),
        backends=_parse_backends(raw.get("backends")),
        default_upstream=_require_str(raw, "default_upstream", ""),
        forward_timeout_seconds=float(timeout),
    )

    errors = settings.validate()
    if errors:
        details = "\n".join(f"- {error}" for error in errors)
        raise GatewayConfigError(f"Configuração inválida:\n{details}")
    return settings


def load_gateway_settings(config_dir: str | Path) -> GatewaySettings:
    """Carrega GatewaySettings do diretório de configs.

    Raises:
        GatewayConfigError: Arquivo ausente, ilegível ou inválido.
    """
    return parse_gateway_settings(_read_config_file(find_config_file(config_dir)))


@lru_cache(maxsize=1)
def get_gateway_settings() -> GatewaySettings:
    """Retorna instância cacheada de GatewaySettings (dir via GATEWAY_CONFIG_DIR)."""
    config_dir = os.getenv(CONFIG_DIR_ENV, "")
    if not config_dir:
        raise GatewayConfigError(f"{CONFIG_DIR_ENV} não configurado")
    return load_gateway_settings(config_dir)
