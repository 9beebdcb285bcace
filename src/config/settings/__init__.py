"""Agregador de settings do slack_bot_gateway.

Re-exporta as settings e funções de carregamento.
"""

from __future__ import annotations

from config.settings.gateway import (
    CONFIG_DIR_ENV,
    CONFIG_FILENAMES,
    BackendSettings,
    GatewayConfigError,
    GatewaySettings,
    find_config_file,
    get_gateway_settings,
    load_gateway_settings,
    parse_gateway_settings,
)

__all__ = [
    # Constants
    "CONFIG_DIR_ENV",
    "CONFIG_FILENAMES",
    # Gateway
    "BackendSettings",
    "GatewayConfigError",
    "GatewaySettings",
    "find_config_file",
    "get_gateway_settings",
    "load_gateway_settings",
    "parse_gateway_settings",
]
