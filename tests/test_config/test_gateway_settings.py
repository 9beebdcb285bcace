"""Testes do carregamento de GatewaySettings."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from config.settings import (
    CONFIG_DIR_ENV,
    BackendSettings,
    GatewayConfigError,
    GatewaySettings,
    find_config_file,
    get_gateway_settings,
    load_gateway_settings,
    parse_gateway_settings,
)

VALID_CONFIG = {
    "log_dir": "/var/log/gateway",
    "host": ":8080",
    "backends": [
        {"callback_prefix": "approve_req", "host": "b1:9001"},
        {"callback_prefix": "form_submit", "host": "b2:9002"},
    ],
}


def _write_json(directory: Path, data: object, filename: str = "config.json") -> Path:
    path = directory / filename
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestLoadGatewaySettings:
    def test_loads_json_config(self, tmp_path: Path) -> None:
        _write_json(tmp_path, VALID_CONFIG)

        settings = load_gateway_settings(tmp_path)

        assert settings.log_dir == "/var/log/gateway"
        assert settings.host == ":8080"
        assert settings.backends == (
            BackendSettings(callback_prefix="approve_req", host="b1:9001"),
            BackendSettings(callback_prefix="form_submit", host="b2:9002"),
        )
        assert settings.default_upstream == ""
        assert settings.forward_timeout_seconds == 30.0

    def test_loads_yaml_config(self, tmp_path: Path) -> None:
        (tmp_path / "config.yaml").write_text(
            "log_dir: /tmp/logs\n"
            "host: 127.0.0.1:9000\n"
            "default_upstream: catchall:9100\n"
            "forward_timeout_seconds: 5\n"
            "backends:\n"
            "  - callback_prefix: approve_req\n"
            "    host: b1:9001\n",
            encoding="utf-8",
        )

        settings = load_gateway_settings(tmp_path)

        assert settings.default_upstream == "catchall:9100"
        assert settings.forward_timeout_seconds == 5.0
        assert settings.backends[0].host == "b1:9001"

    def test_json_wins_over_yaml(self, tmp_path: Path) -> None:
        _write_json(tmp_path, VALID_CONFIG)
        (tmp_path / "config.yaml").write_text("not: [valid", encoding="utf-8")

        assert find_config_file(tmp_path).name == "config.json"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(GatewayConfigError, match="Config file does not exist"):
            load_gateway_settings(tmp_path)

    def test_invalid_json(self, tmp_path: Path) -> None:
        (tmp_path / "config.json").write_text("{broken", encoding="utf-8")

        with pytest.raises(GatewayConfigError, match="inválido"):
            load_gateway_settings(tmp_path)

    def test_backends_order_preserved(self, tmp_path: Path) -> None:
        config = {
            **VALID_CONFIG,
            "backends": [
                {"callback_prefix": "dup", "host": "first:1"},
                {"callback_prefix": "dup", "host": "second:2"},
            ],
        }
        _write_json(tmp_path, config)

        hosts = [b.host for b in load_gateway_settings(tmp_path).backends]

        assert hosts == ["first:1", "second:2"]


class TestParseGatewaySettings:
    @pytest.mark.parametrize(
        "override",
        [
            {"log_dir": ""},
            {"host": "8080"},
            {"host": "localhost"},
            {"default_upstream": "catchall"},
            {"forward_timeout_seconds": 0},
            {"forward_timeout_seconds": "30"},
            {"backends": {"callback_prefix": "x", "host": "b:1"}},
            {"backends": ["x"]},
            {"backends": [{"callback_prefix": "", "host": "b1:9001"}]},
            {"backends": [{"callback_prefix": "x", "host": "b1"}]},
            {"backends": [{"callback_prefix": 1, "host": "b1:9001"}]},
        ],
    )
    def test_invalid_values_rejected(self, override: dict[str, object]) -> None:
        with pytest.raises(GatewayConfigError):
            parse_gateway_settings({**VALID_CONFIG, **override})

    def test_non_object_rejected(self) -> None:
        with pytest.raises(GatewayConfigError):
            parse_gateway_settings(["log_dir"])

    def test_missing_backends_means_empty_table(self) -> None:
        settings = parse_gateway_settings({"log_dir": "/tmp", "host": ":8080"})
        assert settings.backends == ()


class TestGatewaySettings:
    def test_listen_address_all_interfaces(self) -> None:
        settings = GatewaySettings(log_dir="/tmp", host=":8080")
        assert settings.listen_hostname == "0.0.0.0"
        assert settings.listen_port == 8080

    def test_listen_address_explicit_host(self) -> None:
        settings = GatewaySettings(log_dir="/tmp", host="127.0.0.1:9000")
        assert settings.listen_hostname == "127.0.0.1"
        assert settings.listen_port == 9000

    def test_validate_ok(self) -> None:
        assert GatewaySettings(log_dir="/tmp", host=":8080").validate() == []


class TestGetGatewaySettings:
    def test_reads_dir_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_json(tmp_path, VALID_CONFIG)
        monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))
        get_gateway_settings.cache_clear()

        try:
            assert len(get_gateway_settings().backends) == 2
        finally:
            get_gateway_settings.cache_clear()

    def test_env_not_set(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(CONFIG_DIR_ENV, raising=False)
        get_gateway_settings.cache_clear()

        with pytest.raises(GatewayConfigError):
            get_gateway_settings()
