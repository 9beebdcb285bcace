"""Formatter JSON (python-json-logger) para stderr e app.log."""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos lidos do LogRecord em todo log
REQUIRED_LOG_FIELDS = frozenset(
    {
        "asctime",
        "levelname",
        "name",
        "message",
        "correlation_id",
    }
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter(service_name: str) -> JsonFormatter:
    """Cria o formatter com ``service`` fixo em toda linha.

    Payloads do Slack carregam texto livre de usuários, então a saída não
    escapa caracteres não-ASCII.

    Exemplo de output:
        {"asctime": "2026-10-18 10:30:00,123", "correlation_id": "abc-123",
         "level": "INFO", "logger": "app.services.request_rewriter",
         "message": "callback_routed", "service": "slack_bot_gateway",
         "backend_host": "b1:9001"}
    """
    format_string = " ".join(f"%({field})s" for field in sorted(REQUIRED_LOG_FIELDS))

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
        static_fields={"service": service_name},
        json_ensure_ascii=False,
    )
