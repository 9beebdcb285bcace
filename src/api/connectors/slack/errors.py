"""Erros de decodificação do payload de callback do Slack.

Todos são recuperáveis: a requisição segue em passthrough.
"""

from __future__ import annotations


class PayloadDecodeError(ValueError):
    """Erro base: payload não pôde ser decodificado."""

    reason = "decode_failed"

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or self.reason)
        self.detail = detail


class MalformedBodyError(PayloadDecodeError):
    """Body não é um form urlencoded válido."""

    reason = "malformed_body"


class MissingPayloadError(PayloadDecodeError):
    """Campo ``payload`` ausente no form."""

    reason = "missing_payload"


class InvalidPayloadJsonError(PayloadDecodeError):
    """Campo ``payload`` não contém JSON válido."""

    reason = "invalid_json"


class MissingTypeError(PayloadDecodeError):
    """Campo ``type`` ausente ou não-string."""

    reason = "missing_type"


class NoRoutingKeyError(PayloadDecodeError):
    """Type reconhecido, mas o campo de roteamento está ausente ou não é string."""

    reason = "no_routing_key"
