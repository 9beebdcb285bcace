"""Decodificação do body de callback do Slack (função pura).

O Slack envia interações como ``application/x-www-form-urlencoded`` com um
único campo ``payload`` contendo um documento JSON. O decoder trabalha sobre
uma cópia já bufferizada do body; nunca consome o stream da requisição.
"""

from __future__ import annotations

import json
from urllib.parse import parse_qs

from pydantic import ValidationError

from .errors import (
    InvalidPayloadJsonError,
    MalformedBodyError,
    MissingPayloadError,
    MissingTypeError,
    NoRoutingKeyError,
)
from .models import CALLBACK_VARIANTS, InboundCallback, UnknownCallback

PAYLOAD_FIELD = "payload"


def read_payload_field(raw_body: bytes) -> str:
    """Extrai o valor do campo ``payload`` do form urlencoded.

    Raises:
        MalformedBodyError: Body não é UTF-8 ou contém escapes inválidos
        MissingPayloadError: Campo ``payload`` ausente
    """
    try:
        fields = parse_qs(
            raw_body.decode("utf-8"),
            keep_blank_values=True,
            errors="strict",
        )
    except ValueError as exc:
        raise MalformedBodyError(str(exc)) from exc

    values = fields.get(PAYLOAD_FIELD)
    if not values:
        raise MissingPayloadError()
    return values[0]


def parse_callback(payload_json: str) -> InboundCallback:
    """Lê ``type`` e despacha para o parser estrito da variante.

    Raises:
        InvalidPayloadJsonError: ``payload`` não é JSON válido (ou aninhado
            além do limite de recursão)
        MissingTypeError: ``type`` ausente ou não-string
        NoRoutingKeyError: Variante reconhecida sem o campo de roteamento
    """
    try:
        data = json.loads(payload_json)
    except json.JSONDecodeError as exc:
        raise InvalidPayloadJsonError(exc.msg) from exc
    except RecursionError as exc:
        raise InvalidPayloadJsonError("aninhamento excessivo") from exc

    callback_type = data.get("type") if isinstance(data, dict) else None
    if not isinstance(callback_type, str):
        raise MissingTypeError()

    variant = CALLBACK_VARIANTS.get(callback_type)
    if variant is None:
        return UnknownCallback(type=callback_type)

    try:
        return variant.model_validate(data)
    except ValidationError as exc:
        raise NoRoutingKeyError(f"{callback_type}: {exc.error_count()} campo(s) inválido(s)") from exc

