"""Conector Slack - decodificação de callbacks de interatividade.

Responsabilidades:
- Parse do form urlencoded (campo ``payload``)
- Decodificação tipada por ``type`` (shortcut, view_submission, block_actions)
- Extração da routing key (callback_id / action_id)
"""

from .decoder import parse_callback, read_payload_field
from .errors import (
    InvalidPayloadJsonError,
    MalformedBodyError,
    MissingPayloadError,
    MissingTypeError,
    NoRoutingKeyError,
    PayloadDecodeError,
)
from .models import (
    BlockActionsCallback,
    InboundCallback,
    ShortcutCallback,
    UnknownCallback,
    ViewSubmissionCallback,
)

__all__ = [
    "BlockActionsCallback",
    "InboundCallback",
    "InvalidPayloadJsonError",
    "MalformedBodyError",
    "MissingPayloadError",
    "MissingTypeError",
    "NoRoutingKeyError",
    "PayloadDecodeError",
    "ShortcutCallback",
    "UnknownCallback",
    "ViewSubmissionCallback",
    "parse_callback",
    "read_payload_field",
]
