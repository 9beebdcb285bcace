"""Contratos dos callbacks de interatividade do Slack.

Cada valor de ``type`` reconhecido tem seu próprio modelo estrito; qualquer
outro valor cai em UnknownCallback, que não carrega routing key.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator


class _CallbackModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class ShortcutCallback(_CallbackModel):
    """Global/message shortcut: routing key em ``callback_id``."""

    type: Literal["shortcut"] = "shortcut"
    callback_id: StrictStr

    @property
    def routing_key(self) -> str:
        return self.callback_id


class ViewRef(_CallbackModel):
    callback_id: StrictStr


class ViewSubmissionCallback(_CallbackModel):
    """Submissão de modal: routing key em ``view.callback_id``.

    O ``callback_id`` de nível superior, se existir, é ignorado.
    """

    type: Literal["view_submission"] = "view_submission"
    view: ViewRef

    @property
    def routing_key(self) -> str:
        return self.view.callback_id


class ActionRef(_CallbackModel):
    action_id: StrictStr


class BlockActionsCallback(_CallbackModel):
    """Interação com blocos: routing key em ``actions[0].action_id``.

    Só a primeira action é validada; as demais seguem sem schema.
    """

    type: Literal["block_actions"] = "block_actions"
    actions: list[Any] = Field(min_length=1)

    @field_validator("actions")
    @classmethod
    def _validate_first_action(cls, actions: list[Any]) -> list[Any]:
        try:
            first = ActionRef.model_validate(actions[0])
        except ValidationError as exc:
            raise ValueError("actions[0].action_id ausente ou inválido") from exc
        return [first, *actions[1:]]

    @property
    def routing_key(self) -> str:
        return self.actions[0].action_id


class UnknownCallback(_CallbackModel):
    """Qualquer outro ``type`` (ex: message, view_closed)."""

    type: StrictStr

    @property
    def routing_key(self) -> str:
        return ""


InboundCallback = ShortcutCallback | ViewSubmissionCallback | BlockActionsCallback | UnknownCallback

# Um parser estrito por type reconhecido
CALLBACK_VARIANTS: dict[str, type[ShortcutCallback | ViewSubmissionCallback | BlockActionsCallback]] = {
    "shortcut": ShortcutCallback,
    "view_submission": ViewSubmissionCallback,
    "block_actions": BlockActionsCallback,
}
