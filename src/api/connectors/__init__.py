"""Connectors por plataforma: decodificação de payloads de borda.

Estrutura:
- slack/: callbacks de interatividade (shortcut, view_submission, block_actions)
"""

__all__: list[str] = []
