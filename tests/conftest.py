"""Configuração do pytest para o projeto slack_bot_gateway."""

import json
import logging
import sys
from pathlib import Path
from urllib.parse import urlencode

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


def slack_form_body(payload: object) -> bytes:
    """Body urlencoded no formato enviado pelo Slack (campo ``payload``)."""
    return urlencode({"payload": json.dumps(payload)}).encode("utf-8")


@pytest.fixture
def form_body():
    return slack_form_body


@pytest.fixture(autouse=True)
def _reset_root_logging():
    """Fecha handlers instalados por configure_logging durante o teste."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler, (logging.FileHandler, logging.StreamHandler)) and not (
            type(handler).__module__.startswith("_pytest")
        ):
            handler.close()
            root.removeHandler(handler)
    root.setLevel(level)
