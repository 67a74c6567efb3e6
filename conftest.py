from __future__ import annotations

import json
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture()
def write_settings(tmp_path):
    """Return a helper that writes a settings JSON file and returns its path."""

    def _write(payload, name: str = "settings.json") -> str:
        path = tmp_path / name
        if isinstance(payload, str):
            path.write_text(payload, encoding="utf-8")
        else:
            path.write_text(json.dumps(payload), encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture()
def pristine_root_logger():
    """Drop the handlers a test attaches to the root logger and restore its level."""
    root = logging.getLogger()
    level = root.level
    yield root
    for h in list(root.handlers):
        if type(h) in (logging.StreamHandler, RotatingFileHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
