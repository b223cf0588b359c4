"""Pytest configuration shared by every suite.

What:
  Put the in-repo source tree on ``sys.path`` and isolate each test from the
  user's configuration and log destination.

Why:
  Tests must exercise the ``mailterm`` package under ``mailterm/src`` rather
  than an installed wheel, and must never read real credentials from
  ``~/.config/mailterm``.

How:
  Prepend ``mailterm/src`` at import time. The autouse fixture points
  ``MAILTERM_CONFIG_PATH`` at a per-test temporary file and routes structured
  logs into an in-memory buffer exposed as ``log_buffer``.
"""

import io
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "mailterm" / "src"
if SRC_DIR.exists():
    sys.path.insert(0, str(SRC_DIR))

import pytest

from mailterm.utils.logging import set_log_stream


@pytest.fixture(autouse=True)
def config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config loader at a temporary ``config.yaml``."""

    path = tmp_path / "config" / "config.yaml"
    monkeypatch.setenv("MAILTERM_CONFIG_PATH", str(path))
    return path


@pytest.fixture(autouse=True)
def log_buffer():
    """Capture structured log lines for the duration of a test."""

    buffer = io.StringIO()
    set_log_stream(buffer)
    try:
        yield buffer
    finally:
        set_log_stream(None)
