"""Pytest fixtures for unit tests requiring an IMAP fake.

What:
  Make ``tests/unit`` importable and expose ``account`` and ``imap_backend``
  fixtures built on :class:`FakeImapBackend`.

Why:
  Session and reader tests need deterministic mailboxes without sockets.

How:
  Append the unit directory to ``sys.path`` for the local ``fakes`` module and
  monkeypatch the ``IMAPClient`` constructor used by the session.
"""

import sys
from pathlib import Path

import pytest

UNIT_DIR = Path(__file__).resolve().parent
if str(UNIT_DIR) not in sys.path:
    sys.path.insert(0, str(UNIT_DIR))

from fakes import FakeImapBackend, install_backend

from mailterm.config.schema import AccountConfig


@pytest.fixture
def account() -> AccountConfig:
    return AccountConfig(username="reader@example.com", password="secret", host="imap.test")


@pytest.fixture
def imap_backend(monkeypatch: pytest.MonkeyPatch) -> FakeImapBackend:
    """Return an empty backend wired in place of ``imapclient.IMAPClient``."""

    backend = FakeImapBackend()
    install_backend(monkeypatch, backend)
    return backend
