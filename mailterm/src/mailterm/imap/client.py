"""UID-based IMAP session used by the reader.

What:
  Wrap the third-party ``imapclient`` library in a context manager that logs
  in with an explicit :class:`~mailterm.config.schema.AccountConfig`, selects
  the configured mailbox read-only, and exposes the two operations the reader
  needs: list every UID and fetch one message's raw bytes.

Why:
  The rendering core must only ever see opaque byte payloads. Keeping the
  protocol details (fetch item names, response keys, sequence vs UID mode) in
  one place means the rest of the project never touches IMAP syntax.

How:
  :meth:`MailboxSession.__enter__` connects, logs in, and selects the mailbox;
  :meth:`MailboxSession.__exit__` logs out. Fetches use ``BODY.PEEK`` items so
  reading a message does not set the ``\\Seen`` flag.

Interfaces:
  :class:`FetchSpec`, :class:`MailboxSession`, :class:`MailboxError`,
  :class:`MessageNotFoundError`.

Invariants & Safety:
  - All operations run in UID mode; sequence numbers are never used.
  - At most one command is in flight: the session is single-threaded and
    blocking by construction.
  - The mailbox is opened read-only; the reader never mutates server state.
"""
from __future__ import annotations

from enum import Enum
from typing import List, Optional

from imapclient import IMAPClient

from ..config.schema import AccountConfig
from ..utils.logging import get_logger


LOGGER = get_logger("mailterm.imap")


class MailboxError(RuntimeError):
    """Base error for session-level failures."""


class MessageNotFoundError(MailboxError):
    """Raised when a UID or listing index does not resolve to a message."""


class FetchSpec(str, Enum):
    """Which slice of a message to download.

    The value is the fetch item sent to the server; :attr:`response_key` is
    the key the server answers with (``PEEK`` is not echoed back).
    """

    HEADER = "BODY.PEEK[HEADER]"
    FULL = "BODY.PEEK[]"

    @property
    def response_key(self) -> bytes:
        return self.value.replace(".PEEK", "").encode("ascii")


class MailboxSession:
    """Context manager owning a single authenticated IMAP connection.

    What:
      Connects to ``config.host``, authenticates, and selects
      ``config.mailbox`` for the lifetime of the ``with`` block.

    Why:
      A session object with explicit credentials replaces the global
      environment variables older builds relied on, so several accounts or test
      doubles can coexist in one process.

    How:
      Defer network activity to :meth:`__enter__`; the helpers raise
      :class:`RuntimeError` when used outside the context manager.
    """

    def __init__(self, config: AccountConfig):
        self._config = config
        self._client: Optional[IMAPClient] = None

    def __enter__(self) -> "MailboxSession":
        """Open the connection, log in, and select the mailbox read-only.

        Returns:
          The connected session.

        Raises:
          Exception: Whatever ``imapclient`` raises for network or login
            failures; the connection is closed before re-raising.
        """

        config = self._config
        client = IMAPClient(config.host, port=config.port, ssl=config.ssl, timeout=config.timeout)
        try:
            client.login(config.username, config.password)
            client.select_folder(config.mailbox, readonly=True)
        except Exception:
            LOGGER.error("session_open_failed", host=config.host, mailbox=config.mailbox)
            _close_quietly(client)
            raise
        self._client = client
        LOGGER.info("session_opened", host=config.host, mailbox=config.mailbox)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._client is None:
            return
        try:
            self._client.logout()
        finally:
            self._client = None

    @property
    def client(self) -> IMAPClient:
        """Return the connected ``IMAPClient``.

        Raises:
          RuntimeError: If accessed outside the context manager.
        """

        if self._client is None:
            raise RuntimeError("IMAP session not connected")
        return self._client

    @property
    def config(self) -> AccountConfig:
        return self._config

    def search_all_uids(self) -> List[int]:
        """Return every UID in the selected mailbox, in server order."""

        return [int(uid) for uid in self.client.search(["ALL"])]

    def fetch_raw(self, uid: int, spec: FetchSpec = FetchSpec.FULL) -> bytes:
        """Download the ``spec`` slice of message ``uid`` as raw bytes.

        Args:
          uid: Message UID in the selected mailbox.
          spec: :attr:`FetchSpec.HEADER` for listings, :attr:`FetchSpec.FULL`
            for rendering.

        Returns:
          The payload bytes exactly as sent by the server.

        Raises:
          MessageNotFoundError: If the server returns nothing for ``uid``.
        """

        response = self.client.fetch([uid], [spec.value])
        data = response.get(uid)
        if data is None:
            raise MessageNotFoundError(f"Message UID {uid} not found")
        payload = data.get(spec.response_key)
        if payload is None:
            raise MessageNotFoundError(f"Message UID {uid} did not return {spec.name.lower()} data")
        return bytes(payload)


def _close_quietly(client: IMAPClient) -> None:
    try:
        client.logout()
    except Exception as exc:
        LOGGER.warning("session_logout_failed", error=type(exc).__name__, detail=str(exc))
