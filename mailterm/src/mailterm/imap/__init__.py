"""Facade for the IMAP integration layer.

What:
  Surface the :class:`~mailterm.imap.client.MailboxSession` context manager,
  the :class:`~mailterm.imap.client.FetchSpec` selector, the session errors,
  and the :class:`~mailterm.imap.pagination.PaginationIndex`.

Why:
  Call sites should not depend on the module split inside this package.

Interfaces:
  ``FetchSpec``, ``MailboxSession``, ``MailboxError``,
  ``MessageNotFoundError``, ``PaginationIndex``, ``DEFAULT_PAGE_SIZE``.
"""

from .client import FetchSpec, MailboxError, MailboxSession, MessageNotFoundError
from .pagination import DEFAULT_PAGE_SIZE, PaginationIndex

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "FetchSpec",
    "MailboxError",
    "MailboxSession",
    "MessageNotFoundError",
    "PaginationIndex",
]
