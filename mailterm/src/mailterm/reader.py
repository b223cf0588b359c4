"""Mailbox reader combining the IMAP session, pagination, and rendering core.

What:
  Offer the two operations the terminal front-end performs: list one page of
  subjects and render one message by its listing number.

Why:
  The CLI should not know about fetch items, UID ordering, or the part tree.
  Concentrating that glue here keeps the commands short and lets tests drive
  the whole flow against an in-memory IMAP backend.

How:
  Snapshot the mailbox UIDs into a :class:`~mailterm.imap.PaginationIndex` on
  construction. Listings fetch ``BODY.PEEK[HEADER]`` per UID and run
  :func:`~mailterm.core.extract_subjects`; messages fetch ``BODY.PEEK[]`` and
  run :func:`~mailterm.core.render_raw`.

Interfaces:
  :class:`ListingEntry`, :class:`MailboxReader`.

Invariants & Safety:
  - A failed render leaves the session and index untouched, so the next fetch
    works normally.
  - Messages without a subject line are left out of listings.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .core import DecodeError, extract_subjects, render_raw
from .imap import DEFAULT_PAGE_SIZE, FetchSpec, MailboxSession, PaginationIndex
from .utils.logging import get_logger


LOGGER = get_logger("mailterm.reader")


@dataclass(frozen=True)
class ListingEntry:
    """One line of a subject listing.

    Attributes:
      number: One-based position in the newest-first mailbox order; this is the
        number ``fetch`` accepts.
      uid: Server UID of the message.
      subject: Trimmed subject text.
    """

    number: int
    uid: int
    subject: str


class MailboxReader:
    """Page through subjects and render messages of one open session."""

    def __init__(self, session: MailboxSession, page_size: Optional[int] = None):
        """Snapshot the mailbox UIDs of ``session``.

        Args:
          session: An entered :class:`~mailterm.imap.MailboxSession`.
          page_size: Entries per page; defaults to the account setting.
        """

        if page_size is None:
            page_size = getattr(session.config, "page_size", DEFAULT_PAGE_SIZE)
        self._session = session
        self._index = PaginationIndex(session.search_all_uids(), page_size=page_size)
        LOGGER.info("mailbox_indexed", messages=len(self._index), page_size=page_size)

    @property
    def index(self) -> PaginationIndex:
        return self._index

    @property
    def page_size(self) -> int:
        return self._index.page_size

    def list_page(self, page: int) -> List[ListingEntry]:
        """Return the entries of zero-based ``page``.

        What:
          Fetch the header block of every UID on the page and keep the ones
          with a subject line.

        Why:
          Listing must stay cheap; headers are a fraction of a full message and
          are fetched with ``PEEK`` so nothing is marked read.

        How:
          Resolve the page through the index, fetch headers one UID at a time
          (the session allows a single command in flight), extract subjects, and
          number the survivors by their global position.

        Args:
          page: Zero-based page number.

        Returns:
          Entries in newest-first order; empty past the last page.
        """

        uids = self._index.page_to_uid_slice(page)
        headers = [self._session.fetch_raw(uid, FetchSpec.HEADER) for uid in uids]
        first_number = page * self._index.page_size + 1
        entries: List[ListingEntry] = []
        for offset, (uid, subject) in enumerate(zip(uids, extract_subjects(headers))):
            if subject is None:
                continue
            entries.append(ListingEntry(number=first_number + offset, uid=uid, subject=subject))
        return entries

    def fetch_message(self, number: int) -> str:
        """Render message ``number`` (one-based listing position).

        Raises:
          MessageNotFoundError: If ``number`` is outside the mailbox.
          DecodeError: If the message cannot be decoded.
        """

        uid = self._index.uid_at(number - 1)
        raw = self._session.fetch_raw(uid, FetchSpec.FULL)
        try:
            return render_raw(raw)
        except DecodeError as exc:
            LOGGER.error("render_failed", uid=uid, error=type(exc).__name__, detail=str(exc))
            raise
