"""Map listing pages and message numbers onto mailbox UIDs.

What:
  Hold the mailbox's UIDs newest-first and slice them into fixed-size pages.

Why:
  UIDs are assigned in arrival order, so sorting them descending approximates a
  newest-first inbox without fetching dates. The listing numbers shown to the
  user are positions in this order, which lets ``fetch <n>`` reach any message
  regardless of the current page.

How:
  Sort once at construction; :meth:`PaginationIndex.page_to_uid_slice` and
  :meth:`PaginationIndex.uid_at` are plain list slicing and indexing with
  bounds checks.

Interfaces:
  :data:`DEFAULT_PAGE_SIZE`, :class:`PaginationIndex`.

Invariants & Safety:
  - Pages past the end (or negative pages) are empty, never an error.
  - The UID list is a snapshot; new mail appears only in a new session.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from .client import MessageNotFoundError


DEFAULT_PAGE_SIZE = 8


class PaginationIndex:
    """Newest-first UID snapshot with page and position lookups."""

    def __init__(self, uids: Iterable[int], page_size: int = DEFAULT_PAGE_SIZE):
        if page_size <= 0:
            raise ValueError("page_size must be positive")
        self._uids: List[int] = sorted({int(uid) for uid in uids}, reverse=True)
        self.page_size = page_size

    def __len__(self) -> int:
        return len(self._uids)

    def page_to_uid_slice(self, page: int, page_size: Optional[int] = None) -> List[int]:
        """Return the UIDs shown on zero-based ``page``.

        Args:
          page: Zero-based page number.
          page_size: Override of the index's page size for this call.

        Returns:
          Up to ``page_size`` UIDs; empty when ``page`` is out of range.
        """

        size = self.page_size if page_size is None else page_size
        if page < 0 or size <= 0:
            return []
        start = page * size
        if start >= len(self._uids):
            return []
        return self._uids[start:start + size]

    def uid_at(self, index: int) -> int:
        """Return the UID at zero-based listing position ``index``.

        Raises:
          MessageNotFoundError: If ``index`` is outside the snapshot.
        """

        if index < 0 or index >= len(self._uids):
            raise MessageNotFoundError(f"No message number {index + 1}")
        return self._uids[index]
