"""Subject extraction from fetched header blocks."""
from __future__ import annotations

from typing import Iterable, List, Optional, Union


_SUBJECT_PREFIX = "subject:"


def extract_subject(header: Union[bytes, str]) -> Optional[str]:
    """Return the trimmed ``Subject`` value from a raw header block.

    Lines are matched case-insensitively on a ``subject:`` prefix and the first
    match wins. Folded continuation lines are not joined. ``None`` is returned
    when no subject line is present.
    """

    if isinstance(header, (bytes, bytearray)):
        header = bytes(header).decode("utf-8", errors="replace")
    for line in header.splitlines():
        if line.lower().startswith(_SUBJECT_PREFIX):
            return line[len(_SUBJECT_PREFIX):].strip()
    return None


def extract_subjects(headers: Iterable[Union[bytes, str]]) -> List[Optional[str]]:
    """Apply :func:`extract_subject` to each header block, preserving order."""

    return [extract_subject(header) for header in headers]
